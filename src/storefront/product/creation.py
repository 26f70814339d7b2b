"""Catalogue item creation — command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=100)
    description = String(max_length=1000)
    price = Float(required=True, min_value=0.0)
    image = String(max_length=500)
    category = String(max_length=20)
    in_stock = Boolean(default=True)
    inventory = Integer(default=0, min_value=0)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            description=command.description,
            image=command.image,
            category=command.category,
            in_stock=command.in_stock,
            inventory=command.inventory,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
