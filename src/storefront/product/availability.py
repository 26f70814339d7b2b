"""Stock availability toggles — commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class MarkProductInStock:
    product_id = Identifier(required=True)


@storefront.command(part_of="Product")
class MarkProductOutOfStock:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageAvailabilityHandler:
    @handle(MarkProductInStock)
    def mark_in_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.mark_in_stock()
        repo.add(product)

    @handle(MarkProductOutOfStock)
    def mark_out_of_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.mark_out_of_stock()
        repo.add(product)
