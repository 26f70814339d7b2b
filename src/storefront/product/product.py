"""Product aggregate — the catalogue item a booking line points at.

The catalogue is the source of truth for price and stock at checkout time:
the Booking Service reads ``price`` and ``in_stock`` from here and never
trusts the values a client sends.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String

from shared.money import format_price
from storefront.domain import storefront

_IMAGE_PATTERN = re.compile(r"^(https?://|/[\w\-._~:/?#\[\]@!$&'()*+,;=]*$)")


class ProductCategory(Enum):
    FOOD = "food"
    CLOTHING = "clothing"
    TOOLS = "tools"
    ELECTRONICS = "electronics"
    BOOKS = "books"
    HEALTH = "health"
    OTHER = "other"


@storefront.aggregate
class Product:
    name = String(required=True, min_length=2, max_length=100)
    description = String(max_length=1000)
    price = Float(required=True, min_value=0.0)
    image = String(max_length=500)
    category = String(choices=ProductCategory, default=ProductCategory.OTHER.value)
    in_stock = Boolean(default=True)
    inventory = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def image_must_be_url_or_path(self):
        if self.image and not _IMAGE_PATTERN.match(self.image):
            raise ValidationError({"image": ["Image must be a valid URL or file path"]})

    @property
    def is_available(self) -> bool:
        return bool(self.in_stock and (self.inventory or 0) > 0)

    @property
    def formatted_price(self) -> str:
        return format_price(self.price)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        price,
        description=None,
        image=None,
        category=None,
        in_stock=True,
        inventory=0,
    ):
        from storefront.product.events import ProductAdded

        now = datetime.now(UTC)
        product = cls(
            name=name,
            price=price,
            description=description,
            image=image,
            category=category or ProductCategory.OTHER.value,
            in_stock=in_stock,
            inventory=inventory,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                category=product.category,
                in_stock=product.in_stock,
                added_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Price and stock
    # -------------------------------------------------------------------
    def change_price(self, new_price):
        from storefront.product.events import ProductPriceChanged

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductPriceChanged(
                product_id=self.id,
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def mark_in_stock(self):
        self._set_stock(True)

    def mark_out_of_stock(self):
        self._set_stock(False)

    def _set_stock(self, in_stock):
        from storefront.product.events import ProductStockChanged

        if self.in_stock == in_stock:
            return

        self.in_stock = in_stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductStockChanged(
                product_id=self.id,
                in_stock=in_stock,
            )
        )
