"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new item was added to the catalogue."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    category = String()
    in_stock = Boolean()
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductPriceChanged:
    """The catalogue price of a product changed.

    Carts that captured the old price keep it; the next booking snapshots
    the new one.
    """

    __version__ = "v1"

    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    new_price = Float(required=True)


@storefront.event(part_of="Product")
class ProductStockChanged:
    """A product became available or unavailable for booking."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    in_stock = Boolean()
