"""Booking creation — the checkout command and its handler.

The handler is the only place a booking comes into existence. It validates
the request shape, checks that every referenced product exists and is in
stock, snapshots current catalogue prices and persists the booking. Prices
and totals supplied by the client are never read.
"""

import json
from uuid import UUID

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.booking.booking import Booking, is_valid_identifier
from storefront.booking.exceptions import ProductsNotAvailableError
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Booking")
class CreateBooking:
    user_id = Identifier(required=True)
    products = Text(required=True)  # JSON: list of {product_id, quantity}


def validate_booking_items(items) -> list[dict]:
    """Check the structural shape of requested booking items.

    Raises ``ValidationError`` listing every problem found; returns the items
    normalised to ``{"product_id", "quantity"}`` dicts otherwise.
    """
    if not isinstance(items, list) or not items:
        raise ValidationError({"products": ["At least one product is required"]})

    errors = []
    normalised = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            errors.append(f"products[{index}]: must be an object")
            continue

        product_id = item.get("product_id", item.get("productId"))
        quantity = item.get("quantity")

        if is_valid_identifier(product_id):
            product_id = str(UUID(product_id))
        else:
            errors.append(f"products[{index}].productId: Valid product ID is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            errors.append(f"products[{index}].quantity: Quantity must be at least 1")

        normalised.append({"product_id": product_id, "quantity": quantity})

    if errors:
        raise ValidationError({"products": errors})

    return normalised


@storefront.command_handler(part_of=Booking)
class CreateBookingHandler:
    @handle(CreateBooking)
    def create_booking(self, command):
        items = json.loads(command.products) if isinstance(command.products, str) else command.products
        items = validate_booking_items(items)

        # Duplicate product ids are allowed; availability is judged per distinct id
        requested_ids = list(dict.fromkeys(item["product_id"] for item in items))
        available = current_domain.repository_for(Product).find_in_stock(requested_ids)

        if len(available) < len(requested_ids):
            found = {str(product.id) for product in available}
            missing = [product_id for product_id in requested_ids if product_id not in found]
            logger.info(
                "booking_rejected_unavailable",
                user_id=str(command.user_id),
                missing_product_ids=missing,
            )
            raise ProductsNotAvailableError(missing)

        prices = {str(product.id): product.price for product in available}
        lines_data = [
            {
                "product_id": item["product_id"],
                "quantity": item["quantity"],
                "price": prices[item["product_id"]],
            }
            for item in items
        ]

        booking = Booking.create(user_id=command.user_id, lines_data=lines_data)
        current_domain.repository_for(Booking).add(booking)

        logger.info(
            "booking_created",
            booking_id=str(booking.id),
            user_id=str(command.user_id),
            total_amount=booking.total_amount,
            total_items=booking.total_items,
        )
        return str(booking.id)
