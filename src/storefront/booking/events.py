"""Domain events for the Booking aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Booking")
class BookingCreated:
    """A checkout was accepted and persisted as a pending booking."""

    __version__ = "v1"

    booking_id = Identifier(required=True)
    user_id = Identifier(required=True)
    lines = Text(required=True)  # JSON list of {product_id, quantity, price}
    total_amount = Float(required=True)
    total_items = Integer(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Booking")
class BookingConfirmed:
    __version__ = "v1"

    booking_id = Identifier(required=True)
    confirmed_at = DateTime(required=True)


@storefront.event(part_of="Booking")
class BookingCompleted:
    __version__ = "v1"

    booking_id = Identifier(required=True)
    completed_at = DateTime(required=True)


@storefront.event(part_of="Booking")
class BookingCancelled:
    __version__ = "v1"

    booking_id = Identifier(required=True)
    previous_status = String(required=True)
    reason = String(max_length=500)
    cancelled_at = DateTime(required=True)
