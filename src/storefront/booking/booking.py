"""Booking aggregate — the persisted record of a completed checkout.

A booking is immutable once created except for its status. Line prices are
snapshotted from the catalogue by the server when the booking is created,
and ``total_amount`` is always derived from the lines.

State Machine:
    PENDING → CONFIRMED → COMPLETED
    PENDING/CONFIRMED → CANCELLED
"""

import json
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from shared.money import total_amount, total_quantity
from storefront.booking.events import (
    BookingCancelled,
    BookingCompleted,
    BookingConfirmed,
    BookingCreated,
)
from storefront.domain import storefront


class BookingStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.COMPLETED: set(),  # Terminal
    BookingStatus.CANCELLED: set(),  # Terminal
}


def is_valid_identifier(value) -> bool:
    """True when ``value`` is a well-formed aggregate identifier (UUID)."""
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


@storefront.entity(part_of="Booking")
class BookingLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)


@storefront.aggregate
class Booking:
    user_id = Identifier(required=True)
    lines = HasMany(BookingLine)
    total_amount = Float(default=0.0, min_value=0.0)
    status = String(choices=BookingStatus, default=BookingStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def booking_must_have_at_least_one_line(self):
        if not self.lines:
            raise ValidationError({"products": ["Booking must contain at least one product"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, lines_data):
        """Create a pending booking.

        Args:
            user_id: The authenticated user placing the booking.
            lines_data: List of dicts with product_id, quantity and the
                        server-snapshotted unit price.
        """
        now = datetime.now(UTC)
        lines = [
            BookingLine(
                product_id=line["product_id"],
                quantity=line["quantity"],
                price=line["price"],
            )
            for line in lines_data
        ]

        booking = cls(
            user_id=user_id,
            lines=lines,
            total_amount=total_amount((line.price, line.quantity) for line in lines),
            status=BookingStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        booking.raise_(
            BookingCreated(
                booking_id=str(booking.id),
                user_id=str(user_id),
                lines=json.dumps(
                    [
                        {
                            "product_id": str(line.product_id),
                            "quantity": line.quantity,
                            "price": line.price,
                        }
                        for line in booking.lines
                    ]
                ),
                total_amount=booking.total_amount,
                total_items=booking.total_items,
                created_at=now,
            )
        )
        return booking

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def total_items(self) -> int:
        return total_quantity(line.quantity for line in self.lines)

    @property
    def summary(self) -> dict:
        return {
            "id": str(self.id),
            "total_amount": self.total_amount,
            "total_items": self.total_items,
            "status": self.status,
            "created_at": self.created_at,
        }

    def recalculate_total(self):
        """Recompute ``total_amount`` from the lines, discarding any other value."""
        recalculated = total_amount((line.price, line.quantity) for line in self.lines)
        if self.total_amount != recalculated:
            self.total_amount = recalculated

    # -------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = BookingStatus(self.status)
        if target_status not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def confirm(self):
        self._assert_can_transition(BookingStatus.CONFIRMED)
        now = datetime.now(UTC)
        self.status = BookingStatus.CONFIRMED.value
        self.updated_at = now

        self.raise_(BookingConfirmed(booking_id=str(self.id), confirmed_at=now))

    def complete(self):
        self._assert_can_transition(BookingStatus.COMPLETED)
        now = datetime.now(UTC)
        self.status = BookingStatus.COMPLETED.value
        self.updated_at = now

        self.raise_(BookingCompleted(booking_id=str(self.id), completed_at=now))

    def cancel(self, reason=None):
        self._assert_can_transition(BookingStatus.CANCELLED)
        now = datetime.now(UTC)
        previous_status = self.status
        self.status = BookingStatus.CANCELLED.value
        self.updated_at = now

        self.raise_(
            BookingCancelled(
                booking_id=str(self.id),
                previous_status=previous_status,
                reason=reason,
                cancelled_at=now,
            )
        )
