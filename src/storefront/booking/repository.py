"""Repository for the Booking aggregate.

Every save recomputes ``total_amount`` from the booking lines, so a stored
booking can never carry a total that disagrees with its lines.
"""

from protean.core.repository import BaseRepository

from storefront.booking.booking import Booking
from storefront.domain import storefront
from storefront.utils.queries import fetch_all


@storefront.repository(part_of=Booking)
class BookingRepository(BaseRepository):
    def add(self, booking):
        booking.recalculate_total()
        return super().add(booking)

    def find_for_user(self, user_id) -> list[Booking]:
        """All bookings placed by ``user_id``, newest first."""
        return fetch_all(self._dao.query.filter(user_id=user_id).order_by("-created_at"))
