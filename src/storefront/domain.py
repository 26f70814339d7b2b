"""Storefront bounded context — Catalogue products and Bookings.

Holds the product catalogue that acts as the source of truth for price and
stock, and the booking workflow that turns a checked-out cart into a
persisted, price-correct booking record.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
