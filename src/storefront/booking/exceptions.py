"""Booking-specific domain errors."""


class ProductsNotAvailableError(Exception):
    """One or more requested products are missing or out of stock."""

    def __init__(self, product_ids=None):
        self.product_ids = list(product_ids or [])
        super().__init__("One or more products are not available")
