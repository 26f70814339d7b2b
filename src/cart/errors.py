"""Errors raised by the cart client."""

DEFAULT_BOOKING_ERROR = "Failed to create booking"


class CartError(Exception):
    """Base class for cart client errors."""


class EmptyCartError(CartError):
    """Checkout was attempted with nothing in the cart."""

    def __init__(self, message="Cart is empty"):
        super().__init__(message)


class CartDecodeError(CartError):
    """A persisted cart could not be turned back into a CartState."""


class BookingRequestError(CartError):
    """The booking API rejected a request or could not be reached.

    ``message`` is the server-supplied error message when there is one.
    ``status_code`` and ``code`` are None for transport failures.
    """

    def __init__(self, message=DEFAULT_BOOKING_ERROR, status_code=None, code=None):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    @classmethod
    def from_response(cls, response, default_message=DEFAULT_BOOKING_ERROR):
        """Build from an error response carrying the API error envelope."""
        message, code = default_message, None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            message = body["error"].get("message") or default_message
            code = body["error"].get("code")

        return cls(message=message, status_code=response.status_code, code=code)
