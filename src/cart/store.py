"""The cart store: current state, dispatch and the cart operations.

The store owns one ``CartState`` value. Every operation dispatches an action
through the reducer and writes the resulting state to storage, so a cart
survives restarts. Checkout delegates to the booking API and only clears the
cart once the server has accepted the booking.
"""

from dataclasses import replace

import structlog

from cart.client import BookingClient
from cart.errors import (
    DEFAULT_BOOKING_ERROR,
    BookingRequestError,
    CartDecodeError,
    CartError,
    EmptyCartError,
)
from cart.reducer import (
    AddItem,
    ClearCart,
    ClearError,
    LoadCart,
    RemoveItem,
    SetError,
    SetLoading,
    UpdateQuantity,
    reduce,
    with_items,
)
from cart.state import CartState, ProductSnapshot, decode_state, encode_state
from cart.storage import CART_KEY, Storage

logger = structlog.get_logger(__name__)


class CartStore:
    def __init__(self, storage: Storage, client: BookingClient | None = None) -> None:
        self._storage = storage
        self._client = client
        self._state = CartState()
        self._restore()

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def client(self) -> BookingClient | None:
        return self._client

    def dispatch(self, action) -> CartState:
        self._state = reduce(self._state, action)
        self._storage.set(CART_KEY, encode_state(self._state))
        return self._state

    def _restore(self) -> None:
        raw = self._storage.get(CART_KEY)
        if raw is None:
            return
        try:
            restored = decode_state(raw)
        except CartDecodeError as exc:
            logger.warning("cart_restore_failed", error=str(exc))
            self._storage.remove(CART_KEY)
            return

        # Totals are rebuilt from the lines; a checkout cannot still be in
        # flight after a restart
        self.dispatch(LoadCart(replace(with_items(restored, restored.items), loading=False)))

    # -------------------------------------------------------------------
    # Cart operations
    # -------------------------------------------------------------------
    def add_to_cart(self, product, quantity: int = 1) -> CartState:
        """Add ``quantity`` of ``product`` (a ProductSnapshot or catalogue dict)."""
        if not isinstance(product, ProductSnapshot):
            product = ProductSnapshot.from_dict(product)
        return self.dispatch(AddItem(product=product, quantity=quantity))

    def remove_from_cart(self, product_id: str) -> CartState:
        return self.dispatch(RemoveItem(product_id=product_id))

    def update_quantity(self, product_id: str, quantity: int) -> CartState:
        return self.dispatch(UpdateQuantity(product_id=product_id, quantity=quantity))

    def clear_cart(self) -> CartState:
        return self.dispatch(ClearCart())

    def clear_error(self) -> CartState:
        return self.dispatch(ClearError())

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def booking_payload(self) -> dict:
        return {
            "products": [
                {
                    "productId": line.product.id,
                    "quantity": line.quantity,
                    "price": line.price,
                }
                for line in self._state.items
            ],
            "totalAmount": self._state.total_amount,
        }

    def create_booking(self) -> dict:
        """Send the cart to the booking API.

        Returns the server response and empties the cart on success. On
        failure the server's message is kept in ``state.error``, the lines are
        kept and the error is re-raised.
        """
        if self._state.is_empty:
            raise EmptyCartError()
        if self._client is None:
            raise CartError("No booking client configured")

        self.dispatch(SetLoading(True))
        try:
            response = self._client.create_booking(self.booking_payload())
            self.dispatch(ClearCart())
            logger.info("booking_submitted", booking_id=response.get("data", {}).get("booking", {}).get("_id"))
            return response
        except BookingRequestError as exc:
            self.dispatch(SetError(exc.message))
            raise
        except Exception:
            self.dispatch(SetError(DEFAULT_BOOKING_ERROR))
            raise
        finally:
            self.dispatch(SetLoading(False))
