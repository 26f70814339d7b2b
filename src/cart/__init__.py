"""Client-side shopping cart for the Community Market booking API."""

from cart.client import BookingClient
from cart.config import ClientSettings
from cart.errors import BookingRequestError, CartError, EmptyCartError
from cart.session import Session
from cart.state import CartLine, CartState, ProductSnapshot
from cart.storage import JSONFileStorage, MemoryStorage, Storage
from cart.store import CartStore


def open_cart(settings: ClientSettings | None = None) -> CartStore:
    """Cart store backed by the on-disk storage file and the live API."""
    settings = settings or ClientSettings.from_env()
    storage = JSONFileStorage(settings.storage_path)
    client = BookingClient(Session(storage), settings=settings)
    return CartStore(storage, client)


__all__ = [
    "BookingClient",
    "BookingRequestError",
    "CartError",
    "CartLine",
    "CartState",
    "CartStore",
    "ClientSettings",
    "EmptyCartError",
    "JSONFileStorage",
    "MemoryStorage",
    "ProductSnapshot",
    "Session",
    "Storage",
    "open_cart",
]
