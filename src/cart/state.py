"""Cart state values and their persisted form.

States are immutable; the reducer produces a new one for every action. The
persisted shape uses the same camelCase keys the booking API speaks, e.g.::

    {"items": [{"product": {"_id": ..., "name": ..., "price": ...},
                "quantity": 2, "price": 10.0}],
     "totalItems": 2, "totalAmount": 20.0, "loading": false, "error": null}
"""

import json
from dataclasses import dataclass, field

from cart.errors import CartDecodeError


@dataclass(frozen=True)
class ProductSnapshot:
    """The catalogue fields a cart line keeps about its product."""

    id: str
    name: str
    price: float
    image: str | None = None
    category: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ProductSnapshot":
        return cls(
            id=str(data["_id"] if "_id" in data else data["id"]),
            name=data["name"],
            price=float(data["price"]),
            image=data.get("image"),
            category=data.get("category"),
        )

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "category": self.category,
        }


@dataclass(frozen=True)
class CartLine:
    product: ProductSnapshot
    quantity: int
    price: float  # unit price captured when the line was created

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        return cls(
            product=ProductSnapshot.from_dict(data["product"]),
            quantity=int(data["quantity"]),
            price=float(data["price"]),
        )

    def to_dict(self) -> dict:
        return {
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "price": self.price,
        }


@dataclass(frozen=True)
class CartState:
    items: tuple[CartLine, ...] = field(default_factory=tuple)
    total_items: int = 0
    total_amount: float = 0.0
    loading: bool = False
    error: str | None = None

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self.items:
            if line.product.id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.items

    @classmethod
    def from_dict(cls, data: dict) -> "CartState":
        return cls(
            items=tuple(CartLine.from_dict(item) for item in data.get("items", [])),
            total_items=int(data.get("totalItems", 0)),
            total_amount=float(data.get("totalAmount", 0)),
            loading=bool(data.get("loading", False)),
            error=data.get("error"),
        )

    def to_dict(self) -> dict:
        return {
            "items": [line.to_dict() for line in self.items],
            "totalItems": self.total_items,
            "totalAmount": self.total_amount,
            "loading": self.loading,
            "error": self.error,
        }


def encode_state(state: CartState) -> str:
    return json.dumps(state.to_dict())


def decode_state(raw: str) -> CartState:
    """Parse a persisted cart, raising CartDecodeError on any malformed input."""
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        state = CartState.from_dict(data)
    except (ValueError, KeyError, TypeError) as exc:
        raise CartDecodeError(str(exc)) from exc

    seen = set()
    for line in state.items:
        if line.quantity < 1:
            raise CartDecodeError(f"quantity for {line.product.id} must be at least 1, got {line.quantity}")
        if line.product.id in seen:
            raise CartDecodeError(f"product {line.product.id} appears on more than one line")
        seen.add(line.product.id)
    return state
