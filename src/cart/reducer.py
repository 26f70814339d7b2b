"""Cart actions and the pure reducer that applies them.

``reduce(state, action)`` never mutates ``state``; it returns the next state.
Totals are recomputed from the lines on every change to the lines.
"""

from dataclasses import dataclass, replace

from cart.state import CartLine, CartState, ProductSnapshot
from shared.money import total_amount, total_quantity


@dataclass(frozen=True)
class AddItem:
    product: ProductSnapshot
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class SetLoading:
    loading: bool


@dataclass(frozen=True)
class SetError:
    error: str


@dataclass(frozen=True)
class ClearError:
    pass


@dataclass(frozen=True)
class LoadCart:
    state: CartState


def with_items(state: CartState, items) -> CartState:
    """Replace the lines of ``state`` and recompute both totals."""
    items = tuple(items)
    return replace(
        state,
        items=items,
        total_items=total_quantity(line.quantity for line in items),
        total_amount=total_amount((line.price, line.quantity) for line in items),
    )


def _add_item(state: CartState, action: AddItem) -> CartState:
    product = action.product
    if state.line_for(product.id) is not None:
        # Merge keeps the price captured when the line was first added
        items = [
            replace(line, quantity=line.quantity + action.quantity) if line.product.id == product.id else line
            for line in state.items
        ]
    else:
        items = [*state.items, CartLine(product=product, quantity=action.quantity, price=product.price)]

    return replace(with_items(state, items), error=None)


def _update_quantity(state: CartState, action: UpdateQuantity) -> CartState:
    quantity = max(0, action.quantity)
    items = [
        replace(line, quantity=quantity) if line.product.id == action.product_id else line for line in state.items
    ]
    return with_items(state, [line for line in items if line.quantity > 0])


def reduce(state: CartState, action) -> CartState:
    if isinstance(action, AddItem):
        return _add_item(state, action)

    if isinstance(action, RemoveItem):
        return with_items(state, [line for line in state.items if line.product.id != action.product_id])

    if isinstance(action, UpdateQuantity):
        return _update_quantity(state, action)

    if isinstance(action, ClearCart):
        return with_items(state, ())

    if isinstance(action, SetLoading):
        return replace(state, loading=action.loading)

    if isinstance(action, SetError):
        return replace(state, error=action.error, loading=False)

    if isinstance(action, ClearError):
        return replace(state, error=None)

    if isinstance(action, LoadCart):
        return action.state

    return state
