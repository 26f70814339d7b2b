"""BDD tests for checking out a cart into a booking."""

import json

from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from storefront.booking.booking import Booking, BookingStatus
from storefront.booking.creation import CreateBooking
from storefront.booking.exceptions import ProductsNotAvailableError

scenarios("features/checkout.feature")


def _book(outcome, items):
    try:
        outcome["booking_id"] = current_domain.process(
            CreateBooking(user_id="user-001", products=json.dumps(items)),
            asynchronous=False,
        )
    except ProductsNotAvailableError as exc:
        outcome["exc"] = exc


def _booking(outcome):
    return current_domain.repository_for(Booking).get(outcome["booking_id"])


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer books {qty_a:d} of "{name_a}" and {qty_b:d} of "{name_b}"'))
def book_two_products(catalogue, outcome, qty_a, name_a, qty_b, name_b):
    _book(
        outcome,
        [
            {"product_id": catalogue[name_a], "quantity": qty_a},
            {"product_id": catalogue[name_b], "quantity": qty_b},
        ],
    )


@when(parsers.cfparse('the customer books {qty:d} of "{name}" claiming a price of {price:f}'))
def book_with_client_price(catalogue, outcome, qty, name, price):
    _book(outcome, [{"product_id": catalogue[name], "quantity": qty, "price": price}])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("a pending booking is stored")
def pending_booking_stored(outcome):
    assert outcome["exc"] is None
    assert _booking(outcome).status == BookingStatus.PENDING.value


@then(parsers.cfparse("the booking total is {total:f}"))
def booking_total(outcome, total):
    assert _booking(outcome).total_amount == total


@then(parsers.cfparse("the booking has {count:d} items"))
def booking_item_count(outcome, count):
    assert _booking(outcome).total_items == count


@then(parsers.cfparse('the line price for "{name}" is {price:f}'))
def line_price(catalogue, outcome, name, price):
    line = next(line for line in _booking(outcome).lines if str(line.product_id) == catalogue[name])
    assert line.price == price


@then("the booking is rejected as not available")
def booking_rejected(outcome):
    assert isinstance(outcome["exc"], ProductsNotAvailableError)


@then("no booking is stored")
def no_booking_stored():
    assert current_domain.repository_for(Booking)._dao.query.all().items == []
