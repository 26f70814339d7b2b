"""Shared BDD fixtures and step definitions for checkout scenarios."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers
from storefront.product.availability import MarkProductOutOfStock
from storefront.product.creation import AddProduct
from storefront.product.pricing import ChangeProductPrice


@pytest.fixture()
def catalogue():
    """Product name to product id."""
    return {}


@pytest.fixture()
def outcome():
    """Container for the booking id or the captured error."""
    return {"booking_id": None, "exc": None}


@given(parsers.cfparse('the catalogue has "{name}" priced {price:f}'))
def catalogue_has_product(catalogue, name, price):
    catalogue[name] = current_domain.process(AddProduct(name=name, price=price), asynchronous=False)


@given(parsers.cfparse('"{name}" is out of stock'))
def product_out_of_stock(catalogue, name):
    current_domain.process(MarkProductOutOfStock(product_id=catalogue[name]), asynchronous=False)


@given(parsers.cfparse('the price of "{name}" changes to {price:f}'))
def product_price_changes(catalogue, name, price):
    current_domain.process(ChangeProductPrice(product_id=catalogue[name], new_price=price), asynchronous=False)
