import os

import pytest


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain
    from storefront.auth import reset_authenticator

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    reset_authenticator()
    ctx.pop()


@pytest.fixture()
def add_product():
    """Factory: create a catalogue product through the AddProduct command."""
    from protean import current_domain
    from storefront.product.creation import AddProduct

    def _add(name="Garden Trowel", price=12.5, in_stock=True, **kwargs):
        command = AddProduct(name=name, price=price, in_stock=in_stock, **kwargs)
        return current_domain.process(command, asynchronous=False)

    return _add
