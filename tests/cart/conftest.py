import pytest
from cart.state import ProductSnapshot
from cart.storage import MemoryStorage


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def seeds():
    return ProductSnapshot(id="prod-a", name="Seed Pack", price=10.0, category="food")


@pytest.fixture()
def can():
    return ProductSnapshot(id="prod-b", name="Watering Can", price=15.5, category="tools")
