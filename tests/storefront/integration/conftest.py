import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import booking_router, product_router, register_error_handlers
from storefront.auth import get_authenticator


@pytest.fixture()
def app():
    app = FastAPI()
    app.include_router(booking_router, prefix="/api")
    app.include_router(product_router, prefix="/api")
    register_error_handlers(app)
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def user_id():
    return "user-001"


@pytest.fixture()
def token(user_id):
    return get_authenticator().issue_token(user_id=user_id, name="Ada", email="ada@example.com")


@pytest.fixture()
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
