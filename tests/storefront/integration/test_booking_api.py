"""Integration tests for the booking endpoints via TestClient."""

from uuid import uuid4

from protean import current_domain
from storefront.booking.booking import Booking
from storefront.booking.repository import BookingRepository


def _post_booking(client, headers, items, **extra):
    return client.post("/api/user/bookings", json={"products": items, **extra}, headers=headers)


def _stored_bookings():
    return current_domain.repository_for(Booking)._dao.query.all().items


class TestCreateBookingEndpoint:
    def test_created(self, client, auth_headers, add_product, user_id):
        product_id = add_product(name="Seed Pack", price=10.0, category="food", image="/img/seeds.png")

        response = _post_booking(client, auth_headers, [{"productId": product_id, "quantity": 2}])

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["message"] == "Booking created successfully"

        booking = body["data"]["booking"]
        assert booking["userId"] == user_id
        assert booking["status"] == "pending"
        assert booking["totalAmount"] == 20.0
        assert booking["totalItems"] == 2
        assert booking["products"][0]["quantity"] == 2
        assert booking["products"][0]["price"] == 10.0
        assert booking["products"][0]["productId"] == {
            "_id": product_id,
            "name": "Seed Pack",
            "price": 10.0,
            "image": "/img/seeds.png",
            "category": "food",
        }

    def test_client_prices_and_total_ignored(self, client, auth_headers, add_product):
        first = add_product(name="Seed Pack", price=10.0)
        second = add_product(name="Watering Can", price=15.5)

        response = _post_booking(
            client,
            auth_headers,
            [
                {"productId": first, "quantity": 2, "price": 0.01},
                {"productId": second, "quantity": 1, "price": 0.01},
            ],
            totalAmount=0.03,
        )

        assert response.status_code == 201
        booking = response.json()["data"]["booking"]
        assert [line["price"] for line in booking["products"]] == [10.0, 15.5]
        assert booking["totalAmount"] == 35.5

    def test_empty_products_rejected(self, client, auth_headers):
        response = _post_booking(client, auth_headers, [])

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]

    def test_invalid_product_id_rejected(self, client, auth_headers):
        response = _post_booking(client, auth_headers, [{"productId": "abc", "quantity": 1}])

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"].startswith("products.0.productId")

    def test_zero_quantity_rejected(self, client, auth_headers):
        response = _post_booking(client, auth_headers, [{"productId": str(uuid4()), "quantity": 0}])

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_fractional_quantity_rejected(self, client, auth_headers):
        response = _post_booking(client, auth_headers, [{"productId": str(uuid4()), "quantity": 1.5}])
        assert response.status_code == 400

    def test_out_of_stock_rejected(self, client, auth_headers, add_product):
        product_id = add_product(in_stock=False)

        response = _post_booking(client, auth_headers, [{"productId": product_id, "quantity": 1}])

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == {
            "message": "One or more products are not available",
            "code": "PRODUCTS_NOT_AVAILABLE",
        }
        assert _stored_bookings() == []

    def test_unknown_product_rejected(self, client, auth_headers):
        response = _post_booking(client, auth_headers, [{"productId": str(uuid4()), "quantity": 1}])

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "PRODUCTS_NOT_AVAILABLE"

    def test_persistence_failure(self, client, auth_headers, add_product, monkeypatch):
        product_id = add_product()

        def _fail(self, booking):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(BookingRepository, "add", _fail)

        response = _post_booking(client, auth_headers, [{"productId": product_id, "quantity": 1}])

        assert response.status_code == 500
        assert response.json()["error"] == {
            "message": "Failed to create booking",
            "code": "BOOKING_CREATE_ERROR",
        }

    def test_resubmission_creates_new_booking(self, client, auth_headers, add_product):
        product_id = add_product()
        items = [{"productId": product_id, "quantity": 1}]

        first = _post_booking(client, auth_headers, items).json()["data"]["booking"]["_id"]
        second = _post_booking(client, auth_headers, items).json()["data"]["booking"]["_id"]

        assert first != second
        assert len(_stored_bookings()) == 2


class TestListBookingsEndpoint:
    def test_lists_only_own_bookings(self, client, auth_headers, add_product, user_id):
        from storefront.auth import get_authenticator

        product_id = add_product()
        _post_booking(client, auth_headers, [{"productId": product_id, "quantity": 1}])

        other_token = get_authenticator().issue_token(user_id="user-002")
        _post_booking(client, {"Authorization": f"Bearer {other_token}"}, [{"productId": product_id, "quantity": 3}])

        response = client.get("/api/user/bookings", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["count"] == 1
        assert data["bookings"][0]["userId"] == user_id
        assert data["bookings"][0]["products"][0]["productId"]["_id"] == product_id

    def test_empty(self, client, auth_headers):
        response = client.get("/api/user/bookings", headers=auth_headers)
        assert response.json()["data"] == {"bookings": [], "count": 0}

    def test_fetch_failure(self, client, auth_headers, monkeypatch):
        def _fail(self, user_id):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(BookingRepository, "find_for_user", _fail)

        response = client.get("/api/user/bookings", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "BOOKINGS_FETCH_ERROR"
