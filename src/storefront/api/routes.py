"""FastAPI endpoints for the storefront domain.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts).
"""

import json
from math import ceil

from fastapi import APIRouter, Depends, Query
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.api.dependencies import require_user
from storefront.api.errors import BookingCreateError, BookingsFetchError
from storefront.api.schemas import (
    AddProductRequest,
    BookingCreatedData,
    BookingCreatedResponse,
    BookingListData,
    BookingListResponse,
    ChangePriceRequest,
    CreateBookingRequest,
    ErrorResponse,
    Pagination,
    ProductIdData,
    ProductIdResponse,
    ProductListData,
    ProductListResponse,
    SetStockRequest,
    StatusResponse,
)
from storefront.auth.port import AuthenticatedUser
from storefront.booking.booking import Booking
from storefront.booking.creation import CreateBooking
from storefront.booking.exceptions import ProductsNotAvailableError
from storefront.product.availability import MarkProductInStock, MarkProductOutOfStock
from storefront.product.creation import AddProduct
from storefront.product.pricing import ChangeProductPrice
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_ERROR_RESPONSES = {status: {"model": ErrorResponse} for status in (400, 401, 404, 500)}

booking_router = APIRouter(prefix="/user/bookings", tags=["bookings"], responses=_ERROR_RESPONSES)
product_router = APIRouter(prefix="/products", tags=["products"], responses=_ERROR_RESPONSES)


# --- Serialisation helpers ---


def product_payload(product: Product) -> dict:
    return {
        "_id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "formattedPrice": product.formatted_price,
        "image": product.image,
        "category": product.category,
        "inStock": product.in_stock,
        "inventory": product.inventory or 0,
        "isAvailable": product.is_available,
        "createdAt": product.created_at,
        "updatedAt": product.updated_at,
    }


def _product_ref(product: Product) -> dict:
    return {
        "_id": str(product.id),
        "name": product.name,
        "price": product.price,
        "image": product.image,
        "category": product.category,
    }


def booking_payload(booking: Booking, products_by_id: dict[str, Product]) -> dict:
    """Booking as returned to clients, with product references expanded.

    A line whose product no longer exists keeps the bare product id.
    """
    lines = []
    for line in booking.lines:
        product_id = str(line.product_id)
        product = products_by_id.get(product_id)
        lines.append(
            {
                "productId": _product_ref(product) if product is not None else product_id,
                "quantity": line.quantity,
                "price": line.price,
            }
        )

    return {
        "_id": str(booking.id),
        "userId": str(booking.user_id),
        "products": lines,
        "totalAmount": booking.total_amount,
        "totalItems": booking.total_items,
        "status": booking.status,
        "createdAt": booking.created_at,
        "updatedAt": booking.updated_at,
    }


def _products_for(bookings) -> dict[str, Product]:
    product_ids = {str(line.product_id) for booking in bookings for line in booking.lines}
    products = current_domain.repository_for(Product).find_by_ids(product_ids)
    return {str(product.id): product for product in products}


# --- Booking endpoints ---


@booking_router.post("", status_code=201, response_model=BookingCreatedResponse)
async def create_booking(
    body: CreateBookingRequest,
    user: AuthenticatedUser = Depends(require_user),
) -> BookingCreatedResponse:
    """Place a booking for the authenticated user.

    Prices come from the catalogue; any price or total in the body is ignored.
    """
    command = CreateBooking(
        user_id=user.user_id,
        products=json.dumps([{"product_id": item.product_id, "quantity": item.quantity} for item in body.products]),
    )
    try:
        booking_id = current_domain.process(command, asynchronous=False)
        booking = current_domain.repository_for(Booking).get(booking_id)
    except (ValidationError, ProductsNotAvailableError):
        raise
    except Exception as exc:
        logger.exception("booking_create_failed", user_id=user.user_id)
        raise BookingCreateError() from exc

    return BookingCreatedResponse(
        data=BookingCreatedData(booking=booking_payload(booking, _products_for([booking]))),
    )


@booking_router.get("", response_model=BookingListResponse)
async def list_bookings(user: AuthenticatedUser = Depends(require_user)) -> BookingListResponse:
    """The authenticated user's bookings, newest first."""
    try:
        bookings = current_domain.repository_for(Booking).find_for_user(user.user_id)
        products_by_id = _products_for(bookings)
    except Exception as exc:
        logger.exception("bookings_fetch_failed", user_id=user.user_id)
        raise BookingsFetchError() from exc

    return BookingListResponse(
        data=BookingListData(
            bookings=[booking_payload(booking, products_by_id) for booking in bookings],
            count=len(bookings),
        )
    )


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        image=body.image,
        category=body.category,
        in_stock=body.in_stock,
        inventory=body.inventory,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(data=ProductIdData(product_id=product_id))


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    category: str | None = None,
    in_stock: bool | None = Query(None, alias="inStock"),
    limit: int = Query(20, ge=1, le=100),
    page: int = Query(1, ge=1),
) -> ProductListResponse:
    """Browse the catalogue, sorted by name."""
    results = current_domain.repository_for(Product).browse(
        category=category,
        in_stock=in_stock,
        limit=limit,
        page=page,
    )
    total_pages = ceil(results.total / limit)

    return ProductListResponse(
        data=ProductListData(
            products=[product_payload(product) for product in results.items],
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages,
                total_count=results.total,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )
    )


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def change_product_price(product_id: str, body: ChangePriceRequest) -> StatusResponse:
    current_domain.process(
        ChangeProductPrice(product_id=product_id, new_price=body.price),
        asynchronous=False,
    )
    return StatusResponse()


@product_router.put("/{product_id}/stock", response_model=StatusResponse)
async def set_product_stock(product_id: str, body: SetStockRequest) -> StatusResponse:
    command_cls = MarkProductInStock if body.in_stock else MarkProductOutOfStock
    current_domain.process(command_cls(product_id=product_id), asynchronous=False)
    return StatusResponse()
