"""Pydantic request/response schemas for the storefront API.

The wire format is camelCase with ``_id`` identifiers; models accept either
the alias or the Python field name.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.booking.booking import is_valid_identifier
from storefront.product.product import ProductCategory

_CATEGORIES = [category.value for category in ProductCategory]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Booking Request Schemas ---


class BookingItemRequest(_CamelModel):
    product_id: str = Field(..., alias="productId")
    quantity: int = Field(..., ge=1, strict=True)

    @field_validator("product_id")
    @classmethod
    def product_id_must_be_identifier(cls, value: str) -> str:
        if not is_valid_identifier(value):
            raise ValueError("Valid product ID is required")
        return value


class CreateBookingRequest(_CamelModel):
    """Client prices and totals are accepted on the wire but never read."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "products": [
                        {"productId": "6b0c1f0e-2f55-4b6e-9d59-2a6f1d7c0a11", "quantity": 2},
                        {"productId": "0f4b6d1e-8c31-4f0b-a7a5-3b0f9e2d4c22", "quantity": 1},
                    ]
                }
            ]
        },
    )

    products: list[BookingItemRequest] = Field(..., min_length=1)


# --- Booking Response Schemas ---


class ProductRef(_CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    price: float
    image: str | None = None
    category: str | None = None


class BookingLineResponse(_CamelModel):
    product_id: ProductRef | str = Field(..., alias="productId")
    quantity: int
    price: float


class BookingResponse(_CamelModel):
    id: str = Field(..., alias="_id")
    user_id: str = Field(..., alias="userId")
    products: list[BookingLineResponse]
    total_amount: float = Field(..., alias="totalAmount")
    total_items: int = Field(..., alias="totalItems")
    status: str
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class BookingCreatedData(_CamelModel):
    booking: BookingResponse
    message: str = "Booking created successfully"


class BookingCreatedResponse(_CamelModel):
    success: bool = True
    data: BookingCreatedData


class BookingListData(_CamelModel):
    bookings: list[BookingResponse]
    count: int


class BookingListResponse(_CamelModel):
    success: bool = True
    data: BookingListData


# --- Product Request Schemas ---


class AddProductRequest(_CamelModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Garden Trowel",
                    "description": "Stainless steel hand trowel.",
                    "price": 12.5,
                    "image": "https://example.com/images/trowel.jpg",
                    "category": "tools",
                    "inStock": True,
                    "inventory": 14,
                }
            ]
        },
    )

    name: str = Field(..., min_length=2, max_length=100)
    description: str | None = Field(None, max_length=1000)
    price: float = Field(..., ge=0)
    image: str | None = Field(None, max_length=500)
    category: str | None = None
    in_stock: bool = Field(True, alias="inStock")
    inventory: int = Field(0, ge=0)

    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, value: str | None) -> str | None:
        if value is not None and value not in _CATEGORIES:
            raise ValueError(f"Category must be one of: {', '.join(_CATEGORIES)}")
        return value


class ChangePriceRequest(_CamelModel):
    price: float = Field(..., ge=0)


class SetStockRequest(_CamelModel):
    in_stock: bool = Field(..., alias="inStock")


# --- Product Response Schemas ---


class ProductResponse(_CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    description: str | None = None
    price: float
    formatted_price: str = Field(..., alias="formattedPrice")
    image: str | None = None
    category: str | None = None
    in_stock: bool = Field(..., alias="inStock")
    inventory: int = 0
    is_available: bool = Field(..., alias="isAvailable")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class ProductIdData(_CamelModel):
    product_id: str = Field(..., alias="productId")


class ProductIdResponse(_CamelModel):
    success: bool = True
    data: ProductIdData


class Pagination(_CamelModel):
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_count: int = Field(..., alias="totalCount")
    has_next: bool = Field(..., alias="hasNext")
    has_prev: bool = Field(..., alias="hasPrev")


class ProductListData(_CamelModel):
    products: list[ProductResponse]
    pagination: Pagination


class ProductListResponse(_CamelModel):
    success: bool = True
    data: ProductListData


class StatusResponse(_CamelModel):
    success: bool = True
    status: str = "ok"


# --- Error Schemas ---


class ErrorBody(_CamelModel):
    message: str
    code: str
    details: list[dict] | None = None


class ErrorResponse(_CamelModel):
    success: bool = False
    error: ErrorBody
