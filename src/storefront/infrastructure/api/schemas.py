"""Pydantic request/response schemas for the HTTP API.

These are external contracts, kept separate from the application DTOs.
Money values travel as decimal strings ("190.00") so no float ever
carries a price.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str


class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1)
    price: str | int  # decimal string or whole rupees; floats are refused
    category: str
    description: str = ""
    image: str = ""
    stock: int = Field(ge=0, default=100)


class UpdateProductRequest(BaseModel):
    name: str | None = None
    price: str | int | None = None
    category: str | None = None
    description: str | None = None
    image: str | None = None
    stock: int | None = Field(ge=0, default=None)


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class SetCartQuantityRequest(BaseModel):
    quantity: int


class PlaceOrderRequest(BaseModel):
    shipping_address: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [{"shipping_address": "12 MG Road, Bengaluru"}]
        }
    }


class SetOrderStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str


class ProductResponse(BaseModel):
    id: str
    name: str
    price: str
    category: str
    description: str
    image: str
    stock: int


class CartLineResponse(BaseModel):
    product_id: str
    product: ProductResponse | None
    quantity: int
    line_total: str | None


class CartResponse(BaseModel):
    items: list[CartLineResponse]
    subtotal: str
    shipping_fee: str
    total: str
    currency: str
    version: int


class OwnerResponse(BaseModel):
    id: str
    name: str
    email: str


class OrderLineResponse(BaseModel):
    product_id: str
    product: ProductResponse | None
    quantity: int
    price: str
    line_total: str


class OrderResponse(BaseModel):
    id: int
    user_id: str
    status: str
    items: list[OrderLineResponse]
    total_amount: str
    currency: str
    shipping_address: str
    created_at: str
    owner: OwnerResponse | None = None
