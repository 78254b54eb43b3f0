"""Database Models - Pydantic models for all entities.

Rows come from the database in snake_case; API payloads are camelCase.
Every model accepts both spellings and dumps camelCase with ``by_alias=True``.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from storefront.payments.constants import PaymentType
from storefront.services.money import to_decimal, to_storage_number


class StoreModel(BaseModel):
    """Shared config: camelCase aliases, unknown DB columns ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_api(self) -> dict[str, Any]:
        """JSON-ready camelCase dict."""
        return self.model_dump(mode="json", by_alias=True)


class Product(StoreModel):
    """Product model (read-only here)."""
    id: str
    name: str
    offer_price: Decimal
    price: Optional[Decimal] = None
    description: list[str] | str | None = None
    category: Optional[str] = None
    image: list[str] = []
    in_stock: bool = True

    @field_validator("offer_price", "price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v) if v is not None else None

    @field_serializer("offer_price", "price")
    def serialize_price(self, v: Decimal | None):
        return to_storage_number(v) if v is not None else None


class Address(StoreModel):
    """Shipping address model."""
    id: str
    user_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class OrderItem(StoreModel):
    """Cart line as sent by the client and stored on the order."""
    product: str
    quantity: int = Field(ge=1)


class Order(StoreModel):
    """Order model as stored."""
    id: str
    user_id: str
    items: list[OrderItem]
    address: str
    amount: Decimal
    payment_type: PaymentType
    is_paid: bool = False
    created_at: Optional[datetime] = None

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)

    @field_serializer("amount")
    def serialize_amount(self, v: Decimal):
        return to_storage_number(v)


class OrderItemDetail(StoreModel):
    """Order line with its product expanded. ``product`` is None if it was deleted."""
    product: Optional[Product] = None
    quantity: int


class OrderDetail(Order):
    """Order with product and address references expanded for listings."""
    items: list[OrderItemDetail]  # type: ignore[assignment]
    address: Optional[Address] = None  # type: ignore[assignment]


class CheckoutSession(StoreModel):
    """Hosted checkout session returned by the gateway."""
    id: str
    url: str


class PaymentEventData(StoreModel):
    object: dict[str, Any] = {}


class PaymentEvent(StoreModel):
    """Verified gateway event. Only the fields used for reconciliation are modelled."""
    id: Optional[str] = None
    type: str
    data: PaymentEventData = PaymentEventData()

    @property
    def metadata(self) -> dict[str, Any]:
        return self.data.object.get("metadata") or {}
