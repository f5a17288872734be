# app/domain/schemas.py
from enum import Enum
from pydantic import AliasChoices, BaseModel, Field, ConfigDict, field_validator
from typing import List, Literal
from decimal import Decimal
from datetime import datetime


class Language(str, Enum):
    EN = "en"
    BG = "bg"


class OrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# =====================================================
# ARTWORK
# =====================================================
class ArtworkTag(BaseModel):
    """Tag artworku (slug + nazwy en/bg)."""

    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    name_bg: str | None = None

    model_config = ConfigDict(from_attributes=True)


class Artwork(BaseModel):
    """
    Jeden schemat dla artworku - wszystkie opcjonalne pola jawnie.
    Walidowany na granicy storage (baza, client storage, input admina).
    """

    id: int = Field(..., gt=0)
    title: str
    title_bg: str | None = None
    image: str
    description: str = ""
    description_bg: str | None = None
    tags: List[ArtworkTag] = Field(default_factory=list)
    for_sale: bool = False
    price: Decimal | None = Field(None, ge=0)
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ArtworkCreate(BaseModel):
    """Schema dla tworzenia artworku (admin)."""

    title: str = Field(..., min_length=1, max_length=200)
    title_bg: str | None = Field(None, max_length=200)
    image: str = Field(..., min_length=1, max_length=500)
    description: str = ""
    description_bg: str | None = None
    tags: List[ArtworkTag] = Field(default_factory=list)


class ForSaleIn(BaseModel):
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


# =====================================================
# CART
# =====================================================
class CartItem(BaseModel):
    artwork: Artwork
    quantity: int = Field(1, ge=1)


class CartItemIn(BaseModel):
    artwork_id: int = Field(..., gt=0)


class QuantityIn(BaseModel):
    # <= 0 oznacza usuniecie pozycji
    quantity: int


class Notification(BaseModel):
    level: Literal["info", "success", "error"]
    message: str


class CartOut(BaseModel):
    items: List[CartItem]
    total_items: int
    total_price: Decimal
    notifications: List[Notification] = Field(default_factory=list)


class LanguageIn(BaseModel):
    language: Language


# =====================================================
# CHECKOUT
# =====================================================
class ShippingAddress(BaseModel):
    """Adres zapisany w zamowieniu (odczyt)."""

    full_name: str
    address: str
    city: str
    postal_code: str
    country: str
    phone: str
    notes: str | None = None


class ShippingAddressIn(ShippingAddress):
    """Formularz adresu dostawy - minimalne dlugosci pol."""

    full_name: str = Field(..., min_length=3, validation_alias=AliasChoices("full_name", "fullName"))
    address: str = Field(..., min_length=5)
    city: str = Field(..., min_length=2)
    postal_code: str = Field(..., min_length=3, validation_alias=AliasChoices("postal_code", "postalCode"))
    country: str = Field(..., min_length=2)
    phone: str = Field(..., min_length=5)
    notes: str | None = None

    @field_validator("full_name", "address", "city", "postal_code", "country", "phone", mode="before")
    @classmethod
    def strip(cls, v):
        return v.strip() if isinstance(v, str) else v


class OrderLineItem(BaseModel):
    id: int = Field(..., gt=0)
    title: str
    image: str
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(1, ge=1)


class CreateCheckoutIn(BaseModel):
    """Body dla /functions/create-checkout."""

    items: List[OrderLineItem] = Field(..., min_length=1)
    shipping_address: ShippingAddressIn = Field(
        ..., validation_alias=AliasChoices("shipping_address", "shippingAddress")
    )


class CheckoutSessionOut(BaseModel):
    order_id: str
    url: str


class ProcessPaymentIn(BaseModel):
    order_id: str = Field(..., min_length=1, validation_alias=AliasChoices("order_id", "orderId"))


class FinalizeOut(BaseModel):
    success: bool = True
    order_id: str
    status: OrderStatus
    needs_reconciliation: bool = False


# =====================================================
# ORDERS
# =====================================================
class OrderOut(BaseModel):
    """Szczegoly zamowienia (response)."""

    id: str
    user_id: str | None
    items: List[OrderLineItem]
    shipping_address: ShippingAddress
    total_amount: Decimal
    status: OrderStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderSummaryOut(BaseModel):
    """Pozycja listy zamowien - status, data, suma i miniatury."""

    id: str
    status: OrderStatus
    created_at: datetime
    total_amount: Decimal
    item_count: int
    thumbnails: List[str]
