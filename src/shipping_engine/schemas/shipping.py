"""Pydantic request/response models for shipping endpoints."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field


class CartItemModel(BaseModel):
    id: str
    quantity: int = Field(..., ge=0)
    price: float = Field(..., ge=0.0, allow_inf_nan=False, description="Unit price in the store's base currency (USD).")
    weight: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False, description="Unit weight in kilograms.")


class ShippingRequest(BaseModel):
    country_code: str = Field(..., description="Destination country code (case-insensitive).")
    city: Optional[str] = Field(default=None, description="Destination city, used for domestic deliveries.")
    items: Optional[Sequence[CartItemModel]] = Field(default=None, description="Cart lines to weigh and price.")
    weight: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False, description="Package weight when no items are given.")
    subtotal: Optional[float] = Field(
        default=None,
        ge=0.0,
        allow_inf_nan=False,
        description="Order subtotal in USD. Derived from items when omitted.",
    )


class ShippingCalculationModel(BaseModel):
    kind: Literal["international"] = "international"
    zone: str
    service: str
    base_rate: float
    weight_charge: float
    fuel_surcharge: float
    insurance: float
    total_usd: float
    total_kes: int
    currency: str
    estimated_days: str
    courier: str
    is_free_shipping: bool
    savings: Optional[int] = None
    display: str


class LocalShippingCalculationModel(BaseModel):
    kind: Literal["local"] = "local"
    zone: str
    service: str
    flat_rate: int
    currency: str
    estimated_days: str
    courier: str
    is_free_shipping: bool = False
    display: str


ShippingOptionModel = Annotated[
    Union[ShippingCalculationModel, LocalShippingCalculationModel],
    Field(discriminator="kind"),
]


class ShippingQuoteResponse(BaseModel):
    country_code: str
    country_name: str
    zone: str
    is_local: bool
    weight: float
    subtotal: float
    currency: str
    main_shipping: ShippingOptionModel
    options: list[ShippingOptionModel]
    amount_needed_for_free_shipping: float


class ShippingInfoResponse(BaseModel):
    zone: str
    courier: str
    estimated_delivery: str
    currency: str
    zone_name: Optional[str] = None
    country_name: Optional[str] = None
    free_shipping_threshold: Optional[float] = None
    flat_rate: Optional[int] = None
