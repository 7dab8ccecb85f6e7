"""
Payment link entity
"""

from typing import ClassVar, FrozenSet, List, Optional

from pydantic import field_validator

from .base import PaymongoModel, Timestamp, unwrap_resources
from .enums import Currency, LinkStatus
from .payment import Payment


class Link(PaymongoModel):
    id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[Currency] = None
    description: Optional[str] = None
    remarks: Optional[str] = None

    reference_number: Optional[str] = None
    archived: Optional[bool] = None
    status: Optional[LinkStatus] = None
    checkout_url: Optional[str] = None
    fee: Optional[int] = None
    tax_amount: Optional[int] = None
    payments: Optional[List[Payment]] = None
    livemode: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "id",
            "reference_number",
            "archived",
            "status",
            "checkout_url",
            "fee",
            "tax_amount",
            "payments",
            "livemode",
            "created_at",
            "updated_at",
        }
    )

    @field_validator("payments", mode="before")
    @classmethod
    def unwrap_payments(cls, v):
        return unwrap_resources(Payment, v)
