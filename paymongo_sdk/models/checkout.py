"""
Checkout session entity
"""

from typing import ClassVar, FrozenSet, List, Optional

from pydantic import field_validator

from .base import PaymongoModel, Timestamp, unwrap_resources
from .common import Billing, CheckoutMetadata, LineItem
from .enums import CheckoutStatus, PaymentMethodType
from .payment import Payment


class Checkout(PaymongoModel):
    """Checkout session; ``checkout_url`` is where the customer pays"""

    id: Optional[str] = None
    description: Optional[str] = None
    reference_number: Optional[str] = None
    cancel_url: Optional[str] = None
    success_url: Optional[str] = None
    line_items: Optional[List[LineItem]] = None
    payment_method_types: Optional[List[PaymentMethodType]] = None
    billing: Optional[Billing] = None
    metadata: Optional[CheckoutMetadata] = None
    send_email_receipt: Optional[bool] = None
    show_description: Optional[bool] = None
    show_line_items: Optional[bool] = None
    statement_descriptor: Optional[str] = None

    status: Optional[CheckoutStatus] = None
    checkout_url: Optional[str] = None
    client_key: Optional[str] = None
    payments: Optional[List[Payment]] = None
    livemode: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "id",
            "status",
            "checkout_url",
            "client_key",
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
