"""
Payment method entity
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional

from .base import PaymongoModel, Timestamp
from .common import Billing
from .enums import PaymentMethodType


class Details(PaymongoModel):
    """
    Card / bank details. Card number and CVC are only ever sent; the API
    answers with ``last4`` instead.
    """

    card_number: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    cvc: Optional[str] = None
    bank_code: Optional[str] = None
    last4: Optional[str] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"last4"})


class PaymentMethod(PaymongoModel):
    id: Optional[str] = None
    type: Optional[PaymentMethodType] = None
    details: Optional[Details] = None
    billing: Optional[Billing] = None
    metadata: Optional[Dict[str, Any]] = None

    livemode: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"id", "livemode", "created_at", "updated_at"}
    )

    # only these may change after creation
    updatable_fields: ClassVar[FrozenSet[str]] = frozenset({"billing", "metadata"})
