"""
Source entity (e-wallet payment authorization)
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional

from .base import PaymongoModel, Timestamp
from .common import Billing, Redirect
from .enums import Currency, SourceStatus, SourceType


class Source(PaymongoModel):
    """
    A GCash / GrabPay source. The customer authorizes it at
    ``redirect.checkout_url``; once ``chargeable`` it can be turned into a
    :class:`~paymongo_sdk.models.payment.Payment`.
    """

    id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[Currency] = None
    type: Optional[SourceType] = None
    description: Optional[str] = None
    statement_descriptor: Optional[str] = None
    billing: Optional[Billing] = None
    redirect: Optional[Redirect] = None
    metadata: Optional[Dict[str, Any]] = None

    status: Optional[SourceStatus] = None
    livemode: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"id", "status", "livemode", "created_at", "updated_at"}
    )
