"""
Refund entity
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional

from .base import PaymongoModel, Timestamp
from .enums import Currency, RefundReason, RefundStatus


class Refund(PaymongoModel):
    id: Optional[str] = None
    amount: Optional[int] = None
    payment_id: Optional[str] = None
    reason: Optional[RefundReason] = None
    notes: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    currency: Optional[Currency] = None
    status: Optional[RefundStatus] = None
    balance_transaction_id: Optional[str] = None
    payout_id: Optional[str] = None
    livemode: Optional[bool] = None
    available_at: Optional[Timestamp] = None
    refunded_at: Optional[Timestamp] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "id",
            "currency",
            "status",
            "balance_transaction_id",
            "payout_id",
            "livemode",
            "available_at",
            "refunded_at",
            "created_at",
            "updated_at",
        }
    )
