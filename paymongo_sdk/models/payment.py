"""
Payment entity
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional

from .base import PaymongoModel, Timestamp
from .common import Billing
from .enums import Currency, PaymentStatus


class Payment(PaymongoModel):
    """
    A payment, either created from a chargeable source or attached to a
    checkout session / link by the API.

    ``source`` is sent as ``{"id": <source id>, "type": "source"}`` and comes
    back as ``{"id": ..., "type": <funding type>}`` (e.g. ``gcash``).
    """

    id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[Currency] = None
    description: Optional[str] = None
    statement_descriptor: Optional[str] = None
    source: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None

    status: Optional[PaymentStatus] = None
    billing: Optional[Billing] = None
    fee: Optional[int] = None
    net_amount: Optional[int] = None
    foreign_fee: Optional[int] = None
    tax_amount: Optional[int] = None
    external_reference_number: Optional[str] = None
    payment_intent_id: Optional[str] = None
    balance_transaction_id: Optional[str] = None
    disputed: Optional[bool] = None
    origin: Optional[str] = None
    livemode: Optional[bool] = None
    available_at: Optional[Timestamp] = None
    paid_at: Optional[Timestamp] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "id",
            "status",
            "billing",
            "fee",
            "net_amount",
            "foreign_fee",
            "tax_amount",
            "external_reference_number",
            "payment_intent_id",
            "balance_transaction_id",
            "disputed",
            "origin",
            "livemode",
            "available_at",
            "paid_at",
            "created_at",
            "updated_at",
        }
    )

    @classmethod
    def for_source(cls, source, **fields) -> "Payment":
        """
        Build a payment charging a chargeable source for its full amount

        Args:
            source: Chargeable :class:`~paymongo_sdk.models.source.Source`
            **fields: Extra attributes (description, statement_descriptor, ...)
        """
        fields.setdefault("amount", source.amount)
        fields.setdefault("currency", source.currency)
        return cls(source={"id": source.id, "type": "source"}, **fields)
