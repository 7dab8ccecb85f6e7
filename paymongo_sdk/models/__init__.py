"""
PayMongo SDK Data Models
"""

from .base import PaymongoModel
from .enums import (
    Currency,
    PaymentMethodType,
    CheckoutStatus,
    PaymentStatus,
    LinkStatus,
    SourceType,
    SourceStatus,
    RefundStatus,
    RefundReason,
    CustomerDefaultDevice,
)
from .common import Address, Billing, LineItem, Redirect, CheckoutMetadata
from .payment import Payment
from .checkout import Checkout
from .link import Link
from .source import Source
from .refund import Refund
from .customer import Customer
from .payment_method import Details, PaymentMethod

__all__ = [
    "PaymongoModel",
    "Currency",
    "PaymentMethodType",
    "CheckoutStatus",
    "PaymentStatus",
    "LinkStatus",
    "SourceType",
    "SourceStatus",
    "RefundStatus",
    "RefundReason",
    "CustomerDefaultDevice",
    "Address",
    "Billing",
    "LineItem",
    "Redirect",
    "CheckoutMetadata",
    "Payment",
    "Checkout",
    "Link",
    "Source",
    "Refund",
    "Customer",
    "Details",
    "PaymentMethod",
]
