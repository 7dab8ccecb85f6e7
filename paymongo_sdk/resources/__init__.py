"""
Resource clients
"""

from .checkouts import CheckoutClient
from .payments import PaymentClient
from .links import LinksClient
from .sources import SourceClient
from .customers import CustomerClient
from .payment_methods import PaymentMethodsClient
from .refunds import RefundClient

__all__ = [
    "CheckoutClient",
    "PaymentClient",
    "LinksClient",
    "SourceClient",
    "CustomerClient",
    "PaymentMethodsClient",
    "RefundClient",
]
