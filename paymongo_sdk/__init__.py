"""
PayMongo Python SDK
Server-side client for the PayMongo payments API
"""

from paymongo_sdk.client import PaymongoClient
from paymongo_sdk.async_client import AsyncPaymongoClient
from paymongo_sdk.config import ClientConfig
from paymongo_sdk.models import (
    Address,
    Billing,
    Checkout,
    CheckoutMetadata,
    CheckoutStatus,
    Currency,
    Customer,
    CustomerDefaultDevice,
    Details,
    LineItem,
    Link,
    LinkStatus,
    Payment,
    PaymentMethod,
    PaymentMethodType,
    PaymentStatus,
    Redirect,
    Refund,
    RefundReason,
    RefundStatus,
    Source,
    SourceStatus,
    SourceType,
)
from paymongo_sdk.exceptions import (
    PaymongoError,
    APIError,
    ErrorDetail,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
    TimeoutError as PaymongoTimeoutError,
)
from paymongo_sdk.utils import to_minor_units
from paymongo_sdk.__version__ import __version__

__all__ = [
    "PaymongoClient",
    "AsyncPaymongoClient",
    "ClientConfig",
    "Address",
    "Billing",
    "Checkout",
    "CheckoutMetadata",
    "CheckoutStatus",
    "Currency",
    "Customer",
    "CustomerDefaultDevice",
    "Details",
    "LineItem",
    "Link",
    "LinkStatus",
    "Payment",
    "PaymentMethod",
    "PaymentMethodType",
    "PaymentStatus",
    "Redirect",
    "Refund",
    "RefundReason",
    "RefundStatus",
    "Source",
    "SourceStatus",
    "SourceType",
    "PaymongoError",
    "APIError",
    "ErrorDetail",
    "ConfigurationError",
    "NetworkError",
    "ResponseFormatError",
    "PaymongoTimeoutError",
    "to_minor_units",
    "__version__",
]
