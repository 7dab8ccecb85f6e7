"""
Enumerations and their PayMongo wire strings
"""

from enum import Enum


class Currency(str, Enum):
    PHP = "PHP"


class PaymentMethodType(str, Enum):
    """Payment method types accepted by checkout sessions, links and payment methods"""

    ATOME = "atome"
    BILLEASE = "billease"
    CARD = "card"
    DOB = "dob"
    DOB_UBP = "dob_ubp"
    BRANKAS_BDO = "brankas_bdo"
    BRANKAS_LANDBANK = "brankas_landbank"
    BRANKAS_METROBANK = "brankas_metrobank"
    GCASH = "gcash"
    GRAB_PAY = "grab_pay"
    PAYMAYA = "paymaya"
    SHOPEE_PAY = "shopee_pay"
    QRPH = "qrph"


class CheckoutStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class LinkStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"


class SourceType(str, Enum):
    GCASH = "gcash"
    GRAB_PAY = "grab_pay"


class SourceStatus(str, Enum):
    PENDING = "pending"
    CHARGEABLE = "chargeable"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    PAID = "paid"
    FAILED = "failed"


class RefundStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RefundReason(str, Enum):
    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"
    OTHERS = "others"


class CustomerDefaultDevice(str, Enum):
    PHONE = "phone"
    EMAIL = "email"
