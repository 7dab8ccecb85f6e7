"""
Value objects shared by several resources
"""

from typing import ClassVar, FrozenSet, List, Optional

from pydantic import ConfigDict, Field

from .base import PaymongoModel
from .enums import Currency


class Address(PaymongoModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 country code")


class Billing(PaymongoModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None


class LineItem(PaymongoModel):
    """Checkout session line item, amount in minor units"""

    name: str
    quantity: int
    currency: Currency = Currency.PHP
    amount: int
    description: Optional[str] = None
    images: Optional[List[str]] = None


class Redirect(PaymongoModel):
    """Redirect URLs of a source; ``checkout_url`` is filled in by the API"""

    success: Optional[str] = None
    failed: Optional[str] = None
    checkout_url: Optional[str] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"checkout_url"})


class CheckoutMetadata(PaymongoModel):
    """Checkout session metadata; keys beyond the documented ones are kept"""

    model_config = ConfigDict(extra="allow")

    notes: Optional[str] = None
    customer_number: Optional[str] = None
    remarks: Optional[str] = None
