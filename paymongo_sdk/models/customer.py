"""
Customer entity
"""

from typing import ClassVar, FrozenSet, Optional

from .base import PaymongoModel, Timestamp
from .enums import CustomerDefaultDevice


class Customer(PaymongoModel):
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    default_device: Optional[CustomerDefaultDevice] = None

    livemode: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"id", "livemode", "created_at", "updated_at"}
    )
