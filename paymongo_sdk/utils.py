"""
PayMongo SDK Utilities
"""

import base64
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Union

logger = logging.getLogger("paymongo_sdk")

SENSITIVE_KEYS = {
    "api_key",
    "secret",
    "password",
    "authorization",
    "card_number",
    "cvc",
    "secret_key",
    "public_key",
    "client_key",
}


def basic_auth_header(key: str) -> str:
    """
    Build the Basic authentication header value for an API key

    PayMongo takes the key as the username and an empty password.

    Args:
        key: Secret (``sk_``) or public (``pk_``) key

    Returns:
        Header value, e.g. ``Basic c2tfdGVzdF8xMjM6``
    """
    token = base64.b64encode(f"{key}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def to_minor_units(amount: Union[Decimal, str, int, float]) -> int:
    """
    Convert a major-unit amount into integer centavos

    Args:
        amount: Amount in pesos, e.g. ``Decimal("100.50")``

    Returns:
        Amount in minor units, e.g. ``10050``

    Raises:
        ValueError: If the amount is not a number or has sub-centavo precision
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}")

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")

    minor = value * 100
    if minor != minor.to_integral_value():
        raise ValueError(f"Amount {amount!r} has more than two decimal places")
    return int(minor)


def setup_logging(debug: bool = False) -> None:
    """
    Setup logging for SDK

    Args:
        debug: Enable debug level logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def sanitize_for_logging(data: Any) -> Any:
    """
    Sanitize sensitive data for logging

    Args:
        data: Payload to sanitize (dicts and lists are walked recursively)

    Returns:
        Copy of the payload with sensitive values redacted
    """
    if isinstance(data, list):
        return [sanitize_for_logging(item) for item in data]
    if not isinstance(data, dict):
        return data

    sanitized = {}
    for key, value in data.items():
        if str(key).lower() in SENSITIVE_KEYS:
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = sanitize_for_logging(value)

    return sanitized
