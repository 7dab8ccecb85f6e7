"""
PayMongo SDK Main Client
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from paymongo_sdk.config import ClientConfig
from paymongo_sdk.exceptions import ConfigurationError
from paymongo_sdk.http_client import HttpClient
from paymongo_sdk.resources import (
    CheckoutClient,
    CustomerClient,
    LinksClient,
    PaymentClient,
    PaymentMethodsClient,
    RefundClient,
    SourceClient,
)
from paymongo_sdk.utils import setup_logging
from paymongo_sdk.__version__ import __version__

logger = logging.getLogger("paymongo_sdk.client")


def build_config(
    secret_key: Optional[str], public_key: Optional[str], config: Optional[ClientConfig]
) -> ClientConfig:
    if config is not None:
        if secret_key or public_key:
            raise ValueError("Provide either a ClientConfig or keys, not both.")
        return config
    try:
        return ClientConfig(secret_key=secret_key, public_key=public_key)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


class PaymongoClient:
    """
    Main PayMongo SDK Client

    Exposes one client per API resource:
    ``checkouts``, ``payments``, ``links``, ``sources``, ``customers``,
    ``payment_methods`` and ``refunds``.

    Example:
        >>> from paymongo_sdk import PaymongoClient, Link, Currency
        >>> client = PaymongoClient(secret_key=os.getenv("PAYMONGO_SECRET_KEY"))
        >>> link = client.links.create_link(
        ...     Link(amount=10000, currency=Currency.PHP, description="Invoice 42")
        ... )
        >>> link.checkout_url
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        public_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize PayMongo client

        Args:
            secret_key: Secret key (``sk_...``)
            public_key: Public key (``pk_...``), used for sources and payment methods
            config: Full configuration instead of bare keys
            session: Optional requests session to reuse

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.config = build_config(secret_key, public_key, config)

        if self.config.debug:
            setup_logging(debug=True)

        self.http = HttpClient(self.config, session=session)

        self.checkouts = CheckoutClient(self.http)
        self.payments = PaymentClient(self.http)
        self.links = LinksClient(self.http)
        self.sources = SourceClient(self.http)
        self.customers = CustomerClient(self.http)
        self.payment_methods = PaymentMethodsClient(self.http)
        self.refunds = RefundClient(self.http)

        logger.info("PayMongo SDK initialized (version %s)", __version__)
        logger.debug("Base URL: %s", self.http.base_url)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "PaymongoClient":
        """Build a client from PAYMONGO_* environment variables / .env"""
        return cls(config=ClientConfig.from_env(env_file))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PaymongoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
