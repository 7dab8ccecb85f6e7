"""
Asynchronous Client for PayMongo SDK

Non-blocking API calls using aiohttp, for asyncio applications.
"""

import logging
from typing import Optional

import aiohttp

from .async_http import AsyncHttpClient
from .client import build_config
from .config import ClientConfig
from .resources import (
    CheckoutClient,
    CustomerClient,
    LinksClient,
    PaymentClient,
    PaymentMethodsClient,
    RefundClient,
    SourceClient,
)
from .utils import setup_logging

logger = logging.getLogger("paymongo_sdk.async")


class AsyncPaymongoClient:
    """
    Asynchronous PayMongo SDK Client

    Same resource clients as :class:`~paymongo_sdk.client.PaymongoClient`;
    every operation returns an awaitable.

    Example:
        >>> import asyncio
        >>> from paymongo_sdk import AsyncPaymongoClient
        >>>
        >>> async def main():
        ...     async with AsyncPaymongoClient(secret_key="sk_test_123") as client:
        ...         checkout = await client.checkouts.retrieve_checkout("cs_123")
        ...         print(checkout.status)
        >>>
        >>> asyncio.run(main())

    Requests are independent; issue them concurrently with
    ``asyncio.gather``. Cancelling the awaiting task cancels the request.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        public_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = build_config(secret_key, public_key, config)

        if self.config.debug:
            setup_logging(debug=True)

        self.http = AsyncHttpClient(self.config, session=session)

        self.checkouts = CheckoutClient(self.http)
        self.payments = PaymentClient(self.http)
        self.links = LinksClient(self.http)
        self.sources = SourceClient(self.http)
        self.customers = CustomerClient(self.http)
        self.payment_methods = PaymentMethodsClient(self.http)
        self.refunds = RefundClient(self.http)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "AsyncPaymongoClient":
        return cls(config=ClientConfig.from_env(env_file))

    async def __aenter__(self) -> "AsyncPaymongoClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the aiohttp session if this client created it"""
        await self.http.close()
