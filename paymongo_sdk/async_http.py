"""
Asynchronous HTTP transport for the PayMongo API

Same contract as :class:`paymongo_sdk.http_client.HttpClient`, using aiohttp.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import aiohttp

from .config import ClientConfig
from .exceptions import (
    APIError,
    ConfigurationError,
    NetworkError,
    TimeoutError as PaymongoTimeoutError,
)
from .http_client import Parser, apply_parser, decode_body, default_headers, select_key
from .metrics import metrics_api_error, metrics_request
from .utils import basic_auth_header, sanitize_for_logging
from .__version__ import __version__

logger = logging.getLogger("paymongo_sdk.async_http")


class AsyncHttpClient:
    """
    aiohttp-backed transport

    The session is created lazily on first use. A session passed in by the
    caller is never closed by this client.
    """

    def __init__(self, config: ClientConfig, session: Optional[aiohttp.ClientSession] = None):
        if not config.base_url:
            raise ConfigurationError("base_url is required")

        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._session = session
        self._owns_session = session is None
        self.timeout = aiohttp.ClientTimeout(
            sock_connect=config.timeout_connect,
            sock_read=config.timeout_read,
        )
        self.headers = default_headers(f"paymongo-python-sdk-async/{__version__}")

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            connector = None if self.config.verify_ssl else aiohttp.TCPConnector(ssl=False)
            self._session = aiohttp.ClientSession(timeout=self.timeout, connector=connector)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        parse: Optional[Parser] = None,
        use_public_key: bool = False,
        endpoint: Optional[str] = None,
    ) -> Any:
        """
        Issue a request and decode the response

        Raises:
            APIError: If API returns error
            NetworkError: If network error occurs
            TimeoutError: If request times out
            ResponseFormatError: If the response cannot be decoded
        """
        session = await self._get_session()
        url = f"{self.base_url}/{path.lstrip('/')}"
        endpoint = endpoint or f"{method.lower()} {path}"
        headers = dict(self.headers)
        headers["Authorization"] = basic_auth_header(select_key(self.config, use_public_key))
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Async %s %s params=%s body=%s", method, url, query, sanitize_for_logging(body)
            )

        start = time.time()
        try:
            async with session.request(
                method,
                url,
                json=body,
                params=query or None,
                headers=headers,
                timeout=self.timeout,
            ) as resp:
                status = resp.status
                raw = await resp.read()
            # invalid UTF-8 is replaced, as requests does for Response.text
            text = raw.decode("utf-8", errors="replace")
        except asyncio.TimeoutError as e:
            metrics_request(endpoint, 0, start)
            latency = time.time() - start
            logger.error("Request timeout after %.2fs", latency, extra={"endpoint": endpoint})
            raise PaymongoTimeoutError(f"Request timeout after {latency:.2f}s") from e
        except aiohttp.ClientError as e:
            metrics_request(endpoint, 0, start)
            logger.error("Network error: %s", e, extra={"endpoint": endpoint})
            raise NetworkError(f"Network error: {e}") from e

        metrics_request(endpoint, status, start)
        logger.debug(
            "Async response (%s) for %s",
            status,
            endpoint,
            extra={"endpoint": endpoint, "method": method, "status_code": status},
        )

        try:
            decoded = decode_body(status, text)
        except APIError as e:
            metrics_api_error(endpoint, e)
            logger.warning("API error on %s: %s", endpoint, e, extra={"endpoint": endpoint})
            raise
        return apply_parser(parse, decoded)
