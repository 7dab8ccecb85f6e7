"""
Blocking HTTP transport for the PayMongo API
"""

import json
import logging
import time
from typing import Any, Callable, Dict, Optional

import requests
from requests.exceptions import RequestException, Timeout
from pydantic import ValidationError

from paymongo_sdk.config import ClientConfig
from paymongo_sdk.exceptions import (
    APIError,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
    TimeoutError as PaymongoTimeoutError,
)
from paymongo_sdk.metrics import metrics_api_error, metrics_request
from paymongo_sdk.utils import basic_auth_header, sanitize_for_logging
from paymongo_sdk.__version__ import __version__

logger = logging.getLogger("paymongo_sdk.http")

Parser = Callable[[Dict[str, Any]], Any]


def default_headers(user_agent: str) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": user_agent,
    }


def select_key(config: ClientConfig, use_public_key: bool) -> str:
    """
    Pick the key used to authenticate a request

    Public-key operations fall back to the secret key when no public key is
    configured; everything else needs the secret key.
    """
    if use_public_key and config.public_key:
        return config.public_key
    if config.secret_key:
        return config.secret_key
    raise ConfigurationError("A secret key is required for this operation")


def decode_body(status_code: int, text: str) -> Dict[str, Any]:
    """
    Decode a response body, raising APIError for non-2xx statuses

    Args:
        status_code: HTTP status code
        text: Raw response text

    Returns:
        Decoded JSON object (empty dict for an empty 2xx body)

    Raises:
        APIError: If the status is not 2xx
        ResponseFormatError: If a 2xx body is not a JSON object
    """
    try:
        body = json.loads(text) if text else {}
    except ValueError:
        if not 200 <= status_code < 300:
            raise APIError.from_body(status_code, {"raw": text})
        raise ResponseFormatError("Response body is not valid JSON", body=text)

    if not 200 <= status_code < 300:
        raise APIError.from_body(status_code, body)

    if not isinstance(body, dict):
        raise ResponseFormatError("Response body is not a JSON object", body=body)

    return body


def apply_parser(parse: Optional[Parser], body: Dict[str, Any]) -> Any:
    """Run ``parse`` over a decoded body, turning shape mismatches into ResponseFormatError"""
    if parse is None:
        return body
    try:
        return parse(body)
    except ValidationError as e:
        raise ResponseFormatError(f"Response does not match entity schema: {e}", body=body) from e
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ResponseFormatError(f"Unexpected response envelope: {e}", body=body) from e


class HttpClient:
    """
    Thin wrapper over ``requests.Session`` speaking the PayMongo envelope

    Example:
        >>> http = HttpClient(ClientConfig(secret_key="sk_test_123"))
        >>> http.request("GET", "/checkout_sessions/cs_123")
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initialize transport

        Args:
            config: Client configuration
            session: Optional pre-configured session. It keeps its own TLS
                settings and is not closed by :meth:`close`

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not config.base_url:
            raise ConfigurationError("base_url is required")

        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._owns_session = session is None
        self.session = session or requests.Session()
        if self._owns_session:
            self.session.verify = config.verify_ssl
        self.headers = default_headers(f"paymongo-python-sdk/{__version__}")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
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

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: JSON body (already wrapped in the ``data`` envelope)
            params: Query parameters; ``None`` values are dropped
            parse: Callable turning the decoded body into the return value
            use_public_key: Authenticate with the public key
            endpoint: Operation name used for metrics and logs

        Returns:
            ``parse(body)`` or the decoded body

        Raises:
            APIError: If API returns error
            NetworkError: If network error occurs
            TimeoutError: If request times out
            ResponseFormatError: If the response cannot be decoded
        """
        url = self._url(path)
        endpoint = endpoint or f"{method.lower()} {path}"
        headers = dict(self.headers)
        headers["Authorization"] = basic_auth_header(select_key(self.config, use_public_key))
        query = {k: v for k, v in (params or {}).items() if v is not None}
        timeout = (self.config.timeout_connect, self.config.timeout_read)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s %s params=%s body=%s", method, url, query, sanitize_for_logging(body))

        start = time.time()
        try:
            response = self.session.request(
                method, url, headers=headers, params=query or None, json=body, timeout=timeout
            )
        except Timeout as e:
            metrics_request(endpoint, 0, start)
            logger.error("Request timeout: %s %s", method, url, extra={"endpoint": endpoint})
            raise PaymongoTimeoutError(f"Request timed out: {e}") from e
        except RequestException as e:
            metrics_request(endpoint, 0, start)
            logger.error("Network error: %s", e, extra={"endpoint": endpoint})
            raise NetworkError(f"Network error: {e}") from e

        metrics_request(endpoint, response.status_code, start)
        logger.debug(
            "Response (%s) for %s",
            response.status_code,
            endpoint,
            extra={"endpoint": endpoint, "method": method, "status_code": response.status_code},
        )

        try:
            decoded = decode_body(response.status_code, response.text)
        except APIError as e:
            metrics_api_error(endpoint, e)
            logger.warning("API error on %s: %s", endpoint, e, extra={"endpoint": endpoint})
            raise
        return apply_parser(parse, decoded)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
