"""
PayMongo SDK Exceptions
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, List


class PaymongoError(Exception):
    """Base exception for PayMongo SDK"""

    pass


@dataclass(frozen=True)
class ErrorDetail:
    """Single entry of the provider's ``errors`` array"""

    code: str
    detail: str
    pointer: Optional[str] = None
    attribute: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ErrorDetail":
        source = raw.get("source") or {}
        return cls(
            code=str(raw.get("code") or "unknown_error"),
            detail=str(raw.get("detail") or raw.get("message") or ""),
            pointer=source.get("pointer"),
            attribute=source.get("attribute"),
        )


class APIError(PaymongoError):
    """Non-2xx response from the PayMongo API"""

    def __init__(
        self,
        status_code: int,
        errors: Optional[List[ErrorDetail]] = None,
        body: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.errors = errors or []
        self.body = body or {}
        super().__init__(str(self))

    @classmethod
    def from_body(cls, status_code: int, body: Any) -> "APIError":
        """
        Build an APIError from a decoded response body

        Args:
            status_code: HTTP status code
            body: Decoded JSON body (or ``{"raw": text}`` when not JSON)

        Returns:
            APIError carrying every entry of the ``errors`` array
        """
        if not isinstance(body, dict):
            body = {"raw": body}
        raw_errors = body.get("errors")
        errors = []
        if isinstance(raw_errors, list):
            errors = [ErrorDetail.from_dict(e) for e in raw_errors if isinstance(e, dict)]
        return cls(status_code=status_code, errors=errors, body=body)

    @property
    def code(self) -> Optional[str]:
        return self.errors[0].code if self.errors else None

    @property
    def message(self) -> str:
        if self.errors:
            return self.errors[0].detail
        return self.body.get("raw") or "Unknown error"

    def __str__(self) -> str:
        if self.code:
            return f"[{self.status_code}] {self.code}: {self.message}"
        return f"[{self.status_code}] {self.message}"


class ConfigurationError(PaymongoError):
    """SDK configuration error"""

    pass


class NetworkError(PaymongoError):
    """Network/connectivity error"""

    pass


class TimeoutError(PaymongoError):
    """Request timeout error"""

    pass


class ResponseFormatError(PaymongoError):
    """Successful response that does not match the expected envelope"""

    def __init__(self, message: str, body: Any = None):
        self.body = body
        super().__init__(message)
