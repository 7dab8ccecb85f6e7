"""
Shared plumbing for resource clients

A resource client only describes requests; the transport it wraps decides
how they run. Over :class:`~paymongo_sdk.http_client.HttpClient` every method
returns the entity, over :class:`~paymongo_sdk.async_http.AsyncHttpClient` it
returns an awaitable resolving to the entity.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, TypeVar, Union

from paymongo_sdk.models.base import PaymongoModel

M = TypeVar("M", bound=PaymongoModel)
T = TypeVar("T")

Result = Union[T, Awaitable[T]]


def one(model: Type[M]) -> Callable[[Dict[str, Any]], M]:
    """Parse ``{"data": {...}}`` into a single entity"""

    def parse(body: Dict[str, Any]) -> M:
        return model.from_resource(body["data"])

    return parse


def many(model: Type[M]) -> Callable[[Dict[str, Any]], List[M]]:
    """Parse ``{"data": [...]}`` into a list of entities"""

    def parse(body: Dict[str, Any]) -> List[M]:
        data = body["data"]
        if not isinstance(data, list):
            raise TypeError("expected a list under 'data'")
        return [model.from_resource(item) for item in data]

    return parse


def first_or_none(model: Type[M]) -> Callable[[Dict[str, Any]], Optional[M]]:
    """Parse ``{"data": [...]}`` into its first entity, or None when empty"""
    parse_all = many(model)

    def parse(body: Dict[str, Any]) -> Optional[M]:
        items = parse_all(body)
        return items[0] if items else None

    return parse


def accepted(body: Dict[str, Any]) -> bool:
    return True


class Resource:
    """Base class for resource clients"""

    def __init__(self, http):
        self.http = http
