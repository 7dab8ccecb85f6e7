"""
Base model and wire envelope helpers
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, SerializationInfo, model_serializer
from typing_extensions import Annotated


def to_unix_seconds(value: datetime) -> int:
    # naive datetimes are taken as UTC, never host local time
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


# Unix seconds on the wire, aware UTC datetime in Python
Timestamp = Annotated[
    datetime,
    PlainSerializer(to_unix_seconds, return_type=int, when_used="json"),
]

OUTBOUND = "outbound"


def flatten_resource(model, resource: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a resource's ``id`` into its ``attributes``"""
    attributes = dict(resource.get("attributes") or {})
    if "id" in model.model_fields and resource.get("id") is not None:
        attributes["id"] = resource["id"]
    return attributes


def unwrap_resources(model, value: Any) -> Any:
    """Flatten the resource objects of a nested list such as ``payments``"""
    if not isinstance(value, list):
        return value
    return [
        flatten_resource(model, item)
        if isinstance(item, dict) and isinstance(item.get("attributes"), dict)
        else item
        for item in value
    ]


class PaymongoModel(BaseModel):
    """
    Base class for every PayMongo entity

    Python field names are the provider's JSON field names. Fields listed in
    ``read_only_fields`` are populated by the API and never sent back to it.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_model(self, handler, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        if info.context and info.context.get(OUTBOUND):
            for name in self.read_only_fields:
                data.pop(name, None)
        return data

    def to_attributes(self, include: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Serialize to the outbound ``attributes`` object

        Unset (``None``) fields are omitted rather than sent as null, and
        read-only fields are dropped at every nesting level.

        Args:
            include: Restrict the output to these top-level fields
        """
        return self.model_dump(
            mode="json",
            exclude_none=True,
            include=set(include) if include is not None else None,
            context={OUTBOUND: True},
        )

    def to_payload(self, include: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """Wrap :meth:`to_attributes` in the ``{"data": {"attributes": ...}}`` envelope"""
        return {"data": {"attributes": self.to_attributes(include=include)}}

    def to_wire(self) -> Dict[str, Any]:
        """Full attributes as the API returns them, read-only fields included"""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_resource(cls, resource: Dict[str, Any]):
        """
        Build an entity from a ``{"id", "type", "attributes"}`` resource object
        """
        return cls.model_validate(flatten_resource(cls, resource))
