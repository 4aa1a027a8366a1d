"""Generic JSON:API document decoding.

App Store Connect answers every request with a JSON:API document:
``data`` (one resource or a list), optional ``included`` side-loads,
``links`` for pagination and ``meta``. This module turns that shape into
small objects so resource code never indexes raw dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Resource:
    """One JSON:API resource object."""

    type: str
    id: str
    attributes: dict[str, Any] = field(default_factory=dict)
    relationships: dict[str, Any] = field(default_factory=dict)
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def parse(cls, raw: dict[str, Any]) -> Resource:
        return cls(
            type=str(raw.get("type") or ""),
            id=str(raw.get("id") or ""),
            attributes=raw.get("attributes") or {},
            relationships=raw.get("relationships") or {},
            links=raw.get("links") or {},
        )

    def attribute(self, path: str, default: Any = None) -> Any:
        """Look up an attribute by dotted path, e.g. ``assetDeliveryState.state``."""
        value: Any = self.attributes
        for key in path.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
            if value is None:
                return default
        return value

    def _linkage(self, name: str) -> Any:
        relationship = self.relationships.get(name) or {}
        return relationship.get("data")

    def related_id(self, name: str) -> str | None:
        """ID of a to-one relationship, or None when it is absent."""
        linkage = self._linkage(name)
        if isinstance(linkage, dict):
            return linkage.get("id")
        return None

    def related_ids(self, name: str) -> list[str]:
        """IDs of a to-many relationship, in document order."""
        linkage = self._linkage(name)
        if isinstance(linkage, list):
            return [item["id"] for item in linkage if isinstance(item, dict) and "id" in item]
        return []


@dataclass(frozen=True)
class Document:
    """A decoded JSON:API top-level document."""

    data: Resource | list[Resource] | None
    included: list[Resource] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def parse(cls, body: Any) -> Document:
        """Decode a parsed response body.

        Bodies without a ``data`` member (e.g. an empty 204) decode to a
        document whose ``data`` is None.
        """
        if not isinstance(body, dict):
            return cls(data=None)

        raw_data = body.get("data")
        data: Resource | list[Resource] | None
        if isinstance(raw_data, list):
            data = [Resource.parse(item) for item in raw_data if isinstance(item, dict)]
        elif isinstance(raw_data, dict):
            data = Resource.parse(raw_data)
        else:
            data = None

        return cls(
            data=data,
            included=[
                Resource.parse(item)
                for item in body.get("included") or []
                if isinstance(item, dict)
            ],
            links=body.get("links") or {},
            meta=body.get("meta") or {},
        )

    def resources(self) -> list[Resource]:
        """Primary data as a list, whatever its cardinality."""
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return list(self.data)
        return [self.data]

    def first(self) -> Resource | None:
        resources = self.resources()
        return resources[0] if resources else None

    def find_included(self, type_: str, id_: str) -> Resource | None:
        for resource in self.included:
            if resource.type == type_ and resource.id == id_:
                return resource
        return None

    @property
    def next_url(self) -> str | None:
        return self.links.get("next")
