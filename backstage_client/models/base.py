"""Base models for Backstage catalog entities."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Model decoded from the catalog API.

    Unknown fields are kept so that payloads pass through verbatim.
    """

    model_config = ConfigDict(extra="allow")


class EntityKind(str, Enum):
    """Supported entity kinds."""

    COMPONENT = "Component"
    API = "API"
    RESOURCE = "Resource"
    SYSTEM = "System"
    DOMAIN = "Domain"
    USER = "User"
    GROUP = "Group"
    LOCATION = "Location"

    @classmethod
    def from_str(cls, value: str) -> "EntityKind":
        """Parse entity kind from string, handling case insensitivity."""
        normalized = value.lower()
        for kind in cls:
            if kind.value.lower() == normalized:
                return kind
        return cls(value)


class EntityRef(BaseModel):
    """Reference to another entity (kind:namespace/name format)."""

    kind: EntityKind
    namespace: str = "default"
    name: str

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.namespace}/{self.name}"

    @classmethod
    def parse(cls, ref_str: str, default_namespace: str = "default") -> "EntityRef":
        """Parse entity reference string.

        Formats:
        - kind:namespace/name
        - kind:name (uses default namespace)
        - name (assumes Component kind and default namespace)
        """
        if ":" in ref_str:
            kind_part, rest = ref_str.split(":", 1)
            kind = EntityKind.from_str(kind_part)
            if "/" in rest:
                namespace, name = rest.split("/", 1)
            else:
                namespace = default_namespace
                name = rest
        else:
            kind = EntityKind.COMPONENT
            namespace = default_namespace
            name = ref_str

        return cls(kind=kind, namespace=namespace, name=name)

    def to_id(self) -> str:
        """Convert to unique ID string."""
        return str(self)


class EntityLink(WireModel):
    """External link for an entity."""

    url: str = ""
    title: str | None = None
    icon: str | None = None
    type: str | None = None


class EntityMetadata(WireModel):
    """Common metadata for all entities.

    ``uid`` and ``etag`` are assigned by the server and only populated on reads.
    """

    uid: str | None = Field(default=None, title="UID")
    etag: str | None = Field(default=None, title="ETag")
    name: str = Field(default="", title="Name", description="Unique entity name")
    namespace: str = Field(default="default", title="Namespace")
    title: str | None = Field(
        default=None, title="Title", description="Human-readable title"
    )
    description: str | None = Field(default=None, title="Description")
    labels: dict[str, str] = Field(default_factory=dict, title="Labels")
    annotations: dict[str, str] = Field(default_factory=dict, title="Annotations")
    tags: list[str] = Field(default_factory=list, title="Tags")
    links: list[EntityLink] = Field(default_factory=list, title="Links")


class EntityRelationTarget(WireModel):
    """Resolved target of an entity relation."""

    name: str = ""
    kind: str = ""
    namespace: str = "default"


class EntityRelation(WireModel):
    """Directed relation from one entity to another."""

    type: str = ""
    targetRef: str = ""
    target: EntityRelationTarget | None = None


class EntityStatusItemError(WireModel):
    """Serialized error attached to a status item."""

    name: str = ""
    message: str = ""
    code: str | None = None
    stack: str | None = None


class EntityStatusItem(WireModel):
    """A single status entry (level is info, warning or error)."""

    type: str = ""
    level: str = ""
    message: str = ""
    error: EntityStatusItemError | None = None


class EntityStatus(WireModel):
    """Current status of an entity, as claimed by various sources."""

    items: list[EntityStatusItem] = Field(default_factory=list)


class Entity(WireModel):
    """Generic entity envelope, for when the kind is not known ahead of time.

    Every field is optional so that responses limited with ``fields`` decode;
    anything the server left out keeps its empty default.
    """

    apiVersion: str = ""
    kind: str = ""
    metadata: EntityMetadata = Field(default_factory=EntityMetadata)
    spec: dict[str, Any] = Field(default_factory=dict)
    relations: list[EntityRelation] = Field(default_factory=list)
    status: EntityStatus | None = None


class BaseEntity(WireModel):
    """Base class for all typed Backstage entities."""

    apiVersion: str = "backstage.io/v1alpha1"
    kind: EntityKind
    metadata: EntityMetadata = Field(default_factory=EntityMetadata)
    relations: list[EntityRelation] = Field(default_factory=list)
    status: EntityStatus | None = None

    @property
    def ref(self) -> EntityRef:
        """Get entity reference."""
        return EntityRef(
            kind=self.kind,
            namespace=self.metadata.namespace,
            name=self.metadata.name,
        )

    @property
    def entity_id(self) -> str:
        """Get unique entity ID."""
        return self.ref.to_id()
