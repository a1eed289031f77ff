"""Location entity model and the shapes of the locations endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from .base import BaseEntity, Entity, EntityKind, WireModel


class LocationSpec(WireModel):
    """Specification for a Location entity."""

    type: str | None = Field(
        default=None,
        title="Type",
        description="Location type (url or file). Inherits from parent if not specified.",
    )
    target: str | None = Field(
        default=None,
        title="Target",
        description="Single target URL or file path.",
    )
    targets: list[str] = Field(
        default_factory=list,
        title="Targets",
        description="Multiple target URLs or file paths.",
    )
    presence: Literal["required", "optional"] = Field(
        default="required",
        title="Presence",
        description="Whether the target must exist (required) or is optional.",
    )


class Location(BaseEntity):
    """Location entity for referencing external catalog sources.

    Example:
        apiVersion: backstage.io/v1alpha1
        kind: Location
        metadata:
          name: external-catalog
        spec:
          type: url
          target: https://github.com/org/repo/blob/main/catalog-info.yaml
    """

    kind: Literal[EntityKind.LOCATION] = EntityKind.LOCATION
    spec: LocationSpec = Field(default_factory=LocationSpec)


class LocationResponse(WireModel):
    """A registered location, as returned by the locations endpoints."""

    id: str
    type: str
    target: str


class LocationListResponse(WireModel):
    """Item of the location list."""

    data: LocationResponse


class LocationCreateResponse(WireModel):
    """Result of registering a location.

    ``exists`` is only set in dry-run mode, telling a no-op apart from a
    genuine create.
    """

    location: LocationResponse
    entities: list[Entity] = Field(default_factory=list)
    exists: bool | None = None


class LocationCreateRequest(BaseModel):
    """Body of a location registration request."""

    target: str
    type: str = "url"
