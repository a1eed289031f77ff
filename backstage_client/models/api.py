"""API entity model."""

from typing import Literal

from pydantic import Field

from .base import BaseEntity, EntityKind, WireModel


class APISpec(WireModel):
    """Spec for API entity."""

    type: str = Field(
        default="", title="Type", description="API type (openapi, asyncapi, graphql, grpc)"
    )
    lifecycle: str = Field(default="", title="Lifecycle")
    owner: str = Field(default="", title="Owner")
    system: str | None = Field(default=None, title="System")
    definition: str = Field(
        default="", title="Definition", description="API specification (inline or URL)"
    )


class API(BaseEntity):
    """API interface entity."""

    kind: Literal[EntityKind.API] = EntityKind.API
    spec: APISpec = Field(default_factory=APISpec)
