"""System entity model."""

from typing import Literal

from pydantic import Field

from .base import BaseEntity, EntityKind, WireModel


class SystemSpec(WireModel):
    """Spec for System entity."""

    owner: str = Field(default="", title="Owner")
    domain: str | None = Field(default=None, title="Domain")
    type: str | None = Field(default=None, title="Type")


class System(BaseEntity):
    """A collection of components, APIs and resources exposed together."""

    kind: Literal[EntityKind.SYSTEM] = EntityKind.SYSTEM
    spec: SystemSpec = Field(default_factory=SystemSpec)
