"""Domain entity model."""

from typing import Literal

from pydantic import Field

from .base import BaseEntity, EntityKind, WireModel


class DomainSpec(WireModel):
    """Spec for Domain entity."""

    owner: str = Field(default="", title="Owner")
    subdomainOf: str | None = Field(default=None, title="Subdomain Of")
    type: str | None = Field(default=None, title="Type")


class Domain(BaseEntity):
    """Bounded context domain entity."""

    kind: Literal[EntityKind.DOMAIN] = EntityKind.DOMAIN
    spec: DomainSpec = Field(default_factory=DomainSpec)
