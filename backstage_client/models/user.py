"""User entity model."""

from typing import Literal

from pydantic import Field

from .base import BaseEntity, EntityKind, WireModel


class UserProfile(WireModel):
    """User profile information."""

    displayName: str | None = None
    email: str | None = None
    picture: str | None = None


class UserSpec(WireModel):
    """Spec for User entity.

    ``memberOf`` lists direct group memberships only.
    """

    profile: UserProfile = Field(default_factory=UserProfile)
    memberOf: list[str] = Field(default_factory=list, title="Member Of")


class User(BaseEntity):
    """User entity."""

    kind: Literal[EntityKind.USER] = EntityKind.USER
    spec: UserSpec = Field(default_factory=UserSpec)
