"""Pydantic models for Backstage catalog entities."""

from .base import (
    BaseEntity,
    Entity,
    EntityKind,
    EntityLink,
    EntityMetadata,
    EntityRef,
    EntityRelation,
    EntityRelationTarget,
    EntityStatus,
    EntityStatusItem,
    EntityStatusItemError,
    WireModel,
)
from .component import Component, ComponentSpec
from .api import API, APISpec
from .resource import Resource, ResourceSpec
from .system import System, SystemSpec
from .domain import Domain, DomainSpec
from .user import User, UserSpec, UserProfile
from .group import Group, GroupSpec, GroupProfile
from .location import (
    Location,
    LocationCreateRequest,
    LocationCreateResponse,
    LocationListResponse,
    LocationResponse,
    LocationSpec,
)
from .options import (
    ORDER_ASCENDING,
    ORDER_DESCENDING,
    ListEntityOptions,
    ListEntityOrder,
)

__all__ = [
    "WireModel",
    "EntityKind",
    "EntityRef",
    "EntityMetadata",
    "EntityLink",
    "EntityRelation",
    "EntityRelationTarget",
    "EntityStatus",
    "EntityStatusItem",
    "EntityStatusItemError",
    "Entity",
    "BaseEntity",
    "Component",
    "ComponentSpec",
    "API",
    "APISpec",
    "Resource",
    "ResourceSpec",
    "System",
    "SystemSpec",
    "Domain",
    "DomainSpec",
    "User",
    "UserSpec",
    "UserProfile",
    "Group",
    "GroupSpec",
    "GroupProfile",
    "Location",
    "LocationSpec",
    "LocationResponse",
    "LocationListResponse",
    "LocationCreateResponse",
    "LocationCreateRequest",
    "ListEntityOptions",
    "ListEntityOrder",
    "ORDER_ASCENDING",
    "ORDER_DESCENDING",
]
