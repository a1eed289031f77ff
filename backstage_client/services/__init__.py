"""Services for the Backstage catalog API."""

from .entities import EntityService, TypedEntityService
from .kinds import (
    APIService,
    ComponentService,
    DomainService,
    GroupService,
    KindService,
    ResourceService,
    SystemService,
    UserService,
)
from .locations import LocationService

__all__ = [
    "APIService",
    "ComponentService",
    "DomainService",
    "EntityService",
    "GroupService",
    "KindService",
    "LocationService",
    "ResourceService",
    "SystemService",
    "TypedEntityService",
    "UserService",
]
