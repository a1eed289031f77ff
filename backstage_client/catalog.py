"""Catalog facade grouping the Backstage catalog services."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from .errors import InvalidArgumentError
from .models import BaseEntity, EntityKind, EntityRef
from .services import (
    APIService,
    ComponentService,
    DomainService,
    EntityService,
    GroupService,
    KindService,
    LocationService,
    ResourceService,
    SystemService,
    UserService,
)
from .urls import join_path

if TYPE_CHECKING:
    from .client import Client


class CatalogService:
    """Communication with the Backstage Catalog API."""

    API_PATH = "/catalog"

    def __init__(self, client: Client):
        self.client = client
        self.api_path = self.API_PATH

        self.entities = EntityService(client, join_path(self.api_path, "entities"))
        self.apis = APIService(self.entities)
        self.components = ComponentService(self.entities)
        self.domains = DomainService(self.entities)
        self.groups = GroupService(self.entities)
        self.locations = LocationService(self.entities)
        self.resources = ResourceService(self.entities)
        self.systems = SystemService(self.entities)
        self.users = UserService(self.entities)

        self._by_kind: dict[EntityKind, KindService] = {
            service.kind: service
            for service in (
                self.apis,
                self.components,
                self.domains,
                self.groups,
                self.locations,
                self.resources,
                self.systems,
                self.users,
            )
        }

    def by_kind(self, kind: EntityKind | str) -> KindService:
        """Get the service for an entity kind (case-insensitive)."""
        if not isinstance(kind, EntityKind):
            try:
                kind = EntityKind.from_str(kind)
            except ValueError as e:
                raise InvalidArgumentError(f"unknown entity kind: {kind}") from e
        return self._by_kind[kind]

    def get_by_ref(
        self, ref: str, *, timeout: float | httpx.Timeout | None = None
    ) -> tuple[BaseEntity | None, httpx.Response]:
        """Get an entity by reference string.

        Accepts ``kind:namespace/name``, ``kind:name`` and bare ``name``
        (a Component). A missing namespace uses the client's default.
        """
        try:
            entity_ref = EntityRef.parse(
                ref, default_namespace=self.client.default_namespace
            )
        except ValueError as e:
            raise InvalidArgumentError(f"invalid entity reference: {ref!r}") from e

        service = self.by_kind(entity_ref.kind)
        return service.get(entity_ref.name, entity_ref.namespace, timeout=timeout)
