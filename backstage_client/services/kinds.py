"""Per-kind services of the Backstage catalog API."""

from __future__ import annotations

from typing import ClassVar, Generic

import httpx

from ..models import (
    API,
    Component,
    Domain,
    EntityKind,
    Group,
    Resource,
    System,
    User,
)
from .entities import EntityService, EntityT, TypedEntityService


class KindService(Generic[EntityT]):
    """Binds the typed entity service to one kind and its model."""

    kind: ClassVar[EntityKind]
    model: ClassVar[type]

    def __init__(self, entities: EntityService):
        self._typed: TypedEntityService[EntityT] = TypedEntityService(
            entities, self.model
        )

    def get(
        self,
        name: str,
        namespace: str = "",
        *,
        timeout: float | httpx.Timeout | None = None,
    ) -> tuple[EntityT | None, httpx.Response]:
        """Get an entity of this kind by name.

        Args:
            name: Entity name.
            namespace: Entity namespace. Empty uses the client's default.
            timeout: Bound for this call.
        """
        return self._typed.get(self.kind, name, namespace, timeout=timeout)


class APIService(KindService[API]):
    """API entities."""

    kind = EntityKind.API
    model = API


class ComponentService(KindService[Component]):
    """Component entities."""

    kind = EntityKind.COMPONENT
    model = Component


class DomainService(KindService[Domain]):
    """Domain entities."""

    kind = EntityKind.DOMAIN
    model = Domain


class GroupService(KindService[Group]):
    """Group entities."""

    kind = EntityKind.GROUP
    model = Group


class ResourceService(KindService[Resource]):
    """Resource entities."""

    kind = EntityKind.RESOURCE
    model = Resource


class SystemService(KindService[System]):
    """System entities."""

    kind = EntityKind.SYSTEM
    model = System


class UserService(KindService[User]):
    """User entities."""

    kind = EntityKind.USER
    model = User
