"""Entity endpoints of the Backstage catalog API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

import httpx

from ..errors import InvalidArgumentError
from ..models import BaseEntity, Entity, EntityKind, ListEntityOptions
from ..urls import join_path

if TYPE_CHECKING:
    from ..client import Client

EntityT = TypeVar("EntityT", bound=BaseEntity)


def require_argument(value: str, name: str) -> None:
    """Reject an empty identifier before any request is made."""
    if not value:
        raise InvalidArgumentError(f"{name} cannot be empty")


class EntityService:
    """Untyped access to catalog entities, addressed by UID."""

    def __init__(self, client: Client, api_path: str):
        self.client = client
        self.api_path = api_path

    def list(
        self,
        options: ListEntityOptions | None = None,
        *,
        timeout: float | httpx.Timeout | None = None,
    ) -> tuple[list[Entity] | None, httpx.Response]:
        """List entities, optionally filtered, projected and ordered.

        Args:
            options: Filters, fields and ordering. None lists everything.
            timeout: Bound for this call.

        Returns:
            Tuple of (entities, response). Entities is None on error statuses.

        Raises:
            InvalidArgumentError: If an order direction is invalid. Nothing is
                sent in that case.
        """
        params = options.to_params() if options is not None else []
        request = self.client.new_request("GET", self.api_path, params=params)
        return self.client.do(request, list[Entity], timeout=timeout)

    def get(
        self, uid: str, *, timeout: float | httpx.Timeout | None = None
    ) -> tuple[Entity | None, httpx.Response]:
        """Get a single entity by its UID."""
        require_argument(uid, "uid")
        request = self.client.new_request("GET", join_path(self.api_path, "by-uid", uid))
        return self.client.do(request, Entity, timeout=timeout)

    def delete(
        self, uid: str, *, timeout: float | httpx.Timeout | None = None
    ) -> httpx.Response:
        """Delete an orphaned entity by its UID.

        The server only deletes entities without remaining inbound relations;
        its status is returned unchanged.
        """
        require_argument(uid, "uid")
        request = self.client.new_request(
            "DELETE", join_path(self.api_path, "by-uid", uid)
        )
        _, response = self.client.do(request, timeout=timeout)
        return response


class TypedEntityService(Generic[EntityT]):
    """Access to entities of one kind, decoded into that kind's model."""

    def __init__(self, entities: EntityService, model: type[EntityT]):
        self.client = entities.client
        self.api_path = entities.api_path
        self.model = model

    def get(
        self,
        kind: EntityKind | str,
        name: str,
        namespace: str = "",
        *,
        timeout: float | httpx.Timeout | None = None,
    ) -> tuple[EntityT | None, httpx.Response]:
        """Get an entity by kind, name and namespace.

        Args:
            kind: Entity kind; sent lowercased.
            name: Entity name.
            namespace: Entity namespace. Empty uses the client's default.
            timeout: Bound for this call.
        """
        require_argument(name, "name")
        if not namespace:
            namespace = self.client.default_namespace

        kind_name = kind.value if isinstance(kind, EntityKind) else kind
        path = join_path(self.api_path, "by-name", kind_name.lower(), namespace, name)
        request = self.client.new_request("GET", path)
        return self.client.do(request, self.model, timeout=timeout)
