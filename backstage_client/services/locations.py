"""Location service: typed lookup plus the locations endpoints."""

from __future__ import annotations

import logging

import httpx

from ..models import (
    EntityKind,
    Location,
    LocationCreateRequest,
    LocationCreateResponse,
    LocationListResponse,
    LocationResponse,
)
from ..urls import join_path
from .entities import EntityService, require_argument
from .kinds import KindService

logger = logging.getLogger(__name__)


class LocationService(KindService[Location]):
    """Location entities and registered locations.

    Registered locations live under ``<catalog>/locations``, next to the
    entities endpoints, and are addressed by server-assigned ID.
    """

    kind = EntityKind.LOCATION
    model = Location

    def __init__(self, entities: EntityService):
        super().__init__(entities)
        self.client = entities.client
        catalog_path = entities.api_path.rstrip("/").rsplit("/", 1)[0]
        self.api_path = join_path(catalog_path, "locations")

    def create(
        self,
        target: str,
        dry_run: bool = False,
        *,
        timeout: float | httpx.Timeout | None = None,
    ) -> tuple[LocationCreateResponse | None, httpx.Response]:
        """Register a URL location.

        Args:
            target: URL of the catalog file to register.
            dry_run: If True, the server evaluates the location without
                persisting it; ``exists`` in the result tells whether it was
                already registered.
            timeout: Bound for this call.
        """
        require_argument(target, "target")
        if dry_run:
            logger.debug(f"Dry-run registration of location: {target}")

        request = self.client.new_request(
            "POST",
            self.api_path,
            body=LocationCreateRequest(target=target),
            params=[("dryRun", "true" if dry_run else "false")],
        )
        return self.client.do(request, LocationCreateResponse, timeout=timeout)

    def list(
        self, *, timeout: float | httpx.Timeout | None = None
    ) -> tuple[list[LocationListResponse] | None, httpx.Response]:
        """List all registered locations."""
        request = self.client.new_request("GET", self.api_path)
        return self.client.do(request, list[LocationListResponse], timeout=timeout)

    def get_by_id(
        self, id: str, *, timeout: float | httpx.Timeout | None = None
    ) -> tuple[LocationResponse | None, httpx.Response]:
        """Get a registered location by ID."""
        require_argument(id, "id")
        request = self.client.new_request("GET", join_path(self.api_path, id))
        return self.client.do(request, LocationResponse, timeout=timeout)

    def delete_by_id(
        self, id: str, *, timeout: float | httpx.Timeout | None = None
    ) -> httpx.Response:
        """Delete a registered location by ID."""
        require_argument(id, "id")
        request = self.client.new_request("DELETE", join_path(self.api_path, id))
        _, response = self.client.do(request, timeout=timeout)
        return response
