"""Options for listing catalog entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidArgumentError

ORDER_ASCENDING = "asc"
ORDER_DESCENDING = "desc"


@dataclass(frozen=True)
class ListEntityOrder:
    """Ordering condition for an entity list."""

    direction: str
    field: str

    def to_query(self) -> str:
        """Encode as ``direction:field``.

        Raises:
            InvalidArgumentError: If direction is not ``asc`` or ``desc``.
        """
        if self.direction not in (ORDER_ASCENDING, ORDER_DESCENDING):
            raise InvalidArgumentError(f"invalid order direction: {self.direction}")
        return f"{self.direction}:{self.field}"


@dataclass(frozen=True)
class ListEntityOptions:
    """Filters, field projection and ordering for an entity list.

    Each filter is a pre-encoded ``key=value`` (or bare ``key``) predicate and
    is sent verbatim as its own ``filter`` parameter; how repeated filters
    combine is decided by the server.
    """

    filters: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    order: list[ListEntityOrder] = field(default_factory=list)

    def to_params(self) -> list[tuple[str, str]]:
        """Build query parameters, validating every order entry first."""
        orders = [o.to_query() for o in self.order]

        params = [("filter", f) for f in self.filters]
        if self.fields:
            params.append(("fields", ",".join(self.fields)))
        params.extend(("order", o) for o in orders)
        return params
