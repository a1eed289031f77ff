"""HTTP client for the Backstage API."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter

from .catalog import CatalogService
from .config.models import DEFAULT_NAMESPACE, USER_AGENT, ClientConfig
from .errors import RequestConstructionError
from .urls import join_path

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"


def _parse_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url.rstrip("/"))
    except httpx.InvalidURL as e:
        raise RequestConstructionError(f"invalid base URL {base_url!r}: {e}") from e

    if not url.is_absolute_url or not url.host:
        raise RequestConstructionError(
            f"base URL must include scheme and host: {base_url!r}"
        )
    return url


class Client:
    """Manages communication with the Backstage API.

    The client holds only read-only configuration after construction, so one
    instance can be shared between threads. To call endpoints that need
    authentication, pass an ``httpx.Client`` that performs it.

    Example:
        with Client("http://localhost:7007/api") as client:
            component, response = client.catalog.components.get("example-website")
    """

    def __init__(
        self,
        base_url: str,
        default_namespace: str = "",
        http_client: httpx.Client | None = None,
        user_agent: str = USER_AGENT,
    ):
        """Initialize the client.

        Args:
            base_url: API base URL, e.g. http://localhost:7007/api.
            default_namespace: Namespace for calls that do not name one.
                Empty means "default".
            http_client: Pre-configured HTTP client. If None, a new one is
                created and closed together with this client.
            user_agent: User-Agent header sent with every request.

        Raises:
            RequestConstructionError: If the base URL cannot be parsed.
        """
        self.base_url = _parse_base_url(base_url)
        self.default_namespace = default_namespace or DEFAULT_NAMESPACE
        self.user_agent = user_agent
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

        self.catalog = CatalogService(self)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Client":
        """Create a client, and the HTTP client it owns, from configuration."""
        headers = {}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"

        http_client = httpx.Client(timeout=config.timeout, headers=headers)
        try:
            client = cls(
                config.base_url,
                config.default_namespace,
                http_client,
                config.user_agent,
            )
        except RequestConstructionError:
            http_client.close()
            raise

        client._owns_http = True
        return client

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def new_request(
        self,
        method: str,
        url: str,
        body: Any = None,
        params: list[tuple[str, str]] | None = None,
    ) -> httpx.Request:
        """Build an API request.

        A relative URL is resolved against the base URL by joining paths, so a
        base URL with a path prefix (``/api``) is kept.

        Args:
            method: HTTP method.
            url: Absolute URL or path relative to the base URL. May carry a
                query string.
            body: JSON-serializable value or pydantic model. None sends no body.
            params: Extra query parameters; repeated keys are kept.

        Raises:
            RequestConstructionError: If the URL cannot be parsed or the body
                cannot be serialized.
        """
        try:
            target = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"invalid request URL {url!r}: {e}") from e

        if not target.is_absolute_url:
            target = self.base_url.copy_with(
                path=join_path(self.base_url.path, target.path),
                query=target.query or None,
            )
        if params:
            target = target.copy_with(params=[*target.params.multi_items(), *params])

        headers = {"Accept": CONTENT_TYPE_JSON}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        content = None
        if body is not None:
            if isinstance(body, BaseModel):
                body = body.model_dump(mode="json", exclude_none=True)
            try:
                content = json.dumps(body, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestConstructionError(
                    f"cannot encode request body: {e}"
                ) from e
            headers["Content-Type"] = CONTENT_TYPE_JSON

        return self._http.build_request(method, target, content=content, headers=headers)

    def do(
        self,
        request: httpx.Request,
        response_type: Any = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> tuple[Any, httpx.Response]:
        """Send a request and decode its JSON response.

        Only successful (2xx) responses are decoded. Error statuses are
        returned as-is with a None value so callers can inspect them. An empty
        body also yields None.

        Args:
            request: Request built by new_request.
            response_type: Type to validate the decoded JSON into. If None,
                the plain decoded JSON is returned.
            timeout: Bound for this call; None uses the HTTP client's default.

        Returns:
            Tuple of (decoded value or None, response).

        Raises:
            httpx.HTTPError: On network failure or timeout.
            json.JSONDecodeError: If a successful response is not valid JSON.
            pydantic.ValidationError: If the JSON does not fit response_type.
        """
        if timeout is not None:
            request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()

        logger.debug(f"{request.method} {request.url}")
        response = self._http.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if not response.is_success or not response.content.strip():
            return None, response

        data = json.loads(response.content)
        if response_type is None:
            return data, response
        return TypeAdapter(response_type).validate_python(data), response
