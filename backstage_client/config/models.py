"""Configuration models for the Backstage client."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "http://localhost:7007/api"
DEFAULT_NAMESPACE = "default"
USER_AGENT = "backstage-client"


class ClientConfig(BaseModel):
    """Root configuration model."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Backstage API base URL"
    )
    default_namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace used when a call does not name one",
    )
    user_agent: str = Field(default=USER_AGENT)
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    token: str | None = Field(
        default=None, description="Bearer token sent with every request"
    )
