"""Configuration module for the Backstage client."""

from .loader import ConfigLoader, load_config
from .models import DEFAULT_BASE_URL, DEFAULT_NAMESPACE, USER_AGENT, ClientConfig

__all__ = [
    "ClientConfig",
    "ConfigLoader",
    "DEFAULT_BASE_URL",
    "DEFAULT_NAMESPACE",
    "USER_AGENT",
    "load_config",
]
