"""Exceptions raised by the Backstage client."""

from __future__ import annotations


class BackstageError(Exception):
    """Base class for errors raised by this library."""


class RequestConstructionError(BackstageError, ValueError):
    """A request could not be built (bad URL or unserializable body)."""


class InvalidArgumentError(BackstageError, ValueError):
    """An argument was rejected before any request was sent."""
