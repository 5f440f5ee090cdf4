"""Exception hierarchy for the feature catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all recoverable catalog errors."""


class ResourceCreationError(CatalogError):
    """A resource's generated fields could not be built from its declarations."""


class ConfigError(CatalogError):
    """Errors related to configuration loading or validation."""


class InternalDefectError(AssertionError):
    """Upstream validation was bypassed; never catch and continue.

    Not a CatalogError, so handlers for recoverable errors do not catch it.
    """
