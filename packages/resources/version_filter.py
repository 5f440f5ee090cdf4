"""Effective minimum version lookup over appliesTo filter records."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packages.common.types import AppliesToFilterInfo


def find_min_version(filters: Iterable[AppliesToFilterInfo] | None) -> str | None:
    """Return the minimum version of the first filter that declares one.

    First match wins in input order; this is not a numeric minimum across
    filters. Returns None for missing/empty input or when no filter sets a
    minimum version.
    """
    if filters is None:
        return None

    for f in filters:
        if f.min_version is not None and f.min_version.value:
            return f.min_version.value
    return None
