"""Encode query specs the way the catalog search backend reads them."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packages.common.types import Link, QuerySpec


def encode_query(spec: QuerySpec) -> str:
    """Join criteria as ``key=value&key=value``.

    Values are not percent-encoded; a missing value is written as the
    literal ``null`` the backend expects.
    """
    return "&".join(f"{key}={'null' if value is None else value}" for key, value in spec.criteria)


def encode_link_queries(link: Link) -> list[str] | None:
    if link.query is None:
        return None
    return [encode_query(spec) for spec in link.query]
