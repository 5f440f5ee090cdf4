"""Matching keys: does a record describe the same feature as another?"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from packages.common.errors import ResourceCreationError
from packages.common.logging import get_logger
from packages.common.types import AppliesToFilterInfo, ResourceType
from packages.resources.applies_to import generate_applies_to_filter_info

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packages.resources.feature_record import FeatureRecord

logger = get_logger(__name__)


class MatchingKey(BaseModel):
    """Comparison key for a feature record; equal keys mean the same feature."""

    model_config = ConfigDict(frozen=True)

    type: ResourceType | None = None
    applies_to_filter_info: tuple[AppliesToFilterInfo, ...] | None = None
    version: str | None = None
    provide_feature: str | None = None


def _sort_key(f: AppliesToFilterInfo) -> str:
    # Every field takes part, so clauses differing anywhere sort deterministically
    return f.model_dump_json()


def normalize_filters(
    filters: Iterable[AppliesToFilterInfo] | None,
) -> tuple[AppliesToFilterInfo, ...] | None:
    """Canonical, order-independent form of a filter collection."""
    if filters is None:
        return None

    normalized = [
        f.model_copy(
            update={
                "editions": None if f.editions is None else tuple(sorted(f.editions)),
                "raw_editions": None if f.raw_editions is None else tuple(sorted(f.raw_editions)),
            }
        )
        for f in filters
    ]
    return tuple(sorted(normalized, key=_sort_key))


def build_matching_key(record: FeatureRecord) -> MatchingKey:
    """Build the matching key for ``record``.

    The filter fragment is regenerated from the raw appliesTo header rather
    than copied from the record: records written by different uploader
    levels may carry differently shaped filter lists for the same header.
    """
    filters = None
    try:
        filters = normalize_filters(
            generate_applies_to_filter_info(record.applies_to, validate_editions=False)
        )
    except ResourceCreationError as e:
        # Only raised with edition validation on, which this path never asks for
        logger.debug("matching_applies_to_regen_failed", error=str(e))

    return MatchingKey(
        type=record.resource_type,
        applies_to_filter_info=filters,
        version=record.version,
        provide_feature=record.provide_feature,
    )
