"""Cross-reference queries between related features.

Each derivation returns None when the relationship is not expressed for the
record at all, and a (possibly empty) list otherwise. Callers branch on the
difference, so never collapse one into the other.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packages.common.types import QueryKey, QuerySpec, ResourceType
from packages.resources.version_filter import find_min_version

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packages.resources.feature_record import FeatureRecord


class RelationshipQueryBuilder:
    """Build search queries for the features related to ``record``."""

    def __init__(self, record: FeatureRecord) -> None:
        self._record = record

    def _version(self) -> str | None:
        return find_min_version(self._record.applies_to_filter_info)

    def _with_version(self, spec: QuerySpec, version: str | None) -> QuerySpec:
        if version is None:
            return spec
        return spec.with_criterion(QueryKey.MIN_VERSION, version)

    def enables(self) -> list[QuerySpec] | None:
        """Features this one enables: those providing what it requires."""
        required = self._record.require_feature
        if required is None:
            return None

        version = self._version()
        queries = []
        for feature in required:
            spec = QuerySpec().with_criterion(QueryKey.PROVIDE_FEATURE, feature)
            spec = self._with_version(spec, version)
            queries.append(spec.with_criterion(QueryKey.TYPE, self._record.resource_type))
        return queries

    def enabled_by(self) -> list[QuerySpec]:
        """Features that require what this one provides.

        Always exactly one query, even when nothing is provided (the match
        value is then None).
        """
        spec = QuerySpec().with_criterion(QueryKey.REQUIRE_FEATURE, self._record.provide_feature)
        spec = self._with_version(spec, self._version())
        return [spec.with_criterion(QueryKey.TYPE, self._record.resource_type)]

    def supersedes(self) -> list[QuerySpec] | None:
        """Features declaring themselves superseded by this one.

        Supersession is discovered by running the query, so there is no type
        filter here. None when there is no short name to query on.
        """
        short_name = self._record.short_name
        if short_name is None:
            return None

        spec = QuerySpec().with_criterion(QueryKey.SUPERSEDED_BY, short_name)
        return [self._with_version(spec, self._version())]

    def superseded_by(self) -> list[QuerySpec] | None:
        return self._short_name_queries(self._record.superseded_by)

    def superseded_by_optional(self) -> list[QuerySpec] | None:
        return self._short_name_queries(self._record.superseded_by_optional)

    def _short_name_queries(self, short_names: Iterable[str] | None) -> list[QuerySpec] | None:
        # Version and type are added together or not at all, unlike the
        # other derivations; the search backend relies on this shape.
        if short_names is None:
            return None

        version = self._version()
        queries = []
        for short_name in short_names:
            spec = QuerySpec().with_criterion(QueryKey.SHORT_NAME, short_name)
            if version is not None:
                spec = spec.with_criterion(QueryKey.MIN_VERSION, version)
                spec = spec.with_criterion(QueryKey.TYPE, ResourceType.FEATURE)
            queries.append(spec)
        return queries
