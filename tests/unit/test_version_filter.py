"""Tests for effective minimum version lookup."""

from __future__ import annotations

from packages.common.types import AppliesToFilterInfo, FilterVersion
from packages.resources.version_filter import find_min_version


def _filter(min_version: str | None = None) -> AppliesToFilterInfo:
    return AppliesToFilterInfo(
        product_id="com.ibm.websphere.appserver",
        min_version=FilterVersion(value=min_version) if min_version is not None else None,
    )


class TestFindMinVersion:
    def test_none_for_missing_filters(self) -> None:
        assert find_min_version(None) is None

    def test_none_for_empty_filters(self) -> None:
        assert find_min_version([]) is None

    def test_none_when_no_filter_has_min_version(self) -> None:
        assert find_min_version([_filter(), _filter()]) is None

    def test_first_match_wins_not_numeric_minimum(self) -> None:
        """A later, lower version must not replace the first one found."""
        filters = [_filter(), _filter("19.0.0.1"), _filter("8.5.5.9")]
        assert find_min_version(filters) == "19.0.0.1"

    def test_empty_value_is_skipped(self) -> None:
        filters = [
            AppliesToFilterInfo(min_version=FilterVersion(value="")),
            _filter("18.0.0.3"),
        ]
        assert find_min_version(filters) == "18.0.0.3"
