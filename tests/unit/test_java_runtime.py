"""Tests for the Java SE compatibility display string."""

from __future__ import annotations

import pytest

from packages.common.errors import CatalogError, InternalDefectError
from packages.common.types import JavaSEVersionRequirements
from packages.resources.java_runtime import add_version_display_string


class TestVersionDisplayString:
    @pytest.mark.parametrize(
        ("min_version", "expected"),
        [
            ("1.6.0", "Java SE 6, Java SE 7, Java SE 8"),
            ("1.7.0", "Java SE 7, Java SE 8"),
            ("1.8.0", "Java SE 8"),
        ],
    )
    def test_lists_every_runtime_at_or_above_minimum(self, min_version: str, expected: str) -> None:
        reqs = JavaSEVersionRequirements(min_version=min_version)
        assert add_version_display_string(reqs) == expected
        assert reqs.version_display_string == expected

    def test_no_minimum_leaves_record_untouched(self) -> None:
        reqs = JavaSEVersionRequirements(max_version="1.8.0", version_display_string="previous")
        assert add_version_display_string(reqs) is None
        assert reqs.version_display_string == "previous"

    def test_no_requirements_at_all(self) -> None:
        assert add_version_display_string(None) is None

    def test_unknown_minimum_is_internal_defect(self) -> None:
        reqs = JavaSEVersionRequirements(min_version="2.0.0")
        with pytest.raises(InternalDefectError):
            add_version_display_string(reqs)
        assert reqs.version_display_string is None

    def test_internal_defect_is_not_recoverable_catalog_error(self) -> None:
        """Handlers for CatalogError must not swallow a contract violation."""
        assert not issubclass(InternalDefectError, CatalogError)
        assert issubclass(InternalDefectError, AssertionError)
