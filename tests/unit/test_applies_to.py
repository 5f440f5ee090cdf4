"""Tests for appliesTo header parsing."""

from __future__ import annotations

import pytest

from packages.common.errors import ResourceCreationError
from packages.resources.applies_to import generate_applies_to_filter_info

APPSERVER = "com.ibm.websphere.appserver"


class TestGenerateAppliesToFilterInfo:
    def test_no_header(self) -> None:
        assert generate_applies_to_filter_info(None) is None

    def test_open_ended_version(self) -> None:
        [info] = generate_applies_to_filter_info(f"{APPSERVER}; productVersion=18.0.0.3+")

        assert info.product_id == APPSERVER
        assert info.min_version is not None
        assert info.min_version.value == "18.0.0.3"
        assert info.max_version is None
        assert not info.has_max_version

    def test_exact_version_sets_both_bounds(self) -> None:
        [info] = generate_applies_to_filter_info(f"{APPSERVER}; productVersion=8.5.5.9")

        assert info.min_version.value == "8.5.5.9"
        assert info.max_version is not None
        assert info.max_version.value == "8.5.5.9"
        assert info.has_max_version

    def test_quoted_editions_do_not_split_clauses(self) -> None:
        header = (
            f'{APPSERVER}; productVersion=18.0.0.3+; productEdition="BASE,ND,DEVELOPERS", '
            f"{APPSERVER}; productVersion=2018.1.0.0+; productEdition=EARLY_ACCESS"
        )
        first, second = generate_applies_to_filter_info(header)

        assert first.editions == ("Base", "ND", "Developers")
        assert first.raw_editions == ("BASE", "ND", "DEVELOPERS")
        assert second.editions == ("Early Access",)
        assert second.min_version.value == "2018.1.0.0"

    def test_install_type(self) -> None:
        [info] = generate_applies_to_filter_info(f"{APPSERVER}; productInstallType=Archive")
        assert info.install_type == "Archive"
        assert info.min_version is None

    def test_unknown_edition_rejected_when_validating(self) -> None:
        with pytest.raises(ResourceCreationError):
            generate_applies_to_filter_info(f"{APPSERVER}; productEdition=PLATINUM")

    def test_unknown_edition_passed_through_when_lenient(self) -> None:
        [info] = generate_applies_to_filter_info(
            f"{APPSERVER}; productEdition=PLATINUM", validate_editions=False
        )
        assert info.editions == ("PLATINUM",)

    def test_clause_without_product_id_rejected_when_validating(self) -> None:
        with pytest.raises(ResourceCreationError):
            generate_applies_to_filter_info(f"{APPSERVER}; productVersion=18.0.0.3+, ;")

    def test_clause_without_product_id_skipped_when_lenient(self) -> None:
        filters = generate_applies_to_filter_info(
            f"{APPSERVER}; productVersion=18.0.0.3+, ;, ; productVersion=1.0+",
            validate_editions=False,
        )
        assert [f.product_id for f in filters] == [APPSERVER]
