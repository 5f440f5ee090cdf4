"""Feature entries of the component repository catalog."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from packages.common.logging import get_logger
from packages.common.types import (
    AppliesToFilterInfo,
    DisplayPolicy,
    DownloadPolicy,
    InstallPolicy,
    JavaSEVersionRequirements,
    Link,
    ResourceType,
    Visibility,
)
from packages.resources.applies_to import generate_applies_to_filter_info
from packages.resources.interfaces import RepositoryResource
from packages.resources.java_runtime import add_version_display_string
from packages.resources.links import LinkAssembler
from packages.resources.matching import MatchingKey, build_matching_key

logger = get_logger(__name__)


def _add_unique(values: list[str] | None, value: str) -> list[str]:
    values = [] if values is None else values
    if value not in values:
        values.append(value)
    return values


class FeatureRecord(BaseModel, RepositoryResource):
    """A feature as stored in the repository catalog.

    Relationship lists are None until something is declared; callers treat
    None ("not declared") differently from an empty list.
    """

    name: str | None = None
    version: str | None = None
    resource_type: ResourceType = ResourceType.FEATURE

    provide_feature: str | None = None
    require_feature: list[str] | None = None
    require_fix: list[str] | None = None
    superseded_by: list[str] | None = None
    superseded_by_optional: list[str] | None = None
    short_name: str | None = None
    provision_capability: str | None = None

    applies_to: str | None = None
    applies_to_filter_info: list[AppliesToFilterInfo] | None = None
    java_se_version_requirements: JavaSEVersionRequirements | None = None

    visibility: Visibility | None = None
    web_display_policy: DisplayPolicy | None = None
    install_policy: InstallPolicy | None = None
    download_policy: DownloadPolicy | None = None
    vanity_url: str | None = None

    links: list[Link] | None = None

    @classmethod
    def create(cls, **fields: Any) -> FeatureRecord:
        """A brand-new feature, as opposed to one loaded from the catalog."""
        fields.setdefault("resource_type", ResourceType.FEATURE)
        fields.setdefault("download_policy", DownloadPolicy.INSTALLER)
        fields.setdefault("install_policy", InstallPolicy.MANUAL)
        return cls(**fields)

    def set_provide_feature(self, feature: str | None) -> None:
        # A feature provides at most one symbolic name; last set wins.
        self.provide_feature = feature

    def add_require_feature(self, symbolic_name: str) -> None:
        self.require_feature = _add_unique(self.require_feature, symbolic_name)

    def set_require_feature(self, features: list[str] | None) -> None:
        self.require_feature = None if features is None else list(dict.fromkeys(features))

    def add_require_fix(self, fix: str) -> None:
        self.require_fix = _add_unique(self.require_fix, fix)

    def add_superseded_by(self, short_name: str) -> None:
        self.superseded_by = _add_unique(self.superseded_by, short_name)

    def add_superseded_by_optional(self, short_name: str) -> None:
        self.superseded_by_optional = _add_unique(self.superseded_by_optional, short_name)

    @property
    def lower_case_short_name(self) -> str | None:
        return None if self.short_name is None else self.short_name.lower()

    @property
    def name_for_vanity_url(self) -> str | None:
        return self.provide_feature

    def set_java_se_version_requirements(
        self,
        minimum: str | None,
        maximum: str | None,
        raw_bundle_requirements: list[str] | None,
    ) -> None:
        """Aggregate Java SE requirement of the bundles in the feature.

        Any of the values may be None when no bundle declared a requirement.
        """
        self.java_se_version_requirements = JavaSEVersionRequirements(
            min_version=minimum,
            max_version=maximum,
            raw_requirements=(
                None if raw_bundle_requirements is None else list(raw_bundle_requirements)
            ),
        )

    def set_links(self, links: list[Link]) -> None:
        self.links = [link.copy_link() for link in links]

    def get_links(self) -> list[Link]:
        return [link.copy_link() for link in self.links or []]

    def update_generated_fields(self, perform_edition_checking: bool = True) -> None:
        """Recompute filters, links and the Java display string.

        Raises:
            ResourceCreationError: the appliesTo header names an unknown
                edition and ``perform_edition_checking`` is set
            InternalDefectError: the Java minimum version was never validated
        """
        if self.applies_to is not None:
            self.applies_to_filter_info = generate_applies_to_filter_info(
                self.applies_to, validate_editions=perform_edition_checking
            )

        self.set_links(LinkAssembler().assemble(self))
        add_version_display_string(self.java_se_version_requirements)

        logger.debug(
            "generated_fields_updated",
            provide_feature=self.provide_feature,
            links=len(self.links or []),
        )

    def create_matching_data(self) -> MatchingKey:
        return build_matching_key(self)

    def copy_fields_from(self, other: FeatureRecord) -> None:
        """Copy the feature-specific declared fields of ``other`` onto self."""
        self.applies_to = other.applies_to
        self.web_display_policy = other.web_display_policy
        self.install_policy = other.install_policy
        self.links = None if other.links is None else other.get_links()
        self.set_provide_feature(other.provide_feature)
        self.provision_capability = other.provision_capability
        self.set_require_feature(other.require_feature)
        self.visibility = other.visibility
        self.short_name = other.short_name
        self.vanity_url = other.vanity_url
