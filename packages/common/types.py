"""Domain types for the feature catalog."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ResourceType(StrEnum):
    FEATURE = "com.ibm.websphere.Feature"
    ADDON = "com.ibm.websphere.Addon"
    INSTALL = "com.ibm.websphere.Install"
    SAMPLE = "com.ibm.websphere.ProductSample"
    OPENSOURCE = "com.ibm.websphere.OpenSourceIntegration"
    IFIX = "com.ibm.websphere.IFix"
    TOOL = "com.ibm.websphere.Tool"


class DownloadPolicy(StrEnum):
    INSTALLER = "INSTALLER"
    ALL = "ALL"


class InstallPolicy(StrEnum):
    WHEN_SATISFIED = "WHEN_SATISFIED"
    MANUAL = "MANUAL"


class DisplayPolicy(StrEnum):
    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class Visibility(StrEnum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    PROTECTED = "PROTECTED"
    INSTALL = "INSTALL"


class QueryKey(StrEnum):
    """Field paths understood by the repository search backend."""

    PROVIDE_FEATURE = "wlpInformation.provideFeature"
    REQUIRE_FEATURE = "wlpInformation.requireFeature"
    SUPERSEDED_BY = "wlpInformation.supersededBy"
    SHORT_NAME = "wlpInformation.shortName"
    MIN_VERSION = "wlpInformation.appliesToFilterInfo.minVersion.value"
    TYPE = "type"


class FilterVersion(BaseModel):
    """One bound of a version filter."""

    model_config = ConfigDict(frozen=True)

    value: str | None = None
    inclusive: bool = True
    label: str | None = None


class AppliesToFilterInfo(BaseModel):
    """A single product clause of an appliesTo header."""

    model_config = ConfigDict(frozen=True)

    product_id: str | None = None
    min_version: FilterVersion | None = None
    max_version: FilterVersion | None = None
    has_max_version: bool = False
    editions: tuple[str, ...] | None = None
    raw_editions: tuple[str, ...] | None = None
    install_type: str | None = None


class JavaSEVersionRequirements(BaseModel):
    min_version: str | None = None
    max_version: str | None = None
    raw_requirements: list[str] | None = None
    version_display_string: str | None = None


class QuerySpec(BaseModel):
    """Ordered key/value criteria for a search backend query.

    Values may be None (e.g. enabled-by for a record that provides nothing);
    encoding into a transport format is left to the consumer.
    """

    model_config = ConfigDict(frozen=True)

    criteria: tuple[tuple[str, str | None], ...] = ()

    def with_criterion(self, key: str, value: str | None) -> QuerySpec:
        return QuerySpec(criteria=(*self.criteria, (key, value)))

    def get(self, key: str) -> str | None:
        for k, v in self.criteria:
            if k == key:
                return v
        return None

    def keys(self) -> list[str]:
        return [k for k, _ in self.criteria]

    def as_dict(self) -> dict[str, str | None]:
        return dict(self.criteria)


class Link(BaseModel):
    """A labelled group of related-feature queries for the catalog front-end.

    ``query`` is None when the relationship is not expressed for the record,
    which is distinct from an empty list (expressed, but nothing to look up).
    """

    label: str
    link_label_property: str = "name"
    query: list[QuerySpec] | None = None
    link_label_prefix: str | None = None
    link_label_suffix: str | None = None

    def copy_link(self) -> Link:
        return self.model_copy(
            update={"query": None if self.query is None else list(self.query)}
        )

