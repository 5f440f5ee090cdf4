"""Link groups shown on a feature's catalog page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packages.common.types import Link
from packages.resources.relationship_queries import RelationshipQueryBuilder

if TYPE_CHECKING:
    from packages.common.types import QuerySpec
    from packages.resources.feature_record import FeatureRecord

ENABLES_LABEL = "Features that this feature enables"
ENABLED_BY_LABEL = "Features that enable this feature"
SUPERSEDES_LABEL = "Features that this feature supersedes"
SUPERSEDED_BY_LABEL = "Features that supersede this feature"
OPTIONAL_SUFFIX = " (optional)"

LINK_LABEL_PROPERTY = "name"


def make_link(
    label: str,
    link_label_property: str,
    query: list[QuerySpec] | None,
    link_label_prefix: str | None = None,
    link_label_suffix: str | None = None,
) -> Link:
    return Link(
        label=label,
        link_label_property=link_label_property,
        query=query,
        link_label_prefix=link_label_prefix,
        link_label_suffix=link_label_suffix,
    )


class LinkAssembler:
    """Package relationship queries into the five fixed link groups."""

    def assemble(self, record: FeatureRecord) -> list[Link]:
        """Return enables, enabled-by, supersedes, superseded-by and
        superseded-by (optional) links, in that order.

        The optional group shares the superseded-by label so the front-end
        renders both in one section; the suffix marks its entries.
        """
        queries = RelationshipQueryBuilder(record)
        return [
            make_link(ENABLES_LABEL, LINK_LABEL_PROPERTY, queries.enables()),
            make_link(ENABLED_BY_LABEL, LINK_LABEL_PROPERTY, queries.enabled_by()),
            make_link(SUPERSEDES_LABEL, LINK_LABEL_PROPERTY, queries.supersedes()),
            make_link(SUPERSEDED_BY_LABEL, LINK_LABEL_PROPERTY, queries.superseded_by()),
            make_link(
                SUPERSEDED_BY_LABEL,
                LINK_LABEL_PROPERTY,
                queries.superseded_by_optional(),
                link_label_suffix=OPTIONAL_SUFFIX,
            ),
        ]
