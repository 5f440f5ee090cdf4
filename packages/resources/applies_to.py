"""Parse appliesTo headers into version filter records.

A header lists one clause per product, separated by commas:

    com.ibm.websphere.appserver; productVersion=18.0.0.3+; productEdition="BASE,ND"

``productVersion=X+`` means X or later; a bare ``X`` means exactly X.
Commas and semicolons inside double quotes do not split.
"""

from __future__ import annotations

from typing import Any

from packages.common.errors import ResourceCreationError
from packages.common.logging import get_logger
from packages.common.types import AppliesToFilterInfo, FilterVersion

logger = get_logger(__name__)

EDITION_NAMES: dict[str, str] = {
    "BASE": "Base",
    "BASE_ILAN": "ILAN",
    "CORE": "Liberty Core",
    "DEVELOPERS": "Developers",
    "EARLY_ACCESS": "Early Access",
    "EXPRESS": "Express",
    "ND": "ND",
    "ZOS": "z/OS",
}


def _split_unquoted(text: str, sep: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in text:
        if ch == '"':
            in_quotes = not in_quotes
        if ch == sep and not in_quotes:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return [p.strip() for p in parts if p.strip()]


def _parse_version(raw: str) -> tuple[FilterVersion, FilterVersion | None]:
    """Return (min, max) bounds; max is None for open-ended ``X+`` ranges."""
    if raw.endswith("+"):
        value = raw[:-1].strip()
        return FilterVersion(value=value, inclusive=True, label=value), None
    bound = FilterVersion(value=raw, inclusive=True, label=raw)
    return bound, bound


def _parse_editions(
    raw: str, product_id: str, validate_editions: bool
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    raw_editions = tuple(e.strip() for e in raw.split(",") if e.strip())
    editions = []
    for edition in raw_editions:
        name = EDITION_NAMES.get(edition.upper())
        if name is None:
            if validate_editions:
                raise ResourceCreationError(
                    f"Unknown productEdition {edition!r} for product {product_id!r}"
                )
            logger.warning("unknown_edition", edition=edition, product_id=product_id)
            name = edition
        editions.append(name)
    return tuple(editions), raw_editions


def _parse_clause(clause: str, validate_editions: bool) -> AppliesToFilterInfo | None:
    """Parse one product clause; None for a lenient skip of a clause without a product id."""
    tokens = _split_unquoted(clause, ";")
    if not tokens or "=" in tokens[0]:
        if validate_editions:
            raise ResourceCreationError(f"appliesTo clause {clause!r} has no product id")
        logger.warning("applies_to_clause_skipped", clause=clause)
        return None

    product_id = tokens[0]
    fields: dict[str, Any] = {"product_id": product_id}

    for token in tokens[1:]:
        key, sep, value = token.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip().strip('"').strip()

        if key == "productVersion" and value:
            min_version, max_version = _parse_version(value)
            fields["min_version"] = min_version
            fields["max_version"] = max_version
            fields["has_max_version"] = max_version is not None
        elif key == "productEdition" and value:
            editions, raw_editions = _parse_editions(value, product_id, validate_editions)
            fields["editions"] = editions
            fields["raw_editions"] = raw_editions
        elif key == "productInstallType" and value:
            fields["install_type"] = value

    return AppliesToFilterInfo(**fields)


def generate_applies_to_filter_info(
    applies_to: str | None, validate_editions: bool = True
) -> list[AppliesToFilterInfo] | None:
    """Build one filter record per product clause of ``applies_to``.

    Args:
        applies_to: Raw appliesTo header, or None
        validate_editions: Reject unknown productEdition values and clauses
            without a product id instead of passing through or skipping them

    Returns:
        Filter records in header order, or None when there is no header.

    Raises:
        ResourceCreationError: an unknown edition, or a clause with no
            product id, with validation enabled
    """
    if applies_to is None:
        return None

    filters: list[AppliesToFilterInfo] = []
    for clause in _split_unquoted(applies_to, ","):
        info = _parse_clause(clause, validate_editions)
        if info is not None:
            filters.append(info)
    logger.debug("applies_to_regenerated", applies_to=applies_to, filters=len(filters))
    return filters
