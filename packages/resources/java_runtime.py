"""Java SE compatibility display string.

The display string is the set of Java SE releases the product supports that
also satisfy the feature's minimum requirement. Newer runtimes are assumed
to run anything an older one can, so each minimum maps to every known
runtime at or above it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packages.common.errors import InternalDefectError
from packages.common.logging import get_logger

if TYPE_CHECKING:
    from packages.common.types import JavaSEVersionRequirements

logger = get_logger(__name__)

REQUIRES_JAVA_8 = "Java SE 8"
REQUIRES_JAVA_7_OR_8 = "Java SE 7, Java SE 8"
REQUIRES_JAVA_6_OR_7_OR_8 = "Java SE 6, Java SE 7, Java SE 8"

DISPLAY_STRINGS: dict[str, str] = {
    "1.6.0": REQUIRES_JAVA_6_OR_7_OR_8,
    "1.7.0": REQUIRES_JAVA_7_OR_8,
    "1.8.0": REQUIRES_JAVA_8,
}


def add_version_display_string(
    requirements: JavaSEVersionRequirements | None,
) -> str | None:
    """Set ``requirements.version_display_string`` from its minimum version.

    Returns the display string, or None (without touching the record) when
    no minimum is specified.

    Raises:
        InternalDefectError: the minimum is not one of the supported
            literals. Upload-time validation guarantees it is, so reaching
            this is a bug, not bad input.
    """
    if requirements is None or requirements.min_version is None:
        return None

    display = DISPLAY_STRINGS.get(requirements.min_version)
    if display is None:
        logger.error("invalid_java_min_version", min_version=requirements.min_version)
        raise InternalDefectError(
            f"Unsupported Java SE minimum version {requirements.min_version!r}; "
            f"expected one of {sorted(DISPLAY_STRINGS)}"
        )

    requirements.version_display_string = display
    logger.debug("java_display_string_set", min_version=requirements.min_version, display=display)
    return display
