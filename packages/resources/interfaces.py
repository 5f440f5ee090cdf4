"""Abstract interfaces for catalog resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packages.resources.matching import MatchingKey


class RepositoryResource(ABC):
    """A catalog entry whose display fields are derived from its declarations."""

    @abstractmethod
    def update_generated_fields(self, perform_edition_checking: bool = True) -> None:
        """Recompute every generated field, overwriting previous values.

        Raises:
            ResourceCreationError: declarations cannot be turned into
                generated fields (strict mode only)
        """

    @abstractmethod
    def create_matching_data(self) -> MatchingKey:
        """Return the key used to find this resource in another snapshot."""
