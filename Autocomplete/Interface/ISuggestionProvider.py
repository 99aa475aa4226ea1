"""
Suggestion provider abstraction.
This module defines the pluggable interface ISuggestionProvider, the single
capability the autocomplete core needs from the embedding application: given a
Query, return the candidate suggestions. Ranking and matching belong entirely to
the provider; the core only bounds and shapes whatever comes back.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from Autocomplete.Model.Query import Query
from Autocomplete.Model.Suggestion import Suggestion


class ISuggestionProvider(ABC):
    """Abstract suggestion provider interface."""

    @abstractmethod
    def QuerySuggestions(self, query: Query) -> Optional[Iterable[Suggestion]]:
        """Return suggestions for the given query, in display order. May return None."""
        pass
