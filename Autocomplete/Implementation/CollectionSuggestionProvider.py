from __future__ import annotations
from typing import Iterable, List, Union

from Autocomplete.Interface.ISuggestionProvider import ISuggestionProvider
from Autocomplete.Model.Query import Query
from Autocomplete.Model.Suggestion import Suggestion

import logging
logger = logging.getLogger(__name__)

MATCH_BEGINS = "begins"
MATCH_CONTAINS = "contains"
MATCH_MODES = {MATCH_BEGINS, MATCH_CONTAINS}

"""In-memory provider that filters a fixed collection against the search term.
    Plain strings are wrapped into Suggestions; Suggestions are matched on their value.
    The collection order is kept, so callers control the ranking by how they order it.
"""
class CollectionSuggestionProvider(ISuggestionProvider):
    def __init__(self, values: Iterable[Union[str, Suggestion]], match_mode: str = MATCH_BEGINS, ignore_case: bool = True, min_chars: int = 0):
        if match_mode not in MATCH_MODES:
            raise ValueError(f"Invalid match_mode '{match_mode}'. Allowed: begins, contains")
        self.match_mode = match_mode
        self.ignore_case = ignore_case
        self.min_chars = min_chars
        self.suggestions: List[Suggestion] = [v if isinstance(v, Suggestion) else Suggestion(v) for v in values]

    def _normalize(self, text: str) -> str:
        return text.casefold() if self.ignore_case else text

    def _matches(self, value: str, term: str) -> bool:
        if self.match_mode == MATCH_BEGINS:
            return value.startswith(term)
        return term in value

    def QuerySuggestions(self, query: Query) -> List[Suggestion]:
        term = query.term or ""
        if len(term) < self.min_chars:
            return []
        term = self._normalize(term)
        result = []
        for suggestion in self.suggestions:
            if suggestion.value is None:
                continue
            if self._matches(self._normalize(suggestion.value), term):
                result.append(suggestion)
                if query.is_limited and len(result) >= query.limit:
                    break
        logger.debug("Collection provider matched %d suggestions for '%s'", len(result), query.term)
        return result
