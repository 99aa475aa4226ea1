from typing import Any, Iterable, List, Optional

from Autocomplete.Events.event_dispatcher import EventDispatcher
from Autocomplete.Model.Query import Query
from Autocomplete.Model.Suggestion import Suggestion

import logging
logger = logging.getLogger(__name__)


def unique_ordered(items: Iterable[Any]) -> List[Any]:
    """De-duplicate `items` keeping the first occurrence and the original order."""
    seen = set()
    unhashable: List[Any] = []
    result = []
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in unhashable:
                continue
            unhashable.append(item)
        result.append(item)
    return result


class QueryExecutor:

    """Runs suggestion queries for one extension.
    Reads the extension's `suggestion_provider` and `suggestion_limit` at call
    time and returns an ordered, duplicate-free, size-bounded list. Emits events
    via `EventDispatcher` (query_started, suggestions_truncated, query_completed).
    """
    def __init__(self, extension: Any, dispatcher: Optional[EventDispatcher] = None):
        self.extension = extension
        self.dispatcher = dispatcher or EventDispatcher()

    def QuerySuggestions(self, term: str) -> List[Suggestion]:
        query = Query(self.extension, term, self.extension.suggestion_limit)
        return self.Execute(query)

    """Execute `query` against the active provider and bound the result to the query limit.
        Provider exceptions propagate unmodified.
    """
    def Execute(self, query: Query) -> List[Suggestion]:
        provider = self.extension.suggestion_provider
        if provider is None:
            logger.debug("No suggestion provider set for '%s'", query.term)
            return []

        self.dispatcher.dispatch("query_started", query=query)
        raw = provider.QuerySuggestions(query)
        if raw is None:
            logger.debug("Suggestion provider returned None for '%s'", query.term)
            return []

        suggestions = unique_ordered(
            Suggestion(item) if isinstance(item, str) else item for item in raw
        )
        if query.is_limited and len(suggestions) > query.limit:
            dropped = len(suggestions) - query.limit
            logger.debug("Provider returned %d suggestions, dropping %d over limit %d", len(suggestions), dropped, query.limit)
            suggestions = suggestions[:query.limit]
            self.dispatcher.dispatch("suggestions_truncated", query=query, dropped=dropped)

        self.dispatcher.dispatch("query_completed", query=query, suggestions=suggestions)
        return suggestions
