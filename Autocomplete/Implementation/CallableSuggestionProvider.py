from typing import Callable, Iterable, Optional

from Autocomplete.Interface.ISuggestionProvider import ISuggestionProvider
from Autocomplete.Model.Query import Query
from Autocomplete.Model.Suggestion import Suggestion

"""Adapts a plain function `fn(query)` to the provider interface."""
class CallableSuggestionProvider(ISuggestionProvider):
    def __init__(self, fn: Callable[[Query], Optional[Iterable[Suggestion]]]):
        if not callable(fn):
            raise TypeError("CallableSuggestionProvider requires a callable")
        self.fn = fn

    def QuerySuggestions(self, query: Query) -> Optional[Iterable[Suggestion]]:
        return self.fn(query)
