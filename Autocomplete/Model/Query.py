from dataclasses import dataclass
from typing import Any

"""A single suggestion request as handed to a provider.
    Attributes:
        extension: the AutocompleteExtension the request originates from
        term: raw user input, may be empty
        limit: maximum number of suggestions, <= 0 means unbounded
"""
@dataclass(frozen=True)
class Query:
    extension: Any
    term: str
    limit: int = 0

    @property
    def is_limited(self) -> bool:
        return self.limit > 0
