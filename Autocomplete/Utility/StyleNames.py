"""Space-delimited style name accumulator used for the suggestion menu."""
from typing import List, Optional


def _has_whitespace(token: str) -> bool:
    return any(ch.isspace() for ch in token)


class StyleNameList:
    """Ordered list of CSS-like class names.

    Unlike suggestion limiting this does not de-duplicate: adding the same
    token twice keeps both entries. When `tokens` is given the list object is
    mutated in place, so it can be shared with an `ExtensionState`.
    """

    def __init__(self, tokens: Optional[List[str]] = None):
        self._tokens = tokens if tokens is not None else []

    def get(self) -> str:
        return " ".join(self._tokens)

    def add(self, token: Optional[str]) -> None:
        if not token:
            return
        if _has_whitespace(token):
            for piece in token.split():
                self.add(piece)
            return
        self._tokens.append(token)

    def remove(self, token: Optional[str]) -> None:
        if not token:
            return
        if _has_whitespace(token):
            for piece in token.split():
                self.remove(piece)
            return
        if token in self._tokens:
            self._tokens.remove(token)

    def clear(self) -> None:
        del self._tokens[:]

    def tokens(self) -> List[str]:
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)
