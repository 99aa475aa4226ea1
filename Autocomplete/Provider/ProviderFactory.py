"""
Factory for suggestion providers. Creators are registered by key on a factory
instance and embedding applications request providers via `create`.
"""
from typing import Callable, Dict, List
from Autocomplete.Interface.ISuggestionProvider import ISuggestionProvider


class ProviderFactory:
    def __init__(self):
        self._registry: Dict[str, Callable[..., ISuggestionProvider]] = {}

    def register(self, key: str, creator: Callable[..., ISuggestionProvider]) -> None:
        self._registry[key] = creator

    def create(self, key: str, *args, **kwargs) -> ISuggestionProvider:
        creator = self._registry.get(key)
        if not creator:
            raise KeyError(f"Provider not registered: {key}")
        return creator(*args, **kwargs)

    def registered_keys(self) -> List[str]:
        return list(self._registry.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._registry
