"""Built-in provider registration and adaptation of provider-like values."""

from __future__ import annotations
from typing import Any, Optional
from Autocomplete.Implementation.CallableSuggestionProvider import CallableSuggestionProvider
from Autocomplete.Implementation.CollectionSuggestionProvider import CollectionSuggestionProvider
from Autocomplete.Implementation.RemoteSuggestionProvider import RemoteSuggestionProvider
from Autocomplete.Interface.ISuggestionProvider import ISuggestionProvider
from Autocomplete.Provider.ProviderFactory import ProviderFactory


def build_factory() -> ProviderFactory:
    """Return a new factory with the built-in providers registered."""
    factory = ProviderFactory()
    factory.register("collection", lambda values, **options: CollectionSuggestionProvider(values, **options))
    factory.register("remote", lambda endpoint, **options: RemoteSuggestionProvider(endpoint, **options))
    factory.register("callable", lambda fn: CallableSuggestionProvider(fn))
    return factory


class SuggestionProvider:
    """Facade over a `ProviderFactory` used by extensions and the CLI."""

    @staticmethod
    def InitializeProvider(provider_type: str, *args, factory: Optional[ProviderFactory] = None, **kwargs) -> ISuggestionProvider:
        factory = factory or build_factory()
        return factory.create(provider_type, *args, **kwargs)

    @staticmethod
    def AsProvider(candidate: Any) -> Optional[ISuggestionProvider]:
        """Return `candidate` as a provider. None stays None, plain functions get wrapped."""
        if candidate is None or isinstance(candidate, ISuggestionProvider):
            return candidate
        if callable(candidate):
            return CallableSuggestionProvider(candidate)
        raise TypeError(f"Not a suggestion provider: {type(candidate).__name__}")
