"""Registry of autocomplete fields served by one application."""
from threading import Lock
from typing import Dict, List

from Autocomplete.Business.AutocompleteExtension import AutocompleteExtension
from Autocomplete.Exception.AutocompleteError import FieldNotFoundError


class ExtensionRegistry:
    def __init__(self):
        self._extensions: Dict[str, AutocompleteExtension] = {}
        self._lock = Lock()

    def register(self, extension: AutocompleteExtension) -> AutocompleteExtension:
        with self._lock:
            self._extensions[extension.host] = extension
        return extension

    def get(self, name: str) -> AutocompleteExtension:
        extension = self._extensions.get(name)
        if extension is None:
            raise FieldNotFoundError(name)
        return extension

    def names(self) -> List[str]:
        return list(self._extensions.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._extensions
