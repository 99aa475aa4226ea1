import json
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from Autocomplete.Business.QueryExecutor import QueryExecutor
from Autocomplete.Business.ResponseEncoder import EncodedResponse, ResponseEncoder
from Autocomplete.Events.event_dispatcher import EventDispatcher
from Autocomplete.Interface.ISuggestionProvider import ISuggestionProvider
from Autocomplete.Model.ExtensionState import ExtensionState
from Autocomplete.Model.Resource import Resource
from Autocomplete.Model.Suggestion import Suggestion
from Autocomplete.Provider.SuggestionProvider import SuggestionProvider
from Autocomplete.Utility.StyleNames import StyleNameList

import logging
logger = logging.getLogger(__name__)

# icon maps kept per answered request; the oldest are evicted first
MAX_TRACKED_RESPONSES = 64


def request_key(request_id: Any) -> str:
    """String form of a request id as used in resource URLs. Strings are kept as-is."""
    if isinstance(request_id, str):
        return request_id
    return json.dumps(request_id, sort_keys=True, separators=(",", ":"))


class AutocompleteExtension:

    """Server-side half of an autocomplete text field.
    Owns the configuration of one field (limit, provider, client state, menu
    style names), answers `ServerQuerySuggestions` calls and keeps the icon
    resources of recent responses, keyed by request id, so the transport can
    resolve them.
    Not meant for concurrent reconfiguration; the last write wins.
    """
    def __init__(self, host: str, suggestion_provider: Any = None, suggestion_limit: int = 0, dispatcher: Optional[EventDispatcher] = None):
        self.host = host
        self.state = ExtensionState()
        self._menu_style_names = StyleNameList(self.state.menu_style_names)
        self._suggestion_provider: Optional[ISuggestionProvider] = None
        self.suggestion_provider = suggestion_provider
        self.suggestion_limit = suggestion_limit
        self.dispatcher = dispatcher or EventDispatcher()
        self.executor = QueryExecutor(self, self.dispatcher)
        self._resources: "OrderedDict[str, Dict[str, Resource]]" = OrderedDict()
        self._resources_lock = Lock()

    @property
    def suggestion_provider(self) -> Optional[ISuggestionProvider]:
        return self._suggestion_provider

    @suggestion_provider.setter
    def suggestion_provider(self, provider: Any) -> None:
        self._suggestion_provider = SuggestionProvider.AsProvider(provider)

    @property
    def suggestion_limit(self) -> int:
        return self._suggestion_limit

    @suggestion_limit.setter
    def suggestion_limit(self, limit: int) -> None:
        self._suggestion_limit = int(limit)

    # client configuration, passed through unmodified

    @property
    def item_as_html(self) -> bool:
        return self.state.item_as_html

    @item_as_html.setter
    def item_as_html(self, value: bool) -> None:
        self.state.item_as_html = bool(value)

    @property
    def min_chars(self) -> int:
        return self.state.min_chars

    @min_chars.setter
    def min_chars(self, value: int) -> None:
        self.state.min_chars = int(value)

    @property
    def delay(self) -> int:
        return self.state.delay

    @delay.setter
    def delay(self, value: int) -> None:
        self.state.delay = int(value)

    @property
    def cache(self) -> bool:
        return self.state.cache

    @cache.setter
    def cache(self, value: bool) -> None:
        self.state.cache = bool(value)

    @property
    def menu_style_name(self) -> str:
        return self._menu_style_names.get()

    def AddMenuStyleName(self, style_name: Optional[str]) -> None:
        self._menu_style_names.add(style_name)

    def RemoveMenuStyleName(self, style_name: Optional[str]) -> None:
        self._menu_style_names.remove(style_name)

    def ClearMenuStyleNames(self) -> None:
        self._menu_style_names.clear()

    def GetState(self) -> Dict[str, Any]:
        state = self.state.to_dict()
        state["menuStyleName"] = self.menu_style_name
        return state

    # query pipeline

    def QuerySuggestions(self, term: str) -> List[Suggestion]:
        return self.executor.QuerySuggestions(term)

    """Receive a search term from the client, execute the query and hand the
        encoded result to `set_suggestions` together with the untouched request id.
    """
    def ServerQuerySuggestions(self, request_id: Any, term: str, set_suggestions: Callable[[Any, List[Dict[str, Any]]], None]) -> EncodedResponse:
        suggestions = self.QuerySuggestions(term)
        encoded = ResponseEncoder.EncodeSuggestions(suggestions)
        self._remember_resources(request_key(request_id), encoded.resources)
        logger.info("Field '%s' answered request %r with %d suggestions", self.host, request_id, len(encoded))
        set_suggestions(request_id, encoded.records)
        return encoded

    def _remember_resources(self, key: str, resources: Dict[str, Resource]) -> None:
        with self._resources_lock:
            if not resources:
                self._resources.pop(key, None)
                return
            self._resources[key] = dict(resources)
            self._resources.move_to_end(key)
            while len(self._resources) > MAX_TRACKED_RESPONSES:
                self._resources.popitem(last=False)

    """Resolve an icon key issued in the response to `request_id`."""
    def GetResource(self, request_id: Any, key: str) -> Optional[Resource]:
        with self._resources_lock:
            resources = self._resources.get(request_key(request_id), {})
            return resources.get(key)
