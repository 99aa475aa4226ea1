"""
Provider backed by a remote JSON suggest endpoint.
The endpoint is called as `GET <endpoint>?q=<term>[&limit=<n>]` and may answer with
a list of strings, a list of suggestion objects, or the OpenSearch suggestions
array `[term, [values...], [descriptions...]]`.
"""
from typing import Any, Dict, List, Optional
import requests

from Autocomplete.Exception.AutocompleteError import ProviderError
from Autocomplete.Interface.ISuggestionProvider import ISuggestionProvider
from Autocomplete.Model.Query import Query
from Autocomplete.Model.Resource import Resource
from Autocomplete.Model.Suggestion import Suggestion

import logging
logger = logging.getLogger(__name__)


class RemoteSuggestionProvider(ISuggestionProvider):
    def __init__(self, endpoint: str, session: Optional[requests.Session] = None, timeout: float = 5.0):
        if not endpoint:
            raise ValueError("RemoteSuggestionProvider requires an endpoint")
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.timeout = timeout

    def _handle_response(self, response: requests.Response) -> Any:
        if response.status_code != 200:
            raise ProviderError(f"Suggest endpoint error: {response.status_code}", response.status_code)
        try:
            return response.json()
        except ValueError:
            raise ProviderError("Suggest endpoint returned invalid JSON", response.status_code)

    def QuerySuggestions(self, query: Query) -> Optional[List[Suggestion]]:
        params: Dict[str, Any] = {"q": query.term}
        if query.is_limited:
            params["limit"] = query.limit
        try:
            response = self.session.get(self.endpoint, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Suggest endpoint unreachable: {e}")
        data = self._handle_response(response)
        if data is None:
            return None
        return parse_suggestions(data)


def _from_mapping(raw: Dict[str, Any]) -> Suggestion:
    icon = raw.get("icon")
    style_names = raw.get("styleNames")
    return Suggestion(
        value=raw.get("value"),
        description=raw.get("description"),
        icon=Resource(icon) if icon else None,
        style_names=style_names if isinstance(style_names, list) else None,
    )


def parse_suggestions(data: Any) -> List[Suggestion]:
    """Convert a decoded endpoint payload into Suggestions, keeping its order."""
    # OpenSearch suggestions: [term, [values], [descriptions], ...]
    if isinstance(data, list) and len(data) >= 2 and isinstance(data[0], str) and isinstance(data[1], list):
        values = data[1]
        descriptions = data[2] if len(data) > 2 and isinstance(data[2], list) else []
        return [
            Suggestion(value, descriptions[i] if i < len(descriptions) and descriptions[i] else None)
            for i, value in enumerate(values)
            if isinstance(value, str)
        ]
    if isinstance(data, dict):
        data = data.get("suggestions") or []
    if not isinstance(data, list):
        logger.warning("Unexpected suggest payload type: %s", type(data).__name__)
        return []
    suggestions = []
    for item in data:
        if isinstance(item, str):
            suggestions.append(Suggestion(item))
        elif isinstance(item, dict):
            suggestions.append(_from_mapping(item))
    return suggestions
