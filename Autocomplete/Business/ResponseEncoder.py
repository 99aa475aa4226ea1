"""
Converts a bounded suggestion list into the wire representation sent to the client.

Every record carries the keys `value`, `description`, `icon` and `styleNames`;
absent values are encoded as None (JSON null) so the client can rely on them.
Icons are never embedded: the record holds a per-response key ("icon" + index)
and the resource is returned next to the records for out-of-band resolution.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from Autocomplete.Model.Resource import Resource
from Autocomplete.Model.Suggestion import Suggestion

ICON_KEY_PREFIX = "icon"


@dataclass
class EncodedResponse:
    records: List[Dict[str, Any]] = field(default_factory=list)
    resources: Dict[str, Resource] = field(default_factory=dict)

    def resource_urls(self) -> Dict[str, str]:
        return {key: resource.url for key, resource in self.resources.items()}

    def __len__(self) -> int:
        return len(self.records)


def _encode_style_names(style_names: Optional[Iterable[Optional[str]]]) -> Optional[List[str]]:
    if style_names is None:
        return None
    return [name for name in style_names if name is not None]


class ResponseEncoder:

    @staticmethod
    def EncodeSuggestion(suggestion: Suggestion, index: int, resources: Dict[str, Resource]) -> Dict[str, Any]:
        icon_key = None
        if suggestion.icon is not None:
            icon_key = f"{ICON_KEY_PREFIX}{index}"
            resources[icon_key] = suggestion.icon
        return {
            "value": suggestion.value,
            "description": suggestion.description,
            "icon": icon_key,
            "styleNames": _encode_style_names(suggestion.style_names),
        }

    @staticmethod
    def EncodeSuggestions(suggestions: Iterable[Suggestion]) -> EncodedResponse:
        response = EncodedResponse()
        for i, suggestion in enumerate(suggestions):
            response.records.append(ResponseEncoder.EncodeSuggestion(suggestion, i, response.resources))
        return response
