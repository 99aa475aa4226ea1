from dataclasses import dataclass, field
from typing import Any, Dict, List

"""Client-side configuration of an autocomplete field, passed through to the renderer."""
@dataclass
class ExtensionState:
    item_as_html: bool = False
    min_chars: int = 3
    delay: int = 150
    cache: bool = True
    menu_style_names: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemAsHtml": self.item_as_html,
            "minChars": self.min_chars,
            "delay": self.delay,
            "cache": self.cache,
            "menuStyleNames": list(self.menu_style_names),
        }
