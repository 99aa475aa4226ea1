"""
Service configuration read from the environment (after `.env` loading).

    AUTOCOMPLETE_SUGGESTION_LIMIT   max suggestions per response, <= 0 unbounded (10)
    AUTOCOMPLETE_MIN_CHARS          characters typed before the client searches (3)
    AUTOCOMPLETE_DELAY              client search delay in milliseconds (150)
    AUTOCOMPLETE_CACHE              client-side caching of searches (true)
    AUTOCOMPLETE_ITEM_AS_HTML       render suggestions as HTML (false)
    AUTOCOMPLETE_MENU_STYLE         space separated menu style names ("")
    AUTOCOMPLETE_REMOTE_ENDPOINT    suggest endpoint for the remote provider (unset)
"""
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

ENV_PREFIX = "AUTOCOMPLETE_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    suggestion_limit: int = 10
    min_chars: int = 3
    delay: int = 150
    cache: bool = True
    item_as_html: bool = False
    menu_style: str = ""
    remote_endpoint: Optional[str] = None

    def apply(self, extension) -> None:
        """Copy these settings onto an AutocompleteExtension, replacing its menu style names."""
        extension.suggestion_limit = self.suggestion_limit
        extension.min_chars = self.min_chars
        extension.delay = self.delay
        extension.cache = self.cache
        extension.item_as_html = self.item_as_html
        extension.ClearMenuStyleNames()
        extension.AddMenuStyleName(self.menu_style)


def _to_int(name: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _to_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(overrides: Optional[Mapping[str, Any]] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `environ` (default: os.environ); `overrides` keys win.
    Override keys are the Settings field names, e.g. {"suggestion_limit": 5}.
    """
    environ = os.environ if environ is None else environ
    overrides = overrides or {}
    defaults = Settings()

    def lookup(key: str, default: Any) -> Any:
        if key in overrides:
            return overrides[key]
        return environ.get(ENV_PREFIX + key.upper(), default)

    return Settings(
        suggestion_limit=_to_int(ENV_PREFIX + "SUGGESTION_LIMIT", lookup("suggestion_limit", defaults.suggestion_limit)),
        min_chars=_to_int(ENV_PREFIX + "MIN_CHARS", lookup("min_chars", defaults.min_chars)),
        delay=_to_int(ENV_PREFIX + "DELAY", lookup("delay", defaults.delay)),
        cache=_to_bool(ENV_PREFIX + "CACHE", lookup("cache", defaults.cache)),
        item_as_html=_to_bool(ENV_PREFIX + "ITEM_AS_HTML", lookup("item_as_html", defaults.item_as_html)),
        menu_style=str(lookup("menu_style", defaults.menu_style) or ""),
        remote_endpoint=lookup("remote_endpoint", defaults.remote_endpoint) or None,
    )
