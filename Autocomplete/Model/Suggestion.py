from dataclasses import dataclass
from typing import Optional, Sequence

from Autocomplete.Model.Resource import Resource

"""One autocomplete candidate plus its display metadata."""
@dataclass(frozen=True)
class Suggestion:
    value: Optional[str]
    description: Optional[str] = None
    icon: Optional[Resource] = None
    style_names: Optional[Sequence[Optional[str]]] = None

    def __post_init__(self):
        # stored as a tuple so suggestions stay hashable for de-duplication
        if self.style_names is not None and not isinstance(self.style_names, tuple):
            object.__setattr__(self, "style_names", tuple(self.style_names))
