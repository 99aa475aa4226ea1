from dataclasses import dataclass
from typing import Optional

"""Opaque icon reference resolved out-of-band by the transport layer."""
@dataclass(frozen=True)
class Resource:
    url: str
    mime_type: Optional[str] = None
