"""Autocomplete service error base class."""
from typing import Optional


class AutocompleteError(Exception):

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised when a request names a field that is not registered."""
class FieldNotFoundError(AutocompleteError):
    def __init__(self, field_name: str):
        super().__init__(f"Autocomplete field not found: {field_name}", 404)
        self.field_name = field_name

"""Raised by providers backed by a remote service when that service fails.
        Attributes:
            upstream_status: HTTP status returned by the remote service (if any)
"""
class ProviderError(AutocompleteError):
    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message, 502)
        self.upstream_status = upstream_status
