"""Search API error classes."""
from typing import Optional


class SearchError(Exception):

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


"""Raised when the request never produced an HTTP response (connection, timeout)."""
class TransportError(SearchError):
    def __init__(self, message: str):
        super().__init__(message)


"""Raised when the search service answers with a non-2xx status."""
class ResponseStatusError(SearchError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)


"""Raised when a response body cannot be decoded into suggestions."""
class DecodeError(SearchError):
    def __init__(self, message: str):
        super().__init__(message)
