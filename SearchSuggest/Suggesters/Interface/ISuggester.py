"""
Suggester abstraction for `_suggest` requests.
A suggester contributes one named fragment to the request body; the service
returns that suggester's suggestions under the same name.
"""

from abc import ABC, abstractmethod
from typing import Any


class ISuggester(ABC):
    """Abstract suggester interface."""

    @abstractmethod
    def name(self) -> str:
        """Key of this suggester in the request body and in the result."""
        pass

    @abstractmethod
    def to_request_body(self, include_metadata: bool = False) -> Any:
        """JSON-serializable body; wrapped as {name: body} when include_metadata is set."""
        pass
