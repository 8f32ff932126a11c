from __future__ import annotations
from typing import Any, Dict, Optional, Union

from SearchSuggest.Suggesters.Interface.ISuggester import ISuggester


"""Prefix completion against a completion-type field."""
class CompletionSuggester(ISuggester):
    OPTIONS = ("text", "field", "size", "fuzzy")

    def __init__(self, name: str):
        self._name = name
        self._text: Optional[str] = None
        self._options: Dict[str, Any] = {}

    def name(self) -> str:
        return self._name

    def text(self, text: str) -> CompletionSuggester:
        self._text = text
        return self

    def field(self, field: str) -> CompletionSuggester:
        self._options["field"] = field
        return self

    def size(self, size: int) -> CompletionSuggester:
        self._options["size"] = size
        return self

    def fuzzy(self, fuzzy: Union[bool, int, str]) -> CompletionSuggester:
        # True means default fuzziness, a number or "AUTO" sets it explicitly
        if fuzzy is True:
            self._options["fuzzy"] = {}
        elif fuzzy is False:
            self._options.pop("fuzzy", None)
        else:
            self._options["fuzzy"] = {"fuzziness": fuzzy}
        return self

    def to_request_body(self, include_metadata: bool = False) -> Any:
        body: Dict[str, Any] = {}
        if self._text is not None:
            body["text"] = self._text
        body["completion"] = dict(self._options)
        if include_metadata:
            return {self._name: body}
        return body
