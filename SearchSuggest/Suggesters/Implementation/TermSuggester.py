from __future__ import annotations
from typing import Any, Dict, Optional

from SearchSuggest.Suggesters.Interface.ISuggester import ISuggester


"""Suggests corrections per term of the input text, based on edit distance."""
class TermSuggester(ISuggester):
    OPTIONS = ("text", "field", "analyzer", "size", "shard_size", "suggest_mode", "sort", "min_word_length", "max_edits")

    def __init__(self, name: str):
        self._name = name
        self._text: Optional[str] = None
        self._options: Dict[str, Any] = {}

    def name(self) -> str:
        return self._name

    def text(self, text: str) -> TermSuggester:
        self._text = text
        return self

    def field(self, field: str) -> TermSuggester:
        self._options["field"] = field
        return self

    def analyzer(self, analyzer: str) -> TermSuggester:
        self._options["analyzer"] = analyzer
        return self

    def size(self, size: int) -> TermSuggester:
        self._options["size"] = size
        return self

    def shard_size(self, shard_size: int) -> TermSuggester:
        self._options["shard_size"] = shard_size
        return self

    def suggest_mode(self, mode: str) -> TermSuggester:
        self._options["suggest_mode"] = mode
        return self

    def sort(self, sort: str) -> TermSuggester:
        self._options["sort"] = sort
        return self

    def min_word_length(self, length: int) -> TermSuggester:
        self._options["min_word_length"] = length
        return self

    def max_edits(self, edits: int) -> TermSuggester:
        self._options["max_edits"] = edits
        return self

    def to_request_body(self, include_metadata: bool = False) -> Any:
        body: Dict[str, Any] = {}
        if self._text is not None:
            body["text"] = self._text
        body["term"] = dict(self._options)
        if include_metadata:
            return {self._name: body}
        return body
