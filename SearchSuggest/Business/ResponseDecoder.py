"""
Decoding of `_suggest` responses into typed suggestions.
The top-level object is keyed by suggester name, except for `_shards`
which carries shard execution metadata in a different shape.
"""
from typing import Any, List
import logging

import requests

from SearchSuggest.Exception.SearchError import DecodeError
from SearchSuggest.Model.Suggestion import Suggestion, SuggestResult

logger = logging.getLogger(__name__)

SHARDS_KEY = "_shards"


def decode_suggestions(name: str, value: Any) -> List[Suggestion]:
    if not isinstance(value, list):
        raise DecodeError(f"Suggestions for '{name}' must be a JSON array, got {type(value).__name__}")
    try:
        return [Suggestion.from_dict(item) for item in value]
    except DecodeError as e:
        raise DecodeError(f"Invalid suggestion for '{name}': {e.message}") from e


def decode_suggest_response(raw: Any) -> SuggestResult:
    if not isinstance(raw, dict):
        raise DecodeError(f"Suggest response must be a JSON object, got {type(raw).__name__}")
    result: SuggestResult = {}
    for name, value in raw.items():
        if name == SHARDS_KEY:
            continue
        result[name] = decode_suggestions(name, value)
    logger.debug("Decoded suggestions for %d suggester(s)", len(result))
    return result


def decode_response_body(response: requests.Response) -> SuggestResult:
    try:
        raw = response.json()
    except ValueError as e:
        raise DecodeError(f"Suggest response is not valid JSON: {e}") from e
    return decode_suggest_response(raw)
