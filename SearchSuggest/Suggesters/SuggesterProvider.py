"""Builds suggesters from JSON descriptions such as
`{"kind": "term", "name": "fix-typos", "text": "serch", "field": "body"}`.
"""

from __future__ import annotations
from typing import Any, Dict

from SearchSuggest.Suggesters.Implementation.CompletionSuggester import CompletionSuggester
from SearchSuggest.Suggesters.Implementation.TermSuggester import TermSuggester
from SearchSuggest.Suggesters.Interface.ISuggester import ISuggester
from SearchSuggest.Suggesters.SuggesterFactory import SuggesterFactory

import logging
logger = logging.getLogger(__name__)

# Register built-in suggesters
SuggesterFactory.register("term", lambda name: TermSuggester(name))
SuggesterFactory.register("completion", lambda name: CompletionSuggester(name))

RESERVED_KEYS = ("kind", "name")


def build_suggester(payload: Dict[str, Any]) -> ISuggester:
    kind = payload.get("kind", "term")
    if not isinstance(kind, str):
        raise ValueError(f"Unknown suggester kind: {kind}")
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError("Suggester 'name' must be a non-empty string")
    try:
        suggester = SuggesterFactory.create(kind, name)
    except KeyError:
        raise ValueError(f"Unknown suggester kind: {kind}")

    for key, value in payload.items():
        if key in RESERVED_KEYS:
            continue
        if key not in getattr(suggester, "OPTIONS", ()):
            raise ValueError(f"Unknown option '{key}' for {kind} suggester")
        getattr(suggester, key)(value)
    logger.debug("Built %s suggester %s", kind, name)
    return suggester
