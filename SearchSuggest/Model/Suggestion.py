from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from SearchSuggest.Exception.SearchError import DecodeError


def _typed(data: Dict[str, Any], key: str, kinds: tuple, default: Any) -> Any:
    value = data.get(key, default)
    if value is None:
        return default
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise DecodeError(f"Field '{key}' has invalid type: {type(value).__name__}")
    return value


"""One candidate completion with its relevance score and corpus frequency."""
@dataclass(frozen=True)
class SuggestionOption:
    text: str
    score: float = 0.0
    freq: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "SuggestionOption":
        if not isinstance(data, dict):
            raise DecodeError("Suggestion option must be a JSON object")
        return cls(
            text=_typed(data, "text", (str,), ""),
            score=float(_typed(data, "score", (int, float), 0.0)),
            freq=_typed(data, "freq", (int,), 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


"""One matched span of the input text and its candidate completions."""
@dataclass(frozen=True)
class Suggestion:
    text: str
    offset: int = 0
    length: int = 0
    options: Tuple[SuggestionOption, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Suggestion":
        if not isinstance(data, dict):
            raise DecodeError("Suggestion must be a JSON object")
        options = _typed(data, "options", (list,), [])
        return cls(
            text=_typed(data, "text", (str,), ""),
            offset=_typed(data, "offset", (int,), 0),
            length=_typed(data, "length", (int,), 0),
            options=tuple(SuggestionOption.from_dict(o) for o in options),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["options"] = list(data["options"])
        return data


# Suggester name -> suggestions produced by that suggester
SuggestResult = Dict[str, List[Suggestion]]
