from typing import Dict, Any, List

from SearchSuggest.Model.Suggestion import SuggestResult


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ValueError(f"Field '{key}' must be a list of non-empty strings")
    return value


def _string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key) or ""
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value


def _flag(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be a boolean")
    return value


def validate_suggest_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    suggesters = data.get("suggesters")
    if not isinstance(suggesters, list) or not suggesters:
        raise ValueError("Field 'suggesters' must be a non-empty list")
    if not all(isinstance(s, dict) for s in suggesters):
        raise ValueError("Each suggester must be an object")
    return {
        "indices": _string_list(data, "indices"),
        "types": _string_list(data, "types"),
        "routing": _string(data, "routing"),
        "preference": _string(data, "preference"),
        "pretty": _flag(data, "pretty"),
        "debug": _flag(data, "debug"),
        "suggesters": suggesters,
    }


def map_suggestions(result: SuggestResult) -> Dict[str, List[Dict[str, Any]]]:
    return {
        name: [s.to_dict() for s in suggestions]
        for name, suggestions in result.items()
    }
