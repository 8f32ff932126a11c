"""URL utilities for suggest request paths and query strings."""
from typing import Iterable, List, Tuple
from urllib.parse import quote, urlencode


def clean_path_string(segment: str) -> str:
    return quote(segment, safe="")


def build_suggest_path(indices: Iterable[str], types: Iterable[str]) -> str:
    path = "/"
    path += ",".join(clean_path_string(index) for index in indices)
    # Types are appended directly after the indices, without a separator.
    # Servers rely on this exact path, keep it as is.
    path += ",".join(clean_path_string(typ) for typ in types)
    return path + "/_suggest"


def build_query_string(pretty: bool = False, routing: str = "", preference: str = "") -> str:
    params: List[Tuple[str, str]] = []
    if pretty:
        params.append(("pretty", "true"))
    if routing:
        params.append(("routing", routing))
    if preference:
        params.append(("preference", preference))
    if not params:
        return ""
    return "?" + urlencode(params)
