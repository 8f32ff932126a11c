"""
Factory for suggesters. Suggester kinds register themselves by key and
clients can request named instances via `create`.
"""
from typing import Callable, Dict, List
from SearchSuggest.Suggesters.Interface.ISuggester import ISuggester


class SuggesterFactory:
    _registry: Dict[str, Callable[[str], ISuggester]] = {}

    @classmethod
    def register(cls, kind: str, creator: Callable[[str], ISuggester]):
        cls._registry[kind] = creator

    @classmethod
    def create(cls, kind: str, name: str) -> ISuggester:
        creator = cls._registry.get(kind)
        if not creator:
            raise KeyError(f"Suggester kind not registered: {kind}")
        return creator(name)

    @classmethod
    def registered_kinds(cls) -> List[str]:
        return list(cls._registry.keys())
