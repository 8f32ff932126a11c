"""
Fluent builder for one `_suggest` request.
A service instance accumulates indices, types, options and suggesters, then
`execute` sends a single POST and decodes the response. Instances are not
thread-safe; use one per request.
"""
from typing import Any, Dict, List
import logging

from SearchSuggest.Business.ResponseDecoder import decode_response_body
from SearchSuggest.Client.SearchClient import SearchClient
from SearchSuggest.Model.Suggestion import SuggestResult
from SearchSuggest.Suggesters.Interface.ISuggester import ISuggester
from SearchSuggest.Utility.debug import dump_request, dump_response
from SearchSuggest.Utility.url import build_query_string, build_suggest_path

logger = logging.getLogger(__name__)


class SuggestService:

    def __init__(self, client: SearchClient):
        self.client = client
        self._pretty = False
        self._debug = False
        self._routing = ""
        self._preference = ""
        self._indices: List[str] = []
        self._types: List[str] = []
        self._suggesters: List[ISuggester] = []

    def add_index(self, index: str) -> "SuggestService":
        self._indices.append(index)
        return self

    def add_indices(self, *indices: str) -> "SuggestService":
        self._indices.extend(indices)
        return self

    def add_type(self, typ: str) -> "SuggestService":
        self._types.append(typ)
        return self

    def add_types(self, *types: str) -> "SuggestService":
        self._types.extend(types)
        return self

    def set_pretty(self, pretty: bool) -> "SuggestService":
        self._pretty = pretty
        return self

    def set_debug(self, debug: bool) -> "SuggestService":
        self._debug = debug
        return self

    def set_routing(self, routing: str) -> "SuggestService":
        self._routing = routing
        return self

    def set_preference(self, preference: str) -> "SuggestService":
        self._preference = preference
        return self

    def add_suggester(self, suggester: ISuggester) -> "SuggestService":
        self._suggesters.append(suggester)
        return self

    def build_url(self) -> str:
        path = build_suggest_path(self._indices, self._types)
        return path + build_query_string(self._pretty, self._routing, self._preference)

    def build_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        # Later suggesters with the same name replace earlier ones
        for suggester in self._suggesters:
            body[suggester.name()] = suggester.to_request_body(False)
        return body

    def execute(self) -> SuggestResult:
        url = self.build_url()
        body = self.build_body()
        prepared = self.client.new_request("POST", url, body)

        if self._debug:
            dump_request(prepared)

        logger.info("Requesting suggestions: POST %s (%d suggester(s))", url, len(body))
        response = self.client.perform(prepared)

        if self._debug:
            dump_response(response)

        self.client.check_response(response)
        return decode_response_body(response)
