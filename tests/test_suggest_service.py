import json
import logging

import pytest
import requests

from SearchSuggest.Business.SuggestService import SuggestService
from SearchSuggest.Client.SearchClient import SearchClient
from SearchSuggest.Exception.SearchError import DecodeError, ResponseStatusError, TransportError
from SearchSuggest.Model.Suggestion import Suggestion, SuggestionOption
from SearchSuggest.Suggesters.Implementation.TermSuggester import TermSuggester
from SearchSuggest.Suggesters.Interface.ISuggester import ISuggester

BASE = "http://search.test"


class FixedSuggester(ISuggester):
    def __init__(self, name, body):
        self._name = name
        self._body = body
        self.metadata_flags = []

    def name(self):
        return self._name

    def to_request_body(self, include_metadata=False):
        self.metadata_flags.append(include_metadata)
        return self._body


def make_service(session):
    return SearchClient(base_url=BASE, session=session).suggest()


def test_configuration_calls_chain(make_session):
    service = make_service(make_session())
    assert service.add_index("a").add_indices("b").add_type("t").add_types("u") is service
    assert service.set_pretty(True).set_debug(False).set_routing("r").set_preference("p") is service
    assert service.add_suggester(FixedSuggester("s", 1)) is service


def test_build_url_paths(make_session):
    assert make_service(make_session()).add_indices("idx1", "idx2").build_url() == "/idx1,idx2/_suggest"
    assert make_service(make_session()).add_type("typ1").build_url() == "/typ1/_suggest"


def test_build_url_query_string(make_session):
    service = make_service(make_session()).add_index("idx")
    assert service.build_url() == "/idx/_suggest"
    service.set_routing("r1")
    assert service.build_url() == "/idx/_suggest?routing=r1"
    service.set_pretty(True).set_preference("_local")
    assert service.build_url() == "/idx/_suggest?pretty=true&routing=r1&preference=_local"


def test_last_suggester_with_same_name_wins(make_session):
    first = FixedSuggester("s", 1)
    second = FixedSuggester("s", 2)
    service = make_service(make_session()).add_suggester(first).add_suggester(second)
    assert service.build_body() == {"s": 2}
    assert second.metadata_flags == [False]


def test_execute_round_trip(make_session, make_response):
    suggestions = [{"text": "serch", "offset": 0, "length": 5,
                    "options": [{"text": "search", "score": 0.75, "freq": 3}]}]
    url = f"{BASE}/articles/_suggest?routing=r1"
    sess = make_session({("POST", url): make_response(200, {
        "_shards": {"total": 1, "successful": 1, "failed": 0},
        "fix": suggestions,
    })})
    suggester = TermSuggester("fix").text("serch").field("body")

    result = (make_service(sess)
              .add_index("articles")
              .set_routing("r1")
              .add_suggester(suggester)
              .execute())

    sent = sess.sent[0]
    assert sent.method == "POST"
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.body) == {"fix": {"text": "serch", "term": {"field": "body"}}}
    assert result == {"fix": [Suggestion("serch", 0, 5, (SuggestionOption("search", 0.75, 3),))]}
    assert [s.to_dict() for s in result["fix"]] == suggestions


def test_execute_without_suggesters_sends_empty_body(make_session, make_response):
    url = f"{BASE}/idx/_suggest"
    sess = make_session({("POST", url): make_response(200, {"_shards": {"total": 1}})})
    result = make_service(sess).add_index("idx").execute()
    assert json.loads(sess.sent[0].body) == {}
    assert result == {}


def test_non_success_status_is_raised(make_session):
    sess = make_session()
    with pytest.raises(ResponseStatusError) as exc:
        make_service(sess).add_index("missing").add_suggester(FixedSuggester("s", {})).execute()
    assert exc.value.status_code == 404
    assert exc.value.message == "no such index"


def test_transport_failure_is_raised(make_session):
    sess = make_session(error=requests.exceptions.ConnectionError("connection refused"))
    with pytest.raises(TransportError) as exc:
        make_service(sess).add_index("idx").execute()
    assert isinstance(exc.value.__cause__, requests.exceptions.ConnectionError)


def test_undecodable_response_returns_nothing(make_session, make_response):
    url = f"{BASE}/idx/_suggest"
    sess = make_session({("POST", url): make_response(200, {"good": [], "bad": "oops"})})
    with pytest.raises(DecodeError):
        make_service(sess).add_index("idx").execute()


def test_debug_dumps_request_and_response(make_session, make_response, caplog):
    url = f"{BASE}/idx/_suggest"
    sess = make_session({("POST", url): make_response(200, {"s": []})})
    client = SearchClient(base_url=BASE, token="secret-token", session=sess)

    with caplog.at_level(logging.INFO, logger="SearchSuggest.Utility.debug"):
        result = client.suggest().add_index("idx").set_debug(True).add_suggester(FixedSuggester("s", {"x": 1})).execute()

    assert result == {"s": []}
    dumps = [r.getMessage() for r in caplog.records if r.name == "SearchSuggest.Utility.debug"]
    assert len(dumps) == 2
    assert dumps[0].startswith("Outbound request:\nPOST http://search.test/idx/_suggest")
    assert '{"s": {"x": 1}}' in dumps[0]
    assert "secret-token" not in dumps[0]
    assert dumps[1].startswith("Inbound response:\nHTTP 200 OK")


def test_no_dump_without_debug(make_session, make_response, caplog):
    url = f"{BASE}/idx/_suggest"
    sess = make_session({("POST", url): make_response(200, {})})
    with caplog.at_level(logging.INFO, logger="SearchSuggest.Utility.debug"):
        make_service(sess).add_index("idx").execute()
    assert not [r for r in caplog.records if r.name == "SearchSuggest.Utility.debug"]


def test_service_is_bound_to_client(make_session):
    client = SearchClient(base_url=BASE, session=make_session())
    service = client.suggest()
    assert isinstance(service, SuggestService)
    assert service.client is client
