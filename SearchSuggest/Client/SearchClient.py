"""
Lightweight search service client to centralize HTTP interactions and error handling.
"""
from typing import Any, Optional
import logging

import requests

from SearchSuggest.Exception.SearchError import ResponseStatusError, TransportError
from SearchSuggest.Utility.config import get_api_root, get_api_token, get_timeout

logger = logging.getLogger(__name__)


class SearchClient:
    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        token = token or get_api_token()
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        self.session.headers.update({"Accept": "application/json"})
        self.base = (base_url or get_api_root()).rstrip("/")
        self.timeout = timeout or get_timeout()

    def new_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest:
        request = requests.Request(method, f"{self.base}{path}", json=body)
        return self.session.prepare_request(request)

    def perform(self, prepared: requests.PreparedRequest) -> requests.Response:
        try:
            return self.session.send(prepared, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Request to %s failed: %s", prepared.url, e)
            raise TransportError(f"Search API request failed: {e}") from e

    def check_response(self, response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return
        message = f"Search API error: {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            if isinstance(error, dict):
                error = error.get("reason") or error.get("type") or message
            message = str(error)
        raise ResponseStatusError(message, response.status_code)

    def suggest(self):
        from SearchSuggest.Business.SuggestService import SuggestService
        return SuggestService(self)
