"""
Request/response dumps for tracing suggest calls.
Only writes to the log; never changes what is sent or received.
"""
from typing import Mapping, Optional, Union
import logging

import requests

logger = logging.getLogger(__name__)

MASKED_HEADERS = ("authorization",)


def _format_headers(headers: Mapping[str, str]) -> str:
    lines = []
    for key, value in headers.items():
        if key.lower() in MASKED_HEADERS:
            value = "***"
        lines.append(f"{key}: {value}")
    return "\n".join(lines)


def _format_body(body: Optional[Union[str, bytes]]) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def dump_request(prepared: requests.PreparedRequest) -> str:
    out = f"{prepared.method} {prepared.url}\n{_format_headers(prepared.headers)}\n\n{_format_body(prepared.body)}"
    logger.info("Outbound request:\n%s", out)
    return out


def dump_response(response: requests.Response) -> str:
    out = f"HTTP {response.status_code} {response.reason or ''}".rstrip()
    out += f"\n{_format_headers(response.headers)}\n\n{_format_body(response.content)}"
    logger.info("Inbound response:\n%s", out)
    return out
