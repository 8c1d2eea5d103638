"""
Shared fixtures: canned Dropbox responses and a session double.
"""

import json
from typing import Any, List
from unittest.mock import MagicMock

import pytest
import requests


def make_response(status_code: int = 200, body: Any = None) -> requests.Response:
    """Build a real requests.Response with an already-read body."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        content = b""
    elif isinstance(body, (bytes, str)):
        content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        content = json.dumps(body).encode("utf-8")
    response._content = content
    response._content_consumed = True
    response.encoding = "utf-8"
    response.url = "https://example.invalid/"
    return response


@pytest.fixture
def session_with():
    """Return a factory producing a session that answers with ``responses`` in order."""

    def factory(*responses: requests.Response) -> MagicMock:
        session = MagicMock(spec=requests.Session)
        session.send.side_effect = list(responses)
        return session

    return factory


def sent_urls(session: MagicMock) -> List[str]:
    return [c.args[0].url for c in session.send.call_args_list]


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4 fake")
    return path
