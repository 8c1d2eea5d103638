"""Request builders and response handling for the Dropbox HTTP API.

Dropbox v2 has two request styles. Content endpoints take the payload as the
raw body and their arguments as JSON in the ``Dropbox-API-Arg`` header; RPC
endpoints take their arguments as a JSON body.
"""
from __future__ import annotations

import json
import logging
from typing import Callable, Mapping, Optional, Tuple, TypeVar

import requests

from artifact_uploader.errors import DropboxAPIError, DropboxDecodeError, RequestBuildError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_params(params: Optional[Mapping[str, object]]) -> str:
    if params is None:
        raise RequestBuildError("Request parameters are required (use {} for none)")
    try:
        return json.dumps(params)
    except (TypeError, ValueError) as exc:
        raise RequestBuildError(f"Cannot encode request parameters: {exc}") from exc


def build_content_request(
    url: str,
    token: str,
    data: bytes,
    params: Mapping[str, object],
    content_type: str = "application/octet-stream",
    method: str = "POST",
) -> requests.PreparedRequest:
    """Build a content-style request carrying ``data`` as the body."""

    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": content_type,
        # json.dumps escapes non-ASCII, which HTTP headers require
        "Dropbox-API-Arg": _encode_params(params),
    }
    return requests.Request(method, url, headers=headers, data=data).prepare()


def build_api_request(
    url: str,
    token: str,
    params: Mapping[str, object],
    method: str = "POST",
) -> requests.PreparedRequest:
    """Build an RPC-style request with ``params`` as the JSON body."""

    headers = {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}
    body = _encode_params(params).encode("utf-8")
    return requests.Request(method, url, headers=headers, data=body).prepare()


def process_response(
    response: requests.Response,
    parse: Optional[Callable[[object], T]] = None,
) -> Tuple[str, Optional[T]]:
    """Return the body text and, when ``parse`` is given, the decoded value.

    A non-200 status always raises :class:`DropboxAPIError` with the status
    code and the raw body, whether or not the body is valid JSON.
    """

    text = response.text
    logger.debug("%s -> %s", response.url, response.status_code)
    if response.status_code != requests.codes.ok:
        raise DropboxAPIError(response.status_code, text)

    if parse is None:
        return text, None

    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise DropboxDecodeError(f"Cannot decode Dropbox response: {exc}") from exc
    return text, parse(payload)
