"""Upload a file and resolve a public direct-download URL for it."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import requests

from artifact_uploader import config
from artifact_uploader.dropbox_http import build_api_request, build_content_request, process_response
from artifact_uploader.errors import MissingURLError
from artifact_uploader.models import PUBLIC, CreatedSharedLink, ListSharedLinksResult

logger = logging.getLogger(__name__)


def derive_upload_path(file_path: str, upload_path: Optional[str] = None) -> str:
    if upload_path is not None:
        return upload_path
    return "/" + Path(file_path).name


def direct_download_url(url: str) -> str:
    """Turn a Dropbox preview link into a direct download link."""
    return url.replace("?dl=0", "?dl=1", 1)


def _send(session: requests.Session, request: requests.PreparedRequest, parse=None):
    with session.send(request, timeout=config.REQUEST_TIMEOUT) as response:
        _, value = process_response(response, parse)
    return value


def upload_file(session: requests.Session, token: str, data: bytes, upload_path: str) -> None:
    request = build_content_request(
        f"{config.DROPBOX_CONTENT_API}/files/upload",
        token,
        data,
        {
            "path": upload_path,
            "mode": "overwrite",
            "autorename": True,
            "mute": False,
            "strict_conflict": False,
        },
    )
    _send(session, request)


def find_public_link(session: requests.Session, token: str, upload_path: str) -> Optional[str]:
    request = build_api_request(
        f"{config.DROPBOX_API}/sharing/list_shared_links",
        token,
        {"path": upload_path},
    )
    result = _send(session, request, ListSharedLinksResult.from_json)
    link = result.first_public()
    if link is None:
        logger.info("No public link for %s among %d existing", upload_path, len(result.links))
        return None
    logger.info("Reusing public link %s", link.id or link.url)
    return link.url


def create_public_link(session: requests.Session, token: str, upload_path: str) -> str:
    request = build_api_request(
        f"{config.DROPBOX_API}/sharing/create_shared_link_with_settings",
        token,
        {
            "path": upload_path,
            "settings": {"requested_visibility": PUBLIC, "access": "viewer"},
        },
    )
    created = _send(session, request, CreatedSharedLink.from_json)
    return created.url


def publish(
    file_path: str,
    token: str,
    upload_path: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Upload ``file_path`` and return its direct-download URL.

    Stops at the first failure. Dropbox may already hold the uploaded bytes
    when a later step fails; nothing is rolled back.
    """

    upload_path = derive_upload_path(file_path, upload_path)
    data = Path(file_path).read_bytes()

    own_session = session is None
    if own_session:
        session = requests.Session()
    try:
        logger.info("Uploading %s (%d bytes) to %s", file_path, len(data), upload_path)
        upload_file(session, token, data, upload_path)

        url = find_public_link(session, token, upload_path)
        if not url:
            logger.info("Creating public link for %s", upload_path)
            url = create_public_link(session, token, upload_path)
    finally:
        if own_session:
            session.close()

    if not url:
        raise MissingURLError("Dropbox API did not return file URL!")
    return direct_download_url(url)
