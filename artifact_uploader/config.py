"""Runtime settings, overridable through environment variables."""

from __future__ import annotations

import os
from typing import Optional


def _as_float(value: Optional[str], default: Optional[float]) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


DROPBOX_API = os.getenv("ARTIFACT_UPLOADER_DROPBOX_API", "https://api.dropboxapi.com/2").rstrip("/")
DROPBOX_CONTENT_API = os.getenv("ARTIFACT_UPLOADER_DROPBOX_CONTENT_API", "https://content.dropboxapi.com/2").rstrip("/")

# None leaves requests' transport default in place
REQUEST_TIMEOUT = _as_float(os.getenv("ARTIFACT_UPLOADER_TIMEOUT"), None)

LOG_LEVEL = os.getenv("ARTIFACT_UPLOADER_LOG_LEVEL", "WARNING")
