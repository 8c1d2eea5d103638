from __future__ import annotations


class UploaderError(Exception):
    """Base class for every failure the uploader reports."""


class RequestBuildError(UploaderError):
    pass


class DropboxAPIError(UploaderError):
    """Dropbox answered with a status other than 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"{status_code}\n{body}")
        self.status_code = status_code
        self.body = body


class DropboxDecodeError(UploaderError):
    pass


class MissingFieldError(UploaderError):
    def __init__(self, field: str, payload: object = None) -> None:
        super().__init__(f"Dropbox response is missing field {field!r}: {payload!r}")
        self.field = field
        self.payload = payload


class MissingURLError(UploaderError):
    pass
