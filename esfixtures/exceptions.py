"""Error taxonomy for fixture loading.

Transport failures are not wrapped: ``httpx.TransportError`` (connection
refused, DNS failure, timeouts, ...) reaches the caller unchanged and is
re-exported here as ``TransportError`` for convenience.
"""

from typing import Optional

from httpx import TransportError

__all__ = [
    "FixtureError",
    "FileReadError",
    "InvalidFixtureData",
    "RemoteRejection",
    "TransportError",
]


class FixtureError(Exception):
    """Base class for every error raised by esfixtures itself."""


class FileReadError(FixtureError):
    """A fixture file could not be read while building a loader."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f'could not read file "{path}": {cause}')


class InvalidFixtureData(FixtureError, ValueError):
    """Fixture content is neither a JSON object nor an array of JSON objects."""

    def __init__(
        self,
        raw: bytes,
        cause: Optional[Exception] = None,
        file_name: Optional[str] = None,
    ):
        self.raw = raw
        self.cause = cause
        self.file_name = file_name
        if file_name is not None:
            message = f"invalid data provided for fixture: {file_name}, err: {cause}"
        else:
            message = f"invalid json provided: {_preview(raw)}, error: {cause}"
        super().__init__(message)


class RemoteRejection(FixtureError):
    """The search service answered with a status other than 200/201."""

    def __init__(self, file_name: str, status_code: int, body: str):
        self.file_name = file_name
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"can't load fixture for file: {file_name}, "
            f"status: {status_code}, err: {body}"
        )


def _preview(raw: bytes, limit: int = 200) -> str:
    text = raw.decode("utf-8", errors="replace")
    return text if len(text) <= limit else text[:limit] + "..."
