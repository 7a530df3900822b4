"""Reusable base for HTTP clients talking to the search service."""

from typing import Optional

import httpx

from esfixtures.logging_config import get_logger

logger = get_logger(__name__)


class BaseHTTPClient:
    """Thin wrapper around an injected ``httpx.Client`` with logging.

    When no client is passed one is created, and only that one is closed by
    :meth:`close`. A caller-supplied client stays under the caller's control
    (timeouts, transports, test doubles).
    """

    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    # ── HTTP helpers ─────────────────────────────────────────────────

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _post(self, path: str, body: bytes, content_type: str) -> httpx.Response:
        """POST *body* and return the already-closed response.

        The body is read in full before the response is released, so
        ``status_code`` and ``text`` stay usable. Transport errors
        propagate unchanged.
        """
        url = self._url(path)
        logger.debug("POST", url=url, content_type=content_type, size=len(body))
        resp = self._client.post(url, content=body, headers={"Content-Type": content_type})
        try:
            resp.read()
        finally:
            resp.close()
        logger.debug("POST_done", url=url, status=resp.status_code)
        return resp

    # ── lifecycle ────────────────────────────────────────────────────

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
