"""Client for the Elasticsearch-style document endpoints used by fixtures.

Only three endpoints are needed:

* ``POST /{index}/_bulk?refresh=true`` (NDJSON body)
* ``POST /{index}[/{type}]?refresh=true`` (one JSON document)
* ``POST /{index}/_delete_by_query?conflicts=proceed`` (match-all query)

Responses are returned as-is; deciding what a status means is up to the
caller.
"""

from typing import Optional

import httpx

from esfixtures.clients.base_client import BaseHTTPClient

NDJSON = "application/x-ndjson"
JSON = "application/json"

MATCH_ALL_QUERY = b'{"query":{"match_all":{}}}'

SUCCESS_STATUSES = frozenset({httpx.codes.OK, httpx.codes.CREATED})


def is_success(resp: httpx.Response) -> bool:
    """Only 200 and 201 count as accepted writes."""
    return resp.status_code in SUCCESS_STATUSES


class SearchServiceClient(BaseHTTPClient):
    """Search service client bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(base_url=base_url, http_client=http_client, timeout=timeout)

    # ── Writes ───────────────────────────────────────────────────────

    def bulk(self, index: str, payload: bytes) -> httpx.Response:
        return self._post(f"{index}/_bulk?refresh=true", payload, NDJSON)

    def index_document(
        self, index: str, document: bytes, doc_type: str = ""
    ) -> httpx.Response:
        """Store a single document, under ``doc_type`` when one is given."""
        path = f"{index}/{doc_type}?refresh=true" if doc_type else f"{index}?refresh=true"
        return self._post(path, document, JSON)

    # ── Deletes ──────────────────────────────────────────────────────

    def delete_all(self, index: str) -> httpx.Response:
        return self._post(
            f"{index}/_delete_by_query?conflicts=proceed", MATCH_ALL_QUERY, JSON
        )
