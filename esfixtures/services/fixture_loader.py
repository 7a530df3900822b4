"""Loads fixture files into the search service and removes them again.

Each fixture file maps to one index, named after the file without its
extension (``orders.json`` → ``orders``).

Loading a file is a bulk request first. When the service does not accept
the bulk request (any status other than 200/201) every document is sent on
its own instead, which keeps older servers that reject type-less ``_bulk``
calls usable. Files and documents are processed strictly one after another.

Usage::

    from esfixtures.services.fixture_loader import FixtureLoader

    with FixtureLoader("http://localhost:9200", "fixtures/orders.json") as loader:
        loader.load()
        ...
        loader.clean()
"""

from typing import List, Optional, Tuple

import httpx

from esfixtures.clients.search_client import SearchServiceClient, is_success
from esfixtures.domain.fixture_file import FixtureFile, PathLike, read_fixture_files
from esfixtures.engines.bulk_payload import build_bulk_payload
from esfixtures.engines.content_parser import parse_documents
from esfixtures.engines.index_names import inner_type_for
from esfixtures.exceptions import InvalidFixtureData, RemoteRejection
from esfixtures.logging_config import get_logger

logger = get_logger(__name__)


class FixtureLoader:
    """Owns a fixed set of fixture files and the client used to ship them.

    All files are read when the loader is built; ``FileReadError`` is raised
    for the first unreadable one and no loader is returned.

    Args:
        service_url: Base URL of the search service, e.g. ``http://localhost:9200``.
        *file_names: Fixture file paths, processed in the given order.
        http_client: Optional ``httpx.Client``. Timeouts and transports are
            configured on it; the loader never closes a client it was given.
    """

    def __init__(
        self,
        service_url: str,
        *file_names: PathLike,
        http_client: Optional[httpx.Client] = None,
    ):
        self._fixtures: Tuple[FixtureFile, ...] = read_fixture_files(*file_names)
        self._service_url = service_url.rstrip("/")
        self.search = SearchServiceClient(self._service_url, http_client=http_client)

    @property
    def service_url(self) -> str:
        return self._service_url

    @property
    def fixtures(self) -> Tuple[FixtureFile, ...]:
        return self._fixtures

    # ── Load ─────────────────────────────────────────────────────────

    def load(self) -> None:
        """Store every fixture file in its index.

        Raises:
            InvalidFixtureData: A file is not an object or array of objects.
                Files after it are not processed.
            RemoteRejection: The bulk request was refused and at least one
                single-document request was refused too. The last refusal
                for that file is raised once all its documents were tried;
                later files are not processed.
            httpx.TransportError: Any connection-level failure, raised as
                soon as it happens.
        """
        for fixture in self._fixtures:
            documents = self._parse(fixture)
            index = fixture.index_name

            logger.info(
                "bulk_load_started",
                file=fixture.file_name,
                index=index,
                documents=len(documents),
            )
            resp = self.search.bulk(index, build_bulk_payload(documents))
            if is_success(resp):
                logger.info("fixture_loaded", file=fixture.file_name, index=index, mode="bulk")
                continue

            logger.warning(
                "bulk_load_rejected",
                file=fixture.file_name,
                index=index,
                status=resp.status_code,
            )
            rejection = self._load_singly(fixture, documents)
            if rejection is not None:
                raise rejection
            logger.info("fixture_loaded", file=fixture.file_name, index=index, mode="single")

    def _parse(self, fixture: FixtureFile) -> List[bytes]:
        try:
            return parse_documents(fixture.content)
        except InvalidFixtureData as exc:
            raise InvalidFixtureData(
                fixture.content, exc.cause, file_name=fixture.file_name
            ) from exc

    def _load_singly(
        self, fixture: FixtureFile, documents: List[bytes]
    ) -> Optional[RemoteRejection]:
        """Send *documents* one request at a time.

        Indexes named ``<type>_index`` get the document under ``<type>``;
        an index named exactly ``_index`` has no type segment. Refusals do
        not stop the loop; the most recent one is returned.
        """
        index = fixture.index_name
        rejection: Optional[RemoteRejection] = None

        for document in documents:
            inner_type = inner_type_for(index)
            resp = self.search.index_document(index, document, doc_type=inner_type)
            if not is_success(resp):
                rejection = RemoteRejection(fixture.file_name, resp.status_code, resp.text)
                logger.warning(
                    "single_load_rejected",
                    file=fixture.file_name,
                    index=index,
                    doc_type=inner_type,
                    status=resp.status_code,
                )

        return rejection

    # ── Clean ────────────────────────────────────────────────────────

    def clean(self) -> None:
        """Delete every document from every fixture index.

        The response status is not checked: an index that does not exist
        yet is not an error. Transport failures still raise immediately.
        """
        for fixture in self._fixtures:
            index = fixture.index_name
            resp = self.search.delete_all(index)
            if resp.is_success:
                logger.info("fixture_cleaned", file=fixture.file_name, index=index)
            else:
                logger.warning(
                    "clean_rejected_ignored",
                    file=fixture.file_name,
                    index=index,
                    status=resp.status_code,
                )

    # ── lifecycle ────────────────────────────────────────────────────

    def close(self) -> None:
        self.search.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
