"""Load and remove test fixtures in an Elasticsearch-style service.

Usage::

    from esfixtures import FixtureLoader

    loader = FixtureLoader("http://localhost:9200", "fixtures/orders.json")
    loader.load()   # bulk insert, per-document fallback on refusal
    loader.clean()  # delete by match_all query
"""

from esfixtures.exceptions import (
    FileReadError,
    FixtureError,
    InvalidFixtureData,
    RemoteRejection,
    TransportError,
)
from esfixtures.services.fixture_loader import FixtureLoader

__all__ = [
    "FixtureLoader",
    "FixtureError",
    "FileReadError",
    "InvalidFixtureData",
    "RemoteRejection",
    "TransportError",
]
