"""HTTP clients for the search service."""

from esfixtures.clients.base_client import BaseHTTPClient
from esfixtures.clients.search_client import SearchServiceClient, is_success

__all__ = ["BaseHTTPClient", "SearchServiceClient", "is_success"]
