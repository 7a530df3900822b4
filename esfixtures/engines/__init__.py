"""Pure transformations: parsing, naming, payload building."""

from esfixtures.engines.bulk_payload import build_bulk_payload
from esfixtures.engines.content_parser import encode_document, parse_documents
from esfixtures.engines.index_names import index_name_for, inner_type_for

__all__ = [
    "build_bulk_payload",
    "encode_document",
    "parse_documents",
    "index_name_for",
    "inner_type_for",
]
