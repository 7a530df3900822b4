"""Newline-delimited body for the ``_bulk`` endpoint."""

from typing import Iterable

# Index into the index named in the URL, with a generated id.
BULK_ACTION_HEADER = b'{"index":{}}'


def build_bulk_payload(documents: Iterable[bytes]) -> bytes:
    """Interleave an action header line with every document.

    Each header and each document is newline-terminated, so the payload
    ends with ``\\n`` as the bulk API requires. Document order is kept.
    """
    lines = []
    for document in documents:
        lines.append(BULK_ACTION_HEADER)
        lines.append(b"\n")
        lines.append(document)
        lines.append(b"\n")
    return b"".join(lines)
