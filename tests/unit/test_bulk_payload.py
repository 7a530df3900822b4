"""Unit tests for the NDJSON bulk body."""

from esfixtures.engines.bulk_payload import BULK_ACTION_HEADER, build_bulk_payload


def test_header_precedes_every_document():
    payload = build_bulk_payload([b'{"a":1}', b'{"a":2}'])
    assert payload == b'{"index":{}}\n{"a":1}\n{"index":{}}\n{"a":2}\n'


def test_payload_is_newline_terminated():
    payload = build_bulk_payload([b'{"x":true}'])
    assert payload.endswith(b"\n")
    assert payload.splitlines() == [BULK_ACTION_HEADER, b'{"x":true}']


def test_no_documents_empty_payload():
    assert build_bulk_payload([]) == b""


def test_order_preserved():
    docs = [f'{{"n":{i}}}'.encode() for i in range(10)]
    lines = build_bulk_payload(docs).splitlines()
    assert lines[1::2] == docs
    assert set(lines[0::2]) == {BULK_ACTION_HEADER}


def test_accepts_generator():
    payload = build_bulk_payload(d for d in [b"{}"])
    assert payload == b'{"index":{}}\n{}\n'
