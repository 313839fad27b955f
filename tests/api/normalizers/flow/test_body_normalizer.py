"""Testes para o normalizer do corpo do endpoint de Flow."""

from __future__ import annotations

import pytest
from starlette.datastructures import Headers

from api.normalizers.flow import build_inbound_request, normalize_body, parse_body, read_body
from app.domain.flow_request import RequestMethod


async def _chunks(*parts: bytes):
    for part in parts:
        yield part


@pytest.mark.asyncio
async def test_read_body_accumulates_all_chunks() -> None:
    raw = await read_body(_chunks(b'{"chal', b"", b'lenge": ', b'"x"}'))
    assert raw == b'{"challenge": "x"}'


@pytest.mark.asyncio
async def test_read_body_empty_stream() -> None:
    assert await read_body(_chunks()) == b""


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b"[1, 2]",
        b'"text"',
        b"42",
        b"null",
        b"\xff\xfe",
        b'{"a": ',
        b'{"challenge": NaN}',
        b'{"a": Infinity}',
        b'{"a": -Infinity}',
    ],
)
def test_parse_body_falls_back_to_empty_dict(raw: bytes) -> None:
    assert parse_body(raw) == {}


def test_parse_body_json_object() -> None:
    assert parse_body('{"a": 1, "b": "ç"}'.encode()) == {"a": 1, "b": "ç"}


def test_normalize_body_prefers_non_empty_pre_parsed() -> None:
    assert normalize_body(b'{"from": "raw"}', {"from": "transport"}) == {"from": "transport"}


def test_normalize_body_ignores_empty_pre_parsed() -> None:
    assert normalize_body(b'{"from": "raw"}', {}) == {"from": "raw"}


def test_build_inbound_request() -> None:
    headers = Headers({"X-Meta-Health-Check": "1"})

    inbound = build_inbound_request("post", headers, b'{"a": 1}')

    assert inbound.method is RequestMethod.POST
    assert inbound.parsed_body == {"a": 1}
    assert inbound.raw_body == b'{"a": 1}'
    assert inbound.headers.get("x-meta-health-check") == "1"
