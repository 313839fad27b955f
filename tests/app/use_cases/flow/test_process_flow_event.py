"""Testes para ProcessFlowEventUseCase."""

from __future__ import annotations

import threading
from typing import Any

import pytest

from app.domain.flow_request import EncryptedEvent, PlainEvent
from app.use_cases.flow import ProcessFlowEventUseCase


class FakeDecryptor:
    """Decryptor fake: devolve o resultado configurado e registra chamadas."""

    def __init__(self, result: dict[str, Any] | None) -> None:
        self._result = result
        self.calls: list[str] = []
        self.thread_ids: list[int] = []

    def decrypt(self, envelope: str) -> dict[str, Any] | None:
        self.calls.append(envelope)
        self.thread_ids.append(threading.get_ident())
        return self._result


class FakeRelay:
    """Relay fake que guarda os payloads encaminhados."""

    def __init__(self, success: bool = True) -> None:
        self._success = success
        self.forwarded: list[dict[str, Any]] = []

    async def forward(self, payload: dict[str, Any]) -> bool:
        self.forwarded.append(payload)
        return self._success


@pytest.mark.asyncio
async def test_encrypted_event_forwards_decrypted_payload() -> None:
    decryptor = FakeDecryptor({"screen": "SUMMARY"})
    relay = FakeRelay()
    body = {"encrypted_flow_data": "a.b.c.d.e"}

    result = await ProcessFlowEventUseCase(decryptor, relay).execute(
        EncryptedEvent(envelope="a.b.c.d.e"), body
    )

    assert decryptor.calls == ["a.b.c.d.e"]
    assert relay.forwarded == [{"screen": "SUMMARY"}]
    assert result.decrypted is True
    assert result.fallback_used is False
    assert result.forwarded is True


@pytest.mark.asyncio
async def test_failed_decryption_forwards_original_body() -> None:
    relay = FakeRelay()
    body = {"encrypted_flow_data": "a.b.c.d.e", "flow_token": "tok"}

    result = await ProcessFlowEventUseCase(FakeDecryptor(None), relay).execute(
        EncryptedEvent(envelope="a.b.c.d.e"), body
    )

    assert relay.forwarded == [body]
    assert relay.forwarded[0] is body
    assert result.decrypted is False
    assert result.fallback_used is True


@pytest.mark.asyncio
async def test_empty_decrypted_object_is_still_forwarded() -> None:
    relay = FakeRelay()

    await ProcessFlowEventUseCase(FakeDecryptor({}), relay).execute(
        EncryptedEvent(envelope="a.b.c.d.e"), {"encrypted_flow_data": "a.b.c.d.e"}
    )

    assert relay.forwarded == [{}]


@pytest.mark.asyncio
async def test_plain_event_skips_decryption() -> None:
    decryptor = FakeDecryptor({"never": "used"})
    relay = FakeRelay()
    body = {"entry": []}

    result = await ProcessFlowEventUseCase(decryptor, relay).execute(PlainEvent(body=body), body)

    assert decryptor.calls == []
    assert relay.forwarded == [body]
    assert result.fallback_used is False


@pytest.mark.asyncio
async def test_relay_failure_is_reported_in_result() -> None:
    relay = FakeRelay(success=False)

    result = await ProcessFlowEventUseCase(FakeDecryptor(None), relay).execute(
        PlainEvent(body={}), {}
    )

    assert result.forwarded is False
    assert relay.forwarded == [{}]


@pytest.mark.asyncio
async def test_decryption_runs_outside_the_event_loop_thread() -> None:
    decryptor = FakeDecryptor({"ok": True})
    use_case = ProcessFlowEventUseCase(decryptor=decryptor, relay=FakeRelay())

    await use_case.execute(EncryptedEvent(envelope="a.b.c.d.e"), {})

    assert len(decryptor.thread_ids) == 1
    assert decryptor.thread_ids[0] != threading.get_ident()
