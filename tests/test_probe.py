import asyncio
import time

import pytest

from status_api.errors import ProtocolError, StatusError
from status_api.models import ProbeTarget
from status_api.probe import probe, probe_address
from conftest import FakeClient


@pytest.mark.asyncio
async def test_success(online_client, record):
    outcome = await probe(ProbeTarget('example.com', 25565), 1.0, online_client)
    assert outcome.ok
    assert outcome.record == record
    assert outcome.error is None
    assert online_client.calls == [('example.com', 25565)]


@pytest.mark.asyncio
async def test_protocol_failure(refusing_client):
    outcome = await probe(ProbeTarget('example.com'), 1.0, refusing_client)
    assert outcome.error == StatusError.PROTOCOL_ERROR
    assert outcome.record is None


@pytest.mark.asyncio
async def test_unexpected_client_error_is_protocol_failure():
    client = FakeClient(error=RuntimeError("boom"))
    outcome = await probe(ProbeTarget('example.com'), 1.0, client)
    assert outcome.error == StatusError.PROTOCOL_ERROR


@pytest.mark.asyncio
async def test_timeout_tears_down_exchange(hanging_client):
    started = time.monotonic()
    outcome = await probe(ProbeTarget('example.com'), 0.05, hanging_client)
    elapsed = time.monotonic() - started

    assert outcome.error == StatusError.TIMEOUT
    assert elapsed < 1.0
    assert hanging_client.cancelled
    assert hanging_client.closed


@pytest.mark.asyncio
async def test_slow_failure_after_deadline_is_timeout():
    client = FakeClient(error=ProtocolError("late"), delay=0.5)
    outcome = await probe(ProbeTarget('example.com'), 0.05, client)
    assert outcome.error == StatusError.TIMEOUT


@pytest.mark.asyncio
async def test_fast_answer_within_deadline(record):
    client = FakeClient(record=record, delay=0.01)
    outcome = await probe(ProbeTarget('example.com'), 1.0, client)
    assert outcome.ok


@pytest.mark.asyncio
async def test_single_attempt(refusing_client):
    await probe(ProbeTarget('example.com'), 1.0, refusing_client)
    assert len(refusing_client.calls) == 1


@pytest.mark.asyncio
async def test_no_tasks_left_behind(hanging_client):
    before = asyncio.all_tasks()
    await probe(ProbeTarget('example.com'), 0.05, hanging_client)
    assert asyncio.all_tasks() == before


@pytest.mark.asyncio
async def test_cancelled_request_tears_down_exchange(hanging_client):
    task = asyncio.ensure_future(probe(ProbeTarget('example.com'), 30, hanging_client))
    await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert hanging_client.cancelled


@pytest.mark.asyncio
@pytest.mark.parametrize('address', ['', ':25565'])
async def test_probe_address_invalid_input(address, online_client):
    outcome = await probe_address(address, 1.0, online_client)
    assert outcome.error == StatusError.INVALID_INPUT
    assert online_client.calls == []


@pytest.mark.asyncio
async def test_probe_address_parses_port(online_client):
    await probe_address('example.com:25570', 1.0, online_client)
    assert online_client.calls == [('example.com', 25570)]
