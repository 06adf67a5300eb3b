import asyncio

import pytest

from status_api.errors import ProtocolError
from status_api.models import PlayerSample, PlayerSummary, ServerVersionInfo, StatusRecord


def make_record(description='A Minecraft Server', favicon=None, sample=None):
    return StatusRecord(
        version=ServerVersionInfo(name='1.20.4', protocol=765),
        players=PlayerSummary(max=20, online=2, sample=sample),
        description=description,
        favicon=favicon,
    )


class FakeClient:
    """query の呼び出しを記録し、決められた結果を返す"""
    def __init__(self, record=None, error=None, delay=0.0):
        self.record = record
        self.error = error
        self.delay = delay
        self.calls = []
        self.cancelled = False
        self.closed = False

    async def query(self, host, port):
        self.calls.append((host, port))
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.error is not None:
                raise self.error
            return self.record
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        finally:
            self.closed = True


@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def online_client(record):
    return FakeClient(record=record)


@pytest.fixture
def refusing_client():
    return FakeClient(error=ProtocolError("connection refused"))


@pytest.fixture
def hanging_client():
    return FakeClient(delay=60)
