from __future__ import annotations

import pytest

from pyLegoHub.consts import HubType
from pyLegoHub.events import EventEmitter
from pyLegoHub.hubs.basehub import BaseHub


class FakeTransport(EventEmitter):
    def __init__(self, name: str = "Test Hub") -> None:
        super().__init__()
        self.name = name
        self.uuid = "90:84:2B:00:00:01"
        self.connecting = False
        self.connected = False
        self.connect_calls = 0
        self.disconnect_calls = 0
        self.sent: list[tuple[bytes, str]] = []
        self.notify_callbacks: dict = {}

    async def connect(self) -> None:
        self.connect_calls += 1
        self.connected = True

    async def disconnect(self) -> None:
        self.disconnect_calls += 1
        self.connected = False

    async def send(self, data: bytes, characteristic: str) -> None:
        self.sent.append((bytes(data), characteristic))

    async def start_notify(self, characteristic: str, callback) -> None:
        self.notify_callbacks[characteristic] = callback


TEST_PORT_MAP = {
    "A": 0,
    "B": 1,
    "HUB_LED": 50,
    "VOLTAGE_SENSOR": 60,
}


def value_message(port_id: int, payload: bytes) -> bytes:
    """Builds an LPF2 port value message: [length, hub id, 0x45, port, ...payload]."""
    return bytes([4 + len(payload), 0x00, 0x45, port_id]) + payload


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def hub(transport: FakeTransport) -> BaseHub:
    return BaseHub(transport, TEST_PORT_MAP, HubType.UNKNOWN)


@pytest.fixture
def make_hub(transport: FakeTransport):
    def _make(hub_type: HubType) -> BaseHub:
        return BaseHub(transport, TEST_PORT_MAP, hub_type)
    return _make
