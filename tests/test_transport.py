from __future__ import annotations

import pytest
from bleak.exc import BleakError

from pyLegoHub.ble import client as client_module
from pyLegoHub.ble.client import BleakTransport
from pyLegoHub.errors import TransportConnectError, TransportSendError


class FakeBleakClient:
    instances: list["FakeBleakClient"] = []

    def __init__(self, address: str, disconnected_callback=None) -> None:
        self.address = address
        self.disconnected_callback = disconnected_callback
        self.fail_connect = False
        self.fail_write = False
        self.writes: list[tuple[str, bytes]] = []
        self.notifications: dict = {}
        FakeBleakClient.instances.append(self)

    async def connect(self) -> None:
        if self.fail_connect:
            raise BleakError("device not found")

    async def disconnect(self) -> None:
        if self.disconnected_callback:
            self.disconnected_callback(self)

    async def write_gatt_char(self, char_uuid: str, data: bytes) -> None:
        if self.fail_write:
            raise BleakError("not connected")
        self.writes.append((char_uuid, data))

    async def start_notify(self, char_uuid: str, callback) -> None:
        self.notifications[char_uuid] = callback


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch):
    FakeBleakClient.instances.clear()
    monkeypatch.setattr(client_module, "BleakClient", FakeBleakClient)
    return FakeBleakClient


@pytest.mark.asyncio
async def test_connect_send_and_disconnect(fake_client) -> None:
    transport = BleakTransport("90:84:2B:00:00:01", name="HUB NO.4")
    disconnects: list[bool] = []
    transport.on("disconnect", lambda: disconnects.append(True))

    await transport.connect()
    assert transport.connected
    assert not transport.connecting
    assert transport.uuid == "90:84:2B:00:00:01"

    await transport.send(bytearray([0x05, 0x00, 0x01, 0x03, 0x05]), "char")
    client = fake_client.instances[0]
    assert client.writes == [("char", bytes([0x05, 0x00, 0x01, 0x03, 0x05]))]

    await transport.disconnect()
    assert not transport.connected
    assert disconnects == [True]


@pytest.mark.asyncio
async def test_connect_failure_raises_transport_error(fake_client) -> None:
    transport = BleakTransport("90:84:2B:00:00:01")
    transport.client.fail_connect = True

    with pytest.raises(TransportConnectError):
        await transport.connect()

    assert not transport.connected
    assert not transport.connecting


@pytest.mark.asyncio
async def test_write_failure_raises_transport_error(fake_client) -> None:
    transport = BleakTransport("90:84:2B:00:00:01")
    await transport.connect()
    transport.client.fail_write = True

    with pytest.raises(TransportSendError):
        await transport.send(b"\x00", "char")


@pytest.mark.asyncio
async def test_start_notify_is_delegated(fake_client) -> None:
    transport = BleakTransport("90:84:2B:00:00:01")
    handler = lambda sender, data: None

    await transport.start_notify("char", handler)

    assert transport.client.notifications == {"char": handler}
