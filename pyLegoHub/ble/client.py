# pyLegoHub/ble/client.py

import logging
from typing import Callable

from bleak import BleakClient
from bleak.exc import BleakError

from pyLegoHub.errors import TransportConnectError, TransportSendError
from pyLegoHub.events import EventEmitter

logger = logging.getLogger(__name__)


class BleakTransport(EventEmitter):
    """
    Manages the BLE connection to a LEGO hub on top of bleak.
    Emits "disconnect" when the link drops, whoever closed it.
    """
    def __init__(self, address: str, name: str = ""):
        super().__init__()
        self.address = address
        self.name = name
        self.client = BleakClient(address, disconnected_callback=self._on_disconnected)
        self.connecting = False
        self.connected = False

    @property
    def uuid(self) -> str:
        return self.address

    async def connect(self):
        self.connecting = True
        try:
            await self.client.connect()
        except (BleakError, OSError) as exc:
            raise TransportConnectError(f"Failed to connect to LEGO hub at {self.address}: {exc}") from exc
        finally:
            self.connecting = False
        self.connected = True
        logger.info("Connected to LEGO hub at %s", self.address)

    async def disconnect(self):
        if self.connected:
            await self.client.disconnect()
            logger.info("Disconnected from LEGO hub at %s", self.address)

    async def send(self, data: bytes, characteristic: str):
        """
        Delegates the write to BleakClient.write_gatt_char.
        """
        logger.debug("[Write] %s: %s", characteristic, bytes(data).hex())
        try:
            await self.client.write_gatt_char(characteristic, bytes(data))
        except (BleakError, OSError) as exc:
            raise TransportSendError(f"Write to {characteristic} failed: {exc}") from exc

    async def start_notify(self, characteristic: str, callback: Callable):
        """
        Delegates the start_notify call to the underlying BleakClient instance.
        """
        return await self.client.start_notify(characteristic, callback)

    async def stop_notify(self, characteristic: str):
        return await self.client.stop_notify(characteristic)

    def _on_disconnected(self, _client: BleakClient):
        self.connected = False
        logger.info("LEGO hub at %s disconnected", self.address)
        self.emit("disconnect")
