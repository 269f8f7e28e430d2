# pyLegoHub/devices/device.py

import logging
import struct
from typing import Any, Callable, Dict, Optional

from pyLegoHub.consts import BLECharacteristic, DeviceType, HubType, device_type_name
from pyLegoHub.errors import DeviceNotConnectedError
from pyLegoHub.events import EventEmitter

logger = logging.getLogger(__name__)


class Device(EventEmitter):
    """
    A peripheral attached to one port of a hub.

    The hub creates a Device when the transport reports an attach on a port and drops it
    on detach. Subclasses decode their own telemetry: they set a mode map (event name ->
    protocol mode) and override _decode() for the modes they understand.
    """
    def __init__(self, hub, port_id: int, mode_map: Optional[Dict[str, int]] = None,
                 device_type: int = DeviceType.UNKNOWN):
        """
        Stores the device identity. Subscribes to a mode right away when the hub already
        has listeners for one of this device's events.
        """
        super().__init__()
        self.auto_subscribe = getattr(hub, "auto_subscribe", True)
        self.values: Dict[str, Any] = {}
        self._hub = hub
        self._port_id = port_id
        self._mode_map = dict(mode_map or {})
        self._type = device_type
        self._mode: Optional[int] = None
        self._connected = True

        for event in self._mode_map:
            if self._hub.listener_count(event) > 0:
                self._auto_subscribe_event(event)

    @property
    def hub(self):
        return self._hub

    @property
    def port_id(self) -> int:
        return self._port_id

    @property
    def port_name(self) -> Optional[str]:
        return self._hub.get_port_name_for_port_id(self._port_id)

    @property
    def type(self) -> int:
        return self._type

    @property
    def type_name(self) -> str:
        return device_type_name(self._type)

    @property
    def mode(self) -> Optional[int]:
        return self._mode

    @property
    def mode_map(self) -> Dict[str, int]:
        return dict(self._mode_map)

    @property
    def events(self):
        return list(self._mode_map)

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def is_wedo2_smart_hub(self) -> bool:
        return self._hub.type == HubType.WEDO2_SMART_HUB

    def __repr__(self):
        return f"{self.__class__.__name__} on port {self.port_name} ({self._port_id})"

    async def write_direct(self, mode: int, data, callback: Optional[Callable[[], None]] = None):
        """
        Writes a value directly to a mode of the port.
        WeDo 2.0 hubs have no modes on output, the data goes out as a plain output command.
        """
        if self.is_wedo2_smart_hub:
            message = bytes([self._port_id, 0x01, len(data)]) + bytes(data)
            await self.send(message, BLECharacteristic.WEDO2_MOTOR_VALUE_WRITE, callback)
        else:
            message = bytes([0x81, self._port_id, 0x11, 0x51, mode]) + bytes(data)
            await self.send(message, BLECharacteristic.LPF2_ALL, callback)

    async def send(self, data: bytes, characteristic: str = BLECharacteristic.LPF2_ALL,
                   callback: Optional[Callable[[], None]] = None):
        self._ensure_connected()
        await self._hub.send(data, characteristic, callback)

    def subscribe(self, mode: int):
        """
        Makes mode the active telemetry stream of the port.
        """
        self._ensure_connected()
        if mode != self._mode:
            self._mode = mode
            self._hub.subscribe(self._port_id, self._type, mode)

    async def select_mode(self, mode: int):
        """
        Same as subscribe(), but returns once the mode setup is written.
        Commands sent afterwards reach the hub after it.
        """
        self._ensure_connected()
        if mode != self._mode:
            self._mode = mode
            await self._hub.write_subscribe(self._port_id, self._type, mode)

    async def request_update(self):
        """
        Asks the hub for the current value of the active mode.
        """
        await self.send(bytes([0x21, self._port_id, 0x00]))

    def receive(self, message: bytes):
        """
        Decodes an inbound value message for this port.
        Truncated messages are dropped, they never reach the caller as an error.
        """
        try:
            self._decode(message)
        except (IndexError, struct.error):
            logger.debug("[Receive] Dropped short message on port %s (mode %s): %s",
                         self._port_id, self._mode, bytes(message).hex())

    def _decode(self, message: bytes):
        self.notify("receive", message)

    def notify(self, event: str, payload: Any):
        """
        Records the payload and emits the event on the device and on the hub.
        """
        self.values[event] = payload
        self.emit(event, payload)
        self._hub.emit(event, self, payload)

    def emit_global(self, event: str, payload: Any):
        """
        Emits a hub wide reading (voltage, current, remote buttons) on the device and on the hub.
        The hub keeps the latest value.
        """
        self._hub.record_reading(event, payload)
        self.emit(event, payload)
        self._hub.emit(event, self, payload)

    def _detach(self):
        self._connected = False
        self.emit("detach")

    def _on_new_listener(self, event: str):
        if event in self._mode_map:
            self._auto_subscribe_event(event)

    def _auto_subscribe_event(self, event: str):
        if self.auto_subscribe and self._connected:
            self.subscribe(self._mode_map[event])

    def _ensure_connected(self):
        if not self._connected:
            raise DeviceNotConnectedError("Device is not connected")

    @staticmethod
    def _read(fmt: str, message: bytes, offset: int):
        return struct.unpack_from(fmt, message, offset)[0]
