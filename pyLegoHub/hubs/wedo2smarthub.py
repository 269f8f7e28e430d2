# pyLegoHub/hubs/wedo2smarthub.py

import logging
from typing import Callable, Optional

from pyLegoHub.consts import BLECharacteristic, ButtonState, HubType, PORT_MAPS
from pyLegoHub.hubs.basehub import BaseHub

logger = logging.getLogger(__name__)


class WeDo2SmartHub(BaseHub):
    """
    The WeDo 2.0 Smart Hub (45301).
    It listens for port notifications to detect attached devices and for
    sensor notifications to feed their readings to them.
    """
    def __init__(self, transport, auto_subscribe: bool = True):
        super().__init__(transport, PORT_MAPS[HubType.WEDO2_SMART_HUB], HubType.WEDO2_SMART_HUB, auto_subscribe)

    async def connect(self):
        """
        Connects and subscribes to port, sensor, button and battery notifications.
        """
        await super().connect()
        await self._transport.start_notify(BLECharacteristic.WEDO2_PORT_TYPE, self.port_notification_handler)
        await self._transport.start_notify(BLECharacteristic.WEDO2_SENSOR_VALUE, self.sensor_notification_handler)
        await self._transport.start_notify(BLECharacteristic.WEDO2_BUTTON, self.button_notification_handler)
        await self._transport.start_notify(BLECharacteristic.WEDO2_BATTERY, self.battery_notification_handler)
        await self._write_deferred_subscriptions()
        logger.info("Connected to %s (WeDo 2.0 Smart Hub)", self.name)

    async def send(self, data: bytes, characteristic: str = BLECharacteristic.WEDO2_MOTOR_VALUE_WRITE,
                   callback: Optional[Callable[[], None]] = None):
        await self._transport.send(bytes(data), characteristic)
        if callback:
            callback()

    async def write_subscribe(self, port_id: int, device_type: int, mode: int):
        """
        Sends the 11-byte input format command that selects the mode of a port:
        [0x01, 0x02, port, device_type, mode, 0x01, 0x00, 0x00, 0x00, 0x00, 0x01]
        """
        command = bytes([0x01, 0x02, port_id, device_type, mode, 0x01, 0x00, 0x00, 0x00, 0x00, 0x01])
        await self.send(command, BLECharacteristic.WEDO2_PORT_TYPE_WRITE)

    def port_notification_handler(self, sender, data: bytearray):
        """
        Callback for port notifications: [port, connected, _, device_type].
        """
        if len(data) < 2:
            logger.warning("[Port Notification] Incomplete data: %s", list(data))
            return
        port_id = data[0]
        is_connected = data[1]
        logger.debug("[Port Notification] Port: %s, Connected: %s, Data: %s", port_id, is_connected, list(data))

        if not is_connected:
            self._handle_detach(port_id)
        elif len(data) >= 4:
            self._handle_attach(port_id, data[3])
        else:
            logger.warning("[Port Notification] Incomplete data: %s", list(data))

    def sensor_notification_handler(self, sender, data: bytearray):
        """
        Callback for sensor notifications. Byte 1 is the port, readings start at byte 2.
        """
        if len(data) < 2:
            logger.warning("[Sensor Notification] Incomplete data: %s", list(data))
            return
        self._handle_port_value(data[1], bytes(data))

    def button_notification_handler(self, sender, data: bytearray):
        if not data:
            return
        state = ButtonState.PRESSED if data[0] == 1 else ButtonState.RELEASED
        self.emit("button", state)

    def battery_notification_handler(self, sender, data: bytearray):
        if not data:
            return
        battery_level = data[0]
        if battery_level != self._battery_level:
            self._battery_level = battery_level
            self.emit("batteryLevel", battery_level)
