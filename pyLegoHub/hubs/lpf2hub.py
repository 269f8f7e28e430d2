# pyLegoHub/hubs/lpf2hub.py

import logging
import struct
from typing import Callable, Dict, Optional

from pyLegoHub.consts import BLECharacteristic, HubType, PORT_MAPS
from pyLegoHub.hubs.basehub import BaseHub

logger = logging.getLogger(__name__)

# Message kinds, byte 2 of every LPF2 message
HUB_PROPERTIES = 0x01
HUB_ATTACHED_IO = 0x04
PORT_VALUE_SINGLE = 0x45
PORT_INPUT_FORMAT_SETUP_SINGLE = 0x41

# Hub properties
PROPERTY_FIRMWARE_VERSION = 0x03
PROPERTY_HARDWARE_VERSION = 0x04
PROPERTY_RSSI = 0x05
PROPERTY_BATTERY_VOLTAGE = 0x06
PROPERTY_PRIMARY_MAC_ADDRESS = 0x0d

PROPERTY_ENABLE_UPDATES = 0x02
PROPERTY_REQUEST_UPDATE = 0x05

# Attached IO events
IO_DETACHED = 0x00
IO_ATTACHED = 0x01
IO_ATTACHED_VIRTUAL = 0x02


def decode_version(version: int) -> str:
    """
    Decodes the packed BCD firmware/hardware version into "M.m.bb.bbbb".
    """
    text = format(version & 0xffffffff, "08x")
    return ".".join([text[0], text[1], text[2:4], text[4:]])


class LPF2Hub(BaseHub):
    """
    A hub speaking the LEGO Wireless Protocol 3 (Powered UP, BOOST, Control+, DUPLO train, remote).

    Every message travels on the single LPF2 characteristic and starts with
    [length, hub id, message kind].
    """
    def __init__(self, transport, port_map: Optional[Dict[str, int]] = None,
                 hub_type: HubType = HubType.HUB, auto_subscribe: bool = True):
        if port_map is None:
            port_map = PORT_MAPS.get(hub_type, {})
        super().__init__(transport, port_map, hub_type, auto_subscribe)

    async def connect(self):
        """
        Connects, starts listening to the hub and asks for its properties.
        """
        await super().connect()
        await self._transport.start_notify(BLECharacteristic.LPF2_ALL, self._parse_message)
        await self.send(bytes([HUB_PROPERTIES, PROPERTY_FIRMWARE_VERSION, PROPERTY_REQUEST_UPDATE]))
        await self.send(bytes([HUB_PROPERTIES, PROPERTY_HARDWARE_VERSION, PROPERTY_REQUEST_UPDATE]))
        await self.send(bytes([HUB_PROPERTIES, PROPERTY_PRIMARY_MAC_ADDRESS, PROPERTY_REQUEST_UPDATE]))
        await self.send(bytes([HUB_PROPERTIES, PROPERTY_RSSI, PROPERTY_ENABLE_UPDATES]))
        await self.send(bytes([HUB_PROPERTIES, PROPERTY_BATTERY_VOLTAGE, PROPERTY_ENABLE_UPDATES]))
        await self._write_deferred_subscriptions()
        logger.info("Connected to %s (%s)", self.name, self._type.name)

    async def send(self, data: bytes, characteristic: str = BLECharacteristic.LPF2_ALL,
                   callback: Optional[Callable[[], None]] = None):
        """
        Frames data with the [length, hub id] header and writes it.
        """
        if characteristic == BLECharacteristic.LPF2_ALL:
            data = bytes([len(data) + 2, 0x00]) + bytes(data)
        await self._transport.send(data, characteristic)
        if callback:
            callback()

    async def write_subscribe(self, port_id: int, device_type: int, mode: int):
        """
        Selects the mode of a port and enables value notifications for it.
        """
        message = bytes([PORT_INPUT_FORMAT_SETUP_SINGLE, port_id, mode, 0x01, 0x00, 0x00, 0x00, 0x01])
        await self.send(message)

    def _parse_message(self, sender, data: bytearray):
        message = bytes(data)
        logger.debug("[Received] %s", message.hex())
        if len(message) < 3:
            logger.warning("[Received] Message too short: %s", message.hex())
            return

        kind = message[2]
        if kind == HUB_PROPERTIES:
            self._parse_hub_property_response(message)
        elif kind == HUB_ATTACHED_IO:
            self._parse_port_message(message)
        elif kind == PORT_VALUE_SINGLE:
            if len(message) > 3:
                self._handle_port_value(message[3], message)

    def _parse_port_message(self, message: bytes):
        if len(message) < 5:
            return
        port_id = message[3]
        event = message[4]

        if event == IO_DETACHED:
            self._handle_detach(port_id)
        elif event in (IO_ATTACHED, IO_ATTACHED_VIRTUAL):
            if len(message) < 7:
                return
            device_type = struct.unpack_from("<H", message, 5)[0]
            self._handle_attach(port_id, device_type)

    def _parse_hub_property_response(self, message: bytes):
        if len(message) < 6:
            return
        prop = message[3]

        if prop == PROPERTY_FIRMWARE_VERSION and len(message) >= 9:
            self._firmware_version = decode_version(struct.unpack_from("<i", message, 5)[0])
            self.emit("firmwareVersion", self._firmware_version)
        elif prop == PROPERTY_HARDWARE_VERSION and len(message) >= 9:
            self._hardware_version = decode_version(struct.unpack_from("<i", message, 5)[0])
            self.emit("hardwareVersion", self._hardware_version)
        elif prop == PROPERTY_RSSI:
            rssi = struct.unpack_from("<b", message, 5)[0]
            if rssi != self._rssi:
                self._rssi = rssi
                self.emit("rssi", rssi)
        elif prop == PROPERTY_BATTERY_VOLTAGE:
            battery_level = message[5]
            if battery_level != self._battery_level:
                self._battery_level = battery_level
                self.emit("batteryLevel", battery_level)
        elif prop == PROPERTY_PRIMARY_MAC_ADDRESS and len(message) >= 11:
            self._primary_mac_address = ":".join(f"{byte:02x}" for byte in message[5:11])
            self.emit("primaryMACAddress", self._primary_mac_address)
