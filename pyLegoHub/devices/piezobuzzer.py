# pyLegoHub/devices/piezobuzzer.py

import asyncio
import struct

from pyLegoHub.consts import BLECharacteristic, DeviceType
from pyLegoHub.devices.device import Device


class PiezoBuzzer(Device):
    """
    The buzzer inside the WeDo 2.0 Smart Hub.
    """

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.PIEZO_BUZZER)

    async def play_tone(self, frequency: int, time: int):
        """
        Plays a tone of frequency (Hz) for time (milliseconds) and returns once it is done.
        """
        command = bytes([0x05, 0x02, 0x04]) + struct.pack("<HH", frequency, time)
        await self.send(command, BLECharacteristic.WEDO2_MOTOR_VALUE_WRITE)
        await asyncio.sleep(time / 1000)
