# pyLegoHub/devices/led.py

import logging
from enum import IntEnum

from pyLegoHub.consts import BLECharacteristic, DeviceType
from pyLegoHub.devices.device import Device

logger = logging.getLogger(__name__)


class HubLED(Device):
    """
    The RGB LED built into every hub. Set it to a LEGO color or to an RGB value.
    """

    class Mode(IntEnum):
        COLOR = 0x00
        RGB = 0x01

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.HUB_LED)

    async def _send_wedo2(self, mode_select: int, payload):
        # The WeDo 2.0 LED must be switched to absolute or indexed color first
        await self.send(bytes([0x06, 0x17, 0x01, mode_select]), BLECharacteristic.WEDO2_PORT_TYPE_WRITE)
        await self.send(bytes([0x06, 0x04, len(payload)]) + bytes(payload),
                        BLECharacteristic.WEDO2_MOTOR_VALUE_WRITE)

    async def set_color(self, color: int):
        """
        Sets the LED to one of the predefined colors (see Color).
        """
        logger.debug("[HubLED] color=%s", color)
        if self.is_wedo2_smart_hub:
            await self._send_wedo2(0x01, [color])
        else:
            await self.select_mode(self.Mode.COLOR)
            await self.write_direct(self.Mode.COLOR, [color])

    async def set_rgb(self, red: int, green: int, blue: int):
        """
        Sets the LED color using RGB values.
        """
        logger.debug("[HubLED] R=%s G=%s B=%s", red, green, blue)
        if self.is_wedo2_smart_hub:
            await self._send_wedo2(0x02, [red, green, blue])
        else:
            await self.select_mode(self.Mode.RGB)
            await self.write_direct(self.Mode.RGB, [red, green, blue])


class Light(Device):
    """
    The Powered UP light (88005).
    """

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.LIGHT)

    async def set_brightness(self, brightness: int):
        """
        Sets the brightness, from 0 (off) to 100.
        """
        await self.write_direct(0x00, [brightness])
