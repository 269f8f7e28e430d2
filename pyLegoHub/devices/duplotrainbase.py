# pyLegoHub/devices/duplotrainbase.py

"""
Devices built into the DUPLO train base (10874/10875).
"""

from enum import IntEnum

from pyLegoHub.consts import DeviceType
from pyLegoHub.devices.device import Device


class DuploTrainBaseColorSensor(Device):

    class Mode(IntEnum):
        COLOR = 0x00
        REFLECTIVITY = 0x02
        RGB = 0x03

    MODE_MAP = {
        "color": Mode.COLOR,
        "reflect": Mode.REFLECTIVITY,
        "rgb": Mode.RGB,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.DUPLO_TRAIN_BASE_COLOR_SENSOR)

    def _decode(self, message: bytes):
        mode = self._mode

        if mode == self.Mode.COLOR:
            # 0xff is "no color"
            if message[4] <= 10:
                self.notify("color", {"color": message[4]})

        elif mode == self.Mode.REFLECTIVITY:
            self.notify("reflect", {"reflect": message[4]})

        elif mode == self.Mode.RGB:
            red = self._read("<H", message, 4) // 4
            green = self._read("<H", message, 6) // 4
            blue = self._read("<H", message, 8) // 4
            self.notify("rgb", {"red": red, "green": green, "blue": blue})


class DuploTrainBaseSpeedometer(Device):

    class Mode(IntEnum):
        SPEED = 0x00

    MODE_MAP = {
        "speed": Mode.SPEED,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.DUPLO_TRAIN_BASE_SPEEDOMETER)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.SPEED:
            self.notify("speed", {"speed": self._read("<h", message, 4)})


class DuploTrainBaseSpeaker(Device):

    class Mode(IntEnum):
        SOUND = 0x01

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.DUPLO_TRAIN_BASE_SPEAKER)

    async def play_sound(self, sound: int):
        """
        Plays one of the built-in sounds (see DuploTrainBaseSound).
        """
        await self.select_mode(self.Mode.SOUND)
        await self.write_direct(self.Mode.SOUND, [sound])
