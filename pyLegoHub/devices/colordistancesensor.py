# pyLegoHub/devices/colordistancesensor.py

import math
from enum import IntEnum

from pyLegoHub.consts import DeviceType
from pyLegoHub.devices.device import Device


class ColorDistanceSensor(Device):
    """
    The color and distance sensor (88007).
    Color codes above 10 mean "nothing detected" and are not emitted.
    """

    class Mode(IntEnum):
        COLOR = 0x00
        DISTANCE = 0x01
        COLOR_AND_DISTANCE = 0x08

    MODE_MAP = {
        "color": Mode.COLOR,
        "distance": Mode.DISTANCE,
        "colorAndDistance": Mode.COLOR_AND_DISTANCE,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.COLOR_DISTANCE_SENSOR)

    def _decode(self, message: bytes):
        mode = self._mode

        if mode == self.Mode.COLOR:
            if message[4] <= 10:
                self.notify("color", {"color": message[4]})

        elif mode == self.Mode.DISTANCE:
            if self.is_wedo2_smart_hub:
                return
            if message[4] <= 10:
                distance = math.floor(message[4] * 25.4) - 20
                self.notify("distance", {"distance": distance})

        elif mode == self.Mode.COLOR_AND_DISTANCE:
            if self.is_wedo2_smart_hub:
                return
            distance = message[5]
            partial = message[7]
            if partial > 0:
                distance += 1.0 / partial
            distance = math.floor(distance * 25.4) - 20
            self.notify("colorAndDistance", {"color": message[4], "distance": distance})
