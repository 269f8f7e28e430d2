# pyLegoHub/devices/motionsensor.py

from enum import IntEnum

from pyLegoHub.consts import DeviceType
from pyLegoHub.devices.device import Device


class MotionSensor(Device):
    """
    The external motion sensor (WeDo 2.0 45304).
    Distance is reported in millimeters.
    """

    class Mode(IntEnum):
        DISTANCE = 0x00

    MODE_MAP = {
        "distance": Mode.DISTANCE,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.MOTION_SENSOR)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.DISTANCE:
            offset = 2 if self.is_wedo2_smart_hub else 4
            distance = message[offset]
            if message[offset + 1] == 1:
                distance += 255
            self.notify("distance", {"distance": distance * 10})
