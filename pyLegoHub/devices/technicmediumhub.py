# pyLegoHub/devices/technicmediumhub.py

"""
Sensors built into the Technic Medium Hub (Control+).
All three report little-endian int16 triples at offsets 4, 6 and 8.
"""

import math
from enum import IntEnum

from pyLegoHub.consts import DeviceType
from pyLegoHub.devices.device import Device


def _round(value: float) -> int:
    # half up, not banker's rounding
    return int(math.floor(value + 0.5))


class TechnicMediumHubAccelerometerSensor(Device):

    class Mode(IntEnum):
        ACCEL = 0x00

    MODE_MAP = {
        "accel": Mode.ACCEL,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.TECHNIC_MEDIUM_HUB_ACCELEROMETER)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.ACCEL:
            # mG
            x = _round(self._read("<h", message, 4) / 4.096)
            y = _round(self._read("<h", message, 6) / 4.096)
            z = _round(self._read("<h", message, 8) / 4.096)
            self.notify("accel", {"x": x, "y": y, "z": z})


class TechnicMediumHubGyroSensor(Device):

    class Mode(IntEnum):
        GYRO = 0x00

    MODE_MAP = {
        "gyro": Mode.GYRO,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.TECHNIC_MEDIUM_HUB_GYRO_SENSOR)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.GYRO:
            # DPS
            x = _round(self._read("<h", message, 4) * 7 / 400)
            y = _round(self._read("<h", message, 6) * 7 / 400)
            z = _round(self._read("<h", message, 8) * 7 / 400)
            self.notify("gyro", {"x": x, "y": y, "z": z})


class TechnicMediumHubTiltSensor(Device):

    class Mode(IntEnum):
        TILT = 0x00

    MODE_MAP = {
        "tilt": Mode.TILT,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.TECHNIC_MEDIUM_HUB_TILT_SENSOR)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.TILT:
            z = -self._read("<h", message, 4)
            y = self._read("<h", message, 6)
            x = self._read("<h", message, 8)
            self.notify("tilt", {"x": x, "y": y, "z": z})
