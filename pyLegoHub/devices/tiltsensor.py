# pyLegoHub/devices/tiltsensor.py

from enum import IntEnum

from pyLegoHub.consts import DeviceType
from pyLegoHub.devices.device import Device


class TiltSensor(Device):
    """
    The external tilt sensor (WeDo 2.0 45305). Emits signed x/y angles.
    """

    class Mode(IntEnum):
        TILT = 0x00

    MODE_MAP = {
        "tilt": Mode.TILT,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.TILT_SENSOR)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.TILT:
            offset = 2 if self.is_wedo2_smart_hub else 4
            x = self._read("<b", message, offset)
            y = self._read("<b", message, offset + 1)
            self.notify("tilt", {"x": x, "y": y})


class MoveHubTiltSensor(Device):
    """
    The tilt sensor built into the BOOST Move Hub. Its x axis is mirrored.
    """

    class Mode(IntEnum):
        TILT = 0x00

    MODE_MAP = {
        "tilt": Mode.TILT,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.MOVE_HUB_TILT_SENSOR)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.TILT:
            x = -self._read("<b", message, 4)
            y = self._read("<b", message, 5)
            self.notify("tilt", {"x": x, "y": y})
