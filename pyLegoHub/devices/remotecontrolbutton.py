# pyLegoHub/devices/remotecontrolbutton.py

from enum import IntEnum

from pyLegoHub.consts import DeviceType
from pyLegoHub.devices.device import Device


class RemoteControlButton(Device):
    """
    One of the two button clusters of the Powered UP remote (88010).
    Known state bytes come out as RemoteControlButton.ButtonState, others pass through unchanged.
    """

    class Mode(IntEnum):
        BUTTON_EVENTS = 0x00

    class ButtonState(IntEnum):
        RELEASED = 0x00
        UP = 0x01
        STOP = 0x7f
        DOWN = 0xff

    MODE_MAP = {
        "remoteButton": Mode.BUTTON_EVENTS,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.REMOTE_CONTROL_BUTTON)

    def _decode(self, message: bytes):
        if self._mode == self.Mode.BUTTON_EVENTS:
            state = message[4]
            try:
                state = self.ButtonState(state)
            except ValueError:
                pass
            self.emit_global("remoteButton", state)
