# pyLegoHub/devices/motor.py

import logging
from enum import IntEnum

from pyLegoHub.consts import BLECharacteristic, DeviceType
from pyLegoHub.devices.device import Device

logger = logging.getLogger(__name__)

BRAKE = 127


class BasicMotor(Device):
    """
    A motor without a rotation sensor. Only power can be set.
    """

    @staticmethod
    def calculate_motor_power(power: int) -> int:
        """
        Maps a power in percent to the byte the hub expects:
          - For positive speeds, the percentage (1-100).
          - For negative speeds, (256 + power) (e.g. -50 becomes 206).
          - 0 floats the motor, 127 brakes it.
        """
        if power == BRAKE:
            return BRAKE
        power = max(-100, min(100, power))
        if power < 0:
            return 256 + power
        return power

    async def set_power(self, power: int):
        """
        Sets the motor power, from -100 (full reverse) to 100 (full forward).
        """
        motor_value = self.calculate_motor_power(power)
        logger.debug("[Motor] port=%s power=%s mapped to %s", self.port_id, power, motor_value)
        if self.is_wedo2_smart_hub:
            command = bytes([self.port_id, 0x01, 0x01, motor_value])
            await self.send(command, BLECharacteristic.WEDO2_MOTOR_VALUE_WRITE)
        else:
            await self.write_direct(0x00, [motor_value])

    async def stop(self):
        await self.set_power(0)

    async def brake(self):
        await self.set_power(BRAKE)


class SimpleMediumLinearMotor(BasicMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.SIMPLE_MEDIUM_LINEAR_MOTOR)


class TrainMotor(BasicMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.TRAIN_MOTOR)


class DuploTrainBaseMotor(BasicMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, {}, DeviceType.DUPLO_TRAIN_BASE_MOTOR)


class TachoMotor(BasicMotor):
    """
    A motor with a built-in rotation sensor. Emits "rotate" with the
    accumulated angle in degrees.
    """

    class Mode(IntEnum):
        ROTATION = 0x02

    MODE_MAP = {
        "rotate": Mode.ROTATION,
    }

    def _decode(self, message: bytes):
        if self._mode == self.Mode.ROTATION:
            self.notify("rotate", {"degrees": self._read("<i", message, 4)})


class MediumLinearMotor(TachoMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.MEDIUM_LINEAR_MOTOR)


class MoveHubMediumLinearMotor(TachoMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.MOVE_HUB_MEDIUM_LINEAR_MOTOR)


class TechnicLargeLinearMotor(TachoMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.TECHNIC_LARGE_LINEAR_MOTOR)


class TechnicXLargeLinearMotor(TachoMotor):

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.TECHNIC_XLARGE_LINEAR_MOTOR)
