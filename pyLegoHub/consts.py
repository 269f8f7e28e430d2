# pyLegoHub/consts.py

"""
Static protocol facts: hub and device type codes, colors, button states,
BLE characteristic UUIDs and the port tables of each hub model.
"""

from enum import IntEnum


class HubType(IntEnum):
    UNKNOWN = 0
    WEDO2_SMART_HUB = 1
    MOVE_HUB = 2
    HUB = 3
    REMOTE_CONTROL = 4
    DUPLO_TRAIN_BASE = 5
    TECHNIC_MEDIUM_HUB = 6


class DeviceType(IntEnum):
    UNKNOWN = 0
    SIMPLE_MEDIUM_LINEAR_MOTOR = 1
    TRAIN_MOTOR = 2
    LIGHT = 8
    VOLTAGE_SENSOR = 20
    CURRENT_SENSOR = 21
    PIEZO_BUZZER = 22
    HUB_LED = 23
    TILT_SENSOR = 34
    MOTION_SENSOR = 35
    COLOR_DISTANCE_SENSOR = 37
    MEDIUM_LINEAR_MOTOR = 38
    MOVE_HUB_MEDIUM_LINEAR_MOTOR = 39
    MOVE_HUB_TILT_SENSOR = 40
    DUPLO_TRAIN_BASE_MOTOR = 41
    DUPLO_TRAIN_BASE_SPEAKER = 42
    DUPLO_TRAIN_BASE_COLOR_SENSOR = 43
    DUPLO_TRAIN_BASE_SPEEDOMETER = 44
    TECHNIC_LARGE_LINEAR_MOTOR = 46
    TECHNIC_XLARGE_LINEAR_MOTOR = 47
    REMOTE_CONTROL_BUTTON = 55
    REMOTE_CONTROL_RSSI = 56
    TECHNIC_MEDIUM_HUB_ACCELEROMETER = 57
    TECHNIC_MEDIUM_HUB_GYRO_SENSOR = 58
    TECHNIC_MEDIUM_HUB_TILT_SENSOR = 59
    TECHNIC_MEDIUM_HUB_TEMPERATURE_SENSOR = 60


def device_type_name(device_type: int) -> str:
    """
    Returns the enum name for a device type code, or "UNKNOWN" for codes this package does not know.
    """
    try:
        return DeviceType(device_type).name
    except ValueError:
        return DeviceType.UNKNOWN.name


class Color(IntEnum):
    BLACK = 0
    PINK = 1
    PURPLE = 2
    BLUE = 3
    LIGHT_BLUE = 4
    CYAN = 5
    GREEN = 6
    YELLOW = 7
    ORANGE = 8
    RED = 9
    WHITE = 10
    NONE = 255


class ButtonState(IntEnum):
    RELEASED = 0x00
    UP = 0x01
    PRESSED = 0x02
    STOP = 0x7f
    DOWN = 0xff


class DuploTrainBaseSound(IntEnum):
    BRAKE = 3
    STATION_DEPARTURE = 5
    WATER_REFILL = 7
    HORN = 9
    STEAM = 10


class UUIDHelper:
    UUID_CUSTOM_BASE = "1212-EFDE-1523-785FEABCD123"
    UUID_LPF2_BASE = "1212-EFDE-1623-785FEABCD123"
    UUID_STANDARD_BASE = "0000-1000-8000-00805f9b34fb"

    @staticmethod
    def add_leading_zeroes(prefix: str) -> str:
        """
        Removes the '0x' prefix (if present) and pads the value to ensure 8 digits.
        """
        if prefix.startswith("0x"):
            prefix = prefix[2:]
        return ("00000000" + prefix)[-8:]

    @staticmethod
    def uuid_with_prefix(prefix: str, base: str) -> str:
        padding = UUIDHelper.add_leading_zeroes(prefix)
        return f"{padding}-{base.lower()}"


class BLEService:
    WEDO2_SMART_HUB = UUIDHelper.uuid_with_prefix("0x1523", UUIDHelper.UUID_CUSTOM_BASE)
    LPF2_HUB = UUIDHelper.uuid_with_prefix("0x1623", UUIDHelper.UUID_LPF2_BASE)


class BLECharacteristic:
    # WeDo 2.0 characteristics
    WEDO2_BUTTON = UUIDHelper.uuid_with_prefix("0x1526", UUIDHelper.UUID_CUSTOM_BASE)
    WEDO2_PORT_TYPE = UUIDHelper.uuid_with_prefix("0x1527", UUIDHelper.UUID_CUSTOM_BASE)
    WEDO2_SENSOR_VALUE = UUIDHelper.uuid_with_prefix("0x1560", UUIDHelper.UUID_CUSTOM_BASE)
    WEDO2_PORT_TYPE_WRITE = UUIDHelper.uuid_with_prefix("0x1563", UUIDHelper.UUID_CUSTOM_BASE)
    WEDO2_MOTOR_VALUE_WRITE = UUIDHelper.uuid_with_prefix("0x1565", UUIDHelper.UUID_CUSTOM_BASE)
    WEDO2_BATTERY = UUIDHelper.uuid_with_prefix("0x2a19", UUIDHelper.UUID_STANDARD_BASE)
    # Every LPF2 hub multiplexes on a single characteristic
    LPF2_ALL = UUIDHelper.uuid_with_prefix("0x1624", UUIDHelper.UUID_LPF2_BASE)


# Port name -> port id, per hub model
PORT_MAPS = {
    HubType.WEDO2_SMART_HUB: {
        "A": 1,
        "B": 2,
        "CURRENT_SENSOR": 3,
        "VOLTAGE_SENSOR": 4,
        "PIEZO_BUZZER": 5,
        "HUB_LED": 6,
    },
    HubType.MOVE_HUB: {
        "A": 0,
        "B": 1,
        "C": 2,
        "D": 3,
        "HUB_LED": 50,
        "TILT_SENSOR": 58,
        "CURRENT_SENSOR": 59,
        "VOLTAGE_SENSOR": 60,
    },
    HubType.HUB: {
        "A": 0,
        "B": 1,
        "HUB_LED": 50,
        "CURRENT_SENSOR": 59,
        "VOLTAGE_SENSOR": 60,
    },
    HubType.REMOTE_CONTROL: {
        "LEFT": 0,
        "RIGHT": 1,
        "HUB_LED": 52,
        "VOLTAGE_SENSOR": 59,
        "REMOTE_CONTROL_RSSI": 60,
    },
    HubType.DUPLO_TRAIN_BASE: {
        "MOTOR": 0,
        "COLOR": 18,
        "SPEEDOMETER": 19,
    },
    HubType.TECHNIC_MEDIUM_HUB: {
        "A": 0,
        "B": 1,
        "C": 2,
        "D": 3,
        "HUB_LED": 50,
        "CURRENT_SENSOR": 59,
        "VOLTAGE_SENSOR": 60,
        "ACCELEROMETER": 97,
        "GYRO_SENSOR": 98,
        "TILT_SENSOR": 99,
    },
}
