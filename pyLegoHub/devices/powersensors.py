# pyLegoHub/devices/powersensors.py

"""
Battery voltage and current sensors found on every hub.

WeDo 2.0 hubs report calibrated values. LPF2 hubs report a raw ADC reading that is
scaled by a per hub type maximum; hub types missing from a table use its UNKNOWN row.
"""

from enum import IntEnum

from pyLegoHub.consts import DeviceType, HubType
from pyLegoHub.devices.device import Device


def _lookup(table, hub_type):
    return table.get(hub_type, table[HubType.UNKNOWN])


class VoltageSensor(Device):

    class Mode(IntEnum):
        VOLTAGE = 0x00

    MODE_MAP = {
        "voltage": Mode.VOLTAGE,
    }

    MAX_VOLTAGE_VALUE = {
        HubType.UNKNOWN: 9.615,
        HubType.DUPLO_TRAIN_BASE: 6.4,
        HubType.REMOTE_CONTROL: 6.4,
    }

    MAX_VOLTAGE_RAW = {
        HubType.UNKNOWN: 3893,
        HubType.DUPLO_TRAIN_BASE: 3047,
        HubType.REMOTE_CONTROL: 3200,
        HubType.TECHNIC_MEDIUM_HUB: 4095,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.VOLTAGE_SENSOR)

    def _decode(self, message: bytes):
        if self._mode != self.Mode.VOLTAGE:
            return
        if self.is_wedo2_smart_hub:
            voltage = self._read("<h", message, 2) / 40
        else:
            max_voltage_value = _lookup(self.MAX_VOLTAGE_VALUE, self.hub.type)
            max_voltage_raw = _lookup(self.MAX_VOLTAGE_RAW, self.hub.type)
            voltage = self._read("<H", message, 4) * max_voltage_value / max_voltage_raw
        self.emit_global("voltage", voltage)


class CurrentSensor(Device):

    class Mode(IntEnum):
        CURRENT = 0x00

    MODE_MAP = {
        "current": Mode.CURRENT,
    }

    MAX_CURRENT_VALUE = {
        HubType.UNKNOWN: 2444,
        HubType.TECHNIC_MEDIUM_HUB: 4175,
    }

    MAX_CURRENT_RAW = {
        HubType.UNKNOWN: 4095,
    }

    def __init__(self, hub, port_id: int):
        super().__init__(hub, port_id, self.MODE_MAP, DeviceType.CURRENT_SENSOR)

    def _decode(self, message: bytes):
        if self._mode != self.Mode.CURRENT:
            return
        if self.is_wedo2_smart_hub:
            current = self._read("<h", message, 2) / 1000
        else:
            max_current_value = _lookup(self.MAX_CURRENT_VALUE, self.hub.type)
            max_current_raw = _lookup(self.MAX_CURRENT_RAW, self.hub.type)
            current = self._read("<H", message, 4) * max_current_value / max_current_raw
        self.emit_global("current", current)
