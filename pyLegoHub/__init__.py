# pyLegoHub/__init__.py

"""
pyLegoHub - A Python package to talk to LEGO Powered UP and WeDo 2.0 hubs over BLE.
Version: 0.2.0
"""

import logging

__version__ = "0.2.0"

from .consts import (
    BLECharacteristic,
    BLEService,
    ButtonState,
    Color,
    DeviceType,
    DuploTrainBaseSound,
    HubType,
    PORT_MAPS,
)
from .errors import (
    AlreadyConnectedError,
    AlreadyConnectingError,
    ConnectionStateError,
    DeviceNotConnectedError,
    PortNotFoundError,
    PoweredUpError,
    TransportConnectError,
    TransportError,
    TransportSendError,
)
from .events import EventEmitter
from .ble import BleakTransport, Transport
from .devices import *
from .hubs import BaseHub, LPF2Hub, WeDo2SmartHub

logging.getLogger(__name__).addHandler(logging.NullHandler())
