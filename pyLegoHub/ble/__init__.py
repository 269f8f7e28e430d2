# pyLegoHub/ble/__init__.py

"""
pyLegoHub.ble - The Bluetooth Low Energy transport used to talk to LEGO hubs.
"""

from .client import BleakTransport
from .transport import Transport
