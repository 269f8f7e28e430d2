"""
pyLegoHub.hubs - Hubs own the attached devices and route protocol notifications to them.
"""

from .basehub import BaseHub, DEVICE_CONSTRUCTORS
from .lpf2hub import LPF2Hub
from .wedo2smarthub import WeDo2SmartHub

__all__ = ["BaseHub", "DEVICE_CONSTRUCTORS", "LPF2Hub", "WeDo2SmartHub"]
