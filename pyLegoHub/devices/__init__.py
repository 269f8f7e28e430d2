"""
pyLegoHub.devices - One class per peripheral model that can be attached to a hub port.
"""

from .device import Device
from .colordistancesensor import ColorDistanceSensor
from .duplotrainbase import DuploTrainBaseColorSensor, DuploTrainBaseSpeaker, DuploTrainBaseSpeedometer
from .led import HubLED, Light
from .motionsensor import MotionSensor
from .motor import (
    BasicMotor,
    DuploTrainBaseMotor,
    MediumLinearMotor,
    MoveHubMediumLinearMotor,
    SimpleMediumLinearMotor,
    TachoMotor,
    TechnicLargeLinearMotor,
    TechnicXLargeLinearMotor,
    TrainMotor,
)
from .piezobuzzer import PiezoBuzzer
from .powersensors import CurrentSensor, VoltageSensor
from .remotecontrolbutton import RemoteControlButton
from .technicmediumhub import (
    TechnicMediumHubAccelerometerSensor,
    TechnicMediumHubGyroSensor,
    TechnicMediumHubTiltSensor,
)
from .tiltsensor import MoveHubTiltSensor, TiltSensor

__all__ = [
    "Device",
    "BasicMotor",
    "TachoMotor",
    "ColorDistanceSensor",
    "CurrentSensor",
    "DuploTrainBaseColorSensor",
    "DuploTrainBaseMotor",
    "DuploTrainBaseSpeaker",
    "DuploTrainBaseSpeedometer",
    "HubLED",
    "Light",
    "MediumLinearMotor",
    "MotionSensor",
    "MoveHubMediumLinearMotor",
    "MoveHubTiltSensor",
    "PiezoBuzzer",
    "RemoteControlButton",
    "SimpleMediumLinearMotor",
    "TechnicLargeLinearMotor",
    "TechnicMediumHubAccelerometerSensor",
    "TechnicMediumHubGyroSensor",
    "TechnicMediumHubTiltSensor",
    "TechnicXLargeLinearMotor",
    "TiltSensor",
    "TrainMotor",
    "VoltageSensor",
]
