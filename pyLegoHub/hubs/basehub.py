# pyLegoHub/hubs/basehub.py

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from pyLegoHub.consts import DeviceType, HubType, device_type_name
from pyLegoHub.devices import (
    ColorDistanceSensor,
    CurrentSensor,
    Device,
    DuploTrainBaseColorSensor,
    DuploTrainBaseMotor,
    DuploTrainBaseSpeaker,
    DuploTrainBaseSpeedometer,
    HubLED,
    Light,
    MediumLinearMotor,
    MotionSensor,
    MoveHubMediumLinearMotor,
    MoveHubTiltSensor,
    PiezoBuzzer,
    RemoteControlButton,
    SimpleMediumLinearMotor,
    TechnicLargeLinearMotor,
    TechnicMediumHubAccelerometerSensor,
    TechnicMediumHubGyroSensor,
    TechnicMediumHubTiltSensor,
    TechnicXLargeLinearMotor,
    TiltSensor,
    TrainMotor,
    VoltageSensor,
)
from pyLegoHub.errors import AlreadyConnectedError, AlreadyConnectingError, PortNotFoundError
from pyLegoHub.events import EventEmitter

logger = logging.getLogger(__name__)

# Device type code -> device class. Types missing here attach as a plain Device.
DEVICE_CONSTRUCTORS = {
    DeviceType.LIGHT: Light,
    DeviceType.TRAIN_MOTOR: TrainMotor,
    DeviceType.SIMPLE_MEDIUM_LINEAR_MOTOR: SimpleMediumLinearMotor,
    DeviceType.MOVE_HUB_MEDIUM_LINEAR_MOTOR: MoveHubMediumLinearMotor,
    DeviceType.MOTION_SENSOR: MotionSensor,
    DeviceType.TILT_SENSOR: TiltSensor,
    DeviceType.MOVE_HUB_TILT_SENSOR: MoveHubTiltSensor,
    DeviceType.TECHNIC_MEDIUM_HUB_TILT_SENSOR: TechnicMediumHubTiltSensor,
    DeviceType.TECHNIC_MEDIUM_HUB_GYRO_SENSOR: TechnicMediumHubGyroSensor,
    DeviceType.TECHNIC_MEDIUM_HUB_ACCELEROMETER: TechnicMediumHubAccelerometerSensor,
    DeviceType.MEDIUM_LINEAR_MOTOR: MediumLinearMotor,
    DeviceType.TECHNIC_LARGE_LINEAR_MOTOR: TechnicLargeLinearMotor,
    DeviceType.TECHNIC_XLARGE_LINEAR_MOTOR: TechnicXLargeLinearMotor,
    DeviceType.COLOR_DISTANCE_SENSOR: ColorDistanceSensor,
    DeviceType.VOLTAGE_SENSOR: VoltageSensor,
    DeviceType.CURRENT_SENSOR: CurrentSensor,
    DeviceType.PIEZO_BUZZER: PiezoBuzzer,
    DeviceType.REMOTE_CONTROL_BUTTON: RemoteControlButton,
    DeviceType.HUB_LED: HubLED,
    DeviceType.DUPLO_TRAIN_BASE_COLOR_SENSOR: DuploTrainBaseColorSensor,
    DeviceType.DUPLO_TRAIN_BASE_MOTOR: DuploTrainBaseMotor,
    DeviceType.DUPLO_TRAIN_BASE_SPEAKER: DuploTrainBaseSpeaker,
    DeviceType.DUPLO_TRAIN_BASE_SPEEDOMETER: DuploTrainBaseSpeedometer,
}


class BaseHub(EventEmitter):
    """
    Keeps track of the devices attached to a hub and routes port notifications to them.

    Subclasses parse the transport notifications of a hub family and call
    _handle_attach(), _handle_detach() and _handle_port_value(). They also override
    send() and subscribe() with real transport writes.

    Events:
      - "attach" (device), "detach" (device), "disconnect" ()
      - every event in a device mode map, as (device, payload)
    """
    def __init__(self, transport, port_map: Optional[Dict[str, int]] = None,
                 hub_type: HubType = HubType.UNKNOWN, auto_subscribe: bool = True):
        """
        Initializes the hub with a transport that is not connected yet.
        """
        super().__init__()
        self.auto_subscribe = auto_subscribe
        self._transport = transport
        self._type = hub_type
        self._port_map: Dict[str, int] = dict(port_map or {})
        self._attached_devices: Dict[int, Device] = {}
        self._attach_callbacks: List[Callable[[Device], bool]] = []
        self._pending_writes = set()
        self._deferred_subscriptions: Dict[int, Tuple[int, int]] = {}
        self._readings: Dict[str, Any] = {}

        self._firmware_version = "0.0.00.0000"
        self._hardware_version = "0.0.00.0000"
        self._primary_mac_address = "00:00:00:00:00:00"
        self._battery_level = 100
        self._rssi = -60

        transport.on("disconnect", self._on_transport_disconnect)

    @property
    def name(self) -> str:
        return self._transport.name

    @property
    def uuid(self) -> str:
        return self._transport.uuid

    @property
    def type(self) -> HubType:
        return self._type

    @property
    def ports(self) -> List[str]:
        return list(self._port_map)

    @property
    def port_map(self) -> Dict[str, int]:
        return dict(self._port_map)

    @property
    def firmware_version(self) -> str:
        return self._firmware_version

    @property
    def hardware_version(self) -> str:
        return self._hardware_version

    @property
    def primary_mac_address(self) -> str:
        return self._primary_mac_address

    @property
    def battery_level(self) -> int:
        """Battery level in percent (0-100)."""
        return self._battery_level

    @property
    def rssi(self) -> int:
        return self._rssi

    @property
    def voltage(self) -> float:
        """Latest battery voltage reported by the voltage sensor, 0.0 until the first reading."""
        return self._readings.get("voltage", 0.0)

    @property
    def current(self) -> float:
        """Latest reading of the current sensor, 0.0 until the first reading."""
        return self._readings.get("current", 0.0)

    def record_reading(self, event: str, value: Any):
        """
        Keeps the latest value of a hub wide reading.
        """
        self._readings[event] = value

    @property
    def connected(self) -> bool:
        return self._transport.connected

    async def connect(self):
        """
        Connects to the hub through the transport.
        """
        if self._transport.connecting:
            raise AlreadyConnectingError("Already connecting")
        if self._transport.connected:
            raise AlreadyConnectedError("Already connected")
        await self._transport.connect()

    async def disconnect(self):
        await self._transport.disconnect()

    def get_device_at_port(self, port_name: str) -> Optional[Device]:
        """
        Returns the device on a named port, or None if the port is empty.
        Raises PortNotFoundError if this hub model has no such port.
        """
        if port_name not in self._port_map:
            raise PortNotFoundError(port_name)
        return self._attached_devices.get(self._port_map[port_name])

    async def wait_for_device_at_port(self, port_name: str, timeout: Optional[float] = None) -> Device:
        """
        Returns the device on a named port, waiting for it to be attached if needed.
        """
        existing = self.get_device_at_port(port_name)
        if existing is not None:
            return existing
        port_id = self._port_map[port_name]
        return await self._wait_for_attach(lambda device: device.port_id == port_id, timeout)

    def get_devices(self) -> List[Device]:
        return list(self._attached_devices.values())

    def get_devices_by_type(self, device_type: int) -> List[Device]:
        return [device for device in self.get_devices() if device.type == device_type]

    async def wait_for_device_by_type(self, device_type: int, timeout: Optional[float] = None) -> Device:
        """
        Returns a device of the given type, waiting for one to be attached if needed.
        """
        existing = self.get_devices_by_type(device_type)
        if existing:
            return existing[0]
        return await self._wait_for_attach(lambda device: device.type == device_type, timeout)

    def get_port_name_for_port_id(self, port_id: int) -> Optional[str]:
        for port_name, mapped_id in self._port_map.items():
            if mapped_id == port_id:
                return port_name
        return None

    async def sleep(self, delay: int):
        """
        Sleeps for delay milliseconds.
        """
        await asyncio.sleep(delay / 1000)

    async def wait(self, commands):
        """
        Waits until all the given commands are complete.
        """
        return await asyncio.gather(*commands)

    async def send(self, data: bytes, characteristic: str, callback: Optional[Callable[[], None]] = None):
        if callback:
            callback()

    def subscribe(self, port_id: int, device_type: int, mode: int):
        """
        Selects the mode of a port from synchronous code.
        Without a running event loop the request is held back and written on connect().
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("[Subscribe] No running event loop, port %s mode %s deferred", port_id, mode)
            self._deferred_subscriptions[port_id] = (device_type, mode)
            return
        self._deferred_subscriptions.pop(port_id, None)
        self._schedule(self.write_subscribe(port_id, device_type, mode))

    async def write_subscribe(self, port_id: int, device_type: int, mode: int):
        pass

    async def _write_deferred_subscriptions(self):
        deferred, self._deferred_subscriptions = self._deferred_subscriptions, {}
        for port_id, (device_type, mode) in deferred.items():
            device = self._get_device_by_port_id(port_id)
            # skip ports whose device went away or moved on to another mode
            if device is None or device.type != device_type or device.mode != mode:
                continue
            await self.write_subscribe(port_id, device_type, mode)

    def _schedule(self, coroutine):
        # Writes started from synchronous code; keep a reference until they finish
        task = asyncio.get_running_loop().create_task(coroutine)
        self._pending_writes.add(task)
        task.add_done_callback(self._write_done)

    def _write_done(self, task):
        self._pending_writes.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning("Background write failed: %s", task.exception())

    async def _wait_for_attach(self, predicate: Callable[[Device], bool], timeout: Optional[float]) -> Device:
        future = asyncio.get_running_loop().create_future()

        def callback(device: Device) -> bool:
            if future.done():
                return True
            if predicate(device):
                future.set_result(device)
                return True
            return False

        self._attach_callbacks.append(callback)
        try:
            return await asyncio.wait_for(future, timeout)
        finally:
            # cancelled or timed out waits must not stay registered
            if callback in self._attach_callbacks:
                self._attach_callbacks.remove(callback)

    def _attach_device(self, device: Device):
        previous = self._attached_devices.get(device.port_id)
        if previous is not None and previous is not device:
            logger.debug("[Attach] Port %s already holds %s, detaching it first", device.port_id, previous)
            self._detach_device(previous)

        self._attached_devices[device.port_id] = device
        self.emit("attach", device)
        logger.debug("[Attach] Device type %s (%s) on port %s (%s)",
                     device.type, device.type_name, device.port_name, device.port_id)

        # Newest waiter first. Deleting by index while walking backwards skips nobody.
        i = len(self._attach_callbacks)
        while i > 0:
            i -= 1
            callback = self._attach_callbacks[i]
            if callback(device):
                del self._attach_callbacks[i]

    def _detach_device(self, device: Device):
        if self._attached_devices.get(device.port_id) is device:
            del self._attached_devices[device.port_id]
        device._detach()
        self.emit("detach", device)
        logger.debug("[Detach] Device type %s (%s) on port %s (%s)",
                     device.type, device.type_name, device.port_name, device.port_id)

    def _create_device(self, device_type: int, port_id: int) -> Device:
        constructor = DEVICE_CONSTRUCTORS.get(device_type)
        if constructor is not None:
            return constructor(self, port_id)
        logger.debug("[Attach] No decoder for device type %s (%s), using a generic device",
                     device_type, device_type_name(device_type))
        return Device(self, port_id, None, device_type)

    def _get_device_by_port_id(self, port_id: int) -> Optional[Device]:
        return self._attached_devices.get(port_id)

    def _handle_attach(self, port_id: int, device_type: int) -> Device:
        device = self._create_device(device_type, port_id)
        self._attach_device(device)
        return device

    def _handle_detach(self, port_id: int):
        device = self._get_device_by_port_id(port_id)
        if device is not None:
            self._detach_device(device)

    def _handle_port_value(self, port_id: int, message: bytes):
        device = self._get_device_by_port_id(port_id)
        if device is None:
            logger.debug("[Port Value] No device on port %s, dropped %s", port_id, bytes(message).hex())
            return
        device.receive(message)

    def _on_new_listener(self, event: str):
        for device in self.get_devices():
            device._on_new_listener(event)

    def _on_transport_disconnect(self):
        logger.info("Hub %s disconnected", self.name)
        self.emit("disconnect")
