from __future__ import annotations

import asyncio
import struct

import pytest

from pyLegoHub.consts import BLECharacteristic, ButtonState, DeviceType, HubType
from pyLegoHub.devices import HubLED, MotionSensor, PiezoBuzzer, SimpleMediumLinearMotor, TiltSensor
from pyLegoHub.hubs.wedo2smarthub import WeDo2SmartHub

PORT_TYPE = BLECharacteristic.WEDO2_PORT_TYPE
SENSOR_VALUE = BLECharacteristic.WEDO2_SENSOR_VALUE
PORT_TYPE_WRITE = BLECharacteristic.WEDO2_PORT_TYPE_WRITE
MOTOR_VALUE_WRITE = BLECharacteristic.WEDO2_MOTOR_VALUE_WRITE


async def settle() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.fixture
def wedo_hub(transport) -> WeDo2SmartHub:
    return WeDo2SmartHub(transport)


@pytest.mark.asyncio
async def test_connect_subscribes_to_all_notifications(wedo_hub, transport) -> None:
    await wedo_hub.connect()

    assert wedo_hub.type == HubType.WEDO2_SMART_HUB
    assert set(transport.notify_callbacks) == {
        PORT_TYPE,
        SENSOR_VALUE,
        BLECharacteristic.WEDO2_BUTTON,
        BLECharacteristic.WEDO2_BATTERY,
    }


@pytest.mark.asyncio
async def test_port_notification_attaches_and_detaches(wedo_hub, transport) -> None:
    await wedo_hub.connect()

    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01, 0x01, 0x00, DeviceType.TILT_SENSOR]))
    sensor = wedo_hub.get_device_at_port("A")
    assert isinstance(sensor, TiltSensor)
    assert sensor.is_wedo2_smart_hub

    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01, 0x00]))
    assert wedo_hub.get_device_at_port("A") is None


@pytest.mark.asyncio
async def test_tilt_readings_start_at_byte_two(wedo_hub, transport) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x02, 0x01, 0x00, DeviceType.TILT_SENSOR]))
    sensor = wedo_hub.get_device_at_port("B")
    tilts: list = []
    sensor.on("tilt", tilts.append)
    await settle()

    assert transport.sent == [
        (bytes([0x01, 0x02, 0x02, DeviceType.TILT_SENSOR, 0x00, 0x01, 0x00, 0x00, 0x00, 0x00, 0x01]), PORT_TYPE_WRITE),
    ]

    wedo_hub.sensor_notification_handler(SENSOR_VALUE, bytearray([0x00, 0x02]) + struct.pack("<bb", 5, -5))
    assert tilts == [{"x": 5, "y": -5}]


@pytest.mark.asyncio
async def test_motion_sensor_on_wedo(wedo_hub) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01, 0x01, 0x00, DeviceType.MOTION_SENSOR]))
    sensor = wedo_hub.get_device_at_port("A")
    assert isinstance(sensor, MotionSensor)
    distances: list = []
    sensor.on("distance", distances.append)

    wedo_hub.sensor_notification_handler(SENSOR_VALUE, bytearray([0x00, 0x01, 7, 0]))

    assert distances == [{"distance": 70}]


@pytest.mark.asyncio
async def test_voltage_and_current_on_wedo(wedo_hub) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x04, 0x01, 0x00, DeviceType.VOLTAGE_SENSOR]))
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x03, 0x01, 0x00, DeviceType.CURRENT_SENSOR]))
    readings: list = []
    wedo_hub.on("voltage", lambda device, value: readings.append(("voltage", value)))
    wedo_hub.on("current", lambda device, value: readings.append(("current", value)))

    wedo_hub.sensor_notification_handler(SENSOR_VALUE, bytearray([0x00, 0x04]) + struct.pack("<h", 400))
    wedo_hub.sensor_notification_handler(SENSOR_VALUE, bytearray([0x00, 0x03]) + struct.pack("<h", 250))

    assert readings == [("voltage", pytest.approx(10.0)), ("current", pytest.approx(0.25))]
    assert wedo_hub.voltage == pytest.approx(10.0)
    assert wedo_hub.current == pytest.approx(0.25)


def test_explicit_subscribe_without_event_loop_is_written_on_connect(wedo_hub, transport) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01, 0x01, 0x00, DeviceType.MOTION_SENSOR]))
    sensor = wedo_hub.get_device_at_port("A")

    sensor.subscribe(MotionSensor.Mode.DISTANCE)
    assert transport.sent == []

    asyncio.run(wedo_hub.connect())

    assert transport.sent == [
        (bytes([0x01, 0x02, 0x01, DeviceType.MOTION_SENSOR, 0x00, 0x01, 0x00, 0x00, 0x00, 0x00, 0x01]), PORT_TYPE_WRITE),
    ]


@pytest.mark.asyncio
async def test_motor_power_command(wedo_hub, transport) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01, 0x01, 0x00, DeviceType.SIMPLE_MEDIUM_LINEAR_MOTOR]))
    motor = wedo_hub.get_device_at_port("A")
    assert isinstance(motor, SimpleMediumLinearMotor)

    await motor.set_power(50)
    await motor.set_power(-50)
    await motor.stop()

    assert transport.sent == [
        (bytes([0x01, 0x01, 0x01, 50]), MOTOR_VALUE_WRITE),
        (bytes([0x01, 0x01, 0x01, 206]), MOTOR_VALUE_WRITE),
        (bytes([0x01, 0x01, 0x01, 0]), MOTOR_VALUE_WRITE),
    ]


@pytest.mark.asyncio
async def test_hub_led_commands(wedo_hub, transport) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x06, 0x01, 0x00, DeviceType.HUB_LED]))
    led = wedo_hub.get_device_at_port("HUB_LED")
    assert isinstance(led, HubLED)

    await led.set_rgb(0, 255, 0)
    await led.set_color(9)

    assert transport.sent == [
        (bytes([0x06, 0x17, 0x01, 0x02]), PORT_TYPE_WRITE),
        (bytes([0x06, 0x04, 0x03, 0, 255, 0]), MOTOR_VALUE_WRITE),
        (bytes([0x06, 0x17, 0x01, 0x01]), PORT_TYPE_WRITE),
        (bytes([0x06, 0x04, 0x01, 9]), MOTOR_VALUE_WRITE),
    ]


@pytest.mark.asyncio
async def test_piezo_tone(wedo_hub, transport) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x05, 0x01, 0x00, DeviceType.PIEZO_BUZZER]))
    buzzer = wedo_hub.get_device_at_port("PIEZO_BUZZER")
    assert isinstance(buzzer, PiezoBuzzer)

    await buzzer.play_tone(440, 10)

    assert transport.sent == [
        (bytes([0x05, 0x02, 0x04, 0xb8, 0x01, 0x0a, 0x00]), MOTOR_VALUE_WRITE),
    ]


def test_button_and_battery_notifications(wedo_hub) -> None:
    buttons: list = []
    battery: list = []
    wedo_hub.on("button", buttons.append)
    wedo_hub.on("batteryLevel", battery.append)

    wedo_hub.button_notification_handler(BLECharacteristic.WEDO2_BUTTON, bytearray([0x01]))
    wedo_hub.button_notification_handler(BLECharacteristic.WEDO2_BUTTON, bytearray([0x00]))
    wedo_hub.battery_notification_handler(BLECharacteristic.WEDO2_BATTERY, bytearray([0x4b]))

    assert buttons == [ButtonState.PRESSED, ButtonState.RELEASED]
    assert battery == [75]
    assert wedo_hub.battery_level == 75


def test_incomplete_port_notification_is_ignored(wedo_hub) -> None:
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01]))
    wedo_hub.port_notification_handler(PORT_TYPE, bytearray([0x01, 0x01, 0x00]))
    wedo_hub.sensor_notification_handler(SENSOR_VALUE, bytearray([0x00]))

    assert wedo_hub.get_devices() == []
