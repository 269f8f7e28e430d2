# pyLegoHub/ble/transport.py

"""Transport interface consumed by the hubs."""

from typing import Callable, Protocol


class Transport(Protocol):
    name: str
    uuid: str
    connecting: bool
    connected: bool

    async def connect(self) -> None:
        """Open the BLE connection."""

    async def disconnect(self) -> None:
        """Close the BLE connection."""

    async def send(self, data: bytes, characteristic: str) -> None:
        """Write raw bytes to a characteristic."""

    async def start_notify(self, characteristic: str, callback: Callable) -> None:
        """Deliver notifications of a characteristic to callback(sender, data)."""

    def on(self, event: str, listener: Callable) -> Callable:
        """Register a listener; transports emit "disconnect"."""
