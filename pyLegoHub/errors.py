# pyLegoHub/errors.py

"""Domain-specific errors for pyLegoHub."""


class PoweredUpError(Exception):
    """Base error for pyLegoHub."""


class PortNotFoundError(PoweredUpError, KeyError):
    """Raised when a port name does not exist on the hub model."""

    def __init__(self, port_name: str):
        super().__init__(f"Port {port_name} does not exist on this hub type")
        self.port_name = port_name

    def __str__(self) -> str:
        return self.args[0]


class ConnectionStateError(PoweredUpError):
    """Raised when connect is requested in the wrong connection state."""


class AlreadyConnectingError(ConnectionStateError):
    """Raised when connect is called while a connection attempt is running."""


class AlreadyConnectedError(ConnectionStateError):
    """Raised when connect is called on a hub that is already connected."""


class DeviceNotConnectedError(PoweredUpError):
    """Raised when a command is issued to a device that has been detached."""


class TransportError(PoweredUpError):
    """Base transport error."""


class TransportConnectError(TransportError):
    """Raised on BLE connect failures."""


class TransportSendError(TransportError):
    """Raised when writing to a characteristic fails."""
