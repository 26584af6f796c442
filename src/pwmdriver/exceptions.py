"""Exception hierarchy for the PCA9685 driver.

```
PwmDriverError
├── TransportError           single bus transaction failed
│   └── DeviceClosedError    transaction attempted on a closed handle
├── DriverError              multi-step sequence aborted by a TransportError
├── InvalidArgumentError     argument rejected before any bus traffic
└── ConfigurationError       configuration file unreadable or invalid
```

Nothing in the driver retries. Every failure reaches the caller, who decides
whether running the whole sequence again is appropriate (see
`DriverError.recoverable`).
"""

from enum import Enum
from typing import Optional

from pwmdriver import labels


class Operation(Enum):
    """Logical driver operations a failure can be attributed to."""

    SETUP = 'setup'
    SET_FREQUENCY = 'set frequency'
    WRITE_CHANNEL = 'write channel'
    WRITE_ALL_CHANNELS = 'write all channels'
    PROBE = 'probe'


# Sequences that reach the same chip state when run again from scratch
RETRYABLE_OPERATIONS = frozenset({Operation.SETUP, Operation.WRITE_ALL_CHANNELS})


class PwmDriverError(Exception):
    """
    Base exception for all driver errors.

    Attributes:
        message: Human readable description
        recoverable: True if re-running the failed operation is safe
        recovery_hint: Optional suggestion for how to fix the issue
    """

    def __init__(self, message: str, recoverable: bool = False, recovery_hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.message

    def get_full_message(self) -> str:
        """Get the error message followed by the recovery hint, if any."""
        msg = self.message
        if self.recovery_hint:
            msg += f'\n\nSuggestion: {self.recovery_hint}'
        return msg


class TransportError(PwmDriverError):
    """A single addressed read or write on the bus failed."""

    def __init__(self, message: str, address: Optional[int] = None, register: Optional[int] = None):
        super().__init__(message, recovery_hint=labels.HINT_CHECK_WIRING)
        self.address = address
        self.register = register


class DeviceClosedError(TransportError):
    """A transaction was attempted on a handle that has been closed."""

    def __init__(self, address: int, bus_id: int):
        super().__init__(labels.ERR_DEVICE_CLOSED.format(address=address, bus_id=bus_id), address=address)
        self.recovery_hint = None
        self.bus_id = bus_id


class DriverError(PwmDriverError):
    """A multi-step register sequence was aborted by a transport failure.

    The chip is left in whatever partial state the failed step produced.
    """

    def __init__(self, operation: Operation, transport_error: TransportError):
        recoverable = operation in RETRYABLE_OPERATIONS
        super().__init__(
            labels.ERR_OPERATION_FAILED.format(operation=operation.value, error=transport_error),
            recoverable=recoverable,
            recovery_hint=labels.HINT_RETRY_SEQUENCE if recoverable else transport_error.recovery_hint,
        )
        self.operation = operation
        self.transport_error = transport_error


class InvalidArgumentError(PwmDriverError, ValueError):
    """An argument is outside its valid range. Raised before any bus transaction."""


class ConfigurationError(PwmDriverError):
    """The driver configuration file could not be used."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


__all__ = [
    'Operation',
    'PwmDriverError',
    'TransportError',
    'DeviceClosedError',
    'DriverError',
    'InvalidArgumentError',
    'ConfigurationError',
]
