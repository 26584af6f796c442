"""
I2C transaction layer.

Owns one smbus2 bus handle and performs single addressed byte reads and
writes against one device address. The smbus calls are blocking, so each
one runs in a worker thread and is exposed as a coroutine.

NON-RESPONSIBILITIES:
- No register sequencing
- No retries
- No knowledge of what the registers mean
"""

import asyncio
from typing import Callable, Optional

from smbus2 import SMBus  # type: ignore

from pwmdriver import labels
from pwmdriver.exceptions import DeviceClosedError, TransportError
from pwmdriver.logger import Logger

log = Logger().setup_logger('I2C transport')


class I2cTransport:
    """Single-device view of an exclusively owned I2C bus.

    Attributes
    ----------
    bus_id : int
        I2C bus number (1 on a Raspberry Pi)
    address : int
        7-bit device address on that bus
    """

    def __init__(self, bus_id: int, address: int, bus_factory: Callable[[int], SMBus] = SMBus) -> None:
        self.bus_id = bus_id
        self.address = address
        self._bus_factory = bus_factory
        self._bus: Optional[SMBus] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self) -> None:
        """Open the bus. Raises TransportError if the bus cannot be opened."""
        if self._closed:
            raise DeviceClosedError(self.address, self.bus_id)
        try:
            self._bus = self._bus_factory(self.bus_id)
        except OSError as e:
            raise TransportError(labels.ERR_TRANSPORT_OPEN_FAILED.format(bus_id=self.bus_id, error=e), address=self.address) from e
        log.debug(labels.TRANSPORT_BUS_OPENED.format(bus_id=self.bus_id, address=self.address))

    def close(self) -> None:
        """Release the bus. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        bus, self._bus = self._bus, None
        if bus is not None:
            bus.close()
            log.debug(labels.TRANSPORT_BUS_CLOSED.format(bus_id=self.bus_id, address=self.address))

    def _require_bus(self) -> SMBus:
        if self._closed or self._bus is None:
            raise DeviceClosedError(self.address, self.bus_id)
        return self._bus

    async def write_register(self, register: int, value: int) -> None:
        """Write one byte to a register."""
        bus = self._require_bus()
        try:
            await asyncio.to_thread(bus.write_byte_data, self.address, register, value)
        except OSError as e:
            raise TransportError(
                labels.ERR_TRANSPORT_WRITE_FAILED.format(address=self.address, register=register, error=e),
                address=self.address,
                register=register,
            ) from e
        log.debug(labels.TRANSPORT_WRITE.format(address=self.address, register=register, value=value))

    async def read_register(self, register: int) -> int:
        """Read one byte from a register."""
        bus = self._require_bus()
        try:
            value = await asyncio.to_thread(bus.read_byte_data, self.address, register)
        except OSError as e:
            raise TransportError(
                labels.ERR_TRANSPORT_READ_FAILED.format(address=self.address, register=register, error=e),
                address=self.address,
                register=register,
            ) from e
        log.debug(labels.TRANSPORT_READ.format(address=self.address, register=register, value=value))
        return value
