"""
PCA9685 handler for controlling the PWM board on I2C.

Example:
    >>> with open_device(frequency_hz=50, address=0x40, bus_id=1) as pca:
    ...     await pca.setup()
    ...     await pca.set_frequency(50)
    ...     await pca.write_channel(0, 0, 307)
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict, Optional

from smbus2 import SMBus  # type: ignore

from pwmdriver import channels, labels, registers
from pwmdriver.configuration import DriverSettings
from pwmdriver.constants import DEFAULT_ADDRESS, DEFAULT_BUS, DEFAULT_FREQUENCY_HZ, OSCILLATOR_SETTLE_DELAY
from pwmdriver.exceptions import DeviceClosedError, DriverError, Operation, TransportError
from pwmdriver.frequency import Delay, apply_prescale, compute_prescale
from pwmdriver.logger import Logger
from pwmdriver.transport import I2cTransport
from pwmdriver.validation import validate_address, validate_channel, validate_tick

log = Logger().setup_logger('PCA9685')


class PCA9685:
    """One open connection to one PCA9685 chip.

    The handle owns its transport exclusively. All register state lives in
    the chip; the only thing remembered here is the last frequency that was
    applied successfully.

    Every public coroutine runs its whole register sequence under a
    per-handle lock, so sequences issued concurrently on the same event loop
    are serialized rather than interleaved.

    Attributes
    ----------
    bus_id : int
        I2C bus number
    address : int
        7-bit I2C address of the board
    """

    def __init__(self, transport: I2cTransport, frequency_hz: float, delay: Delay = asyncio.sleep) -> None:
        self._transport = transport
        self._frequency = frequency_hz
        self._delay = delay
        self._lock = asyncio.Lock()

    @property
    def bus_id(self) -> int:
        return self._transport.bus_id

    @property
    def address(self) -> int:
        return self._transport.address

    @property
    def frequency(self) -> float:
        """Last frequency in Hz applied to the chip (or requested at open)."""
        return self._frequency

    @property
    def closed(self) -> bool:
        return self._transport.closed

    def close(self) -> None:
        """Close the bus connection. Further operations raise DeviceClosedError.

        Does not wait for a sequence that is still running on this handle;
        from a coroutine use `aclose()` instead.
        """
        if self._transport.closed:
            return
        self._transport.close()
        log.info(labels.PCA9685_CLOSED.format(address=self.address))

    async def aclose(self) -> None:
        """Wait for any running register sequence to finish, then close."""
        async with self._lock:
            self.close()

    def __enter__(self) -> 'PCA9685':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    async def __aenter__(self) -> 'PCA9685':
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    @asynccontextmanager
    async def _sequence(self, operation: Operation) -> AsyncIterator[None]:
        """Serialize a register sequence and tag transport failures with its operation."""
        if self._transport.closed:
            raise DeviceClosedError(self.address, self.bus_id)
        async with self._lock:
            try:
                yield
            except DeviceClosedError:
                raise
            except TransportError as e:
                error = DriverError(operation, e)
                log.error(error.message)
                raise error from e

    async def set_frequency(self, frequency_hz: float) -> None:
        """Reprogram the prescaler for a new PWM frequency.

        Args:
            frequency_hz: Output frequency in Hz (roughly 24 to 1526 Hz).

        Raises:
            InvalidArgumentError: Frequency invalid, nothing was sent.
            DeviceClosedError: The handle is closed, nothing was sent.
            DriverError: A bus transaction failed part way through.
        """
        prescale = compute_prescale(frequency_hz)
        async with self._sequence(Operation.SET_FREQUENCY):
            await apply_prescale(self._transport, prescale, self._delay)
        self._frequency = float(frequency_hz)
        log.info(labels.PCA9685_FREQUENCY_SET.format(frequency=self._frequency, prescale=prescale))

    async def write_channel(self, channel: int, on: int, off: int) -> None:
        """Write on and off ticks for one channel.

        Args:
            channel: Channel index, 0..15.
            on: Tick (0..4095) at which the output goes high.
            off: Tick (0..4095) at which the output goes low.
        """
        validate_channel(channel)
        validate_tick('on', on)
        validate_tick('off', off)
        async with self._sequence(Operation.WRITE_CHANNEL):
            await channels.write_channel(self._transport, channel, on, off)

    async def write_all_channels(self, on: int, off: int) -> None:
        """Write the same on and off ticks to every channel through the ALL_LED block."""
        validate_tick('on', on)
        validate_tick('off', off)
        async with self._sequence(Operation.WRITE_ALL_CHANNELS):
            await channels.write_all_channels(self._transport, on, off)

    async def setup(self, frequency_hz: float = DEFAULT_FREQUENCY_HZ) -> None:
        """Bring the chip into a known state.

        All outputs off, totem pole outputs, all-call enabled, oscillator
        awake, then the frequency sequence for `frequency_hz` (60 Hz unless
        told otherwise). Each step must succeed before the next one runs.
        """
        prescale = compute_prescale(frequency_hz)
        log.info(labels.PCA9685_SETUP_STARTED.format(address=self.address))

        async with self._sequence(Operation.SETUP):
            await channels.write_all_channels(self._transport, 0, 0)
            await self._transport.write_register(registers.MODE2, registers.OUTDRV)
            await self._transport.write_register(registers.MODE1, registers.ALLCALL)
            await self._delay(OSCILLATOR_SETTLE_DELAY)

            mode = await self._transport.read_register(registers.MODE1)
            await self._transport.write_register(registers.MODE1, mode & ~registers.SLEEP)
            await self._delay(OSCILLATOR_SETTLE_DELAY)

            await apply_prescale(self._transport, prescale, self._delay)

        self._frequency = float(frequency_hz)
        log.info(labels.PCA9685_SETUP_DONE.format(frequency=self._frequency))

    async def probe(self) -> Dict[str, int]:
        """Read back the mode, address and prescale registers.

        Returns:
            dict: Register name to current byte value, read from the chip.
        """
        values: Dict[str, int] = {}
        async with self._sequence(Operation.PROBE):
            for name, register in registers.PROBE_REGISTERS.items():
                values[name] = await self._transport.read_register(register)
        return values


def open_device(
    frequency_hz: float = DEFAULT_FREQUENCY_HZ,
    address: int = DEFAULT_ADDRESS,
    bus_id: int = DEFAULT_BUS,
    *,
    bus_factory: Callable[[int], SMBus] = SMBus,
    delay: Optional[Delay] = None,
) -> PCA9685:
    """Open the bus and return a handle for the PCA9685 at `address`.

    Nothing is written to the chip; call `setup()` to initialize it.

    Raises:
        InvalidArgumentError: Frequency or address invalid.
        TransportError: The bus could not be opened.
    """
    compute_prescale(frequency_hz)
    validate_address(address)

    transport = I2cTransport(bus_id, address, bus_factory=bus_factory)
    transport.open()
    log.info(labels.PCA9685_OPENED.format(address=address, bus_id=bus_id))
    return PCA9685(transport, float(frequency_hz), delay=delay or asyncio.sleep)


def open_device_from_settings(settings: DriverSettings, **kwargs) -> PCA9685:
    """Open the board described by a DriverSettings (see `pwmdriver.configuration`)."""
    return open_device(settings.frequency_hz, settings.address, settings.bus_id, **kwargs)
