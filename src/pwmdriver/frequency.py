"""
Frequency controller.

The prescaler can only be written while the oscillator is asleep, so every
frequency change goes through the same sleep -> reprogram -> wake sequence:

    old_mode = MODE1
    MODE1    <- (old_mode & 0x7F) | SLEEP   restart bit cleared, sleep set
    PRESCALE <- prescale
    MODE1    <- old_mode
    wait >= 5 ms                            oscillator settle
    MODE1    <- old_mode | RESTART

A failure at any step leaves the chip as that step left it.
"""

import math
from typing import Awaitable, Callable

from pwmdriver import labels, registers
from pwmdriver.constants import (
    OSCILLATOR_CLOCK_HZ,
    OSCILLATOR_SETTLE_DELAY,
    PRESCALE_MAX,
    PRESCALE_MIN,
    TICKS_PER_CYCLE,
)
from pwmdriver.exceptions import InvalidArgumentError
from pwmdriver.transport import I2cTransport
from pwmdriver.validation import validate_frequency

Delay = Callable[[float], Awaitable[None]]


def compute_prescale(frequency_hz: float) -> int:
    """Convert a PWM frequency into the PRESCALE register value.

    Args:
        frequency_hz: Requested output frequency in Hz.

    Returns:
        int: Prescale rounded half up, e.g. 5 for 1000 Hz and 121 for 50 Hz.

    Raises:
        InvalidArgumentError: If the frequency is not positive and finite, or
            the prescale does not fit the chip's 3..255 range.
    """
    frequency_hz = validate_frequency(frequency_hz)
    prescale_raw = (OSCILLATOR_CLOCK_HZ / float(TICKS_PER_CYCLE)) / frequency_hz - 1.0
    # tiny frequencies overflow to inf, which floor() cannot convert
    prescale = math.floor(prescale_raw + 0.5) if math.isfinite(prescale_raw) else prescale_raw

    if not PRESCALE_MIN <= prescale <= PRESCALE_MAX:
        raise InvalidArgumentError(
            labels.ERR_FREQUENCY_OUT_OF_RANGE.format(
                frequency=frequency_hz,
                prescale=prescale,
                prescale_min=PRESCALE_MIN,
                prescale_max=PRESCALE_MAX,
            )
        )
    return prescale


def sleep_mode(mode: int) -> int:
    """MODE1 value with the restart bit cleared and the sleep bit set."""
    return (mode & 0x7F) | registers.SLEEP


async def apply_prescale(transport: I2cTransport, prescale: int, delay: Delay) -> None:
    """Run the sleep -> reprogram -> wake sequence for an already computed prescale."""
    old_mode = await transport.read_register(registers.MODE1)

    await transport.write_register(registers.MODE1, sleep_mode(old_mode))
    await transport.write_register(registers.PRESCALE, prescale)
    await transport.write_register(registers.MODE1, old_mode)
    await delay(OSCILLATOR_SETTLE_DELAY)
    await transport.write_register(registers.MODE1, old_mode | registers.RESTART)
