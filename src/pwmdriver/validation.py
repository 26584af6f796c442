"""Fail-fast argument checks, run before any bus transaction."""

import math
from numbers import Real

from pwmdriver import labels
from pwmdriver.constants import MAX_CHANNEL, MAX_DEVICE_ADDRESS, MAX_TICK
from pwmdriver.exceptions import InvalidArgumentError


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid channel or tick
    return isinstance(value, int) and not isinstance(value, bool)


def validate_channel(channel) -> int:
    if not _is_int(channel) or not 0 <= channel <= MAX_CHANNEL:
        raise InvalidArgumentError(labels.ERR_INVALID_CHANNEL.format(max_channel=MAX_CHANNEL, channel=channel))
    return channel


def validate_tick(name: str, value) -> int:
    if not _is_int(value) or not 0 <= value <= MAX_TICK:
        raise InvalidArgumentError(labels.ERR_INVALID_TICK.format(name=name, max_tick=MAX_TICK, value=value))
    return value


def validate_frequency(frequency_hz) -> float:
    """Check that a frequency is a finite, positive real number.

    Whether the resulting prescale fits the chip is checked separately by
    `pwmdriver.frequency.compute_prescale`.
    """
    if (
        not isinstance(frequency_hz, Real)
        or isinstance(frequency_hz, bool)
        or not math.isfinite(frequency_hz)
        or frequency_hz <= 0
    ):
        raise InvalidArgumentError(labels.ERR_INVALID_FREQUENCY.format(frequency=frequency_hz))
    return float(frequency_hz)


def validate_address(address) -> int:
    if not _is_int(address) or not 0 <= address <= MAX_DEVICE_ADDRESS:
        raise InvalidArgumentError(labels.ERR_INVALID_ADDRESS.format(max_address=MAX_DEVICE_ADDRESS, address=address))
    return address
