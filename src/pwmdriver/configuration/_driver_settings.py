from dataclasses import dataclass

from pwmdriver.constants import DEFAULT_ADDRESS, DEFAULT_BUS, DEFAULT_FREQUENCY_HZ


@dataclass(frozen=True)
class DriverSettings:
    """Where the board lives and the frequency it should run at."""

    bus_id: int = DEFAULT_BUS
    address: int = DEFAULT_ADDRESS
    frequency_hz: float = DEFAULT_FREQUENCY_HZ
