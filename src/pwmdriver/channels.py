"""
Channel writer.

Each channel holds two 12-bit words (on tick, off tick) spread over four
byte registers. Words are written low byte first, on word before off word.
The four writes are not atomic: a failure part way through leaves the
channel with a mix of old and new bytes.
"""

from typing import List, Sequence

from pwmdriver import registers
from pwmdriver.transport import I2cTransport


def split_pair(on: int, off: int) -> List[int]:
    """Split an on/off tick pair into [on_l, on_h, off_l, off_h] bytes."""
    return [on & 0xFF, on >> 8, off & 0xFF, off >> 8]


async def write_pair(transport: I2cTransport, addresses: Sequence[int], on: int, off: int) -> None:
    """Write an on/off pair to four registers, stopping at the first failure."""
    for register, value in zip(addresses, split_pair(on, off)):
        await transport.write_register(register, value)


async def write_channel(transport: I2cTransport, channel: int, on: int, off: int) -> None:
    await write_pair(transport, registers.channel_registers(channel), on, off)


async def write_all_channels(transport: I2cTransport, on: int, off: int) -> None:
    await write_pair(transport, registers.ALL_LED_REGISTERS, on, off)
