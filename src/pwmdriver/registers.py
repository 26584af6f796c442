"""
PCA9685 register map.

Command byte addresses and mode bits as defined by the datasheet.
Only the per-channel LED registers are computed, everything else is fixed.
"""

from typing import Tuple

# Mode and address registers
MODE1 = 0x00
MODE2 = 0x01
SUBADR1 = 0x02
SUBADR2 = 0x03
SUBADR3 = 0x04
ALLCALLADR = 0x05
PRESCALE = 0xFE

# Channel 0 registers, channel N is at +4*N
LED0_ON_L = 0x06
LED0_ON_H = 0x07
LED0_OFF_L = 0x08
LED0_OFF_H = 0x09

# Broadcast block, written to every channel at once
ALL_LED_ON_L = 0xFA
ALL_LED_ON_H = 0xFB
ALL_LED_OFF_L = 0xFC
ALL_LED_OFF_H = 0xFD

# MODE1 bits
RESTART = 0x80
SLEEP = 0x10
ALLCALL = 0x01

# MODE2 bits
INVRT = 0x10
OUTDRV = 0x04

REGISTER_STRIDE = 4

ALL_LED_REGISTERS: Tuple[int, int, int, int] = (ALL_LED_ON_L, ALL_LED_ON_H, ALL_LED_OFF_L, ALL_LED_OFF_H)

# Registers read back by a probe, in datasheet order
PROBE_REGISTERS = {
    'MODE1': MODE1,
    'MODE2': MODE2,
    'SUBADR1': SUBADR1,
    'SUBADR2': SUBADR2,
    'SUBADR3': SUBADR3,
    'ALLCALLADR': ALLCALLADR,
    'PRESCALE': PRESCALE,
}


def channel_registers(channel: int) -> Tuple[int, int, int, int]:
    """Return the (on_l, on_h, off_l, off_h) addresses for a channel."""
    offset = REGISTER_STRIDE * channel
    return (LED0_ON_L + offset, LED0_ON_H + offset, LED0_OFF_L + offset, LED0_OFF_H + offset)
