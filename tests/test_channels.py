"""Tests for single-channel and all-channel writes."""

import pytest

from pwmdriver import registers
from pwmdriver.channels import split_pair


class TestRegisterMap:
    """Test per-channel register arithmetic."""

    def test_channel_zero(self):
        assert registers.channel_registers(0) == (0x06, 0x07, 0x08, 0x09)

    def test_last_channel(self):
        assert registers.channel_registers(15) == (0x42, 0x43, 0x44, 0x45)

    def test_channels_do_not_overlap_broadcast_block(self):
        highest = max(registers.channel_registers(15))
        assert highest < min(registers.ALL_LED_REGISTERS)


class TestSplitPair:
    def test_split(self):
        assert split_pair(0x123, 0xABC) == [0x23, 0x01, 0xBC, 0x0A]

    def test_full_scale(self):
        assert split_pair(0, 4095) == [0x00, 0x00, 0xFF, 0x0F]


@pytest.mark.asyncio
class TestWriteChannel:
    """Test PCA9685.write_channel."""

    @pytest.mark.parametrize('channel', [0, 1, 7, 15])
    async def test_four_writes_in_order(self, pca, events, channel):
        await pca.write_channel(channel, 0x123, 0x456)

        base = 0x06 + 4 * channel
        assert events == [
            ('write', base, 0x23),
            ('write', base + 1, 0x01),
            ('write', base + 2, 0x56),
            ('write', base + 3, 0x04),
        ]

    async def test_servo_pulse(self, pca, events):
        """1.5 ms pulse at 50 Hz is roughly 307 ticks."""
        await pca.write_channel(3, 0, 307)

        assert events == [
            ('write', 0x12, 0x00),
            ('write', 0x13, 0x00),
            ('write', 0x14, 0x33),
            ('write', 0x15, 0x01),
        ]

    async def test_bounds_are_accepted(self, pca, bus):
        await pca.write_channel(15, 4095, 4095)
        await pca.write_channel(0, 0, 0)
        assert bus.transactions == 8

    async def test_uses_device_address(self, bus_factory, delay, bus):
        from pwmdriver import open_device

        with open_device(address=0x41, bus_factory=bus_factory, delay=delay) as pca:
            await pca.write_channel(0, 0, 1)
        assert bus.addresses == {0x41}


@pytest.mark.asyncio
class TestWriteAllChannels:
    """Test PCA9685.write_all_channels."""

    async def test_broadcast_registers(self, pca, events):
        await pca.write_all_channels(0x0FF, 0x800)

        assert events == [
            ('write', 0xFA, 0xFF),
            ('write', 0xFB, 0x00),
            ('write', 0xFC, 0x00),
            ('write', 0xFD, 0x08),
        ]

    async def test_all_off(self, pca, events):
        await pca.write_all_channels(0, 0)
        assert [value for _, _, value in events] == [0, 0, 0, 0]
