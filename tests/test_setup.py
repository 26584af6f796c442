"""Tests for the device setup sequence and probe."""

import pytest

from pwmdriver import DriverError, Operation

SETUP_SEQUENCE = [
    # every output off
    ('write', 0xFA, 0x00),
    ('write', 0xFB, 0x00),
    ('write', 0xFC, 0x00),
    ('write', 0xFD, 0x00),
    # totem pole outputs, all-call on
    ('write', 0x01, 0x04),
    ('write', 0x00, 0x01),
    ('delay', 0.005),
    # wake up
    ('read', 0x00, 0x01),
    ('write', 0x00, 0x01),
    ('delay', 0.005),
    # 60 Hz
    ('read', 0x00, 0x01),
    ('write', 0x00, 0x11),
    ('write', 0xFE, 101),
    ('write', 0x00, 0x01),
    ('delay', 0.005),
    ('write', 0x00, 0x81),
]


@pytest.mark.asyncio
class TestSetup:
    """Test PCA9685.setup."""

    async def test_sequence(self, pca, events):
        await pca.setup()

        assert events == SETUP_SEQUENCE
        assert pca.frequency == 60

    async def test_sleep_bit_cleared_on_wake(self, pca, bus, events):
        # a chip that ignores the MODE1 write and stays asleep
        original_write = bus.write_byte_data

        def sticky_sleep(address, register, value):
            if register == 0x00 and value == 0x01 and bus.transactions == 5:
                value = 0x11
            original_write(address, register, value)

        bus.write_byte_data = sticky_sleep

        await pca.setup()

        assert events[7] == ('read', 0x00, 0x11)
        assert events[8] == ('write', 0x00, 0x01)

    async def test_custom_frequency(self, pca, events):
        await pca.setup(50)

        assert ('write', 0xFE, 121) in events
        assert pca.frequency == 50

    async def test_bus_transaction_count(self, pca, bus):
        await pca.setup()
        assert bus.transactions == len([event for event in SETUP_SEQUENCE if event[0] != 'delay'])

    @pytest.mark.parametrize('fail_at', [1, 5, 7, 10, 13])
    async def test_failure_aborts(self, pca, bus, fail_at):
        bus.fail_at = fail_at

        with pytest.raises(DriverError) as excinfo:
            await pca.setup()

        assert excinfo.value.operation is Operation.SETUP
        assert excinfo.value.recoverable
        assert bus.transactions == fail_at

    async def test_can_run_again_after_failure(self, pca, bus, events):
        bus.fail_at = 6
        with pytest.raises(DriverError):
            await pca.setup()

        bus.fail_at = None
        events.clear()
        await pca.setup()

        assert events == SETUP_SEQUENCE


@pytest.mark.asyncio
class TestProbe:
    """Test PCA9685.probe."""

    async def test_reads_registers(self, pca, bus, events):
        bus.registers.update({0x01: 0x04, 0x02: 0xE2, 0x03: 0xE4, 0x04: 0xE8, 0x05: 0xE0, 0xFE: 0x1E})

        values = await pca.probe()

        assert values == {
            'MODE1': 0x11,
            'MODE2': 0x04,
            'SUBADR1': 0xE2,
            'SUBADR2': 0xE4,
            'SUBADR3': 0xE8,
            'ALLCALLADR': 0xE0,
            'PRESCALE': 0x1E,
        }
        assert all(event[0] == 'read' for event in events)

    async def test_failure(self, pca, bus):
        bus.fail_at = 2

        with pytest.raises(DriverError) as excinfo:
            await pca.probe()

        assert excinfo.value.operation is Operation.PROBE
