"""Pytest fixtures for tests."""

import pytest

from pwmdriver import open_device

# Power-on value of MODE1: sleep and all-call set
POWER_ON_MODE1 = 0x11


class FakeBus:
    """Stand-in for smbus2.SMBus that records every transaction.

    Transactions are appended to the shared `events` list as
    ('write', register, value) or ('read', register, value) tuples.
    Setting `fail_at` to N makes the N-th transaction (1-based) raise
    OSError, the way smbus2 reports a NACK.
    """

    def __init__(self, events, registers=None):
        self.events = events
        self.registers = {0x00: POWER_ON_MODE1}
        self.registers.update(registers or {})
        self.transactions = 0
        self.fail_at = None
        self.closed = False
        self.addresses = set()

    def _begin(self, address):
        self.transactions += 1
        self.addresses.add(address)
        if self.fail_at == self.transactions:
            raise OSError(121, 'Remote I/O error')

    def write_byte_data(self, address, register, value):
        self._begin(address)
        self.registers[register] = value
        self.events.append(('write', register, value))

    def read_byte_data(self, address, register):
        self._begin(address)
        value = self.registers.get(register, 0)
        self.events.append(('read', register, value))
        return value

    def close(self):
        self.closed = True


@pytest.fixture
def events():
    """Ordered log of bus transactions and delays."""
    return []


@pytest.fixture
def bus(events):
    return FakeBus(events)


@pytest.fixture
def delay(events):
    """Recording replacement for asyncio.sleep."""

    async def _delay(seconds):
        events.append(('delay', seconds))

    return _delay


@pytest.fixture
def bus_factory(bus):
    opened = []

    def _factory(bus_id):
        opened.append(bus_id)
        return bus

    _factory.opened = opened
    return _factory


@pytest.fixture
def pca(bus_factory, delay):
    """Open PCA9685 handle on the fake bus."""
    device = open_device(bus_factory=bus_factory, delay=delay)
    yield device
    device.close()