"""
Log and error strings for the PCA9685 driver.

Keeping them in one place keeps the wording consistent between the
driver, the command line tool and the tests.
"""

# Transport
TRANSPORT_BUS_OPENED = 'Opened I2C bus {bus_id} for device 0x{address:02X}'
TRANSPORT_BUS_CLOSED = 'Closed I2C bus {bus_id} for device 0x{address:02X}'
TRANSPORT_WRITE = 'write 0x{address:02X} reg 0x{register:02X} <- 0x{value:02X}'
TRANSPORT_READ = 'read 0x{address:02X} reg 0x{register:02X} -> 0x{value:02X}'

ERR_TRANSPORT_OPEN_FAILED = 'Could not open I2C bus {bus_id}: {error}'
ERR_TRANSPORT_WRITE_FAILED = 'I2C write failed at device 0x{address:02X} register 0x{register:02X}: {error}'
ERR_TRANSPORT_READ_FAILED = 'I2C read failed at device 0x{address:02X} register 0x{register:02X}: {error}'
ERR_DEVICE_CLOSED = 'Device 0x{address:02X} on bus {bus_id} is closed'

# Driver
PCA9685_OPENED = 'PCA9685 opened at address 0x{address:02X} on bus {bus_id}'
PCA9685_CLOSED = 'PCA9685 at address 0x{address:02X} closed'
PCA9685_SETUP_STARTED = 'Setting up PCA9685 at address 0x{address:02X}'
PCA9685_SETUP_DONE = 'PCA9685 setup complete at {frequency} Hz'
PCA9685_FREQUENCY_SET = 'PWM frequency set to {frequency} Hz (prescale {prescale})'

ERR_OPERATION_FAILED = '{operation} failed: {error}'

# Argument validation
ERR_INVALID_CHANNEL = 'Channel must be an integer between 0 and {max_channel}, got {channel!r}'
ERR_INVALID_TICK = '{name} must be an integer between 0 and {max_tick}, got {value!r}'
ERR_INVALID_FREQUENCY = 'Frequency must be a finite number greater than 0 Hz, got {frequency!r}'
ERR_FREQUENCY_OUT_OF_RANGE = (
    'Frequency {frequency} Hz needs prescale {prescale}, which is outside the chip range '
    '{prescale_min}..{prescale_max}'
)
ERR_INVALID_ADDRESS = 'Device address must be an integer between 0x00 and 0x{max_address:02X}, got {address!r}'

# Recovery hints
HINT_RETRY_SEQUENCE = 'The sequence converges to the same chip state, it is safe to run it again.'
HINT_CHECK_WIRING = 'Check that the device is powered, wired and present on the bus (i2cdetect).'

# Configuration
CONFIG_LOADED = 'Loaded driver configuration from {path}'
CONFIG_NOT_FOUND = 'No configuration file at {path}, using defaults'
ERR_CONFIG_INVALID_JSON = "Configuration file {path} is not valid JSON: {error}"
ERR_CONFIG_INVALID_VALUE = "Invalid configuration value for '{field}': {value!r}"

# Command line
CLI_DESCRIPTION = 'PCA9685 PWM controller bench tool'
CLI_DONE = 'Done.'
CLI_PROBE_LINE = '{name}: 0x{value:02X}'
