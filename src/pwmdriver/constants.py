### Chip Constants ###
# Internal oscillator frequency (Hz)
OSCILLATOR_CLOCK_HZ = 25_000_000.0
# Ticks per PWM cycle (12-bit counter)
TICKS_PER_CYCLE = 4096
MAX_TICK = TICKS_PER_CYCLE - 1

NUM_CHANNELS = 16
MAX_CHANNEL = NUM_CHANNELS - 1

# Valid prescale register range (datasheet minimum is 3)
PRESCALE_MIN = 3
PRESCALE_MAX = 255

MAX_DEVICE_ADDRESS = 0x7F

### Timing Constants ###
# Oscillator settle time after waking or reprogramming (seconds)
OSCILLATOR_SETTLE_DELAY = 0.005

### Defaults ###
DEFAULT_FREQUENCY_HZ = 60.0
DEFAULT_ADDRESS = 0x40
DEFAULT_BUS = 1

# Configuration file, relative to the home directory
DEFAULT_CONFIG_FILE = 'pwmdriver.json'

# Log file folder, relative to the working directory
LOGS_FOLDER = 'logs/'

__all__ = [
    'OSCILLATOR_CLOCK_HZ',
    'TICKS_PER_CYCLE',
    'MAX_TICK',
    'NUM_CHANNELS',
    'MAX_CHANNEL',
    'PRESCALE_MIN',
    'PRESCALE_MAX',
    'MAX_DEVICE_ADDRESS',
    'OSCILLATOR_SETTLE_DELAY',
    'DEFAULT_FREQUENCY_HZ',
    'DEFAULT_ADDRESS',
    'DEFAULT_BUS',
    'DEFAULT_CONFIG_FILE',
    'LOGS_FOLDER',
]
