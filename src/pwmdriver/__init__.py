"""Register-level driver for the PCA9685 16-channel PWM controller."""

from pwmdriver.configuration import ConfigProvider, DriverSettings
from pwmdriver.exceptions import (
    ConfigurationError,
    DeviceClosedError,
    DriverError,
    InvalidArgumentError,
    Operation,
    PwmDriverError,
    TransportError,
)
from pwmdriver.frequency import compute_prescale
from pwmdriver.pca9685 import PCA9685, open_device, open_device_from_settings

__all__ = [
    'PCA9685',
    'open_device',
    'open_device_from_settings',
    'compute_prescale',
    'ConfigProvider',
    'DriverSettings',
    'Operation',
    'PwmDriverError',
    'TransportError',
    'DeviceClosedError',
    'DriverError',
    'InvalidArgumentError',
    'ConfigurationError',
]
