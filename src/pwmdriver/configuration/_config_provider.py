"""
Driver configuration loaded from a JSON file.

The file is optional. When present it looks like:

    {
        "pca9685": [
            {"bus": 1, "address": "0x40", "frequency": 50}
        ]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jmespath  # http://jmespath.org/tutorial.html

from pwmdriver import labels
from pwmdriver.configuration._driver_settings import DriverSettings
from pwmdriver.constants import DEFAULT_CONFIG_FILE
from pwmdriver.exceptions import ConfigurationError, InvalidArgumentError
from pwmdriver.logger import Logger
from pwmdriver.validation import validate_address, validate_frequency

log = Logger().setup_logger('Configuration')


class ConfigProvider:
    """Reads PCA9685 settings from the JSON configuration file."""

    PCA9685_BUS = 'pca9685[0].bus'
    PCA9685_ADDRESS = 'pca9685[0].address'
    PCA9685_FREQUENCY = 'pca9685[0].frequency'

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else Path.home() / DEFAULT_CONFIG_FILE
        self.values: Dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        if not self.path.exists():
            log.info(labels.CONFIG_NOT_FOUND.format(path=self.path))
            self.values = {}
            return

        try:
            with open(self.path, encoding='utf-8') as json_file:
                self.values = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(labels.ERR_CONFIG_INVALID_JSON.format(path=self.path, error=e), path=str(self.path)) from e

        log.info(labels.CONFIG_LOADED.format(path=self.path))

    def get(self, search_pattern: str) -> Any:
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return value

    def _invalid(self, field: str, value: Any) -> ConfigurationError:
        return ConfigurationError(labels.ERR_CONFIG_INVALID_VALUE.format(field=field, value=value), path=str(self.path))

    def get_pca9685_bus(self) -> int:
        value = self.get(self.PCA9685_BUS)
        if value is None:
            return DriverSettings.bus_id
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise self._invalid(self.PCA9685_BUS, value)
        return value

    def get_pca9685_address(self) -> int:
        value = self.get(self.PCA9685_ADDRESS)
        if value is None:
            return DriverSettings.address
        try:
            # addresses are usually written as hex strings, e.g. "0x40"
            address = int(value, 0) if isinstance(value, str) else value
            return validate_address(address)
        except (ValueError, TypeError) as e:
            raise self._invalid(self.PCA9685_ADDRESS, value) from e

    def get_pca9685_frequency(self) -> float:
        value = self.get(self.PCA9685_FREQUENCY)
        if value is None:
            return DriverSettings.frequency_hz
        try:
            return validate_frequency(value)
        except InvalidArgumentError as e:
            raise self._invalid(self.PCA9685_FREQUENCY, value) from e

    def get_settings(self) -> DriverSettings:
        return DriverSettings(
            bus_id=self.get_pca9685_bus(),
            address=self.get_pca9685_address(),
            frequency_hz=self.get_pca9685_frequency(),
        )
