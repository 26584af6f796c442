from ._config_provider import ConfigProvider
from ._driver_settings import DriverSettings

__all__ = ["ConfigProvider", "DriverSettings"]
