"""
Bench tool for a PCA9685 board.

    python -m pwmdriver setup
    python -m pwmdriver --address 0x41 frequency 50
    python -m pwmdriver channel 0 0 307
    python -m pwmdriver all 0 0
    python -m pwmdriver probe
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pwmdriver import labels
from pwmdriver.configuration import ConfigProvider, DriverSettings
from pwmdriver.exceptions import InvalidArgumentError, PwmDriverError
from pwmdriver.logger import Logger
from pwmdriver.pca9685 import PCA9685, open_device_from_settings

EXIT_OK = 0
EXIT_DRIVER_ERROR = 1
EXIT_INVALID_ARGUMENT = 2

DRIVER_LOGGERS = ('Configuration', 'I2C transport', 'PCA9685')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pwmdriver', description=labels.CLI_DESCRIPTION)
    parser.add_argument('--config', help='Path to the JSON configuration file')
    parser.add_argument('--bus', type=int, help='I2C bus number (overrides the configuration)')
    parser.add_argument('--address', type=lambda value: int(value, 0), help='Device address, e.g. 0x40')
    parser.add_argument('--verbose', action='store_true', help='Log every register access to the console')
    parser.add_argument('--log-dir', help='Folder for the log file (default: logs/)')

    commands = parser.add_subparsers(dest='command', required=True)

    setup = commands.add_parser('setup', help='Turn every output off and start the oscillator')
    setup.add_argument('frequency', type=float, nargs='?', help='Frequency in Hz (default: configured value)')

    frequency = commands.add_parser('frequency', help='Change the PWM frequency')
    frequency.add_argument('frequency', type=float, help='Frequency in Hz')

    channel = commands.add_parser('channel', help='Write on/off ticks to one channel')
    channel.add_argument('channel', type=int)
    channel.add_argument('on', type=int)
    channel.add_argument('off', type=int)

    all_channels = commands.add_parser('all', help='Write on/off ticks to every channel')
    all_channels.add_argument('on', type=int)
    all_channels.add_argument('off', type=int)

    commands.add_parser('probe', help='Print the mode, sub-address and prescale registers')

    return parser


def resolve_settings(args: argparse.Namespace) -> DriverSettings:
    settings = ConfigProvider(args.config).get_settings()
    return DriverSettings(
        bus_id=args.bus if args.bus is not None else settings.bus_id,
        address=args.address if args.address is not None else settings.address,
        frequency_hz=settings.frequency_hz,
    )


async def run_command(pca: PCA9685, args: argparse.Namespace) -> None:
    if args.command == 'setup':
        await pca.setup(args.frequency if args.frequency is not None else pca.frequency)
    elif args.command == 'frequency':
        await pca.set_frequency(args.frequency)
    elif args.command == 'channel':
        await pca.write_channel(args.channel, args.on, args.off)
    elif args.command == 'all':
        await pca.write_all_channels(args.on, args.off)
    elif args.command == 'probe':
        for name, value in (await pca.probe()).items():
            print(labels.CLI_PROBE_LINE.format(name=name, value=value))


def main(argv: Optional[List[str]] = None, **open_kwargs) -> int:
    args = build_parser().parse_args(argv)
    if args.log_dir:
        Logger().set_logs_folder(args.log_dir)
    level = logging.DEBUG if args.verbose else logging.INFO
    for name in DRIVER_LOGGERS:
        Logger().setup_logger(name, enable_stream_handler=True, level=level)
    log = Logger().setup_logger('CLI', enable_stream_handler=True, level=level)

    try:
        settings = resolve_settings(args)
        with open_device_from_settings(settings, **open_kwargs) as pca:
            asyncio.run(run_command(pca, args))
    except InvalidArgumentError as e:
        log.error(e.message)
        return EXIT_INVALID_ARGUMENT
    except PwmDriverError as e:
        log.error(e.get_full_message())
        return EXIT_DRIVER_ERROR

    log.info(labels.CLI_DONE)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
