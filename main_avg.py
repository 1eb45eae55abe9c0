#!/usr/bin/env python
"""Compute running averages of the numbers read from a file or stdin."""
import argparse
import logging
import logging.config
import os
import sys

import yaml

from avg.config import DEFAULT_MODE, DEFAULT_WINDOW_SIZE, make_config
from avg.errors import ConfigurationError, UnopenableInputError
from avg.inputs import open_input
from avg.parsing import read_values
from avg.runner import run
from avg.utils.argparse import int_pos

logger = logging.getLogger(__name__)

PACKAGE_NAME = 'avg'
VERSION = '0.0.1'

MODES_HELP = """\
runtime modes:
  CMA -- Cumulative Moving Average
  SMA -- Simple Moving Average (mean of the means of consecutive windows)
"""


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        usage='%(prog)s [OPTIONS] [DATAFILE]',
        description=__doc__,
        epilog=MODES_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'data_filename',
        nargs='?',
        default=None,
        metavar='DATAFILE',
        help='file to read numbers from (default: standard input)',
    )

    parser.add_argument(
        '-m',
        '--mode',
        default=DEFAULT_MODE,
        help=f'set the runtime mode (default: {DEFAULT_MODE})',
    )
    parser.add_argument(
        '-I',
        '--show-intermediates',
        action='store_true',
        help='for compatible modes, show intermediate results '
        'not just the final result',
    )
    parser.add_argument(
        '-W',
        '--window-size',
        type=int_pos,
        default=DEFAULT_WINDOW_SIZE,
        metavar='W',
        help='for compatible modes, set a window size of W '
        f'(default: {DEFAULT_WINDOW_SIZE})',
    )
    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s ({PACKAGE_NAME}) Version {VERSION}',
        help='show version information',
    )

    # diagnostics
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
    )
    parser.add_argument('--logconfig', default=None)

    return parser


def setup_logging(level: str, logconfig: str | None = None):
    if logconfig is not None:
        with open(logconfig, 'r') as f:
            logging.config.dictConfig(yaml.safe_load(f.read()))
        return

    # stdout carries the averages, diagnostics go to stderr
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {
                    'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
                },
            },
            'handlers': {
                'default_handler': {
                    'class': 'logging.StreamHandler',
                    'level': level,
                    'formatter': 'standard',
                    'stream': 'ext://sys.stderr',
                },
            },
            'loggers': {
                '': {
                    'handlers': ['default_handler'],
                    'level': level,
                    'propagate': False,
                }
            },
        }
    )


def main(argv=None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.logconfig)

    try:
        config = make_config(
            mode=args.mode,
            window_size=args.window_size,
            show_intermediates=args.show_intermediates,
            data_filename=args.data_filename,
        )
    except ConfigurationError as e:
        print(f'{e}\n', file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    try:
        with open_input(config.data_filename) as stream:
            run(config, read_values(stream), sys.stdout)
    except UnopenableInputError as e:
        print(f'{parser.prog}: {e}', file=sys.stderr)
        return 1
    except BrokenPipeError:
        # reader closed stdout early, e.g. `avg -I data.txt | head`
        logger.debug('output closed by reader')
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
