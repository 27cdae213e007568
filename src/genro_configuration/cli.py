# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command-line tools: configuration-put, configuration-get, configuration-copy.

Usage:
    configuration-put <uri> <path> <value>
    configuration-get <uri> <path> [--recursive]
    configuration-copy <source-uri> <destination-uri> [--path PATH]

Examples:
    configuration-put file:/etc/app.ini database/host db.local
    configuration-get json:///etc/app.json database --recursive
    configuration-copy file:/etc/app.ini consul://localhost:8500/app

Every tool exits with 0 on success and 1 after printing the error on
stderr. The log level defaults to $CONFIGURATION_LOG_LEVEL (WARNING if
unset); -v switches to DEBUG.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Sequence

from .exceptions import ConfigurationError
from .factory import get_configuration

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'CONFIGURATION_LOG_LEVEL'


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument('--separator', default='/',
                        help="Path separator (default '/')")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def _setup_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def _run(command: Callable[[argparse.Namespace], int], args: argparse.Namespace) -> int:
    _setup_logging(args.verbose)
    try:
        return command(args)
    except (ConfigurationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


# ==================== put ====================


def _put(args: argparse.Namespace) -> int:
    with get_configuration(args.uri) as conf:
        conf.set_path_separator(args.separator)
        conf.put_string(args.path, args.value)
    return 0


def put_main(argv: Sequence[str] | None = None) -> int:
    parser = _parser('configuration-put', 'Put a value into a configuration backend')
    parser.add_argument('uri', help='Backend URI')
    parser.add_argument('path', help='Path of the value')
    parser.add_argument('value', help='Value to put')
    return _run(_put, parser.parse_args(argv))


# ==================== get ====================


def _get(args: argparse.Namespace) -> int:
    with get_configuration(args.uri) as conf:
        conf.set_path_separator(args.separator)
        if args.recursive:
            for key, value in sorted(conf.get_recursive_map(args.path).items()):
                print(f"{key} = {value}")
            return 0
        value = conf.get_string(args.path)
    if value is None:
        print(f"error: no value at '{args.path}'", file=sys.stderr)
        return 1
    print(value)
    return 0


def get_main(argv: Sequence[str] | None = None) -> int:
    parser = _parser('configuration-get', 'Get a value from a configuration backend')
    parser.add_argument('uri', help='Backend URI')
    parser.add_argument('path', help='Path of the value')
    parser.add_argument('-r', '--recursive', action='store_true',
                        help='Print every value at or below path')
    return _run(_get, parser.parse_args(argv))


# ==================== copy ====================


def _copy(args: argparse.Namespace) -> int:
    with get_configuration(args.source) as source, \
            get_configuration(args.destination) as destination:
        source.set_path_separator(args.separator)
        destination.set_path_separator(args.separator)
        values = source.get_recursive_map(args.path)
        for key, value in sorted(values.items()):
            destination.put_string(key, value)
    logger.info("Copied %d values from %s to %s", len(values), args.source, args.destination)
    return 0


def copy_main(argv: Sequence[str] | None = None) -> int:
    parser = _parser('configuration-copy', 'Copy values between configuration backends')
    parser.add_argument('source', help='Source backend URI')
    parser.add_argument('destination', help='Destination backend URI')
    parser.add_argument('--path', default='',
                        help='Copy only the subtree at this path (default: everything)')
    return _run(_copy, parser.parse_args(argv))
