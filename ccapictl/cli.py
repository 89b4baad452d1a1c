# =============================================================================
# ccapictl – Command line entry point
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Fernández Rodríguez
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This program is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors be liable for any claim, damages, or other liability arising from,
# out of, or in connection with the use of this software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text must accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
# @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import argparse
import logging
import sys
from ipaddress import IPv4Address
from typing import List, Optional, Sequence

import structlog

from .client import parse_u32
from .config import DEFAULT_CCAPI_PORT, DEFAULT_TIMEOUT_S
from .console import CCAPI
from .exceptions import ConsoleError, ConsoleUsageError
from .models import ShutdownMode, parse_ipv4

logger = logging.getLogger(__name__)


def _arg(args: Sequence[str], index: int) -> Optional[str]:
    return args[index] if index < len(args) else None


def _run_process(ccapi: CCAPI, args: Sequence[str]) -> None:
    action = _arg(args, 0)
    if action is None:
        raise ConsoleUsageError("A valid action for processes must be specified")

    if action == "list":
        for pid in ccapi.get_process_list():
            print(pid)
    elif action == "name":
        raw_pid = _arg(args, 1)
        try:
            pid = parse_u32(raw_pid or "")
        except ValueError as exc:
            raise ConsoleUsageError("A valid process id must be specified") from exc
        print(ccapi.get_process_name(pid))
    elif action == "map":
        for pid, name in sorted(ccapi.get_process_map().items()):
            print(f"{pid}\t{name}")
    else:
        raise ConsoleUsageError(f"Invalid action '{action}' specified for processes")


def run(ccapi: CCAPI, command: str, args: Sequence[str]) -> None:
    """
    Route one CLI command to the matching CCAPI call.

    Every argument is validated before a request is sent; bad input raises
    ConsoleUsageError.

    Args:
        ccapi: Client bound to the target console.
        command: Command token (e.g. "ringbuzzer", "process").
        args: Remaining positional arguments.
    """
    first = _arg(args, 0)
    second = _arg(args, 1)

    if command == "ringbuzzer":
        if first is None:
            raise ConsoleUsageError("A buzzer type must be provided")
        ccapi.ring_buzzer(first)

    elif command == "shutdown":
        ccapi.shutdown(ShutdownMode.SHUTDOWN)

    elif command == "restart":
        if first is None:
            mode = ShutdownMode.HARD_REBOOT
        elif first in ("soft", "hard"):
            mode = ShutdownMode.from_str(first)
        else:
            raise ConsoleUsageError(f"Invalid restart mode '{first}' provided")
        ccapi.shutdown(mode)

    elif command == "notify":
        if first is None or second is None:
            raise ConsoleUsageError("A valid icon and message must be provided")
        ccapi.notify(first, second)

    elif command == "led":
        if first is None or second is None:
            raise ConsoleUsageError("A LED color and status must be provided")
        ccapi.set_console_led(first, second)

    elif command == "firmware":
        info = ccapi.get_firmware_info()
        print(f"Firmware version: {info.firmware_version}")
        print(f"CCAPI version:    {info.ccapi_version}")
        print(f"Console type:     {info.console_type.name}")

    elif command in ("temperature", "temp"):
        info = ccapi.get_temperature_info()
        print(f"Cell: {info.cell} °C")
        print(f"RSX:  {info.rsx} °C")

    elif command == "process":
        _run_process(ccapi, args)

    else:
        raise ConsoleUsageError(f"Command '{command}' not recognized")


def _ipv4(value: str) -> IPv4Address:
    try:
        return parse_ipv4(value)
    except ConsoleUsageError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccapictl",
        description="Control a console through its CCAPI web service",
    )
    parser.add_argument(
        "-i",
        "--ip-address",
        type=_ipv4,
        required=True,
        help="Console IPv4 address",
    )
    parser.add_argument(
        "-c",
        "--command",
        required=True,
        help="Command: ringbuzzer, shutdown, restart, notify, led, firmware, "
        "temperature/temp, process",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_CCAPI_PORT,
        help=f"CCAPI port (default {DEFAULT_CCAPI_PORT})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help=f"HTTP timeout in seconds (default {DEFAULT_TIMEOUT_S})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and responses",
    )
    parser.add_argument("args", nargs="*", help="Command arguments")
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Route library structlog events through stdlib logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    configure_logging(ns.verbose)

    try:
        ccapi = CCAPI(ns.ip_address, port=ns.port, timeout_s=ns.timeout)
        try:
            run(ccapi, ns.command, ns.args)
        finally:
            ccapi.close()
    except ConsoleError as exc:
        logger.debug("cli.command_failed command=%s error=%r", ns.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0
