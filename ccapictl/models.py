# =============================================================================
# ccapictl Library – Models
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from .config import DEFAULT_CCAPI_PORT
from .exceptions import ConsoleUsageError


class _TokenEnum(Enum):
    """
    Integer-valued enum that can also be built from a CLI token.

    The accepted token of a member is its lowercase name without
    underscores (e.g. NotifyIcon.WRONG_WAY <-> "wrongway"), unless the
    subclass declares its own `_tokens()` mapping.
    """

    @classmethod
    def _label(cls) -> str:
        return _LABELS.get(cls.__name__, "value")

    @classmethod
    def _tokens(cls) -> Dict[str, "_TokenEnum"]:
        return {member.name.lower().replace("_", ""): member for member in cls}

    @classmethod
    def from_str(cls, token: str):
        member = cls._tokens().get(token.strip().lower())
        if member is None:
            raise ConsoleUsageError(f"invalid {cls._label()} '{token}' provided")
        return member

    @classmethod
    def coerce(cls, value: Union["_TokenEnum", str]):
        """Accept a member or its token; anything else is a usage error."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        raise ConsoleUsageError(f"invalid {cls._label()} {value!r} provided")


class BuzzerType(_TokenEnum):
    """Buzzer patterns accepted by `ringbuzzer`."""

    CONTINUOUS = 0
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3


class ShutdownMode(_TokenEnum):
    """Modes accepted by `shutdown`."""

    SHUTDOWN = 1
    SOFT_REBOOT = 2
    HARD_REBOOT = 3

    @classmethod
    def _tokens(cls) -> Dict[str, "ShutdownMode"]:
        return {
            "shutdown": cls.SHUTDOWN,
            "soft": cls.SOFT_REBOOT,
            "hard": cls.HARD_REBOOT,
        }


class NotifyIcon(_TokenEnum):
    """Icons that can be shown next to a notification message."""

    INFO = 0
    CAUTION = 1
    FRIEND = 2
    SLIDER = 3
    WRONG_WAY = 4
    DIALOG = 5
    DIALOG_SHADOW = 6
    TEXT = 7
    POINTER = 8
    GRAB = 9
    HAND = 10
    PEN = 11
    FINGER = 12
    ARROW = 13
    ARROW_RIGHT = 14
    PROGRESS = 15
    TROPHY1 = 16
    TROPHY2 = 17
    TROPHY3 = 18
    TROPHY4 = 19


class ConsoleLed(_TokenEnum):
    """Front panel LEDs."""

    GREEN = 1
    RED = 2


class LedStatus(_TokenEnum):
    OFF = 0
    ON = 1
    BLINK = 2


# Used in error messages, e.g. "invalid buzzer type 'x' provided".
_LABELS = {
    "BuzzerType": "buzzer type",
    "ShutdownMode": "restart mode",
    "NotifyIcon": "notify icon",
    "ConsoleLed": "LED color",
    "LedStatus": "LED status",
}


class ConsoleType(Enum):
    """
    Console hardware type reported by `getfirmwareinfo`.

    Values outside the known range are reported as UNKNOWN.
    """

    UNKNOWN = 0
    CEX = 1
    DEX = 2
    TOOL = 3

    @classmethod
    def from_value(cls, value: int) -> "ConsoleType":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


def parse_ipv4(value: Union[str, ipaddress.IPv4Address]) -> ipaddress.IPv4Address:
    """
    Parse an IPv4 address.

    Raises:
        ConsoleUsageError: If `value` is not a valid dotted IPv4 address.
    """
    if isinstance(value, ipaddress.IPv4Address):
        return value
    try:
        return ipaddress.IPv4Address(str(value).strip())
    except ipaddress.AddressValueError as exc:
        raise ConsoleUsageError(f"invalid IPv4 address '{value}' provided") from exc


def check_port(port: int) -> int:
    try:
        port = int(port)
    except (TypeError, ValueError) as exc:
        raise ConsoleUsageError(f"invalid port '{port}' provided") from exc
    if not 0 < port <= 0xFFFF:
        raise ConsoleUsageError(f"invalid port {port} provided")
    return port


@dataclass
class Endpoint:
    """
    Address of the console CCAPI service.

    Mutable: the client updates `ip` and `port` independently through
    `set_console_ip` / `set_console_port`.

    Attributes:
        ip: IPv4 address of the console.
        port: TCP port of the CCAPI web service (6333 by default).
    """

    ip: ipaddress.IPv4Address
    port: int = DEFAULT_CCAPI_PORT

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True)
class ConsoleResponse:
    """
    Immutable representation of a successful CCAPI response.

    Attributes:
        command:
            CCAPI command that generated this response.

        status_code:
            Status parsed from line 0. Always 0 (CCAPI_OK) for instances
            returned by the client, since non-zero codes raise instead.

        lines:
            Body split on newlines. Line 0 is the status code, lines 1..N are
            the command-specific payload.

        raw:
            Original unmodified text body.
    """

    command: str
    status_code: int
    lines: List[str]
    raw: str

    @property
    def payload(self) -> List[str]:
        """Lines following the status line."""
        return self.lines[1:]

    def line(self, index: int) -> Optional[str]:
        """Return line `index` or None when the body is shorter."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None


@dataclass(frozen=True)
class FirmwareInfo:
    """
    Firmware details reported by `getfirmwareinfo`.

    Attributes:
        firmware_version: Console firmware version (sent in decimal, e.g. 4700).
        ccapi_version: CCAPI protocol version (sent in hexadecimal).
        console_type: Hardware type of the console.
    """

    firmware_version: int
    ccapi_version: int
    console_type: ConsoleType


@dataclass(frozen=True)
class TemperatureInfo:
    """
    Temperatures reported by `gettemperature`, in degrees Celsius.

    Attributes:
        cell: CPU (Cell) temperature.
        rsx: GPU (RSX) temperature.
    """

    cell: int
    rsx: int
