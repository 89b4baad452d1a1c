# =============================================================================
# CCAPI - Typed console operations built on top of ConsoleClient
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Fernández Rodríguez
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose and noninfringement. In no event shall the
# authors or copyright holders be liable for any claim, damages or other
# liability, whether in an action of contract, tort or otherwise, arising from,
# out of or in connection with the software or the use or other dealings in the
# software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
# @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

from typing import Dict, List, Union

import structlog

from .client import ConsoleClient, parse_i32, parse_u32
from .config import DEFAULT_RADIX
from .exceptions import (
    ConsoleDecodeError,
    ConsoleNotImplementedError,
    ConsoleTransportError,
    ConsoleUsageError,
)
from .models import (
    BuzzerType,
    ConsoleLed,
    ConsoleResponse,
    ConsoleType,
    FirmwareInfo,
    LedStatus,
    NotifyIcon,
    ShutdownMode,
    TemperatureInfo,
)

logger = structlog.get_logger(__name__)


def _require_line(response: ConsoleResponse, index: int, operation: str, what: str) -> str:
    line = response.line(index)
    if line is None:
        raise ConsoleDecodeError(operation, f"missing {what} (line {index})")
    return line


def _decode(operation: str, what: str, text: str, parse, radix: int) -> int:
    try:
        return parse(text.strip(), radix)
    except ValueError as exc:
        raise ConsoleDecodeError(operation, f"invalid {what} {text!r}") from exc


class CCAPI(ConsoleClient):
    """
    High-level client exposing one typed method per CCAPI command.

    `CCAPI` extends :class:`ccapictl.client.ConsoleClient`; each method sends
    exactly one request (except `get_process_map`) and decodes the payload
    lines that follow the status line.

    Enum arguments also accept their CLI token (e.g. "single" for
    BuzzerType.SINGLE); invalid tokens raise ConsoleUsageError before anything
    is sent.
    """

    # ---- Commands (last segment of /ccapi/<command>) ----
    RING_BUZZER_CMD = "ringbuzzer"
    SHUTDOWN_CMD = "shutdown"
    NOTIFY_CMD = "notify"
    SET_CONSOLE_LED_CMD = "setconsoleled"
    GET_FIRMWARE_INFO_CMD = "getfirmwareinfo"
    GET_TEMPERATURE_CMD = "gettemperature"
    GET_PROCESS_LIST_CMD = "getprocesslist"
    GET_PROCESS_NAME_CMD = "getprocessname"
    GET_MEMORY_CMD = "getmemory"

    def ring_buzzer(self, buzzer_type: Union[BuzzerType, str]) -> None:
        """
        Ring the console buzzer.

        Args:
            buzzer_type: Buzzer pattern to use.
        """
        buzzer_type = BuzzerType.coerce(buzzer_type)
        self.request(self.RING_BUZZER_CMD).param("type", buzzer_type.value).send()

    def shutdown(self, mode: Union[ShutdownMode, str] = ShutdownMode.SHUTDOWN) -> None:
        """
        Shut down or restart the console.

        The console drops the HTTP connection while it goes down, so a
        successful shutdown usually shows up as a transport error. Transport
        errors are therefore treated as success for this command only; a
        non-zero status code still raises.

        Args:
            mode: Shutdown, soft reboot or hard reboot.

        Raises:
            ConsoleStatusError / ConsoleFramingError:
                If the console answered with an error.
        """
        mode = ShutdownMode.coerce(mode)
        try:
            self.request(self.SHUTDOWN_CMD).param("mode", mode.value).send()
        except ConsoleTransportError as exc:
            logger.debug("ccapi.shutdown.connection_dropped", mode=mode.name, error=str(exc))

    def notify(self, icon: Union[NotifyIcon, str], message: str) -> None:
        """
        Display a notification message with an icon.

        Args:
            icon: Icon to display.
            message: Message to display. Sent as-is in the query string.
        """
        icon = NotifyIcon.coerce(icon)
        self.request(self.NOTIFY_CMD).param("id", icon.value).param("msg", message).send()

    def set_console_led(
        self,
        color: Union[ConsoleLed, str],
        status: Union[LedStatus, str],
    ) -> None:
        """Set a console LED on, off or blinking."""
        color = ConsoleLed.coerce(color)
        status = LedStatus.coerce(status)
        (
            self.request(self.SET_CONSOLE_LED_CMD)
            .param("color", color.value)
            .param("status", status.value)
            .send()
        )

    def get_firmware_info(self) -> FirmwareInfo:
        """
        Query firmware information.

        Payload:
            line 1: firmware version (decimal)
            line 2: CCAPI version (hexadecimal)
            line 3: console type (decimal, see ConsoleType)

        Returns:
            FirmwareInfo model.

        Raises:
            ConsoleDecodeError:
                If any of the three lines is missing or malformed.
        """
        op = "get_firmware_info"
        resp = self.request(self.GET_FIRMWARE_INFO_CMD).send()

        raw_firmware = _require_line(resp, 1, op, "firmware version")
        raw_ccapi = _require_line(resp, 2, op, "CCAPI version")
        raw_type = _require_line(resp, 3, op, "console type")

        return FirmwareInfo(
            firmware_version=_decode(op, "firmware version", raw_firmware, parse_u32, 10),
            ccapi_version=_decode(op, "CCAPI version", raw_ccapi, parse_u32, DEFAULT_RADIX),
            console_type=ConsoleType.from_value(
                _decode(op, "console type", raw_type, parse_i32, 10)
            ),
        )

    def get_temperature_info(self) -> TemperatureInfo:
        """
        Query CPU and GPU temperatures in degrees Celsius.

        Both values are sent in hexadecimal.
        """
        op = "get_temperature_info"
        resp = self.request(self.GET_TEMPERATURE_CMD).send()

        raw_cell = _require_line(resp, 1, op, "cell temperature")
        raw_rsx = _require_line(resp, 2, op, "RSX temperature")

        return TemperatureInfo(
            cell=_decode(op, "cell temperature", raw_cell, parse_i32, DEFAULT_RADIX),
            rsx=_decode(op, "RSX temperature", raw_rsx, parse_i32, DEFAULT_RADIX),
        )

    def get_process_list(self) -> List[int]:
        """
        Return the process identifiers running on the console.

        Lines that are not decimal pids (empty trailer, junk) are skipped.
        """
        resp = self.request(self.GET_PROCESS_LIST_CMD).send()

        pids: List[int] = []
        for raw_pid in resp.payload:
            try:
                pids.append(parse_u32(raw_pid.strip()))
            except ValueError:
                continue
        return pids

    def get_process_name(self, pid: int) -> str:
        """
        Return the name of process `pid`.

        Raises:
            ConsoleDecodeError: If the response has no name line.
        """
        pid = _check_pid(pid)
        resp = self.request(self.GET_PROCESS_NAME_CMD).param("pid", pid).send()
        return _require_line(resp, 1, "get_process_name", f"name for pid '{pid}'")

    def get_process_map(self) -> Dict[int, str]:
        """
        Return a pid -> name map.

        Sends one `getprocesslist` followed by one `getprocessname` per pid.
        If any lookup fails the error propagates and no partial map is
        returned.
        """
        return {pid: self.get_process_name(pid) for pid in self.get_process_list()}

    def read_process_memory(self, pid: int, address: int, size: int) -> bytes:
        """
        **Not implemented.** Read `size` bytes at `address` in process `pid`.

        The request is built but never sent.

        Raises:
            ConsoleNotImplementedError: Always.
        """
        (
            self.request(self.GET_MEMORY_CMD)
            .param("pid", pid)
            .param("addr", hex(address) if isinstance(address, int) else address)
            .param("size", size)
        )
        raise ConsoleNotImplementedError("read_process_memory is not implemented")


def _check_pid(pid: int) -> int:
    try:
        return parse_u32(str(pid))
    except ValueError as exc:
        raise ConsoleUsageError(f"invalid process id '{pid}' provided") from exc
