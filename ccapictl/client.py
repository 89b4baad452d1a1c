# =============================================================================
# ConsoleClient - HTTP client for the console CCAPI web service
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
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
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from ipaddress import IPv4Address
from typing import Any, Dict, Optional, Union

import requests
import structlog

from .config import (
    CCAPI_PATH_PREFIX,
    DEFAULT_CCAPI_PORT,
    DEFAULT_RADIX,
    DEFAULT_TIMEOUT_S,
    I32_MAX,
    I32_MIN,
    U32_MAX,
)
from .errors import classify, is_success
from .exceptions import (
    ConsoleFramingError,
    ConsoleStatusError,
    ConsoleTransportError,
)
from .models import ConsoleResponse, Endpoint, check_port, parse_ipv4

logger = structlog.get_logger(__name__)

# Plain ASCII digits only: no "0x" prefix, no "_" separators, no Unicode digits.
_DIGITS = {
    10: "[0-9]+",
    16: "[0-9a-fA-F]+",
}


def _parse_int(text: str, radix: int, signed: bool) -> int:
    sign = "[+-]?" if signed else r"\+?"
    if re.fullmatch(sign + _DIGITS[radix], text, flags=re.ASCII) is None:
        raise ValueError(f"{text!r} is not a base {radix} integer")
    return int(text, radix)


def parse_u32(text: str, radix: int = 10) -> int:
    """
    Parse an unsigned 32-bit integer written in `radix`.

    Raises:
        ValueError: If `text` is not a number or is out of range.
    """
    value = _parse_int(text, radix, signed=False)
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{text!r} is out of range for u32")
    return value


def parse_i32(text: str, radix: int = 10) -> int:
    """
    Parse a signed 32-bit integer written in `radix`.

    Raises:
        ValueError: If `text` is not a number or is out of range.
    """
    value = _parse_int(text, radix, signed=True)
    if not I32_MIN <= value <= I32_MAX:
        raise ValueError(f"{text!r} is out of range for i32")
    return value


@dataclass
class ConsoleRequest:
    """
    One CCAPI command waiting to be sent.

    Built with `ConsoleClient.request()`, filled with `param()` calls and
    consumed by `send()`:

        client.request("notify").param("id", 0).param("msg", "hi").send()

    Attributes:
        client: Client that will perform the round trip.
        endpoint: Copy of the client endpoint at build time.
        command: CCAPI command name (last path segment of the URL).
        parameters: Query parameters; values are always strings.
    """

    client: "ConsoleClient" = field(repr=False)
    endpoint: Endpoint
    command: str
    parameters: Dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Full URL, e.g. 'http://192.168.1.20:6333/ccapi/ringbuzzer'."""
        return f"http://{self.endpoint}{CCAPI_PATH_PREFIX}/{self.command}"

    def param(self, name: str, value: Any) -> "ConsoleRequest":
        # Escaping is left to requests; '&' or newlines in values are not sanitized.
        self.parameters[name] = str(value)
        return self

    def send(self) -> ConsoleResponse:
        return self.client.send(self)


class ConsoleClient:
    """
    Minimal HTTP client to interact with the CCAPI web service running on a
    console.

    Every command is a single GET to `http://<ip>:<port>/ccapi/<command>` with
    its arguments in the query string. The body is plain text:

        <status code, hexadecimal>
        <payload line 1>
        ...

    A status of 0 means success. Any other value is mapped to an
    `ErrorKind` and raised as `ConsoleStatusError`.

    This client focuses on the request/response cycle only. Typed
    operations live in :class:`ccapictl.console.CCAPI`.
    """

    def __init__(
        self,
        console_ip: Union[str, IPv4Address],
        port: int = DEFAULT_CCAPI_PORT,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a ConsoleClient.

        Args:
            console_ip:
                IPv4 address of the console, e.g. '192.168.1.20'.
            port:
                Port of the CCAPI web service (6333 by default).
            timeout_s:
                HTTP request timeout in seconds.
            session:
                Optional preconfigured requests.Session. If not provided, a new
                session is created.

        Raises:
            ConsoleUsageError:
                If the address is not a valid IPv4 address or the port is out
                of range.
        """
        self._endpoint = Endpoint(parse_ipv4(console_ip), check_port(port))
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> Endpoint:
        """Current console endpoint (address and port)."""
        return self._endpoint

    def set_console_ip(self, console_ip: Union[str, IPv4Address]) -> None:
        """Set the IPv4 address of the console to communicate with."""
        self._endpoint.ip = parse_ipv4(console_ip)

    def set_console_port(self, port: int) -> None:
        """Set the port of the CCAPI web service."""
        self._endpoint.port = check_port(port)

    def request(self, command: str) -> ConsoleRequest:
        """Start building a request for `command`."""
        return ConsoleRequest(
            client=self,
            endpoint=dataclasses.replace(self._endpoint),
            command=command,
        )

    def send(self, request: ConsoleRequest) -> ConsoleResponse:
        """
        Perform one request/response cycle.

        Args:
            request: Request built with `request()`.

        Returns:
            ConsoleResponse for a zero status code.

        Raises:
            ConsoleTransportError:
                On connection, timeout or HTTP errors.
            ConsoleFramingError:
                If the status line is missing or not hexadecimal.
            ConsoleStatusError:
                If the console returns a non-zero status code.
        """
        url = request.url
        logger.debug("ccapi.request", url=url, params=request.parameters)

        try:
            r = self.session.get(url, params=request.parameters, timeout=self.timeout_s)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise ConsoleTransportError(
                f"HTTP error sending '{request.command}' to {url}: {exc}"
            ) from exc

        return self._parse_response(request, r.text)

    def close(self) -> None:
        self.session.close()

    def _parse_response(self, request: ConsoleRequest, raw: str) -> ConsoleResponse:
        """
        Parse the raw body into a ConsoleResponse.

        The function:
          1) Splits the body on newlines (a trailing '\\r' is dropped)
          2) Parses line 0 as a hexadecimal 32-bit status code
          3) Raises ConsoleStatusError for any non-zero status

        Payload lines are returned untouched; decoding them is up to each
        typed operation.
        """
        lines = [ln.rstrip("\r") for ln in (raw or "").split("\n")]

        raw_status = lines[0].strip()
        if not raw_status:
            raise ConsoleFramingError(
                f"Could not read status code from '{request.command}' response"
            )

        try:
            status_code = parse_u32(raw_status, DEFAULT_RADIX)
        except ValueError as exc:
            raise ConsoleFramingError(
                f"Invalid status code {raw_status!r} in '{request.command}' response"
            ) from exc

        logger.debug("ccapi.response", command=request.command, status=f"{status_code:#x}")

        if not is_success(status_code):
            raise ConsoleStatusError(
                kind=classify(status_code),
                status_code=status_code,
                command=request.command,
                parameters=request.parameters,
            )

        return ConsoleResponse(
            command=request.command,
            status_code=status_code,
            lines=lines,
            raw=raw,
        )
