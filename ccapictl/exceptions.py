# =============================================================================
# ccapictl Library – Exceptions Module
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

from typing import Dict, Optional

from .errors import ErrorKind


class ConsoleError(Exception):
    """
    Base exception for the library.

    All custom exceptions of the ccapictl library inherit from this class so
    that callers can catch `ConsoleError` to handle any library-specific
    failure in a generic way.
    """
    pass


class ConsoleTransportError(ConsoleError):
    """
    Errors related to the transport layer.

    This includes problems such as:
      - Connection refused / network unreachable
      - DNS failures
      - HTTP errors
      - Request timeouts
    """
    pass


class ConsoleProtocolError(ConsoleError):
    """
    The response returned by the console cannot be understood.
    """
    pass


class ConsoleFramingError(ConsoleProtocolError):
    """
    The response body is missing the status line, or the status line is not
    a valid hexadecimal 32-bit value.
    """
    pass


class ConsoleDecodeError(ConsoleProtocolError):
    """
    The console reported success but the payload lines expected by the
    operation are missing or malformed.

    Attributes:
        operation: Name of the typed operation whose payload failed to decode.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class ConsoleStatusError(ConsoleError):
    """
    The console explicitly responded with a non-zero status code.

    This indicates that the command was delivered correctly but the console
    rejected it or was unable to execute it.

    Attributes:
        kind: Classified error kind (ErrorKind.UNKNOWN for unmapped codes).
        status_code: Raw status code as reported by the console.
        command: CCAPI command that was sent.
        parameters: Query parameters that were sent with the command.
    """

    def __init__(
        self,
        kind: ErrorKind,
        status_code: int,
        command: str,
        parameters: Optional[Dict[str, str]] = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.command = command
        self.parameters = dict(parameters or {})
        super().__init__(
            f"invalid response code '{status_code:#x}' ({kind.description}), "
            f"parameters: {self.parameters}"
        )


class ConsoleUsageError(ConsoleError, ValueError):
    """
    Invalid input from the caller (unknown enum token, bad address, missing
    CLI argument). Always raised before any request is sent.
    """
    pass


class ConsoleNotImplementedError(ConsoleError, NotImplementedError):
    """
    The operation is part of the public API but not implemented.
    """
    pass
