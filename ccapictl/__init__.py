from .client import ConsoleClient, ConsoleRequest
from .console import CCAPI
from .errors import ErrorKind, classify, is_success
from .models import (
    BuzzerType,
    ConsoleLed,
    ConsoleResponse,
    ConsoleType,
    Endpoint,
    FirmwareInfo,
    LedStatus,
    NotifyIcon,
    ShutdownMode,
    TemperatureInfo,
)
from .exceptions import (
    ConsoleError,
    ConsoleTransportError,
    ConsoleProtocolError,
    ConsoleFramingError,
    ConsoleDecodeError,
    ConsoleStatusError,
    ConsoleUsageError,
    ConsoleNotImplementedError,
)

__all__ = [
    "CCAPI",
    "ConsoleClient",
    "ConsoleRequest",
    "ConsoleResponse",
    "Endpoint",
    "ErrorKind",
    "classify",
    "is_success",
    "BuzzerType",
    "ConsoleLed",
    "ConsoleType",
    "FirmwareInfo",
    "LedStatus",
    "NotifyIcon",
    "ShutdownMode",
    "TemperatureInfo",
    "ConsoleError",
    "ConsoleTransportError",
    "ConsoleProtocolError",
    "ConsoleFramingError",
    "ConsoleDecodeError",
    "ConsoleStatusError",
    "ConsoleUsageError",
    "ConsoleNotImplementedError",
]
