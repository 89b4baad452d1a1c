# =============================================================================
# ccapictl Library – Console status codes
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

from enum import Enum
from typing import Dict, Optional

from .config import CCAPI_OK


class ErrorKind(Enum):
    """
    Generic console error codes, as returned in the status line of a CCAPI
    response.

    Each member carries the raw 32-bit `code` and a human readable
    `description`. `UNKNOWN` has no code and is used for every value that is
    not listed here.

    See: https://www.psdevwiki.com/ps3/Error_Codes#Generic_errors
    """

    EAGAIN = (0x80010001, "The resource is temporarily unavailable")
    EINVAL = (0x80010002, "Invalid argument or flag")
    ENOSYS = (0x80010003, "The feature is not yet implemented")
    ENOMEM = (0x80010004, "Memory allocation failed")
    ESRCH = (0x80010005, "The resource with the specified identifier does not exist")
    ENOENT = (0x80010006, "The file does not exist")
    ENOEXEC = (0x80010007, "The file is in unrecognized format")
    EDEADLK = (0x80010008, "Resource deadlock is avoided")
    EPERM = (0x80010009, "Operation not permitted")
    EBUSY = (0x8001000A, "The device or resource is busy")
    ETIMEDOUT = (0x8001000B, "The operation is timed out")
    EABORT = (0x8001000C, "The operation is aborted")
    EFAULT = (0x8001000D, "Invalid memory access")
    ECHILD = (0x8001000E, "Try to access a non existing child process")
    ESTAT = (0x8001000F, "State of the target thread is invalid")
    EALIGN = (0x80010010, "Alignment is invalid")
    EKRESOURCE = (0x80010011, "Shortage of the kernel resources")
    EISDIR = (0x80010012, "The file is a directory")
    ECANCELED = (0x80010013, "Operation cancelled")
    EEXIST = (0x80010014, "Entry already exists")
    EISCONN = (0x80010015, "Port is already connected")
    ENOTCONN = (0x80010016, "Port is not connected")
    EAUTHFAIL = (0x80010017, "Failure in authorizing SELF")
    ENOTMSELF = (0x80010018, "The file is not MSELF")
    ESYSVER = (0x80010019, "System version error")
    EAUTHFATAL = (0x8001001A, "Fatal system error occurred while authorizing SELF")
    EDOM = (0x8001001B, "Math domain violation")
    ERANGE = (0x8001001C, "Math range violation")
    EILSEQ = (0x8001001D, "Illegal multi-byte sequence in input")
    EFPOS = (0x8001001E, "File position error")
    EINTR = (0x8001001F, "Syscall was interrupted")
    EFBIG = (0x80010020, "File too large")
    EMLINK = (0x80010021, "Too many links")
    ENFILE = (0x80010022, "File table overflow")
    ENOSPC = (0x80010023, "No space left on device")
    ENOTTY = (0x80010024, "Not a TTY")
    EPIPE = (0x80010025, "Broken pipe")
    EROFS = (0x80010026, "Read-only filesystem")
    ESPIPE = (0x80010027, "Illegal seek")
    E2BIG = (0x80010028, "Arg list too long")
    EACCES = (0x80010029, "Access violation")
    EBADF = (0x8001002A, "Invalid file descriptor")
    EIO = (0x8001002B, "Filesystem mounting failed")
    EMFILE = (0x8001002C, "Too many files open")
    ENODEV = (0x8001002D, "No device")
    ENOTDIR = (0x8001002E, "Not a directory")
    ENXIO = (0x8001002F, "No such device or IO")
    EXDEV = (0x80010030, "Cross-device link error")
    EBADMSG = (0x80010031, "Bad Message")
    EINPROGRESS = (0x80010032, "In progress")
    EMSGSIZE = (0x80010033, "Message size error")
    ENAMETOOLONG = (0x80010034, "Name too long")
    ENOLCK = (0x80010035, "No lock")
    ENOTEMPTY = (0x80010036, "Not empty")
    EUNSUP = (0x80010037, "Not supported")
    EFSSPECIFIC = (0x80010038, "File-system specific error")
    EOVERFLOW = (0x80010039, "Overflow occured")
    ENOTMOUNTED = (0x8001003A, "Filesystem not mounted")
    ENOTSDATA = (0x8001003B, "Not SData")
    ESDKVER = (0x8001003C, "Incorrect version in sys_load_param")
    ENOLICDISC = (0x8001003D, "Pointer is null when related to PARAMSFO")
    ENOLICENT = (0x8001003E, "Pointer is null when related to DISCSFO (and PARAMSFO)")
    UNKNOWN = (None, "Unknown error")

    def __init__(self, code: Optional[int], description: str) -> None:
        self.code = code
        self.description = description


_KINDS_BY_CODE: Dict[int, ErrorKind] = {
    kind.code: kind for kind in ErrorKind if kind.code is not None
}


def classify(code: int) -> ErrorKind:
    """
    Map a raw status code to its ErrorKind.

    Total over every input: codes that are not in the table (0 included)
    yield ErrorKind.UNKNOWN.
    """
    return _KINDS_BY_CODE.get(code, ErrorKind.UNKNOWN)


def is_success(code: int) -> bool:
    """Only CCAPI_OK (0) is success; every other code is a failure."""
    return code == CCAPI_OK
