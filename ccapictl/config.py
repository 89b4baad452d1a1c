# =============================================================================
# ccapictl Library – Configuration constants
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

# Port the CCAPI web service listens on.
DEFAULT_CCAPI_PORT = 6333

# HTTP request timeout in seconds (passed to requests).
DEFAULT_TIMEOUT_S = 5.0

# Every command lives under this path: http://<ip>:<port>/ccapi/<command>
CCAPI_PATH_PREFIX = "/ccapi"

# Status line of every response.
CCAPI_OK = 0

# Status codes, the CCAPI version and temperatures are sent in hexadecimal.
DEFAULT_RADIX = 16

U32_MAX = 0xFFFFFFFF
I32_MIN = -0x80000000
I32_MAX = 0x7FFFFFFF
