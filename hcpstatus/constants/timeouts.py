"""Timeout constants for hcpstatus.

All timeout values for OCM commands and connection checks.
"""

from typing import Final

# ============================================================================
# Process-level command timeouts (int, in seconds)
# ============================================================================

OCM_COMMAND_TIMEOUT: Final = 45

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

CONNECTION_CHECK_TIMEOUT: Final = 12.0

__all__ = [
    "CONNECTION_CHECK_TIMEOUT",
    "OCM_COMMAND_TIMEOUT",
]
