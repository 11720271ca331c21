"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Feedback flattening defaults
# ============================================================================

# Feedback prefixes that look like "<Type>-Status" but never carry a condition.
NON_CONDITION_PREFIXES_DEFAULT: Final = ("Version",)

# ============================================================================
# OCM defaults
# ============================================================================

OCM_BINARY_DEFAULT: Final = "ocm"

# ============================================================================
# Display defaults
# ============================================================================

SHOW_RELATIVE_TIMES_DEFAULT: Final = True

__all__ = [
    "NON_CONDITION_PREFIXES_DEFAULT",
    "OCM_BINARY_DEFAULT",
    "SHOW_RELATIVE_TIMES_DEFAULT",
]
