"""Constants module for hcpstatus.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Naming conventions of the live-resources payload (Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
"""

from hcpstatus.constants.defaults import (
    NON_CONDITION_PREFIXES_DEFAULT,
    OCM_BINARY_DEFAULT,
    SHOW_RELATIVE_TIMES_DEFAULT,
)
from hcpstatus.constants.enums import (
    CertificateReadiness,
    ConditionField,
    FieldValueType,
)
from hcpstatus.constants.timeouts import (
    CONNECTION_CHECK_TIMEOUT,
    OCM_COMMAND_TIMEOUT,
)
from hcpstatus.constants.values import (
    APP_TITLE,
    CERTIFICATE_DOCUMENT_PREFIX,
    KEY_SEPARATOR,
    SYNC_DOCUMENT_PREFIX,
)

__all__ = [
    "APP_TITLE",
    "CERTIFICATE_DOCUMENT_PREFIX",
    "CONNECTION_CHECK_TIMEOUT",
    "KEY_SEPARATOR",
    "NON_CONDITION_PREFIXES_DEFAULT",
    "OCM_BINARY_DEFAULT",
    "OCM_COMMAND_TIMEOUT",
    "SHOW_RELATIVE_TIMES_DEFAULT",
    "SYNC_DOCUMENT_PREFIX",
    "CertificateReadiness",
    "ConditionField",
    "FieldValueType",
]
