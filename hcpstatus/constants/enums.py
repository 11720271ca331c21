"""All enum definitions for hcpstatus.

This module consolidates all enumerations used throughout the application.
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Wire Enums
# =============================================================================

class FieldValueType(Enum):
    """Payload tag of a ManifestWork status feedback value."""

    STRING = "String"
    INTEGER = "Integer"


class ConditionField(Enum):
    """Condition fields recognised in flattened feedback names."""

    STATUS = "Status"
    REASON = "Reason"
    MESSAGE = "Message"
    LAST_TRANSITION_TIME = "LastTransitionTime"

    @property
    def attribute(self) -> str:
        """Name of the matching Condition model attribute."""
        return _CONDITION_ATTRIBUTES[self]


_CONDITION_ATTRIBUTES: dict[ConditionField, str] = {
    ConditionField.STATUS: "status",
    ConditionField.REASON: "reason",
    ConditionField.MESSAGE: "message",
    ConditionField.LAST_TRANSITION_TIME: "last_transition_time",
}


# =============================================================================
# Display Enums
# =============================================================================

class CertificateReadiness(Enum):
    """Display value for a certificate's tri-state readiness."""

    READY = "Ready"
    NOT_READY = "Not Ready"
    UNKNOWN = "Unknown"

    @classmethod
    def from_ready(cls, ready: bool | None) -> CertificateReadiness:
        if ready is None:
            return cls.UNKNOWN
        return cls.READY if ready else cls.NOT_READY


__all__ = [
    "CertificateReadiness",
    "ConditionField",
    "FieldValueType",
]
