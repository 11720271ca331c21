"""Feedback parser - regroups flattened status feedback into conditions.

ManifestWork status feedback cannot carry nested structure, so each field of
each condition arrives as its own ``<ConditionType>-<Field>`` entry, e.g.
``Available-Status`` and ``Available-Message``. Entries that do not follow the
pattern (``Replicas``, ``Version-Current``) are returned as extras.

Known limitation: the name is split on its first hyphen, so a condition type
that itself contains a hyphen is mis-split. Current OCM data has no such types.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from hcpstatus.constants.defaults import NON_CONDITION_PREFIXES_DEFAULT
from hcpstatus.constants.enums import ConditionField
from hcpstatus.constants.values import KEY_SEPARATOR
from hcpstatus.models.core.manifest_work import FeedbackValue, IntegerFieldValue
from hcpstatus.models.core.status_info import Condition

logger = logging.getLogger(__name__)

_CONDITION_FIELDS: dict[str, ConditionField] = {field.value: field for field in ConditionField}


class FeedbackResult(NamedTuple):
    """Conditions in first-appearance order plus the remaining named values."""

    conditions: list[Condition]
    extras: dict[str, str]


def feedback_text(value: FeedbackValue) -> str:
    """Render a feedback payload as text, stringifying integers."""
    field_value = value.field_value
    if isinstance(field_value, IntegerFieldValue):
        return str(field_value.integer)
    return field_value.string


class FeedbackParser:
    """Groups flat status feedback values into Condition records."""

    def __init__(self, non_condition_prefixes: Iterable[str] | None = None) -> None:
        """Initialize feedback parser.

        Args:
            non_condition_prefixes: Prefixes never treated as condition types.
                Defaults to NON_CONDITION_PREFIXES_DEFAULT.
        """
        if non_condition_prefixes is None:
            non_condition_prefixes = NON_CONDITION_PREFIXES_DEFAULT
        self.non_condition_prefixes = frozenset(non_condition_prefixes)

    def _split_condition_name(self, name: str) -> tuple[str, ConditionField] | None:
        """Return (condition type, field) when name addresses a condition field."""
        prefix, separator, suffix = name.partition(KEY_SEPARATOR)
        if not separator:
            return None
        field = _CONDITION_FIELDS.get(suffix)
        if field is None or prefix in self.non_condition_prefixes:
            return None
        return prefix, field

    def parse(self, values: Sequence[FeedbackValue]) -> FeedbackResult:
        """Split feedback values into conditions and extras.

        The first value seen for a condition field or extra name wins.

        Args:
            values: Feedback values in document order

        Returns:
            FeedbackResult with conditions ordered by first appearance.
        """
        condition_fields: dict[str, dict[str, str]] = {}
        extras: dict[str, str] = {}

        for value in values:
            text = feedback_text(value)
            split = self._split_condition_name(value.name)
            if split is None:
                if value.name in extras:
                    logger.debug("Ignoring repeated feedback value %s", value.name)
                    continue
                extras[value.name] = text
                continue

            condition_type, field = split
            fields = condition_fields.setdefault(condition_type, {})
            if field.attribute in fields:
                logger.debug("Ignoring repeated feedback value %s", value.name)
                continue
            fields[field.attribute] = text

        conditions = [
            Condition(type=condition_type, **fields)
            for condition_type, fields in condition_fields.items()
        ]
        return FeedbackResult(conditions=conditions, extras=extras)
