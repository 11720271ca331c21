"""Sync parser - summarizes a ManifestWork's top-level conditions."""

from __future__ import annotations

import logging

from hcpstatus.constants.values import (
    CONDITION_APPLIED,
    CONDITION_AVAILABLE,
    CONDITION_STATUS_TRUE,
)
from hcpstatus.controllers.status.parsers.document_parser import DocumentParser
from hcpstatus.models.core.manifest_work import ManifestWorkDocument
from hcpstatus.models.core.status_info import SyncSummary
from hcpstatus.utils.time_parser import ZERO_TIME, parse_rfc3339

logger = logging.getLogger(__name__)


class SyncParser(DocumentParser):
    """Parses the Applied/Available sync state of a ManifestWork."""

    _DOCUMENT_LABEL = "ManifestWork sync status"

    def parse(self, raw: str | bytes, key: str = "") -> SyncSummary:
        """Parse a ManifestWork into a SyncSummary.

        Args:
            raw: ManifestWork JSON text
            key: Live-resource key; used as the summary name when given,
                otherwise the document's metadata.name is used.

        Returns:
            SyncSummary with the most recent transition time of any condition.

        Raises:
            DocumentParseError: The document is not a decodable ManifestWork.
        """
        document = self._decode(ManifestWorkDocument, raw, key)

        applied = False
        available = False
        last_sync_time = ZERO_TIME

        for condition in document.status.conditions:
            if condition.type == CONDITION_APPLIED:
                applied = condition.status == CONDITION_STATUS_TRUE
            elif condition.type == CONDITION_AVAILABLE:
                available = condition.status == CONDITION_STATUS_TRUE

            if not condition.last_transition_time:
                continue
            transition = parse_rfc3339(condition.last_transition_time)
            if transition is None:
                logger.debug(
                    "Skipping unparsable lastTransitionTime %r in %s",
                    condition.last_transition_time,
                    key or document.metadata.name,
                )
                continue
            if transition > last_sync_time:
                last_sync_time = transition

        return SyncSummary(
            name=key or document.metadata.name,
            applied=applied,
            available=available,
            last_sync_time=last_sync_time,
        )
