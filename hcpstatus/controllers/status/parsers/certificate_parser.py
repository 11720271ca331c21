"""Certificate parser - reads a standalone cert-manager Certificate."""

from __future__ import annotations

import logging
from datetime import datetime

from hcpstatus.constants.values import CONDITION_READY, CONDITION_STATUS_TRUE
from hcpstatus.controllers.status.parsers.document_parser import DocumentParser
from hcpstatus.models.core.manifest_work import CertificateDocument
from hcpstatus.models.core.status_info import CertificateStatus
from hcpstatus.utils.time_parser import ZERO_TIME, parse_rfc3339

logger = logging.getLogger(__name__)


class CertificateParser(DocumentParser):
    """Parses readiness, validity window and DNS names of a Certificate."""

    _DOCUMENT_LABEL = "certificate"

    def parse(self, raw: str | bytes, key: str = "") -> CertificateStatus:
        """Parse a Certificate resource.

        Readiness is only set when a Ready condition is present. Absent or
        unparsable timestamps are left at ZERO_TIME.

        Raises:
            DocumentParseError: The text is not a decodable Certificate.
        """
        document = self._decode(CertificateDocument, raw, key)
        status = document.status

        ready: bool | None = None
        for condition in status.conditions:
            if condition.type == CONDITION_READY:
                ready = condition.status == CONDITION_STATUS_TRUE

        return CertificateStatus(
            ready=ready,
            not_after=self._parse_time(status.not_after, "notAfter", key),
            renewal_time=self._parse_time(status.renewal_time, "renewalTime", key),
            dns_names=list(document.spec.dns_names),
        )

    @staticmethod
    def _parse_time(value: str, field: str, key: str) -> datetime:
        if not value:
            return ZERO_TIME
        parsed = parse_rfc3339(value)
        if parsed is None:
            logger.debug("Ignoring unparsable %s %r in %s", field, value, key)
            return ZERO_TIME
        return parsed
