"""Worker pool parser - reads NodePool state embedded in a ManifestWork."""

from __future__ import annotations

import logging
import re

from hcpstatus.constants.values import FEEDBACK_REPLICAS, FEEDBACK_VERSION, KIND_NODE_POOL
from hcpstatus.controllers.status.parsers.document_parser import DocumentParser
from hcpstatus.controllers.status.parsers.feedback_parser import FeedbackParser
from hcpstatus.models.core.manifest_work import ManifestWorkDocument
from hcpstatus.models.core.status_info import WorkerPoolStatus

logger = logging.getLogger(__name__)

_REPLICAS_PATTERN = re.compile(r"[+-]?[0-9]+")


class WorkerPoolParser(DocumentParser):
    """Parses every NodePool manifest of a ManifestWork."""

    _DOCUMENT_LABEL = "NodePool ManifestWork"

    def __init__(self, feedback_parser: FeedbackParser | None = None) -> None:
        self.feedback_parser = feedback_parser or FeedbackParser()

    @staticmethod
    def _parse_replicas(value: str | None, pool_name: str) -> int:
        """Parse the Replicas feedback value, returning 0 when unusable."""
        if value is None:
            return 0
        if not _REPLICAS_PATTERN.fullmatch(value):
            logger.debug("Unparsable replica count %r for NodePool %s", value, pool_name)
            return 0
        return int(value)

    def parse(self, raw: str | bytes, key: str = "") -> list[WorkerPoolStatus]:
        """Parse all NodePools in a ManifestWork.

        Args:
            raw: ManifestWork JSON text
            key: Live-resource key, used in error reports

        Returns:
            WorkerPoolStatus list in manifest order, possibly empty.

        Raises:
            DocumentParseError: The document is not a decodable ManifestWork.
        """
        document = self._decode(ManifestWorkDocument, raw, key)

        pools: list[WorkerPoolStatus] = []
        for manifest in self._iter_manifests(document, KIND_NODE_POOL):
            name = manifest.resource_meta.name
            feedback = self.feedback_parser.parse(manifest.status_feedback.values)
            pools.append(
                WorkerPoolStatus(
                    name=name,
                    replicas=self._parse_replicas(feedback.extras.get(FEEDBACK_REPLICAS), name),
                    version=feedback.extras.get(FEEDBACK_VERSION, ""),
                    conditions=feedback.conditions,
                )
            )
        return pools
