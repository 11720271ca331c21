"""Control plane parser - reads HostedCluster state from the main ManifestWork."""

from __future__ import annotations

import logging

from hcpstatus.constants.values import (
    AVAILABLE_UPDATES_SEPARATOR,
    FEEDBACK_VERSION_AVAILABLE_UPDATES,
    FEEDBACK_VERSION_CURRENT,
    FEEDBACK_VERSION_DESIRED,
    FEEDBACK_VERSION_IMAGE,
    FEEDBACK_VERSION_STATUS,
    KIND_CERTIFICATE,
    KIND_HOSTED_CLUSTER,
    MANAGEMENT_CLUSTER_LABEL,
)
from hcpstatus.controllers.status.parsers.document_parser import DocumentParser
from hcpstatus.controllers.status.parsers.feedback_parser import FeedbackParser
from hcpstatus.models.core.manifest_work import ManifestWorkDocument
from hcpstatus.models.core.status_info import (
    CertificateStatus,
    Condition,
    ControlPlaneResult,
    VersionInfo,
)

logger = logging.getLogger(__name__)


def split_available_updates(value: str) -> list[str]:
    """Split the comma separated available-updates feedback value."""
    if not value:
        return []
    return [
        version.strip()
        for version in value.split(AVAILABLE_UPDATES_SEPARATOR)
        if version.strip()
    ]


class ControlPlaneParser(DocumentParser):
    """Parses HostedCluster conditions, version and certificate presence."""

    _DOCUMENT_LABEL = "main ManifestWork"

    def __init__(self, feedback_parser: FeedbackParser | None = None) -> None:
        """Initialize control plane parser.

        Args:
            feedback_parser: Flattener for status feedback values.
        """
        self.feedback_parser = feedback_parser or FeedbackParser()

    def _parse_version(self, extras: dict[str, str]) -> VersionInfo:
        return VersionInfo(
            current=extras.get(FEEDBACK_VERSION_CURRENT, ""),
            desired=extras.get(FEEDBACK_VERSION_DESIRED, ""),
            status=extras.get(FEEDBACK_VERSION_STATUS, ""),
            image=extras.get(FEEDBACK_VERSION_IMAGE, ""),
            available_updates=split_available_updates(
                extras.get(FEEDBACK_VERSION_AVAILABLE_UPDATES, "")
            ),
        )

    def parse(self, raw: str | bytes, key: str = "") -> ControlPlaneResult:
        """Parse the main ManifestWork.

        Only the first HostedCluster manifest is read. A Certificate manifest
        only marks the certificate as observed; its readiness stays unknown
        because the feedback rules do not publish certificate details.

        Args:
            raw: ManifestWork JSON text
            key: Live-resource key, used in error reports

        Returns:
            ControlPlaneResult.

        Raises:
            DocumentParseError: The document is not a decodable ManifestWork.
        """
        document = self._decode(ManifestWorkDocument, raw, key)
        management_cluster = document.metadata.labels.get(MANAGEMENT_CLUSTER_LABEL, "")

        hosted_clusters = list(self._iter_manifests(document, KIND_HOSTED_CLUSTER))
        if len(hosted_clusters) > 1:
            logger.debug(
                "%s carries %d HostedCluster manifests, reading the first",
                key,
                len(hosted_clusters),
            )

        conditions: list[Condition] = []
        version = VersionInfo()
        if hosted_clusters:
            feedback = self.feedback_parser.parse(hosted_clusters[0].status_feedback.values)
            conditions = feedback.conditions
            version = self._parse_version(feedback.extras)

        certificate = None
        if next(self._iter_manifests(document, KIND_CERTIFICATE), None) is not None:
            certificate = CertificateStatus()

        return ControlPlaneResult(
            conditions=conditions,
            version=version,
            management_cluster=management_cluster,
            certificate=certificate,
        )
