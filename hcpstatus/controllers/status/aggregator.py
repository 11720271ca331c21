"""Status aggregator - merges live-resource documents into one StatusSnapshot.

Live-resource keys follow a prefix convention:
- ``manifest_work-<suffix>``: ManifestWork documents (sync state and NodePools)
- ``certificate-<suffix>``: standalone ingress Certificate documents

The main ManifestWork is ``manifest_work-<cluster internal id>`` and carries
the HostedCluster. All other keys are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from hcpstatus.constants.values import (
    CERTIFICATE_DOCUMENT_PREFIX,
    KEY_SEPARATOR,
    SYNC_DOCUMENT_PREFIX,
)
from hcpstatus.controllers.status.parsers import (
    CertificateParser,
    ControlPlaneParser,
    FeedbackParser,
    SyncParser,
    WorkerPoolParser,
)
from hcpstatus.models.core.status_info import (
    CertificateStatus,
    ControlPlaneResult,
    StatusSnapshot,
    SyncSummary,
    WorkerPoolStatus,
)

logger = logging.getLogger(__name__)

_SYNC_KEY_PREFIX = SYNC_DOCUMENT_PREFIX + KEY_SEPARATOR
_CERTIFICATE_KEY_PREFIX = CERTIFICATE_DOCUMENT_PREFIX + KEY_SEPARATOR


def main_document_key(cluster_internal_id: str) -> str:
    """Key of the ManifestWork that carries the cluster's HostedCluster."""
    return _SYNC_KEY_PREFIX + cluster_internal_id


class StatusAggregator:
    """Builds a StatusSnapshot from the OCM live-resources mapping.

    Aggregation is a pure function of its input: documents are processed in
    sorted key order so repeated calls return equal snapshots.
    """

    def __init__(self, non_condition_prefixes: Iterable[str] | None = None) -> None:
        """Initialize the aggregator and its parsers.

        Args:
            non_condition_prefixes: Feedback prefixes never treated as
                condition types. Defaults to the built-in list.
        """
        feedback_parser = FeedbackParser(non_condition_prefixes)
        self.sync_parser = SyncParser()
        self.control_plane_parser = ControlPlaneParser(feedback_parser)
        self.worker_pool_parser = WorkerPoolParser(feedback_parser)
        self.certificate_parser = CertificateParser()

    @staticmethod
    def classify_keys(resources: Mapping[str, str]) -> tuple[list[str], list[str]]:
        """Return sorted (ManifestWork keys, Certificate keys)."""
        sync_keys = sorted(key for key in resources if key.startswith(_SYNC_KEY_PREFIX))
        certificate_keys = sorted(
            key for key in resources if key.startswith(_CERTIFICATE_KEY_PREFIX)
        )
        return sync_keys, certificate_keys

    def _parse_sync_summaries(
        self, resources: Mapping[str, str], sync_keys: list[str]
    ) -> list[SyncSummary]:
        return [self.sync_parser.parse(resources[key], key) for key in sync_keys]

    def _parse_worker_pools(
        self, resources: Mapping[str, str], sync_keys: list[str]
    ) -> list[WorkerPoolStatus]:
        pools: list[WorkerPoolStatus] = []
        for key in sync_keys:
            pools.extend(self.worker_pool_parser.parse(resources[key], key))
        return pools

    def _parse_ingress_certificate(
        self, resources: Mapping[str, str], certificate_keys: list[str]
    ) -> CertificateStatus | None:
        if not certificate_keys:
            return None
        if len(certificate_keys) > 1:
            logger.warning(
                "Found %d certificate documents, using %s",
                len(certificate_keys),
                certificate_keys[0],
            )
        key = certificate_keys[0]
        return self.certificate_parser.parse(resources[key], key)

    def aggregate(
        self, resources: Mapping[str, str], cluster_internal_id: str
    ) -> StatusSnapshot:
        """Parse live resources into a StatusSnapshot.

        Args:
            resources: Live-resource key to raw JSON document text
            cluster_internal_id: OCM internal cluster ID, names the main document

        Returns:
            StatusSnapshot with cluster identity fields left empty.

        Raises:
            DocumentParseError: Any document fails to decode. No partial
                snapshot is returned.
        """
        sync_keys, certificate_keys = self.classify_keys(resources)
        main_key = main_document_key(cluster_internal_id)
        logger.debug(
            "Aggregating %d ManifestWork and %d certificate documents (main: %s)",
            len(sync_keys),
            len(certificate_keys),
            main_key,
        )

        sync_summaries = self._parse_sync_summaries(resources, sync_keys)

        control_plane = ControlPlaneResult()
        if main_key in resources:
            control_plane = self.control_plane_parser.parse(resources[main_key], main_key)
        else:
            logger.debug("Main ManifestWork %s not present", main_key)

        worker_pools = self._parse_worker_pools(resources, sync_keys)
        ingress_certificate = self._parse_ingress_certificate(resources, certificate_keys)

        return StatusSnapshot(
            management_cluster=control_plane.management_cluster,
            version=control_plane.version,
            api_server_certificate=control_plane.certificate,
            ingress_certificate=ingress_certificate,
            sync_summaries=sync_summaries,
            conditions=control_plane.conditions,
            worker_pools=worker_pools,
        )


def parse_live_resources(
    resources: Mapping[str, str],
    cluster_internal_id: str,
    non_condition_prefixes: Iterable[str] | None = None,
) -> StatusSnapshot:
    """Aggregate live resources with a one-off StatusAggregator."""
    return StatusAggregator(non_condition_prefixes).aggregate(resources, cluster_internal_id)
