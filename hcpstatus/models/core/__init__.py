"""Core domain models."""

from hcpstatus.models.core.cluster_info import ClusterInfo
from hcpstatus.models.core.errors import (
    ClusterLookupError,
    DocumentParseError,
    NoLiveResourcesError,
    NotHostedClusterError,
    OcmCommandError,
    StatusError,
)
from hcpstatus.models.core.status_info import (
    CertificateStatus,
    Condition,
    ControlPlaneResult,
    StatusSnapshot,
    SyncSummary,
    VersionInfo,
    WorkerPoolStatus,
)

__all__ = [
    "CertificateStatus",
    "ClusterInfo",
    "ClusterLookupError",
    "Condition",
    "ControlPlaneResult",
    "DocumentParseError",
    "NoLiveResourcesError",
    "NotHostedClusterError",
    "OcmCommandError",
    "StatusError",
    "StatusSnapshot",
    "SyncSummary",
    "VersionInfo",
    "WorkerPoolStatus",
]
