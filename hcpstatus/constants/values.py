"""Scalar constants for hcpstatus.

All naming conventions of the OCM live-resources payload with proper type
hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "hcpstatus"

# ============================================================================
# Live-resource document keys
# ============================================================================

KEY_SEPARATOR: Final = "-"
SYNC_DOCUMENT_PREFIX: Final = "manifest_work"
CERTIFICATE_DOCUMENT_PREFIX: Final = "certificate"

# ============================================================================
# Resource kinds embedded in ManifestWork manifests
# ============================================================================

KIND_HOSTED_CLUSTER: Final = "HostedCluster"
KIND_NODE_POOL: Final = "NodePool"
KIND_CERTIFICATE: Final = "Certificate"

MANAGEMENT_CLUSTER_LABEL: Final = "api.openshift.com/management-cluster"

# ============================================================================
# Condition types and values
# ============================================================================

CONDITION_APPLIED: Final = "Applied"
CONDITION_AVAILABLE: Final = "Available"
CONDITION_READY: Final = "Ready"
CONDITION_STATUS_TRUE: Final = "True"

# ============================================================================
# Status feedback names
# ============================================================================

FEEDBACK_VERSION_CURRENT: Final = "Version-Current"
FEEDBACK_VERSION_DESIRED: Final = "Version-Desired"
FEEDBACK_VERSION_STATUS: Final = "Version-Status"
FEEDBACK_VERSION_IMAGE: Final = "Version-Image"
FEEDBACK_VERSION_AVAILABLE_UPDATES: Final = "Version-AvailableUpdates"
FEEDBACK_REPLICAS: Final = "Replicas"
FEEDBACK_VERSION: Final = "Version"

AVAILABLE_UPDATES_SEPARATOR: Final = ","
VERSION_STATUS_COMPLETED: Final = "Completed"

# ============================================================================
# OCM API
# ============================================================================

OCM_CLUSTERS_PATH: Final = "/api/clusters_mgmt/v1/clusters"
OCM_LIVE_RESOURCES_PATH: Final = "/api/clusters_mgmt/v1/clusters/{cluster_id}/resources/live"

__all__ = [
    "APP_TITLE",
    "AVAILABLE_UPDATES_SEPARATOR",
    "CERTIFICATE_DOCUMENT_PREFIX",
    "CONDITION_APPLIED",
    "CONDITION_AVAILABLE",
    "CONDITION_READY",
    "CONDITION_STATUS_TRUE",
    "FEEDBACK_REPLICAS",
    "FEEDBACK_VERSION",
    "FEEDBACK_VERSION_AVAILABLE_UPDATES",
    "FEEDBACK_VERSION_CURRENT",
    "FEEDBACK_VERSION_DESIRED",
    "FEEDBACK_VERSION_IMAGE",
    "FEEDBACK_VERSION_STATUS",
    "KEY_SEPARATOR",
    "KIND_CERTIFICATE",
    "KIND_HOSTED_CLUSTER",
    "KIND_NODE_POOL",
    "MANAGEMENT_CLUSTER_LABEL",
    "OCM_CLUSTERS_PATH",
    "OCM_LIVE_RESOURCES_PATH",
    "SYNC_DOCUMENT_PREFIX",
    "VERSION_STATUS_COMPLETED",
]
