"""Status screen configuration - section titles, column definitions, and messages."""

from __future__ import annotations

# =============================================================================
# Section titles
# =============================================================================

SECTION_MANIFEST_WORKS = "MANIFEST WORKS (Service Cluster -> Management Cluster)"
SECTION_HOSTED_CLUSTER = "HOSTED CLUSTER"
SECTION_CONTROL_PLANE_VERSION = "CONTROL PLANE VERSION"
SECTION_CONDITIONS = "CONDITIONS"
SECTION_API_CERTIFICATE = "CLUSTER KUBE API CERTIFICATE"
SECTION_INGRESS_CERTIFICATE = "DEFAULT INGRESS CERTIFICATE"
SECTION_NODE_POOLS = "NODEPOOLS"
NODE_POOL_TITLE_PREFIX = "NODEPOOL: "

# =============================================================================
# Table Columns
# =============================================================================

MANIFEST_WORK_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("NAME", 48),
    ("APPLIED", 9),
    ("AVAILABLE", 11),
    ("LAST SYNC", 20),
]

CONDITION_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("CONDITION", 28),
    ("STATUS", 8),
    ("MESSAGE", 80),
]

# =============================================================================
# Placeholders
# =============================================================================

NOT_AVAILABLE = "(not available)"
UNKNOWN_TIME = "(unknown)"
TRANSITIONAL_HINT = "(Cluster may not be fully installed yet or may be in a transitional state)"
NO_MANIFEST_WORKS = "No ManifestWork resources found"
NO_HOSTED_CLUSTER_CONDITIONS = "No HostedCluster conditions available"
NO_CERTIFICATE = "No certificate information available"
NO_NODE_POOLS = "No NodePool resources found"
NO_NODE_POOL_CONDITIONS = "No NodePool conditions reported"
API_CERTIFICATE_FOUND = "Certificate resource found in ManifestWork"
API_CERTIFICATE_DETAILS_UNAVAILABLE = (
    "(Detailed status not available - ACM feedback rules not yet implemented)"
)
VERSION_STATUS_NOTE = "Check ClusterVersion conditions below for details"

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
