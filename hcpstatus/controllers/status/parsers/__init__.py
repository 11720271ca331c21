"""Parsers for live-resource documents."""

from hcpstatus.controllers.status.parsers.certificate_parser import CertificateParser
from hcpstatus.controllers.status.parsers.control_plane_parser import ControlPlaneParser
from hcpstatus.controllers.status.parsers.feedback_parser import (
    FeedbackParser,
    FeedbackResult,
)
from hcpstatus.controllers.status.parsers.sync_parser import SyncParser
from hcpstatus.controllers.status.parsers.worker_pool_parser import WorkerPoolParser

__all__ = [
    "CertificateParser",
    "ControlPlaneParser",
    "FeedbackParser",
    "FeedbackResult",
    "SyncParser",
    "WorkerPoolParser",
]
