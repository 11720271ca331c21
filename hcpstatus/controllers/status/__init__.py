"""Init file for status module."""

from hcpstatus.controllers.status.aggregator import (
    StatusAggregator,
    main_document_key,
    parse_live_resources,
)
from hcpstatus.controllers.status.controller import StatusController
from hcpstatus.controllers.status.fetchers import OcmFetcher
from hcpstatus.controllers.status.parsers import (
    CertificateParser,
    ControlPlaneParser,
    FeedbackParser,
    SyncParser,
    WorkerPoolParser,
)

__all__ = [
    "CertificateParser",
    "ControlPlaneParser",
    "FeedbackParser",
    "OcmFetcher",
    "StatusAggregator",
    "StatusController",
    "SyncParser",
    "WorkerPoolParser",
    "main_document_key",
    "parse_live_resources",
]
