"""Exceptions raised while fetching and aggregating cluster status."""

from __future__ import annotations


class StatusError(Exception):
    """Base exception for status retrieval and aggregation errors."""


class DocumentParseError(StatusError):
    """Raised when a live-resource document cannot be decoded.

    Attributes:
        key: Live-resource key of the offending document
        reason: Decoder error text
    """

    def __init__(self, key: str, reason: str, document: str = "document") -> None:
        self.key = key
        self.reason = reason
        self.document = document
        super().__init__(f"failed to parse {document} {key!r}: {reason}")


class ClusterLookupError(StatusError):
    """Raised when a cluster identifier does not resolve to exactly one cluster."""


class NotHostedClusterError(StatusError):
    """Raised when the resolved cluster is not a hosted control plane cluster."""


class NoLiveResourcesError(StatusError):
    """Raised when OCM returns no live resources for a cluster."""


class OcmCommandError(StatusError):
    """Raised when an ocm CLI invocation fails, times out, or returns garbage."""
