"""Fetchers for the status controller."""

from hcpstatus.controllers.status.fetchers.ocm_fetcher import (
    OcmFetcher,
    normalize_resources,
)

__all__ = ["OcmFetcher", "normalize_resources"]
