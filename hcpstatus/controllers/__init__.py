"""Controllers module for hcpstatus.

This module provides the controller that fetches hosted control plane
live resources from OCM and aggregates them into a status snapshot.
"""

from __future__ import annotations

from hcpstatus.controllers.base import AsyncControllerMixin, BaseController
from hcpstatus.controllers.status import StatusAggregator, StatusController

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
    "StatusAggregator",
    "StatusController",
]
