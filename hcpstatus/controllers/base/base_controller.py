"""Base controller with async patterns for hcpstatus.

Controllers wrap blocking CLI calls in asyncio so several lookups can run
concurrently and callers can bound them with timeouts.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class AsyncControllerMixin:
    """Mixin tracking load timing for async controllers."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    def _start_load(self) -> None:
        self._load_start_time = time.monotonic()

    def _load_duration_ms(self) -> float:
        """Milliseconds since _start_load, or 0.0 when no load was started."""
        if self._load_start_time is None:
            return 0.0
        return (time.monotonic() - self._load_start_time) * 1000


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...
