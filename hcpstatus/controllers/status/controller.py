"""Status controller - fetches live resources from OCM and aggregates them."""

from __future__ import annotations

import asyncio
import logging
import subprocess
from typing import Any

from hcpstatus.constants.timeouts import CONNECTION_CHECK_TIMEOUT
from hcpstatus.controllers.base import BaseController
from hcpstatus.controllers.status.aggregator import StatusAggregator
from hcpstatus.controllers.status.fetchers import OcmFetcher
from hcpstatus.models.core.errors import (
    NoLiveResourcesError,
    NotHostedClusterError,
    OcmCommandError,
)
from hcpstatus.models.core.status_info import StatusSnapshot
from hcpstatus.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class StatusController(BaseController):
    """Hosted control plane status operations.

    Delegates to:
    - OcmFetcher: cluster lookup and live-resource retrieval
    - StatusAggregator: document parsing and merging
    """

    SOURCE_STATUS = "status"

    def __init__(
        self,
        cluster_identifier: str | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        """Initialize the status controller.

        Args:
            cluster_identifier: Cluster name, internal ID or external ID used
                by fetch_all
            settings: Application settings, defaults when omitted
        """
        super().__init__()
        self.cluster_identifier = cluster_identifier
        self.settings = settings or AppSettings()
        self._fetcher = OcmFetcher(self._run_ocm)
        self._aggregator = StatusAggregator(self.settings.non_condition_prefixes)

    def _run_ocm_sync(self, args: tuple[str, ...], timeout: float | None = None) -> str:
        """Run an ocm command synchronously (thread-safe wrapper target)."""
        cmd = [self.settings.ocm_binary, *args]
        effective_timeout = timeout if timeout is not None else self.settings.ocm_command_timeout
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except FileNotFoundError as exc:
            raise OcmCommandError(
                f"{self.settings.ocm_binary} not found; install the ocm CLI and run 'ocm login'"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise OcmCommandError(
                f"ocm {args[0] if args else ''} timed out after {effective_timeout}s"
            ) from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.warning("ocm command failed: %s", stderr or result.returncode)
            raise OcmCommandError(stderr or "ocm command failed")
        return result.stdout

    async def _run_ocm(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_ocm_sync, args)

    async def check_connection(self) -> bool:
        """Return True when the ocm CLI is logged in."""
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._run_ocm_sync, ("whoami",), CONNECTION_CHECK_TIMEOUT),
                timeout=CONNECTION_CHECK_TIMEOUT + 1,
            )
        except (OcmCommandError, asyncio.TimeoutError) as exc:
            logger.warning("OCM connection check failed: %s", exc)
            return False
        return True

    async def fetch_status(self, identifier: str | None = None) -> StatusSnapshot:
        """Fetch and aggregate the status of a hosted control plane cluster.

        Args:
            identifier: Cluster name, internal ID or external ID. Defaults to
                the identifier given at construction.

        Returns:
            StatusSnapshot with cluster identity fields filled in.

        Raises:
            ClusterLookupError: The identifier does not resolve to one cluster.
            NotHostedClusterError: The cluster is not an HCP cluster.
            NoLiveResourcesError: OCM returned no live resources.
            DocumentParseError: A live-resource document failed to decode.
            OcmCommandError: An ocm call failed.
        """
        target = identifier or self.cluster_identifier or ""
        self._start_load()

        cluster = await self._fetcher.fetch_cluster(target)
        if not cluster.hypershift_enabled:
            raise NotHostedClusterError(f"cluster {target!r} is not an HCP cluster")

        resources = await self._fetcher.fetch_live_resources(cluster.id)
        if not resources:
            raise NoLiveResourcesError(f"no live resources found for cluster {cluster.id}")

        snapshot = self._aggregator.aggregate(resources, cluster.id)
        logger.debug(
            "Aggregated %d live resources for %s in %.0fms",
            len(resources),
            cluster.id,
            self._load_duration_ms(),
        )
        return snapshot.model_copy(
            update={
                "cluster_id": cluster.external_id,
                "cluster_name": cluster.name,
                "cluster_state": cluster.state,
            }
        )

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch the status of the configured cluster."""
        return {self.SOURCE_STATUS: await self.fetch_status()}
