"""OCM fetcher for status controller - fetches cluster and live-resource data."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from hcpstatus.constants.values import OCM_CLUSTERS_PATH, OCM_LIVE_RESOURCES_PATH
from hcpstatus.models.core.cluster_info import ClusterInfo
from hcpstatus.models.core.errors import ClusterLookupError, OcmCommandError

logger = logging.getLogger(__name__)

RunOcmFunc = Callable[[tuple[str, ...]], Awaitable[str]]


class OcmFetcher:
    """Fetches cluster records and live resources through the ocm CLI."""

    _LOOKUP_PAGE_SIZE = 2

    def __init__(self, run_ocm_func: RunOcmFunc) -> None:
        """Initialize with ocm runner function.

        Args:
            run_ocm_func: Async function running ``ocm`` with the given arguments
                and returning its stdout
        """
        self._run_ocm = run_ocm_func

    @staticmethod
    def _quote(value: str) -> str:
        return "'" + value.replace("'", "''") + "'"

    @classmethod
    def build_search_query(cls, identifier: str) -> str:
        """Search expression matching a cluster by internal ID, external ID or display name.

        ``like`` lets callers pass ``%`` wildcards.
        """
        quoted = cls._quote(identifier.strip())
        return f"id like {quoted} or external_id like {quoted} or display_name like {quoted}"

    @staticmethod
    def _load_json(output: str, what: str) -> dict[str, Any]:
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as exc:
            raise OcmCommandError(f"ocm returned invalid JSON for {what}: {exc}") from exc
        if not isinstance(payload, dict):
            raise OcmCommandError(f"ocm returned unexpected payload for {what}")
        return payload

    @staticmethod
    def parse_cluster(item: dict[str, Any]) -> ClusterInfo:
        """Convert an OCM cluster object into ClusterInfo."""
        hypershift = item.get("hypershift") or {}
        return ClusterInfo(
            id=str(item.get("id", "")),
            external_id=str(item.get("external_id", "")),
            name=str(item.get("name", "")),
            state=str(item.get("state", "")),
            hypershift_enabled=bool(hypershift.get("enabled", False)),
        )

    async def fetch_cluster(self, identifier: str) -> ClusterInfo:
        """Resolve a cluster name, internal ID or external ID to one cluster.

        Raises:
            ClusterLookupError: No cluster, or more than one, matches.
            OcmCommandError: The ocm call failed.
        """
        if not identifier.strip():
            raise ClusterLookupError("cluster identifier must not be empty")

        output = await self._run_ocm(
            (
                "get",
                OCM_CLUSTERS_PATH,
                "--parameter",
                f"search={self.build_search_query(identifier)}",
                "--parameter",
                f"size={self._LOOKUP_PAGE_SIZE}",
            )
        )
        payload = self._load_json(output, f"cluster {identifier}")
        items = payload.get("items") or []
        if not items:
            raise ClusterLookupError(f"no cluster found for {identifier!r}")
        if len(items) > 1:
            raise ClusterLookupError(f"{identifier!r} matches more than one cluster")
        cluster = self.parse_cluster(items[0])
        logger.debug("Resolved %s to cluster %s", identifier, cluster.id)
        return cluster

    async def fetch_live_resources(self, cluster_id: str) -> dict[str, str]:
        """Fetch the live-resources mapping of a cluster.

        Non-string document values are re-encoded as JSON text.
        """
        path = OCM_LIVE_RESOURCES_PATH.format(cluster_id=cluster_id)
        payload = self._load_json(await self._run_ocm(("get", path)), path)
        resources = payload.get("resources") or {}
        if not isinstance(resources, dict):
            raise OcmCommandError(f"ocm returned unexpected resources for {path}")
        return normalize_resources(resources)


def normalize_resources(resources: dict[str, Any]) -> dict[str, str]:
    """Ensure every live-resource value is raw JSON text."""
    return {
        str(key): value if isinstance(value, str) else json.dumps(value)
        for key, value in resources.items()
    }
