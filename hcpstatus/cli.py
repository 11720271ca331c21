"""Command line entry point: show HCP cluster health from OCM live resources."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from hcpstatus.constants.values import APP_TITLE
from hcpstatus.controllers.status import StatusAggregator, StatusController
from hcpstatus.controllers.status.fetchers import normalize_resources
from hcpstatus.models.core.errors import DocumentParseError, StatusError
from hcpstatus.models.core.status_info import StatusSnapshot
from hcpstatus.models.state import AppSettings, ConfigError, ConfigManager
from hcpstatus.screens.status import StatusPresenter

logger = logging.getLogger(__name__)

EXAMPLES = """\
examples:
  # Show status by cluster name
  hcpstatus --cluster-id my-cluster

  # Show status by cluster ID
  hcpstatus --cluster-id 2o9r9r1q4tp0bulsfksdc8fesls54sql

  # Inspect a saved live-resources response offline
  hcpstatus --from-file live.json --internal-id 2o9r9r1q4tp0bulsfksdc8fesls54sql
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_TITLE,
        description=(
            "Display a health overview of a ROSA HCP cluster using data from the "
            "OCM live resources endpoint: ManifestWork sync status, HostedCluster "
            "conditions, certificate status, and NodePool health."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-C", "--cluster-id", help="Cluster name, ID, or external ID")
    parser.add_argument(
        "--from-file",
        type=Path,
        help="Read a saved live-resources JSON response instead of calling OCM",
    )
    parser.add_argument(
        "--internal-id",
        help="Internal cluster ID naming the main ManifestWork (with --from-file)",
    )
    parser.add_argument("--timeout", type=int, help="Timeout for each ocm call, in seconds")
    parser.add_argument(
        "--absolute-times",
        action="store_true",
        help="Show sync times as timestamps instead of relative ages",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def load_resources_file(path: Path) -> dict[str, str]:
    """Load live resources saved from the OCM endpoint.

    Accepts the full response (with a ``resources`` member) or the bare mapping.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise DocumentParseError(str(path), str(exc), "live-resources file") from exc
    if isinstance(payload, dict) and isinstance(payload.get("resources"), dict):
        payload = payload["resources"]
    if not isinstance(payload, dict):
        raise DocumentParseError(str(path), "expected a JSON object", "live-resources file")
    return normalize_resources(payload)


def _resolve_settings(args: argparse.Namespace) -> AppSettings:
    settings = ConfigManager.load()
    updates: dict[str, object] = {}
    if args.timeout is not None:
        updates["ocm_command_timeout"] = max(1, args.timeout)
    if args.absolute_times:
        updates["show_relative_times"] = False
    return settings.model_copy(update=updates) if updates else settings


def _snapshot_from_file(args: argparse.Namespace, settings: AppSettings) -> StatusSnapshot:
    internal_id = args.internal_id or args.cluster_id
    resources = load_resources_file(args.from_file)
    snapshot = StatusAggregator(settings.non_condition_prefixes).aggregate(resources, internal_id)
    return snapshot.model_copy(
        update={"cluster_id": internal_id, "cluster_name": args.from_file.name}
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.from_file is None and not args.cluster_id:
        parser.error("--cluster-id is required unless --from-file is given")
    if args.from_file is not None and not (args.internal_id or args.cluster_id):
        parser.error("--from-file needs --internal-id or --cluster-id")

    try:
        settings = _resolve_settings(args)
        if args.from_file is not None:
            snapshot = _snapshot_from_file(args, settings)
        else:
            controller = StatusController(args.cluster_id, settings)
            snapshot = asyncio.run(controller.fetch_status())
    except (StatusError, ConfigError) as exc:
        logger.debug("Status retrieval failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    StatusPresenter(snapshot, show_relative_times=settings.show_relative_times).render(Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
