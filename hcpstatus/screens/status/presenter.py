"""Status presenter - formats a StatusSnapshot into rich renderables.

Every section renders something: absent data produces an explicit
"not available" line rather than an empty block.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from hcpstatus.constants.enums import CertificateReadiness
from hcpstatus.constants.values import VERSION_STATUS_COMPLETED
from hcpstatus.models.core.status_info import (
    CertificateStatus,
    Condition,
    StatusSnapshot,
    SyncSummary,
    VersionInfo,
    WorkerPoolStatus,
)
from hcpstatus.screens.status.config import (
    API_CERTIFICATE_DETAILS_UNAVAILABLE,
    API_CERTIFICATE_FOUND,
    CONDITION_TABLE_COLUMNS,
    DATE_FORMAT,
    DATETIME_FORMAT,
    MANIFEST_WORK_TABLE_COLUMNS,
    NO_CERTIFICATE,
    NO_HOSTED_CLUSTER_CONDITIONS,
    NO_MANIFEST_WORKS,
    NO_NODE_POOL_CONDITIONS,
    NO_NODE_POOLS,
    NODE_POOL_TITLE_PREFIX,
    NOT_AVAILABLE,
    SECTION_API_CERTIFICATE,
    SECTION_CONDITIONS,
    SECTION_CONTROL_PLANE_VERSION,
    SECTION_HOSTED_CLUSTER,
    SECTION_INGRESS_CERTIFICATE,
    SECTION_MANIFEST_WORKS,
    SECTION_NODE_POOLS,
    TRANSITIONAL_HINT,
    UNKNOWN_TIME,
    VERSION_STATUS_NOTE,
)
from hcpstatus.utils.time_parser import days_until, format_relative_time, is_zero_time


def bool_status(value: bool) -> str:
    return "True" if value else "False"


def condition_message_lines(condition: Condition) -> list[str]:
    """Message (or reason when empty) split into the first line and stripped continuations."""
    message = condition.message or condition.reason
    first, *rest = message.split("\n")
    return [first] + [line.strip() for line in rest if line.strip()]


class StatusPresenter:
    """Presenter for a StatusSnapshot - handles row formatting and rendering."""

    def __init__(
        self,
        snapshot: StatusSnapshot,
        *,
        now: datetime | None = None,
        show_relative_times: bool = True,
    ) -> None:
        self._snapshot = snapshot
        self._now = now or datetime.now(timezone.utc)
        self._show_relative_times = show_relative_times

    @property
    def snapshot(self) -> StatusSnapshot:
        return self._snapshot

    # =========================================================================
    # Row formatting
    # =========================================================================

    def get_header_lines(self) -> list[str]:
        s = self._snapshot
        name = s.cluster_name or NOT_AVAILABLE
        cluster_id = s.cluster_id or NOT_AVAILABLE
        return [
            f"HCP Cluster Status: {name} ({cluster_id})",
            f"Cluster State: {s.cluster_state or NOT_AVAILABLE}",
            f"Management Cluster: {s.management_cluster or NOT_AVAILABLE}",
        ]

    def format_last_sync(self, summary: SyncSummary) -> str:
        if is_zero_time(summary.last_sync_time):
            return UNKNOWN_TIME
        if self._show_relative_times:
            return format_relative_time(summary.last_sync_time, self._now)
        return summary.last_sync_time.astimezone(timezone.utc).strftime(DATETIME_FORMAT)

    def get_sync_rows(self) -> list[tuple[str, str, str, str]]:
        return [
            (
                summary.name,
                bool_status(summary.applied),
                bool_status(summary.available),
                self.format_last_sync(summary),
            )
            for summary in self._snapshot.sync_summaries
        ]

    @staticmethod
    def get_version_lines(version: VersionInfo) -> list[str]:
        """Version summary lines; a single "(not available)" line when nothing is known."""
        if not (
            version.current
            or version.desired
            or version.status
            or version.image
            or version.available_updates
        ):
            return [f"Version: {NOT_AVAILABLE}"]

        line = f"Current: {version.current or NOT_AVAILABLE}"
        if version.desired:
            line += f"  Desired: {version.desired}"
        if version.status:
            line += f"  Status: {version.status}"
        lines = [line]
        if version.image:
            lines.append(f"Image: {version.image}")
        if version.available_updates:
            lines.append(f"Available Updates: {', '.join(version.available_updates)}")
        if version.status and version.status != VERSION_STATUS_COMPLETED:
            lines.append(f"Note: {VERSION_STATUS_NOTE}")
        return lines

    @staticmethod
    def get_condition_rows(conditions: Sequence[Condition]) -> list[tuple[str, str, str]]:
        """Condition table rows; multi-line messages continue in the MESSAGE column."""
        rows: list[tuple[str, str, str]] = []
        for condition in conditions:
            first, *continuation = condition_message_lines(condition)
            rows.append((condition.type, condition.status, first))
            rows.extend(("", "", line) for line in continuation)
        return rows

    def get_certificate_rows(self, certificate: CertificateStatus) -> list[tuple[str, str]]:
        rows = [("Status:", CertificateReadiness.from_ready(certificate.ready).value)]
        if is_zero_time(certificate.not_after):
            rows.append(("Expires:", NOT_AVAILABLE))
        else:
            remaining = days_until(certificate.not_after, self._now)
            expires = certificate.not_after.strftime(DATE_FORMAT)
            rows.append(("Expires:", f"{expires} ({remaining}d remaining)"))
        if not is_zero_time(certificate.renewal_time):
            rows.append(("Renews:", certificate.renewal_time.strftime(DATE_FORMAT)))
        if certificate.dns_names:
            rows.append(("DNS Names:", certificate.dns_names[0]))
            rows.extend(("", name) for name in certificate.dns_names[1:])
        else:
            rows.append(("DNS Names:", NOT_AVAILABLE))
        return rows

    @staticmethod
    def get_worker_pool_title(pool: WorkerPoolStatus) -> str:
        details = []
        if pool.replicas > 0:
            details.append(f"{pool.replicas} replicas")
        if pool.version:
            details.append(f"v{pool.version}")
        title = NODE_POOL_TITLE_PREFIX + pool.name
        if details:
            title += " (" + ", ".join(details) + ")"
        return title

    # =========================================================================
    # Renderables
    # =========================================================================

    @staticmethod
    def _title(text: str) -> Text:
        return Text(text, style="bold")

    @staticmethod
    def _note(*lines: str) -> Text:
        return Text("\n".join(f"  {line}" for line in lines))

    @staticmethod
    def _table(columns: Sequence[tuple[str, int]], rows: Sequence[Sequence[str]]) -> Table:
        table = Table(box=None, pad_edge=False, padding=(0, 2, 0, 2), show_edge=False)
        for name, width in columns:
            table.add_column(name, max_width=width, overflow="fold", no_wrap=False)
        for row in rows:
            table.add_row(*(Text(cell) for cell in row))
        return table

    @staticmethod
    def _key_value_table(rows: Sequence[tuple[str, str]]) -> Table:
        table = Table(box=None, show_header=False, pad_edge=False, padding=(0, 2, 0, 2))
        table.add_column(no_wrap=True)
        table.add_column()
        for key, value in rows:
            table.add_row(Text(key), Text(value))
        return table

    def _manifest_work_section(self) -> list[RenderableType]:
        section: list[RenderableType] = [self._title(SECTION_MANIFEST_WORKS)]
        rows = self.get_sync_rows()
        if not rows:
            section.append(self._note(NO_MANIFEST_WORKS, TRANSITIONAL_HINT))
        else:
            section.append(self._table(MANIFEST_WORK_TABLE_COLUMNS, rows))
        return section

    def _hosted_cluster_section(self) -> list[RenderableType]:
        section: list[RenderableType] = [self._title(SECTION_HOSTED_CLUSTER)]
        section.append(self._note(SECTION_CONTROL_PLANE_VERSION))
        version_lines = self.get_version_lines(self._snapshot.version)
        section.append(self._note(*(f"  {line}" for line in version_lines)))
        section.append(Text(""))
        section.append(self._note(SECTION_CONDITIONS))
        conditions = self._snapshot.conditions
        if not conditions:
            section.append(
                self._note(f"  {NO_HOSTED_CLUSTER_CONDITIONS}", f"  {TRANSITIONAL_HINT}")
            )
        else:
            section.append(
                self._table(CONDITION_TABLE_COLUMNS, self.get_condition_rows(conditions))
            )
        return section

    def _certificate_sections(self) -> list[RenderableType]:
        section: list[RenderableType] = []
        if self._snapshot.api_server_certificate is not None:
            section.append(self._title(SECTION_API_CERTIFICATE))
            section.append(self._note(API_CERTIFICATE_FOUND, API_CERTIFICATE_DETAILS_UNAVAILABLE))
            section.append(Text(""))

        section.append(self._title(SECTION_INGRESS_CERTIFICATE))
        ingress = self._snapshot.ingress_certificate
        if ingress is None:
            section.append(self._note(NO_CERTIFICATE, TRANSITIONAL_HINT))
        else:
            section.append(self._key_value_table(self.get_certificate_rows(ingress)))
        return section

    def _node_pool_sections(self) -> list[RenderableType]:
        pools = self._snapshot.worker_pools
        if not pools:
            return [self._title(SECTION_NODE_POOLS), self._note(NO_NODE_POOLS, TRANSITIONAL_HINT)]

        section: list[RenderableType] = []
        for index, pool in enumerate(pools):
            if index:
                section.append(Text(""))
            section.append(self._title(self.get_worker_pool_title(pool)))
            if pool.conditions:
                section.append(
                    self._table(CONDITION_TABLE_COLUMNS, self.get_condition_rows(pool.conditions))
                )
            else:
                section.append(self._note(NO_NODE_POOL_CONDITIONS))
        return section

    def build(self) -> Group:
        """Build the full status view as a single renderable group."""
        header = Text("\n".join(self.get_header_lines()), style="bold")
        blocks = [
            [header],
            self._manifest_work_section(),
            self._hosted_cluster_section(),
            self._certificate_sections(),
            self._node_pool_sections(),
        ]
        renderables: list[RenderableType] = []
        for block in blocks:
            renderables.extend(block)
            renderables.append(Text(""))
        return Group(*renderables)

    def render(self, console: Console) -> None:
        console.print(self.build())
