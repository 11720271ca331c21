"""Aggregated hosted control plane status models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hcpstatus.utils.time_parser import ZERO_TIME


class Condition(BaseModel):
    """A single condition reported by a HostedCluster or NodePool."""

    model_config = ConfigDict(frozen=True)

    type: str
    status: str = ""
    reason: str = ""
    message: str = ""
    last_transition_time: str = ""  # left unparsed


class SyncSummary(BaseModel):
    """Sync status of one ManifestWork document."""

    model_config = ConfigDict(frozen=True)

    name: str
    applied: bool = False
    available: bool = False
    last_sync_time: datetime = ZERO_TIME


class VersionInfo(BaseModel):
    """Control plane version details. Empty strings mean unknown."""

    model_config = ConfigDict(frozen=True)

    current: str = ""
    desired: str = ""
    status: str = ""
    image: str = ""
    available_updates: list[str] = Field(default_factory=list)


class CertificateStatus(BaseModel):
    """Certificate details.

    ``ready`` is None when the certificate was observed but its readiness
    is not reported.
    """

    model_config = ConfigDict(frozen=True)

    ready: bool | None = None
    not_after: datetime = ZERO_TIME
    renewal_time: datetime = ZERO_TIME
    dns_names: list[str] = Field(default_factory=list)


class WorkerPoolStatus(BaseModel):
    """Status of a single NodePool."""

    model_config = ConfigDict(frozen=True)

    name: str
    replicas: int = 0
    version: str = ""
    conditions: list[Condition] = Field(default_factory=list)


class ControlPlaneResult(BaseModel):
    """Fields extracted from the main ManifestWork."""

    model_config = ConfigDict(frozen=True)

    conditions: list[Condition] = Field(default_factory=list)
    version: VersionInfo = Field(default_factory=VersionInfo)
    management_cluster: str = ""
    certificate: CertificateStatus | None = None


class StatusSnapshot(BaseModel):
    """Health snapshot of a hosted control plane cluster.

    Cluster identity fields are filled in by the caller; aggregation leaves
    them empty.
    """

    model_config = ConfigDict(frozen=True)

    cluster_id: str = ""
    cluster_name: str = ""
    cluster_state: str = ""
    management_cluster: str = ""
    version: VersionInfo = Field(default_factory=VersionInfo)
    api_server_certificate: CertificateStatus | None = None
    ingress_certificate: CertificateStatus | None = None
    sync_summaries: list[SyncSummary] = Field(default_factory=list)
    conditions: list[Condition] = Field(default_factory=list)
    worker_pools: list[WorkerPoolStatus] = Field(default_factory=list)
