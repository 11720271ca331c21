"""Cluster identity as returned by the OCM clusters_mgmt API."""

from pydantic import BaseModel, ConfigDict


class ClusterInfo(BaseModel):
    """Subset of an OCM cluster used to fetch and label status."""

    model_config = ConfigDict(frozen=True)

    id: str
    external_id: str = ""
    name: str = ""
    state: str = ""
    hypershift_enabled: bool = False
