"""hcpstatus - hosted control plane health from OCM live resources."""

from hcpstatus.controllers.status.aggregator import StatusAggregator, parse_live_resources
from hcpstatus.models.core.status_info import StatusSnapshot

__version__ = "0.1.0"

__all__ = ["StatusAggregator", "StatusSnapshot", "__version__", "parse_live_resources"]
