"""Status screen package."""

from hcpstatus.screens.status.presenter import StatusPresenter

__all__ = ["StatusPresenter"]
