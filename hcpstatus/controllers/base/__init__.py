"""Base controller classes."""

from hcpstatus.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
)

__all__ = ["AsyncControllerMixin", "BaseController"]
