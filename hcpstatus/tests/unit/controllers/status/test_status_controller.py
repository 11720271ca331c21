"""Tests for status controller."""

from __future__ import annotations

import subprocess
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from hcpstatus.controllers.status.controller import StatusController
from hcpstatus.models.core.cluster_info import ClusterInfo
from hcpstatus.models.core.errors import (
    ClusterLookupError,
    NoLiveResourcesError,
    NotHostedClusterError,
    OcmCommandError,
)
from hcpstatus.models.state.app_settings import AppSettings

HCP_CLUSTER = ClusterInfo(
    id="2abc",
    external_id="0c6e1e8a-ext",
    name="my-hcp",
    state="ready",
    hypershift_enabled=True,
)


class TestStatusController:
    """Tests for StatusController class."""

    @pytest.fixture
    def controller(self) -> StatusController:
        return StatusController("my-hcp", AppSettings(ocm_binary="ocm-test"))

    def test_controller_init(self, controller: StatusController) -> None:
        assert controller.cluster_identifier == "my-hcp"
        assert controller.settings.ocm_binary == "ocm-test"
        assert controller._load_start_time is None

    @pytest.mark.asyncio
    async def test_fetch_status(
        self, controller: StatusController, manifest_work, manifest, string_value
    ) -> None:
        """Identity fields come from the OCM cluster record."""
        controller._fetcher.fetch_cluster = AsyncMock(return_value=HCP_CLUSTER)  # type: ignore[method-assign]
        controller._fetcher.fetch_live_resources = AsyncMock(  # type: ignore[method-assign]
            return_value={
                "manifest_work-2abc": manifest_work(
                    manifests=[
                        manifest("HostedCluster", "c", [string_value("Version-Current", "4.21.0")])
                    ]
                )
            }
        )

        snapshot = await controller.fetch_status()

        assert snapshot.cluster_id == "0c6e1e8a-ext"
        assert snapshot.cluster_name == "my-hcp"
        assert snapshot.cluster_state == "ready"
        assert snapshot.version.current == "4.21.0"
        controller._fetcher.fetch_cluster.assert_awaited_once_with("my-hcp")
        controller._fetcher.fetch_live_resources.assert_awaited_once_with("2abc")

    @pytest.mark.asyncio
    async def test_fetch_status_explicit_identifier(
        self, controller: StatusController, manifest_work
    ) -> None:
        controller._fetcher.fetch_cluster = AsyncMock(return_value=HCP_CLUSTER)  # type: ignore[method-assign]
        controller._fetcher.fetch_live_resources = AsyncMock(  # type: ignore[method-assign]
            return_value={"manifest_work-2abc": manifest_work()}
        )

        await controller.fetch_status("other")

        controller._fetcher.fetch_cluster.assert_awaited_once_with("other")

    @pytest.mark.asyncio
    async def test_fetch_status_not_hcp(self, controller: StatusController) -> None:
        """Classic clusters are rejected before fetching live resources."""
        classic = HCP_CLUSTER.model_copy(update={"hypershift_enabled": False})
        controller._fetcher.fetch_cluster = AsyncMock(return_value=classic)  # type: ignore[method-assign]
        controller._fetcher.fetch_live_resources = AsyncMock()  # type: ignore[method-assign]

        with pytest.raises(NotHostedClusterError):
            await controller.fetch_status()

        controller._fetcher.fetch_live_resources.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_status_no_live_resources(self, controller: StatusController) -> None:
        controller._fetcher.fetch_cluster = AsyncMock(return_value=HCP_CLUSTER)  # type: ignore[method-assign]
        controller._fetcher.fetch_live_resources = AsyncMock(return_value={})  # type: ignore[method-assign]

        with pytest.raises(NoLiveResourcesError):
            await controller.fetch_status()

    @pytest.mark.asyncio
    async def test_fetch_status_without_identifier(self) -> None:
        with pytest.raises(ClusterLookupError):
            await StatusController().fetch_status()

    @pytest.mark.asyncio
    async def test_fetch_all(self, controller: StatusController, manifest_work) -> None:
        controller._fetcher.fetch_cluster = AsyncMock(return_value=HCP_CLUSTER)  # type: ignore[method-assign]
        controller._fetcher.fetch_live_resources = AsyncMock(  # type: ignore[method-assign]
            return_value={"manifest_work-2abc": manifest_work()}
        )

        result = await controller.fetch_all()

        assert list(result) == [StatusController.SOURCE_STATUS]
        assert result["status"].cluster_name == "my-hcp"

    @pytest.mark.asyncio
    async def test_check_connection_success(self, controller: StatusController) -> None:
        with patch.object(controller, "_run_ocm_sync", return_value="user") as run:
            assert await controller.check_connection() is True

        assert run.call_args.args[0] == ("whoami",)

    @pytest.mark.asyncio
    async def test_check_connection_failure(self, controller: StatusController) -> None:
        with patch.object(controller, "_run_ocm_sync", side_effect=OcmCommandError("not logged in")):
            assert await controller.check_connection() is False


class TestRunOcm:
    """Tests for the ocm subprocess wrapper."""

    @pytest.fixture
    def controller(self) -> StatusController:
        return StatusController(settings=AppSettings(ocm_binary="ocm-test", ocm_command_timeout=7))

    def test_success_returns_stdout(self, controller: StatusController) -> None:
        completed = MagicMock(returncode=0, stdout='{"items": []}', stderr="")
        with patch("subprocess.run", return_value=completed) as run:
            assert controller._run_ocm_sync(("get", "/api")) == '{"items": []}'

        assert run.call_args.args[0] == ["ocm-test", "get", "/api"]
        assert run.call_args.kwargs["timeout"] == 7

    def test_nonzero_exit_raises(self, controller: StatusController) -> None:
        completed = MagicMock(returncode=1, stdout="", stderr="Not logged in\n")
        with patch("subprocess.run", return_value=completed), pytest.raises(
            OcmCommandError, match="Not logged in"
        ):
            controller._run_ocm_sync(("whoami",))

    def test_missing_binary_raises(self, controller: StatusController) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError()), pytest.raises(
            OcmCommandError, match="not found"
        ):
            controller._run_ocm_sync(("whoami",))

    def test_timeout_raises(self, controller: StatusController) -> None:
        error = subprocess.TimeoutExpired(cmd="ocm-test", timeout=7)
        with patch("subprocess.run", side_effect=error), pytest.raises(
            OcmCommandError, match="timed out"
        ):
            controller._run_ocm_sync(("get", "/api"))

    @pytest.mark.asyncio
    async def test_async_wrapper(self, controller: StatusController) -> None:
        completed = MagicMock(returncode=0, stdout="ok", stderr="")
        with patch("subprocess.run", return_value=completed):
            assert await controller._run_ocm(("whoami",)) == "ok"
