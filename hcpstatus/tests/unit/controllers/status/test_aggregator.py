"""Tests for status aggregator."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from hcpstatus.controllers.status.aggregator import (
    StatusAggregator,
    main_document_key,
    parse_live_resources,
)
from hcpstatus.models.core.errors import DocumentParseError
from hcpstatus.models.core.status_info import StatusSnapshot

CLUSTER_ID = "2abc123def456"


@pytest.fixture
def aggregator() -> StatusAggregator:
    return StatusAggregator()


@pytest.fixture
def live_resources(manifest_work, manifest, string_value, integer_value, certificate_document):
    """A realistic live-resources mapping for one HCP cluster."""
    return {
        f"manifest_work-{CLUSTER_ID}": manifest_work(
            name=CLUSTER_ID,
            labels={"api.openshift.com/management-cluster": "hs-mc-abc"},
            conditions=[
                {"type": "Applied", "status": "True", "lastTransitionTime": "2026-05-07T10:00:00Z"},
                {"type": "Available", "status": "True", "lastTransitionTime": "2026-05-07T11:00:00Z"},
            ],
            manifests=[
                manifest(
                    "HostedCluster",
                    "test",
                    [
                        string_value("Available-Status", "True"),
                        string_value("Version-Current", "4.21.0"),
                    ],
                ),
                manifest("Certificate", "api-cert"),
            ],
        ),
        f"manifest_work-{CLUSTER_ID}-workers": manifest_work(
            name=f"{CLUSTER_ID}-workers",
            conditions=[{"type": "Applied", "status": "False"}],
            manifests=[
                manifest(
                    "NodePool",
                    "workers",
                    [integer_value("Replicas", 3), string_value("Version", "4.21.0")],
                )
            ],
        ),
        f"certificate-{CLUSTER_ID}": certificate_document(
            dns_names=["*.apps.test.example.com"],
            conditions=[{"type": "Ready", "status": "True"}],
            not_after="2026-08-05T12:00:00Z",
        ),
        "namespace-openshift-ingress": "not json, but never read",
    }


class TestStatusAggregator:
    """Tests for StatusAggregator class."""

    def test_empty_mapping(self, aggregator: StatusAggregator) -> None:
        snapshot = aggregator.aggregate({}, CLUSTER_ID)

        assert snapshot == StatusSnapshot()
        assert snapshot.sync_summaries == []
        assert snapshot.conditions == []
        assert snapshot.worker_pools == []
        assert snapshot.version.current == ""
        assert snapshot.version.available_updates == []
        assert snapshot.api_server_certificate is None
        assert snapshot.ingress_certificate is None

    def test_single_sync_document(self, aggregator: StatusAggregator, manifest_work) -> None:
        resources = {
            "manifest_work-X": manifest_work(
                conditions=[
                    {"type": "Applied", "status": "True", "lastTransitionTime": "2026-05-07T10:00:00Z"},
                    {"type": "Available", "status": "True", "lastTransitionTime": "2026-05-07T12:30:00Z"},
                ]
            )
        }

        snapshot = aggregator.aggregate(resources, "X")

        assert len(snapshot.sync_summaries) == 1
        summary = snapshot.sync_summaries[0]
        assert summary.name == "manifest_work-X"
        assert summary.applied is True
        assert summary.available is True
        assert summary.last_sync_time == datetime(2026, 5, 7, 12, 30, tzinfo=timezone.utc)

    def test_full_cluster(self, aggregator: StatusAggregator, live_resources) -> None:
        snapshot = aggregator.aggregate(live_resources, CLUSTER_ID)

        assert snapshot.cluster_id == ""
        assert snapshot.management_cluster == "hs-mc-abc"
        assert snapshot.version.current == "4.21.0"
        assert [(c.type, c.status) for c in snapshot.conditions] == [("Available", "True")]
        assert snapshot.api_server_certificate is not None
        assert snapshot.api_server_certificate.ready is None
        assert snapshot.ingress_certificate is not None
        assert snapshot.ingress_certificate.ready is True
        assert snapshot.ingress_certificate.dns_names == ["*.apps.test.example.com"]
        assert [s.name for s in snapshot.sync_summaries] == [
            f"manifest_work-{CLUSTER_ID}",
            f"manifest_work-{CLUSTER_ID}-workers",
        ]
        assert [s.applied for s in snapshot.sync_summaries] == [True, False]
        assert [(p.name, p.replicas, p.version) for p in snapshot.worker_pools] == [
            ("workers", 3, "4.21.0")
        ]

    def test_aggregation_is_repeatable(self, aggregator: StatusAggregator, live_resources) -> None:
        first = aggregator.aggregate(live_resources, CLUSTER_ID)
        second = aggregator.aggregate(dict(reversed(list(live_resources.items()))), CLUSTER_ID)

        assert first == second

    def test_missing_main_document(self, aggregator: StatusAggregator, live_resources) -> None:
        snapshot = aggregator.aggregate(live_resources, "some-other-id")

        assert snapshot.conditions == []
        assert snapshot.version.current == ""
        assert snapshot.management_cluster == ""
        assert snapshot.api_server_certificate is None
        assert len(snapshot.sync_summaries) == 2
        assert len(snapshot.worker_pools) == 1

    def test_sync_summaries_sorted_by_key(self, aggregator: StatusAggregator, manifest_work) -> None:
        resources = {
            "manifest_work-c": manifest_work(),
            "manifest_work-a": manifest_work(),
            "manifest_work-b": manifest_work(),
        }

        snapshot = aggregator.aggregate(resources, "a")

        assert [s.name for s in snapshot.sync_summaries] == [
            "manifest_work-a",
            "manifest_work-b",
            "manifest_work-c",
        ]

    def test_worker_pools_collected_across_documents(
        self, aggregator: StatusAggregator, manifest_work, manifest
    ) -> None:
        resources = {
            "manifest_work-x-pool2": manifest_work(manifests=[manifest("NodePool", "pool2")]),
            "manifest_work-x-pool1": manifest_work(
                manifests=[manifest("NodePool", "pool1a"), manifest("NodePool", "pool1b")]
            ),
        }

        snapshot = aggregator.aggregate(resources, "x")

        assert [p.name for p in snapshot.worker_pools] == ["pool1a", "pool1b", "pool2"]

    def test_first_certificate_key_wins(
        self, aggregator: StatusAggregator, certificate_document, caplog
    ) -> None:
        resources = {
            "certificate-b": certificate_document(dns_names=["b.example.com"]),
            "certificate-a": certificate_document(dns_names=["a.example.com"]),
        }

        with caplog.at_level(logging.WARNING):
            snapshot = aggregator.aggregate(resources, "x")

        assert snapshot.ingress_certificate is not None
        assert snapshot.ingress_certificate.dns_names == ["a.example.com"]
        assert "certificate-a" in caplog.text

    def test_null_documents_read_as_empty(self, aggregator: StatusAggregator) -> None:
        snapshot = aggregator.aggregate(
            {"manifest_work-x": "null", "certificate-x": "null"}, "x"
        )

        assert [(s.name, s.applied) for s in snapshot.sync_summaries] == [
            ("manifest_work-x", False)
        ]
        assert snapshot.conditions == []
        assert snapshot.ingress_certificate is not None
        assert snapshot.ingress_certificate.ready is None

    def test_unrelated_keys_ignored(self, aggregator: StatusAggregator) -> None:
        resources = {"Manifest_work-x": "{", "configmap-x": "{", "manifest_workx": "{"}

        assert aggregator.aggregate(resources, "x") == StatusSnapshot()

    @pytest.mark.parametrize(
        "key",
        ["manifest_work-x", "manifest_work-x-workers", "certificate-x"],
    )
    def test_decode_failure_names_key(
        self, aggregator: StatusAggregator, key: str
    ) -> None:
        resources = {"manifest_work-x": "{}", key: "{truncated"}

        with pytest.raises(DocumentParseError) as exc_info:
            aggregator.aggregate(resources, "x")

        assert exc_info.value.key == key
        assert key in str(exc_info.value)

    def test_custom_non_condition_prefixes(self, manifest_work, manifest, string_value) -> None:
        resources = {
            "manifest_work-x": manifest_work(
                manifests=[
                    manifest(
                        "HostedCluster",
                        "c",
                        [
                            string_value("Available-Status", "True"),
                            string_value("Platform-Status", "AWS"),
                        ],
                    )
                ]
            )
        }

        snapshot = StatusAggregator(["Version", "Platform"]).aggregate(resources, "x")

        assert [c.type for c in snapshot.conditions] == ["Available"]


class TestHelpers:
    def test_main_document_key(self) -> None:
        assert main_document_key("abc") == "manifest_work-abc"

    def test_classify_keys(self) -> None:
        sync_keys, certificate_keys = StatusAggregator.classify_keys(
            {"certificate-z": "", "manifest_work-b": "", "other": "", "manifest_work-a": ""}
        )

        assert sync_keys == ["manifest_work-a", "manifest_work-b"]
        assert certificate_keys == ["certificate-z"]

    def test_parse_live_resources(self, manifest_work) -> None:
        snapshot = parse_live_resources({"manifest_work-x": manifest_work()}, "x")

        assert [s.name for s in snapshot.sync_summaries] == ["manifest_work-x"]
