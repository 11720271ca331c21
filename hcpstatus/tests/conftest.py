"""Shared fixtures building OCM live-resource documents."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest


def _string_value(name: str, value: str) -> dict[str, Any]:
    return {"name": name, "fieldValue": {"type": "String", "string": value}}


def _integer_value(name: str, value: int) -> dict[str, Any]:
    return {"name": name, "fieldValue": {"type": "Integer", "integer": value}}


@pytest.fixture
def string_value() -> Callable[[str, str], dict[str, Any]]:
    """Factory for String-typed status feedback entries."""
    return _string_value


@pytest.fixture
def integer_value() -> Callable[[str, int], dict[str, Any]]:
    """Factory for Integer-typed status feedback entries."""
    return _integer_value


@pytest.fixture
def manifest() -> Callable[..., dict[str, Any]]:
    """Factory for one ManifestWork resourceStatus manifest entry."""

    def _build(kind: str, name: str = "", values: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        return {
            "resourceMeta": {"kind": kind, "name": name},
            "statusFeedback": {"values": values or []},
        }

    return _build


@pytest.fixture
def manifest_work() -> Callable[..., str]:
    """Factory for ManifestWork JSON documents."""

    def _build(
        name: str = "",
        labels: dict[str, str] | None = None,
        conditions: list[dict[str, Any]] | None = None,
        manifests: list[dict[str, Any]] | None = None,
    ) -> str:
        return json.dumps(
            {
                "metadata": {"name": name, "labels": labels or {}},
                "status": {
                    "conditions": conditions or [],
                    "resourceStatus": {"manifests": manifests or []},
                },
            }
        )

    return _build


@pytest.fixture
def certificate_document() -> Callable[..., str]:
    """Factory for cert-manager Certificate JSON documents."""

    def _build(
        dns_names: list[str] | None = None,
        conditions: list[dict[str, Any]] | None = None,
        not_after: str | None = None,
        renewal_time: str | None = None,
    ) -> str:
        status: dict[str, Any] = {"conditions": conditions or []}
        if not_after is not None:
            status["notAfter"] = not_after
        if renewal_time is not None:
            status["renewalTime"] = renewal_time
        return json.dumps({"spec": {"dnsNames": dns_names or []}, "status": status})

    return _build
