"""Shared fixtures for the pricing engine tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from proposal_pricing.models.schemas import ServiceDescription
from proposal_pricing.pricing.parameters import PricingParameters, default_pricing_parameters


class FakeCollection:
    """Minimal stand-in for a pymongo collection, keyed on user_id."""

    def __init__(self):
        self.docs: dict[str, dict[str, Any]] = {}

    def find_one(self, query: dict[str, Any]):
        doc = self.docs.get(query["user_id"])
        return dict(doc) if doc else None

    def replace_one(self, query: dict[str, Any], document: dict[str, Any], upsert: bool = False):
        self.docs[query["user_id"]] = dict(document)
        return SimpleNamespace(matched_count=1, modified_count=1)

    def delete_one(self, query: dict[str, Any]):
        deleted = self.docs.pop(query["user_id"], None)
        return SimpleNamespace(deleted_count=1 if deleted else 0)


@pytest.fixture
def default_params() -> PricingParameters:
    return default_pricing_parameters()


@pytest.fixture
def fake_collection() -> FakeCollection:
    return FakeCollection()


def _build_service(**overrides: Any) -> ServiceDescription:
    """A medium PMO engagement over 6 months in one location, unless overridden."""
    data: dict[str, Any] = {
        "service_id": "svc-1",
        "service_type": "pmo",
        "complexity": "medium",
        "estimated_duration": 6,
        "duration_unit": "months",
        "deliverables": [],
    }
    data.update(overrides)
    if "details" not in data and data["service_type"] in ("pmo", "training", "audit", "strategy"):
        data["details"] = {"locations": ["Luanda"]}
    return ServiceDescription(**data)


@pytest.fixture
def make_service():
    return _build_service
