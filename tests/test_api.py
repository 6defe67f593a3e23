"""
Tests for the HTTP surface.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from storefront.infrastructure.pipeline.mock_pipeline import MockPipelineClient
from storefront.infrastructure.store.memory_store import MemoryStore
from storefront.main import app
from storefront.wiring.dependencies import get_pipeline_factory, get_store


@pytest.fixture
def pipeline():
    return MockPipelineClient()


@pytest.fixture
def client(pipeline):
    store = MemoryStore()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_pipeline_factory] = lambda: pipeline
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_variants_are_fetched_once(client, pipeline):
    first = client.get("/products/P1/variants")
    second = client.get("/products/P1/variants")

    assert first.status_code == 200
    assert first.json()["status"] == "present"
    assert second.json() == first.json()
    assert len(pipeline.calls) == 1


def test_variants_error_maps_to_bad_gateway(client, pipeline):
    pipeline.failing.add("getProductVariants")
    response = client.get("/products/P1/variants")
    assert response.status_code == 502


def test_invalid_review_returns_validation_errors(client, pipeline):
    response = client.post("/products/P1/reviews", json={"title": "Great"})

    assert response.status_code == 422
    assert set(response.json()["validation_errors"]) == {"rate", "author"}
    assert pipeline.calls == []


def test_new_review_is_added(client, pipeline):
    response = client.post(
        "/products/P1/reviews",
        json={"title": "Great", "review": "Fits well", "rate": 5, "author_name": "Kim"},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "submitted", "is_update": False}
    operation, payload = pipeline.calls[0]
    assert operation == "addProductReview"
    assert payload["author"] == "Kim"
    assert payload["productId"] == "P1"


def test_existing_review_is_updated(client, pipeline):
    response = client.post(
        "/products/P1/reviews",
        json={"rate": 2, "existing": {"author": "Kim", "rate": 4}},
    )

    assert response.status_code == 200
    assert response.json()["is_update"] is True
    assert pipeline.calls[0][0] == "updateProductReview"
    assert pipeline.calls[0][1]["rate"] == 2


def test_failed_review_submission_maps_to_bad_gateway(client, pipeline):
    pipeline.failing.add("addProductReview")
    response = client.post("/products/P1/reviews", json={"rate": 5, "author": "Kim"})
    assert response.status_code == 502
