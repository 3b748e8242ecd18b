"""Tests for the HTTP API."""
import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture(name="client")
def create_client() -> TestClient:
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_compare_documents(client, uat_yaml, prod_json):
    response = client.post("/api/compare", json={
        "source_content": uat_yaml,
        "source_filename": "uat.yaml",
        "target_content": prod_json,
        "target_filename": "prod.json",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["source_format"] == "yaml"
    assert body["target_format"] == "json"
    assert body["only_in_source"] == ["database.debug"]
    assert body["common"] == ["database.host", "database.port"]
    assert body["value_differences"] == [
        {"key": "database.host", "source_value": "uat-db", "target_value": "prod-db"}
    ]
    assert body["summary"].startswith("📊 Config Comparison Summary")
    assert body["report"] is None


def test_compare_undetectable_document(client):
    response = client.post("/api/compare", json={
        "source_content": '{"a": 1}',
        "source_filename": "a.json",
        "target_content": "@#$ nothing",
        "target_filename": "b.unknownext",
    })

    assert response.status_code == 422
    assert "b.unknownext" in response.json()["detail"]


def test_compare_uploaded_files(client, uat_yaml, prod_yaml):
    response = client.post("/api/compare/files", files={
        "source_file": ("uat.yaml", uat_yaml.encode("utf-8"), "application/x-yaml"),
        "target_file": ("prod.yaml", prod_yaml.encode("utf-8"), "application/x-yaml"),
    })

    assert response.status_code == 200
    body = response.json()
    assert body["source_file"] == "uat.yaml"
    assert "CONFIG COMPARISON REPORT" in body["report"]


def test_compare_uploaded_binary_file(client, prod_yaml):
    response = client.post("/api/compare/files", files={
        "source_file": ("uat.yaml", b"\xff\xfe\x00bad", "application/octet-stream"),
        "target_file": ("prod.yaml", prod_yaml.encode("utf-8"), "application/x-yaml"),
    })

    assert response.status_code == 400


def test_compare_uploaded_file_with_byte_order_mark(client, prod_yaml):
    response = client.post("/api/compare/files", files={
        "source_file": ("uat.yaml", prod_yaml.encode("utf-8-sig"), "application/x-yaml"),
        "target_file": ("prod.yaml", prod_yaml.encode("utf-8"), "application/x-yaml"),
    })

    assert response.status_code == 200
    body = response.json()
    assert body["only_in_source"] == []
    assert body["value_differences"] == []


def test_detect(client):
    response = client.post("/api/compare/detect", json={"content": "", "filename": "app.yml"})

    assert response.status_code == 200
    assert response.json() == {"format": "yaml", "format_source": "extension"}


def test_flatten(client):
    response = client.post("/api/compare/flatten", json={
        "content": '{"a": {"b": [1, null]}}',
        "filename": "a.json",
    })

    assert response.status_code == 200
    assert response.json() == {"format": "json", "flat": {"a.b[0]": 1, "a.b[1]": None}}


def test_flatten_parse_error(client):
    response = client.post("/api/compare/flatten", json={
        "content": "<root><open></root>",
        "filename": "bad.xml",
    })

    assert response.status_code == 422
    assert "xml" in response.json()["detail"]


def test_inline_diff(client):
    response = client.post("/api/compare/inline-diff", json={
        "old_value": "uat-db",
        "new_value": "prod-db",
    })

    assert response.status_code == 200
    assert response.json()["suffix"] == "-db"
