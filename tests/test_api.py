"""End-to-end tests for the HTTP endpoints."""

import math

import pytest

from config import settings

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNPROCESSABLE = 422


def _upload(client, *files):
    payload = [("documents", (name, content, "text/plain")) for name, content in files]
    return client.post("/api/upload-doc", files=payload)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == HTTP_OK
    assert r.json()["status"] == "healthy"
    assert r.json()["documents_indexed"] == 0


def test_health_counts_uploaded_documents(client):
    _upload(client, ("a.txt", b"red"), ("b.txt", b"red;"))
    assert client.get("/health").json()["documents_indexed"] == 1


def test_upload_returns_documents_and_errors(client):
    r = _upload(client, ("a.txt", b"Red Blue"), ("bad.txt", b"red;"), ("a.txt", b"green"))
    assert r.status_code == HTTP_OK
    assert r.json() == {
        "documents": ["a.txt"],
        "errors": ["File 'bad.txt' ignored: invalid characters."],
    }
    assert client.get("/api/documents").json() == {"documents": ["a.txt"]}


def test_upload_without_files_is_rejected(client):
    assert client.post("/api/upload-doc").status_code == HTTP_UNPROCESSABLE


def test_boolean_search_flow(client):
    r = client.post("/api/search/boolean", json={"query": "red"})
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["detail"] == "Error: No terms defined. Please enter terms first."

    r = client.post("/api/update-terms", json={"raw_terms": "red blue green"})
    assert r.json() == {"status": "success", "terms_count": 3}

    r = client.post("/api/search/boolean", json={"query": "red"})
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["detail"] == "Error: No documents uploaded. Please add documents first."

    _upload(client, ("a.txt", b"red blue"), ("b.txt", b"red"))

    r = client.post("/api/search/boolean", json={"query": "Red AND NOT(blue)"})
    assert r.status_code == HTTP_OK
    assert r.json() == {"query": "Red AND NOT(blue)", "documents": ["b.txt"], "total_results": 1}

    r = client.post("/api/search/boolean", json={"query": "blue or green"})
    assert r.json()["documents"] == ["a.txt"]


def test_vector_search_flow(client):
    r = client.post("/api/search/vector", json={"query": "cat"})
    assert r.status_code == HTTP_BAD_REQUEST

    _upload(client, ("a.txt", b"cat dog cat"), ("b.txt", b"cat cat"), ("c.txt", b"emu"))

    r = client.post("/api/search/vector", json={"query": "cat"})
    assert r.status_code == HTTP_OK
    body = r.json()
    assert body["total_results"] == 2
    assert body["results"][0] == {"fileName": "b.txt", "score": 1.0}
    assert body["results"][1]["fileName"] == "a.txt"
    assert body["results"][1]["score"] == pytest.approx(2 / math.sqrt(5))


def test_vector_search_empty_query(client):
    _upload(client, ("a.txt", b"cat"))
    r = client.post("/api/search/vector", json={"query": "  "})
    assert r.status_code == HTTP_OK
    assert r.json() == {"query": "  ", "results": [], "total_results": 0}


def test_query_too_long(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_QUERY_LENGTH", 5)
    _upload(client, ("a.txt", b"cat"))
    r = client.post("/api/search/vector", json={"query": "cat dog"})
    assert r.status_code == HTTP_UNPROCESSABLE


def test_invalid_json_body(client):
    r = client.post("/api/search/vector", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == HTTP_UNPROCESSABLE


def test_clear_docs(client):
    _upload(client, ("a.txt", b"cat"))
    for _ in range(2):
        r = client.post("/api/clear-docs")
        assert r.status_code == HTTP_OK
        assert client.get("/api/documents").json() == {"documents": []}

    status = client.get("/api/status").json()
    assert status == {"documents_count": 0, "terms_count": 0, "ready_for_queries": False}
    assert client.post("/api/search/vector", json={"query": "cat"}).status_code == HTTP_BAD_REQUEST
