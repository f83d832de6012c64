# File: tests/test_health.py
from __future__ import annotations


def test_health_ok(test_client):
    r = test_client.get("/health")
    assert r.status_code == 200
    assert r.text == "OK"
    assert r.headers["content-type"].startswith("text/plain")


def test_health_ignores_broken_build_files(test_client, build_dir):
    (build_dir / "VERSION").mkdir()
    (build_dir / "TIMESTAMP").write_bytes(b"\xff\xfe\xfa")
    r = test_client.get("/health")
    assert r.status_code == 200
    assert r.text == "OK"


def test_health_head(test_client):
    r = test_client.head("/health")
    assert r.status_code == 200
