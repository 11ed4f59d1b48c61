from fastapi.testclient import TestClient

import routers.health
from main import app

client = TestClient(app)


def test_health_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_health_db():
    r = client.get("/health/db")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_health_schema_all_tables_present():
    r = client.get("/health/schema")
    assert r.status_code == 200
    b = r.json()
    assert b["ok"] is True
    assert b["missing"] == []
    assert b["tables"] == {"math_problem_sessions": True, "math_problem_submissions": True}


def test_health_schema_reports_missing_table(monkeypatch):
    monkeypatch.setattr(
        routers.health,
        "REQUIRED_TABLES",
        ("math_problem_sessions", "math_problem_hints"),
    )
    b = client.get("/health/schema").json()
    assert b["ok"] is False
    assert b["missing"] == ["math_problem_hints"]
    assert b["tables"]["math_problem_sessions"] is True
