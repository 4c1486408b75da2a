from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  (registers every table on Base.metadata)
from database.db import Base, get_db
from main import app
from services.grading.aggregator import AssessmentRecord


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _register(client: TestClient, email: str) -> dict:
    resp = client.post(
        "/api/register",
        json={"name": "Student", "email": email, "password": "secret-pass"},
    )
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture()
def auth_headers(client):
    return _register(client, "student@mail.com")


@pytest.fixture()
def other_auth_headers(client):
    return _register(client, "other@mail.com")


@pytest.fixture()
def make_subject(client, auth_headers):
    def _make(name: str, headers: dict | None = None) -> int:
        resp = client.post("/api/subjects/", json={"name": name}, headers=headers or auth_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]["id"]

    return _make


@pytest.fixture()
def add_assessment(client, auth_headers):
    def _add(subject_id: int, quarter: str, activity: str, mode: str, score: float, total: float, headers: dict | None = None) -> dict:
        resp = client.post(
            "/api/assessments/",
            json={
                "subject_id": subject_id,
                "name_assessment": f"{activity} {mode}",
                "type_quarter": quarter,
                "type_activity": activity,
                "mode": mode,
                "score": score,
                "total_items": total,
            },
            headers=headers or auth_headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _add


@pytest.fixture()
def make_record():
    def _make(activity: str, mode: str, score: float, total: float, quarter: str = "midterm", subject_id: int = 1) -> AssessmentRecord:
        return AssessmentRecord(
            subject_id=subject_id,
            quarter=quarter,
            activity_type=activity,
            mode=mode,
            score=score,
            total_items=total,
        )

    return _make
