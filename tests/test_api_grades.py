from __future__ import annotations

import pytest

from routers.grades import get_transmutation_table
from main import app
from services.grading.transmutation import TransmutationTable

ACTIVITIES = ["quiz", "exam", "assignment", "project"]


def test_scope_report_midterm_scenario(client, auth_headers, make_subject, add_assessment):
    subject_id = make_subject("Physics")
    add_assessment(subject_id, "midterm", "quiz", "f2f", 18, 20)
    add_assessment(subject_id, "midterm", "exam", "f2f", 40, 50)
    add_assessment(subject_id, "midterm", "quiz", "online", 9, 10)

    resp = client.get(f"/api/grades/midterm/subjects/{subject_id}", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()

    assert body["subject_id"] == subject_id
    assert body["quarter"] == "midterm"
    assert body["activities"]["quiz"]["partial_grades"]["face_to_face"]["percentage"] == 90.0
    assert body["activities"]["exam"]["partial_grades"]["face_to_face"]["percentage"] == 80.0
    assert body["f2f_breakdown"]["raw_score"] == 42.5
    assert body["online_breakdown"]["raw_score"] == 22.5
    assert body["overall_breakdown"]["raw_score"] == 34.5
    assert body["overall_breakdown"]["final_grade"] == 5.0
    assert resp.headers["X-Latency-Ms"].isdigit()


def test_scope_report_without_records(client, auth_headers, make_subject):
    subject_id = make_subject("Physics")

    body = client.get(f"/api/grades/final/subjects/{subject_id}", headers=auth_headers).json()
    assert body["has_data"] is False
    assert body["overall_breakdown"]["final_grade"] == "No Grade"
    assert body["f2f_breakdown"]["raw_score"] == "No Data"


def test_scope_report_unknown_subject_is_404(client, auth_headers, other_auth_headers, make_subject):
    foreign_subject = make_subject("Chemistry", headers=other_auth_headers)

    resp = client.get(f"/api/grades/midterm/subjects/{foreign_subject}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_invalid_quarter_is_rejected(client, auth_headers):
    resp = client.get("/api/grades/summer", headers=auth_headers)
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_activity_breakdown(client, auth_headers, make_subject, add_assessment):
    subject_id = make_subject("Physics")
    add_assessment(subject_id, "pre_final", "project", "online", 45, 50)

    body = client.get(
        f"/api/grades/pre_final/subjects/{subject_id}/activities/project", headers=auth_headers
    ).json()
    assert body["activity"] == "project"
    assert body["partial_grades"]["online"] == {"score_obtained": 45.0, "total_possible": 50.0, "percentage": 90.0}
    assert body["partial_grades"]["face_to_face"]["percentage"] == 0


def test_scope_records(client, auth_headers, make_subject, add_assessment):
    subject_id = make_subject("Physics")
    add_assessment(subject_id, "midterm", "quiz", "f2f", 18, 20)

    found = client.get(f"/api/grades/midterm/subjects/{subject_id}/records", headers=auth_headers)
    missing = client.get(f"/api/grades/final/subjects/{subject_id}/records", headers=auth_headers)

    assert found.status_code == 200
    assert found.json()["data"][0]["subject_name"] == "Physics"
    assert missing.status_code == 404
    assert missing.json()["data"] == []


def test_quarter_report_across_subjects(client, auth_headers, make_subject, add_assessment):
    graded = make_subject("Algebra")
    make_subject("History")
    for activity in ACTIVITIES:
        add_assessment(graded, "midterm", activity, "f2f", 20, 20)
        add_assessment(graded, "midterm", activity, "online", 17, 20)

    body = client.get("/api/grades/midterm", headers=auth_headers).json()

    assert body["quarter"] == "midterm"
    assert body["subjects"]["Algebra"]["status"] == "Passing"
    assert body["subjects"]["Algebra"]["overall_breakdown"]["final_grade"] == 1.5
    assert body["subjects"]["History"]["status"] == "No Grade"
    assert body["overall_average"] == 1.5


def test_subject_all_quarters(client, auth_headers, make_subject, add_assessment):
    subject_id = make_subject("Algebra")
    add_assessment(subject_id, "preliminary", "quiz", "f2f", 18, 20)

    body = client.get(f"/api/grades/subjects/{subject_id}/all-quarters", headers=auth_headers).json()
    assert body["subject_id"] == subject_id
    assert body["quarters"]["preliminary"]["f2f"]["raw_score"] == 22.5
    assert body["quarters"]["final"]["overall"]["final_grade"] is None
    assert body["subject_final_average"] == 5.0
    assert body["status"] == "Failed"

    missing = client.get("/api/grades/subjects/999/all-quarters", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["subject_final_average"] is None


def test_all_subjects_all_quarters(client, auth_headers, make_subject, add_assessment):
    empty = client.get("/api/grades/all-quarters", headers=auth_headers).json()
    assert empty == {"message": "No subjects found", "subjects": {}, "overall_average": None}

    algebra = make_subject("Algebra")
    make_subject("History")
    for quarter in ("midterm", "final"):
        for activity in ACTIVITIES:
            add_assessment(algebra, quarter, activity, "f2f", 20, 20)
            add_assessment(algebra, quarter, activity, "online", 17, 20)

    body = client.get("/api/grades/all-quarters", headers=auth_headers).json()
    assert body["quarters"] == ["preliminary", "midterm", "pre_final", "final"]
    assert body["subjects"]["Algebra"]["subject_final_average"] == 1.5
    assert body["subjects"]["History"]["status"] == "No Grades Yet"
    assert body["overall_average"] == 1.5


def test_grades_are_scoped_to_the_user(client, auth_headers, other_auth_headers, make_subject, add_assessment):
    mine = make_subject("Algebra")
    theirs = make_subject("Algebra", headers=other_auth_headers)
    add_assessment(theirs, "midterm", "quiz", "f2f", 20, 20, headers=other_auth_headers)

    body = client.get("/api/grades/midterm", headers=auth_headers).json()
    assert body["subjects"]["Algebra"]["subject_id"] == mine
    assert body["subjects"]["Algebra"]["status"] == "No Grade"


@pytest.fixture()
def lenient_scale():
    app.dependency_overrides[get_transmutation_table] = lambda: TransmutationTable(steps=((10, 1.0),))
    yield
    app.dependency_overrides.pop(get_transmutation_table, None)


def test_grading_scale_can_be_overridden(client, auth_headers, make_subject, add_assessment, lenient_scale):
    subject_id = make_subject("Physics")
    add_assessment(subject_id, "midterm", "quiz", "f2f", 18, 20)

    body = client.get(f"/api/grades/midterm/subjects/{subject_id}", headers=auth_headers).json()
    assert body["overall_breakdown"]["final_grade"] == 1.0


def test_grades_require_a_token(client):
    resp = client.get("/api/grades/midterm")
    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == "Bearer"
