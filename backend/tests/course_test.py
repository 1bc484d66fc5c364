import logging
import uuid

import pytest
from fastapi import status

from conftest import auth_headers, create_course, register

COURSE_PAYLOAD = {"title": "Algorithms", "description": "Sorting and searching", "level": "ADVANCED"}

@pytest.fixture
def professor(client):
    token, user = register(client, "Dr. Jane Professor", "jane@professor.com")
    return token, user

@pytest.fixture
def student(client):
    token, user = register(client, "John Student", "john@student.com")
    return token, user

# =======================================================
#                 CREATE  /courses/  (POST)
# =======================================================

def test_create_course_enrolls_creator_as_professor(client, professor):
    token, user = professor
    course = create_course(client, token)

    assert course["title"] == "React Fundamentals"
    assert course["level"] == "BEGINNER"
    assert len(course["enrollments"]) == 1
    enrollment = course["enrollments"][0]
    assert enrollment["role"] == "PROFESSOR"
    assert enrollment["user"]["id"] == user["id"]

    r = client.get(f"/courses/{course['id']}/enrollments")
    assert [e["role"] for e in r.json()] == ["PROFESSOR"]

def test_create_course_requires_authentication(client):
    r = client.post("/courses/", json = COURSE_PAYLOAD)
    assert r.status_code == status.HTTP_401_UNAUTHORIZED

    r = client.post("/courses/", json = COURSE_PAYLOAD, headers = auth_headers("garbage"))
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert client.get("/courses/").json() == []

def test_create_course_rejects_invalid_level(client, professor):
    token, _ = professor
    payload = {**COURSE_PAYLOAD, "level": "EXPERT"}
    r = client.post("/courses/", json = payload, headers = auth_headers(token))
    assert r.status_code == 422

# =======================================================
#                 READ  /courses/
# =======================================================

def test_get_courses_newest_first(client, professor):
    token, _ = professor
    create_course(client, token, title = "First")
    create_course(client, token, title = "Second")

    r = client.get("/courses/")
    assert r.status_code == status.HTTP_200_OK
    assert [c["title"] for c in r.json()] == ["Second", "First"]

def test_get_course_not_found(client):
    r = client.get(f"/courses/{uuid.uuid4()}")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert "Course not found" in r.json()["detail"]

def test_get_course_invalid_id(client):
    r = client.get("/courses/not-a-uuid")
    assert r.status_code == 422

# =======================================================
#                 UPDATE  /courses/{id}  (PUT)
# =======================================================

def test_update_course_partial(client, professor):
    token, _ = professor
    course = create_course(client, token)

    r = client.put(f"/courses/{course['id']}", json = {"level": "INTERMEDIATE"}, headers = auth_headers(token))
    assert r.status_code == status.HTTP_200_OK
    body = r.json()
    assert body["level"] == "INTERMEDIATE"
    assert body["title"] == course["title"]
    assert body["description"] == course["description"]

def test_update_course_by_non_professor_is_forbidden(client, professor, student):
    prof_token, _ = professor
    student_token, _ = student
    course = create_course(client, prof_token)

    r = client.put(f"/courses/{course['id']}", json = {"title": "Hijacked"}, headers = auth_headers(student_token))
    assert r.status_code == status.HTTP_403_FORBIDDEN
    assert r.json()["detail"] == "Not authorized to edit this course"

    stored = client.get(f"/courses/{course['id']}").json()
    assert stored["title"] == course["title"]

def test_update_course_by_enrolled_student_is_forbidden(client, professor, student):
    prof_token, _ = professor
    student_token, _ = student
    course = create_course(client, prof_token)
    client.post(f"/courses/{course['id']}/enrollments", headers = auth_headers(student_token))

    r = client.put(f"/courses/{course['id']}", json = {"title": "Hijacked"}, headers = auth_headers(student_token))
    assert r.status_code == status.HTTP_403_FORBIDDEN

def test_update_course_rejects_null_fields(client, professor):
    token, _ = professor
    course = create_course(client, token)

    r = client.put(f"/courses/{course['id']}", json = {"title": None}, headers = auth_headers(token))
    assert r.status_code == 422

def test_update_course_requires_authentication(client, professor):
    token, _ = professor
    course = create_course(client, token)

    r = client.put(f"/courses/{course['id']}", json = {"title": "New"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED

def test_update_missing_course_is_forbidden(client, professor):
    token, _ = professor
    r = client.put(f"/courses/{uuid.uuid4()}", json = {"title": "New"}, headers = auth_headers(token))
    assert r.status_code == status.HTTP_403_FORBIDDEN
    assert r.json()["detail"] == "Not authorized to edit this course"

# =======================================================
#                 DELETE  /courses/{id}
# =======================================================

def test_delete_course_cascades_enrollments(client, professor, student):
    prof_token, _ = professor
    student_token, student_user = student
    course = create_course(client, prof_token)
    client.post(f"/courses/{course['id']}/enrollments", headers = auth_headers(student_token))

    r = client.delete(f"/courses/{course['id']}", headers = auth_headers(prof_token))
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"success": True}

    assert client.get(f"/courses/{course['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert client.get(f"/courses/{course['id']}/enrollments").json() == []
    assert client.get(f"/users/{student_user['id']}/enrollments").json() == []

    # Users survive the cascade
    assert client.get(f"/users/{student_user['id']}").status_code == status.HTTP_200_OK

def test_delete_course_by_non_professor_is_forbidden(client, professor, student):
    prof_token, _ = professor
    student_token, _ = student
    course = create_course(client, prof_token)

    r = client.delete(f"/courses/{course['id']}", headers = auth_headers(student_token))
    assert r.status_code == status.HTTP_403_FORBIDDEN
    assert r.json()["detail"] == "Not authorized to delete this course"
    assert client.get(f"/courses/{course['id']}").status_code == status.HTTP_200_OK

def test_delete_missing_course_is_forbidden(client, professor):
    token, _ = professor
    r = client.delete(f"/courses/{uuid.uuid4()}", headers = auth_headers(token))
    assert r.status_code == status.HTTP_403_FORBIDDEN
    assert r.json()["detail"] == "Not authorized to delete this course"

def test_routine_http_errors_not_logged_as_db_errors(client, professor, student, caplog):
    prof_token, _ = professor
    student_token, _ = student
    course = create_course(client, prof_token)

    with caplog.at_level(logging.DEBUG, logger = "app"):
        r = client.delete(f"/courses/{course['id']}", headers = auth_headers(student_token))
        assert r.status_code == status.HTTP_403_FORBIDDEN
        assert client.get(f"/courses/{uuid.uuid4()}").status_code == status.HTTP_404_NOT_FOUND

    assert not [rec for rec in caplog.records if "Database session error" in rec.getMessage()]
