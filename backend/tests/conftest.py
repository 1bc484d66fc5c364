import os, sys, pathlib

import pytest
from fastapi.testclient import TestClient

ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("JWT_EXPIRATION_MINUTES", "60")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENROLL_ALLOW_PROFESSOR_ROLE", "true")

from main import create_app
from config.database import Database

PASSWORD = "password123"


@pytest.fixture
def client():
    # Fresh in-memory database per test
    app = create_app("sqlite://")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    database = Database("sqlite://").open()
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.close()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, name: str = "John Student", email: str = "john@student.com", password: str = PASSWORD):
    r = client.post("/auth/register", json = {"name": name, "email": email, "password": password})
    assert r.status_code == 201, r.text
    body = r.json()
    return body["token"], body["user"]


def create_course(client, token: str, title: str = "React Fundamentals", level: str = "BEGINNER"):
    r = client.post(
        "/courses/",
        json = {"title": title, "description": "Learn the basics of React.", "level": level},
        headers = auth_headers(token),
    )
    assert r.status_code == 201, r.text
    return r.json()
