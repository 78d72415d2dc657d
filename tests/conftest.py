import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from kidpoints.database import get_db
from kidpoints.database.base_class import Base
from kidpoints.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def login(client, username, password="secret"):
    res = client.post("/api/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def parent_headers(client):
    res = client.post("/api/register", json={"username": "mom", "password": "secret", "name": "Mom"})
    assert res.status_code == 201, res.text
    return login(client, "mom")


@pytest.fixture
def child(client, parent_headers):
    res = client.post(
        "/api/children",
        json={"username": "sam", "password": "secret", "name": "Sam", "age": 8},
        headers=parent_headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
def child_headers(client, child):
    return login(client, "sam")


@pytest.fixture
def other_parent_headers(client):
    res = client.post("/api/register", json={"username": "dad", "password": "secret", "name": "Dad"})
    assert res.status_code == 201, res.text
    return login(client, "dad")
