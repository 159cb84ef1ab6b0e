# tests/conftest.py
import os

# must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from sqlalchemy.orm import Session
from fastapi.testclient import TestClient

from app.core.database import Base, engine, SessionLocal
from main import app


@pytest.fixture(scope="function", autouse=True)
def _schema():
    """Fresh schema for every test, on the same engine the app uses."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db() -> Session:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client() -> TestClient:
    with TestClient(app) as c:
        yield c
