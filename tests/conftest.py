import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before anything imports database
TEST_DB_PATH = Path(tempfile.mkdtemp()) / "shorturl_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["ENVIRONMENT"] = "dev"

import database
import main
import models
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def empty_table():
    with database.SessionLocal() as db:
        db.query(models.ShortenedUrl).delete()
        db.commit()
    yield


@pytest.fixture
def client():
    with TestClient(main.app) as c:
        yield c


@pytest.fixture
def shorten(client):
    def _shorten(url):
        resp = client.post("/api/url", json={"data": {"url": url}})
        assert resp.status_code == 201
        return resp.json()["data"]
    return _shorten
