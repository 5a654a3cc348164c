import base64
import sqlite3

import pytest
from fastapi.testclient import TestClient

from keypub.app import create_app

WEBSITE = "keys.example.org"


def make_key(size=32, fill=7):
    return base64.b64encode(bytes([fill]) * size).decode("ascii")


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "pubkeys.db"


@pytest.fixture
def app(db_path):
    return create_app(db_url=f"sqlite://{db_path}", website_name=WEBSITE)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def row_count(db_path):
    def count():
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM pub_keys").fetchone()[0]
        finally:
            conn.close()
    return count
