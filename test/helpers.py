# test/helpers.py
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from auth.utils import create_access_token

SECRET = "test-secret-con-longitud-suficiente-32b"
PASSWORD = "secreto123"


def register(client: TestClient, email: str, name: str = "Usuario", password: str = PASSWORD) -> dict:
    resp = client.post("/auth/register", json={"email": email, "name": name, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def create_task(client: TestClient, **fields) -> dict:
    resp = client.post("/tasks", json=fields)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def expired_token(user_id: str, email: str) -> str:
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    return create_access_token({"sub": user_id, "email": email}, SECRET, timedelta(days=7), now=issued)
