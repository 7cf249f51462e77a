from __future__ import annotations

from copy import deepcopy
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import Mock, patch
from urllib.parse import urlparse
import itertools

import pytest

from healthsaas.config import settings as settings_module
from healthsaas.integrations.api_client import ApiClient
from healthsaas.storage.local_storage import LocalStorage
from healthsaas.storage.session_store import SessionStore

BASE_URL = "http://backend.test/api"


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> Mock:
    """Build a stand-in for requests.Response; pass text= for a non-JSON body."""
    response = Mock()
    response.status_code = status_code
    if text is not None:
        response.text = text
        response.json.side_effect = ValueError(f"Expecting value: {text[:20]!r}")
    else:
        response.text = "" if body is None else repr(body)
        response.json.return_value = deepcopy(body)
    return response


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Each test sees a fresh settings object built from a controlled environment."""
    for name in ("HEALTHSAAS_API_URL", "VITE_API_URL", "HEALTHSAAS_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HEALTHSAAS_STORAGE_PATH", str(tmp_path / "local_storage.json"))
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture
def response_factory() -> Callable[..., Mock]:
    return make_response


@pytest.fixture
def mock_request():
    with patch("healthsaas.integrations.api_client.requests.request") as mocked:
        mocked.return_value = make_response(200, {"message": "ok"})
        yield mocked


@pytest.fixture
def client() -> ApiClient:
    return ApiClient(BASE_URL)


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "browser" / "local_storage.json")


@pytest.fixture
def session_store(storage: LocalStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def user_payload() -> Dict[str, Any]:
    return {"user_id": "1", "name": "Jane", "email": "a@b.com", "role": "worker"}


class FakeBackend:
    """In-memory households service speaking the backend's wire format."""

    def __init__(self):
        self.households: List[Dict[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []
        self._ids = itertools.count(1)

    def __call__(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json})
        path = urlparse(url).path
        if not path.startswith("/api/households"):
            return make_response(404, {"detail": "Not Found"})

        if method == "POST":
            if any(h["code"] == json["code"] for h in self.households):
                return make_response(400, {"detail": "Household code already exists"})
            record = dict(json, _id=f"hh-{next(self._ids)}", created_at="2026-10-19T09:00:00")
            self.households.append(record)
            return make_response(201, {"message": "Household created", "data": {"household_id": record["_id"]}})

        if method == "GET":
            limit = int(params["limit"])
            skip = int(params["skip"])
            page = self.households[skip:skip + limit]
            return make_response(200, {
                "message": "ok",
                "data": {"households": page, "count": len(page), "total": len(self.households)},
            })

        household_id = path.rsplit("/", 1)[-1]
        matches = [h for h in self.households if h["_id"] == household_id]
        if not matches:
            return make_response(404, {"detail": "Household not found"})
        if method == "PUT":
            matches[0].update(json)
            return make_response(200, {"message": "Household updated"})
        if method == "DELETE":
            self.households.remove(matches[0])
            return make_response(200, {"message": "Household deleted"})
        return make_response(405, text="Method Not Allowed")


@pytest.fixture
def fake_backend():
    backend = FakeBackend()
    with patch("healthsaas.integrations.api_client.requests.request", side_effect=backend):
        yield backend
