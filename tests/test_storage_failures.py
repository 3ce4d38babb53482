"""Erreurs d'accès à la base : 500 sans corps, détail uniquement dans les logs.

get et update n'interceptent pas l'erreur : elle remonte jusqu'au
gestionnaire par défaut de FastAPI (500 aussi, mais sans log applicatif).
"""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tutorial_api.api.dependencies import get_tutorial_service
from tutorial_api.features.tutorials.services import TutorialService
from tutorial_api.main import app


class _BrokenStore:
    """Stockage dont chaque opération échoue comme une base injoignable."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    create = get = find_all = find_by_title_containing = _fail
    find_by_published = save = delete_by_id = delete_all = _fail


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_tutorial_service] = lambda: TutorialService(_BrokenStore())
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "method, url, body",
    [
        ("get", "/api/tutorials", None),
        ("get", "/api/tutorials?title=go", None),
        ("get", "/api/tutorials/published", None),
        ("post", "/api/tutorials", {"title": "Go", "description": "Learn Go"}),
        ("delete", "/api/tutorials/1", None),
        ("delete", "/api/tutorials", None),
    ],
)
def test_storage_failure_returns_empty_500(broken_client, caplog, method, url, body):
    kwargs = {"json": body} if body is not None else {}
    with caplog.at_level(logging.ERROR, logger="tutorial_api.api.routers.tutorials"):
        res = getattr(broken_client, method)(url, **kwargs)

    assert res.status_code == 500
    assert res.content == b""
    assert "database is locked" not in res.text
    assert any(r.exc_info for r in caplog.records)


@pytest.mark.parametrize(
    "method, url, body",
    [
        ("get", "/api/tutorials/1", None),
        ("put", "/api/tutorials/1", {"title": "Go", "description": "Learn Go", "published": True}),
    ],
)
def test_lookup_paths_fall_back_to_framework_500(broken_client, method, url, body):
    kwargs = {"json": body} if body is not None else {}
    res = getattr(broken_client, method)(url, **kwargs)
    assert res.status_code == 500
    assert "database is locked" not in res.text
