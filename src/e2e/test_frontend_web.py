# src/e2e/test_frontend_web.py

import pytest

import charlm_frontend.web as webmod
from charlm import LanguageModel
from charlm.config import MAX_TEXT_LENGTH
from charlm_frontend.web import app as flask_app


@pytest.fixture
def client(monkeypatch):
    m = LanguageModel(3, seed=0)
    m.train("abcabcabc")
    monkeypatch.setattr(webmod, "_model", m)
    return flask_app.test_client()


@pytest.mark.e2e
def test_generate_api_json(client):
    rv = client.get("/api/generate?seed=abc&n=3")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data == {"seed": "abc", "text": "abcabc", "generated": 3, "window_length": 3}


@pytest.mark.e2e
def test_generate_api_short_and_unknown_seed(client):
    assert client.get("/api/generate?seed=ab&n=10").get_json()["text"] == "ab"
    assert client.get("/api/generate?seed=xyz&n=10").get_json()["generated"] == 0


@pytest.mark.e2e
def test_generate_api_clamps_length(client):
    data = client.get(f"/api/generate?seed=abc&n={MAX_TEXT_LENGTH * 10}").get_json()
    assert data["generated"] == MAX_TEXT_LENGTH
    data = client.get("/api/generate?seed=abc&n=-4").get_json()
    assert data["text"] == "abc"


@pytest.mark.e2e
def test_health(client):
    data = client.get("/api/health").get_json()
    assert data == {"ok": True, "trained": True, "windows": 3}


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<form" in html


@pytest.mark.e2e
def test_generate_without_model_is_503(monkeypatch):
    monkeypatch.setattr(webmod, "_model", None)
    c = flask_app.test_client()
    assert c.get("/api/generate?seed=abc").status_code == 503
    assert c.get("/api/health").get_json()["trained"] is False
