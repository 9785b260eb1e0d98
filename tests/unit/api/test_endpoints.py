"""HTTP tests: domain errors mapped to responses, session-based login."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from snippetbox.api.dependencies import get_engine
from snippetbox.main import app

pytestmark = pytest.mark.usefixtures("fast_hashing")

SNAIL = {
    "title": "O snail",
    "content": "O snail\nClimb Mount Fuji,\nBut slowly, slowly!\n\n– Kobayashi Issa",
    "expires": 7,
}


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def _signup_and_login(client, email="a@x.com", password="secret123"):
    response = client.post("/user/signup", json={"name": "A", "email": email, "password": password})
    assert response.status_code == 201
    response = client.post("/user/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["id"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSignup:
    def test_created(self, client):
        response = client.post("/user/signup", json={"name": "A", "email": "a@x.com", "password": "secret123"})
        assert response.status_code == 201
        assert response.json()["id"] >= 1

    def test_duplicate_email_conflict(self, client):
        body = {"name": "A", "email": "a@x.com", "password": "secret123"}
        client.post("/user/signup", json=body)
        response = client.post("/user/signup", json=body)
        assert response.status_code == 409
        assert response.json()["field"] == "email"

    @pytest.mark.parametrize(
        "body",
        [
            {"name": " ", "email": "a@x.com", "password": "secret123"},
            {"name": "A", "email": "not-an-email", "password": "secret123"},
            {"name": "A", "email": "a@x.com", "password": "short"},
        ],
    )
    def test_invalid_input(self, client, body):
        assert client.post("/user/signup", json=body).status_code == 422


class TestLogin:
    def test_returns_registered_id(self, client):
        signup = client.post("/user/signup", json={"name": "A", "email": "a@x.com", "password": "secret123"})
        login = client.post("/user/login", json={"email": "a@x.com", "password": "secret123"})
        assert login.status_code == 200
        assert login.json()["id"] == signup.json()["id"]

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        client.post("/user/signup", json={"name": "A", "email": "a@x.com", "password": "secret123"})
        wrong = client.post("/user/login", json={"email": "a@x.com", "password": "wrong-password"})
        unknown = client.post("/user/login", json={"email": "b@x.com", "password": "secret123"})
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json()


class TestSnippetCreate:
    def test_requires_login(self, client):
        response = client.post("/snippet/create", json=SNAIL, follow_redirects=False)
        assert response.status_code == 401

    def test_redirects_to_new_snippet(self, client):
        _signup_and_login(client)
        response = client.post("/snippet/create", json=SNAIL, follow_redirects=False)
        assert response.status_code == 303
        location = response.headers["location"]
        assert location.startswith("/snippet/view/")

        view = client.get(location)
        assert view.status_code == 200
        assert view.json()["title"] == "O snail"

    def test_rejects_unlisted_expiry(self, client):
        _signup_and_login(client)
        response = client.post("/snippet/create", json={**SNAIL, "expires": 30}, follow_redirects=False)
        assert response.status_code == 422

    def test_logout_ends_session(self, client):
        _signup_and_login(client)
        assert client.post("/user/logout").status_code == 200
        response = client.post("/snippet/create", json=SNAIL, follow_redirects=False)
        assert response.status_code == 401

    def test_session_for_deleted_user_is_rejected(self, client, bare_engine):
        _signup_and_login(client)
        # Point the app at a database where the user does not exist.
        SQLModel.metadata.create_all(bare_engine)
        app.dependency_overrides[get_engine] = lambda: bare_engine
        response = client.post("/snippet/create", json=SNAIL, follow_redirects=False)
        assert response.status_code == 401


class TestSnippetView:
    @pytest.mark.parametrize("snippet_id", ["abc", "0", "-1", "999"])
    def test_not_found(self, client, snippet_id):
        assert client.get(f"/snippet/view/{snippet_id}").status_code == 404


class TestHome:
    def test_lists_latest_newest_first(self, client):
        _signup_and_login(client)
        for n in range(3):
            client.post("/snippet/create", json={**SNAIL, "title": f"Snippet {n}"}, follow_redirects=False)
        titles = [s["title"] for s in client.get("/").json()]
        assert titles == ["Snippet 2", "Snippet 1", "Snippet 0"]

    def test_storage_failure_is_generic_500(self, client, bare_engine):
        app.dependency_overrides[get_engine] = lambda: bare_engine
        response = client.get("/")
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
