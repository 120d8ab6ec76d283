"""End-to-end tests for the posts API."""

from datetime import datetime
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from numtalk.interface.api.app import create_app
from tests.conftest import auth_header
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container (in-memory persistence)."""
    app_instance = create_app(container=build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


def _create_chain(client: TestClient, start_number=100) -> dict:
    response = client.post(
        "/posts", json={"startNumber": start_number}, headers=auth_header()
    )
    assert response.status_code == 200
    return response.json()


class TestHealth:
    def test_health_is_public(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"ok": True}


class TestAuthentication:
    """Every mutating route requires a valid bearer token."""

    @pytest.mark.parametrize(
        "path",
        [
            "/posts",
            f"/posts/{uuid4()}/comments",
            f"/posts/{uuid4()}/nodes",
        ],
    )
    def test_missing_token_is_401(self, client, path):
        response = client.post(path, json={})

        assert response.status_code == 401
        assert response.json()["detail"] == "Missing Authorization header"

    def test_malformed_header_is_401(self, client):
        response = client.post(
            "/posts", json={"text": "hi"}, headers={"Authorization": "Token abc"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token format"

    def test_invalid_token_is_401(self, client):
        response = client.post(
            "/posts", json={"text": "hi"}, headers={"Authorization": "Bearer nope"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    def test_auth_is_checked_before_body(self, client):
        """An unauthenticated request with a bad body still gets 401."""
        response = client.post("/posts", json={"startNumber": "x", "text": 1})

        assert response.status_code == 401

    def test_listing_needs_no_token(self, client):
        response = client.get("/posts")

        assert response.status_code == 200
        assert response.json() == []


class TestRequestBodies:
    """Bodies are read only after the token is checked."""

    MUTATING_PATHS = [
        "/posts",
        f"/posts/{uuid4()}/comments",
        f"/posts/{uuid4()}/nodes",
    ]

    @pytest.mark.parametrize("path", MUTATING_PATHS)
    @pytest.mark.parametrize(
        "content", [None, b"{not json", b"[1]"], ids=["empty", "invalid", "array"]
    )
    def test_unauthenticated_bad_body_is_401(self, client, path, content):
        response = client.post(
            path, content=content, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 401

    @pytest.mark.parametrize("path", MUTATING_PATHS)
    @pytest.mark.parametrize(
        "content", [None, b"{not json", b"[1]"], ids=["empty", "invalid", "array"]
    )
    def test_authenticated_bad_body_is_400(self, client, path, content):
        response = client.post(
            path,
            content=content,
            headers={"Content-Type": "application/json", **auth_header()},
        )

        assert response.status_code == 400


class TestCreatePost:
    def test_create_text_post(self, client):
        response = client.post(
            "/posts", json={"text": "hello"}, headers=auth_header("u7", "gina")
        )

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == "hello"
        assert body["comments"] == []
        assert body["nodes"] == []
        assert body["startNumber"] is None
        assert body["authorId"] == "u7"
        assert body["authorName"] == "gina"
        assert "id" in body
        assert "createdAt" in body

    def test_create_chain_post(self, client):
        body = _create_chain(client, 5)

        assert body["startNumber"] == 5
        assert len(body["nodes"]) == 1
        assert body["nodes"][0]["result"] == 5
        assert body["nodes"][0]["op"] is None
        assert body["nodes"][0]["parentId"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"text": ""},
            {"startNumber": "5"},
            {"startNumber": True},
            {"text": "hi", "startNumber": 1},
        ],
    )
    def test_invalid_body_is_400(self, client, payload):
        response = client.post("/posts", json=payload, headers=auth_header())

        assert response.status_code == 400


class TestAddComment:
    def test_comment_is_trimmed(self, client):
        post = client.post(
            "/posts", json={"text": "topic"}, headers=auth_header()
        ).json()

        response = client.post(
            f"/posts/{post['id']}/comments",
            json={"text": "  hi  "},
            headers=auth_header("u2", "bob"),
        )

        assert response.status_code == 200
        comments = response.json()["comments"]
        assert len(comments) == 1
        assert comments[0]["text"] == "hi"
        assert comments[0]["parentId"] is None
        assert comments[0]["authorName"] == "bob"

    def test_reply_keeps_parent_id(self, client):
        post = client.post(
            "/posts", json={"text": "topic"}, headers=auth_header()
        ).json()
        first = client.post(
            f"/posts/{post['id']}/comments", json={"text": "a"}, headers=auth_header()
        ).json()
        parent_id = first["comments"][0]["id"]

        response = client.post(
            f"/posts/{post['id']}/comments",
            json={"text": "b", "parentId": parent_id},
            headers=auth_header(),
        )

        assert response.json()["comments"][1]["parentId"] == parent_id

    @pytest.mark.parametrize("payload", [{"text": "   "}, {"text": ""}, {}])
    def test_blank_comment_is_400(self, client, payload):
        post = client.post(
            "/posts", json={"text": "topic"}, headers=auth_header()
        ).json()

        response = client.post(
            f"/posts/{post['id']}/comments", json=payload, headers=auth_header()
        )

        assert response.status_code == 400

    @pytest.mark.parametrize("post_id", [str(uuid4()), "not-a-uuid"])
    def test_missing_post_is_404(self, client, post_id):
        response = client.post(
            f"/posts/{post_id}/comments", json={"text": "hi"}, headers=auth_header()
        )

        assert response.status_code == 404


class TestExtendChain:
    def test_scenario_subtract_then_divide_by_zero(self, client):
        post = _create_chain(client, 100)
        root_id = post["nodes"][0]["id"]

        response = client.post(
            f"/posts/{post['id']}/nodes",
            json={"parentIndex": 0, "op": "sub", "rightOperand": 30},
            headers=auth_header(),
        )
        assert response.status_code == 200
        node = response.json()["nodes"][1]
        assert node["result"] == 70
        assert node["parentId"] == root_id
        assert node["op"] == "sub"
        assert node["rightOperand"] == 30

        response = client.post(
            f"/posts/{post['id']}/nodes",
            json={"parentIndex": 1, "op": "div", "rightOperand": 0},
            headers=auth_header(),
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "division by zero"

        listed = client.get("/posts").json()
        assert len(listed[0]["nodes"]) == 2

    @pytest.mark.parametrize(
        "payload",
        [
            {"parentIndex": 0, "op": "pow", "rightOperand": 2},
            {"parentIndex": 0, "op": "add", "rightOperand": "2"},
            {"parentIndex": 0, "op": "add"},
        ],
    )
    def test_invalid_operation_is_400(self, client, payload):
        post = _create_chain(client, 1)

        response = client.post(
            f"/posts/{post['id']}/nodes", json=payload, headers=auth_header()
        )

        assert response.status_code == 400

    def test_integral_float_parent_index(self, client):
        post = _create_chain(client, 6)

        response = client.post(
            f"/posts/{post['id']}/nodes",
            json={"parentIndex": 0.0, "op": "div", "rightOperand": 4},
            headers=auth_header(),
        )

        assert response.status_code == 200
        assert response.json()["nodes"][1]["result"] == 1.5

    def test_divide_by_zero_on_missing_post_is_404(self, client):
        response = client.post(
            f"/posts/{uuid4()}/nodes",
            json={"parentIndex": 0, "op": "div", "rightOperand": 0},
            headers=auth_header(),
        )

        assert response.status_code == 404

    def test_missing_parent_node_is_404(self, client):
        post = _create_chain(client, 1)

        response = client.post(
            f"/posts/{post['id']}/nodes",
            json={"parentIndex": 3, "op": "add", "rightOperand": 1},
            headers=auth_header(),
        )

        assert response.status_code == 404

    def test_missing_post_is_404(self, client):
        response = client.post(
            f"/posts/{uuid4()}/nodes",
            json={"parentIndex": 0, "op": "add", "rightOperand": 1},
            headers=auth_header(),
        )

        assert response.status_code == 404


class TestListPosts:
    def test_newest_first_and_repeatable(self, client):
        first = client.post("/posts", json={"text": "one"}, headers=auth_header())
        second = client.post("/posts", json={"startNumber": 2}, headers=auth_header())

        listed = client.get("/posts").json()
        again = client.get("/posts").json()

        created = [datetime.fromisoformat(p["createdAt"]) for p in listed]
        assert created == sorted(created, reverse=True)
        assert {p["id"] for p in listed} == {first.json()["id"], second.json()["id"]}
        assert listed == again
