"""Integration tests for the GitHub webhook endpoint."""

from __future__ import annotations

import json

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pingbot.application.use_cases.pings import IdentityResolver
from pingbot.config import Settings, get_settings
from pingbot.domain.entities import NotificationUrl
from pingbot.infrastructure.database import get_db, initialize_database
from pingbot.infrastructure.repositories import NotificationRepository
from pingbot.interfaces.api.dependencies import compute_signature, get_identity_resolver

from conftest import FakeDirectory

COMMENT_URL = "https://github.com/rust-lang/rust/issues/5#issuecomment-99"


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def settings() -> Settings:
    return Settings(webhook_secret=None)


@pytest.fixture()
def client(session_factory, directory, settings):
    from main import create_app

    app = create_app()

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_identity_resolver] = lambda: IdentityResolver(directory)
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


def _comment_payload(body: str, action: str = "created") -> dict:
    return {
        "action": action,
        "issue": {
            "number": 5,
            "title": "Tracking issue for async closures",
            "body": "original",
            "html_url": "https://github.com/rust-lang/rust/issues/5",
            "user": {"login": "reporter", "id": 100},
            "created_at": "2024-05-01T10:00:00Z",
        },
        "comment": {
            "body": body,
            "html_url": COMMENT_URL,
            "user": {"login": "commenter", "id": 200},
            "updated_at": "2024-05-01T12:00:00Z",
        },
        "repository": {"full_name": "rust-lang/rust"},
    }


def _post(client: TestClient, event: str, payload: dict, **headers: str):
    return client.post(
        "/github-hook",
        content=json.dumps(payload).encode(),
        headers={"X-GitHub-Event": event, "Content-Type": "application/json", **headers},
    )


def test_comment_creates_pings(client: TestClient, session_factory) -> None:
    response = _post(client, "issue_comment", _comment_payload("r? @alice cc @rust-lang/core"))

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "processed"
    assert data["notified_user_ids"] == [7, 9]

    repository = NotificationRepository(session_factory())
    alice = repository.find_notification(7, NotificationUrl(COMMENT_URL))
    assert alice.team_name is None
    assert alice.short_description == "Comment on Tracking issue for async closures"
    assert repository.find_notification(9, NotificationUrl(COMMENT_URL)).team_name == "core"
    assert repository.get_username(9) == "bob"


def test_edited_comment_only_acknowledges(client: TestClient, session_factory) -> None:
    _post(client, "issue_comment", _comment_payload("@alice"))

    payload = _comment_payload(f"acknowledge {COMMENT_URL} @bob", action="edited")
    payload["comment"]["user"] = {"login": "alice", "id": 7}
    response = _post(client, "issue_comment", payload)

    assert response.json() == {
        "status": "processed",
        "acknowledged": [COMMENT_URL],
        "notified_user_ids": [],
    }
    repository = NotificationRepository(session_factory())
    assert repository.find_notification(7, NotificationUrl(COMMENT_URL)) is None
    assert repository.find_notification(9, NotificationUrl(COMMENT_URL)) is None


def test_issue_opened_event(client: TestClient) -> None:
    payload = _comment_payload("unused")
    del payload["comment"]
    payload["action"] = "opened"
    payload["issue"]["body"] = "@carol can you take a look?"

    response = _post(client, "issues", payload)

    assert response.json()["notified_user_ids"] == [11]


@pytest.mark.parametrize(
    ("event", "action"),
    [("push", "created"), ("issues", "typed"), ("issue_comment", "unknown")],
)
def test_unhandled_deliveries_are_ignored(client: TestClient, event: str, action: str) -> None:
    response = _post(client, event, _comment_payload("@alice", action=action))

    assert response.status_code == 200
    assert response.json()["status"] == "ignored"


def test_malformed_payload_is_rejected(client: TestClient) -> None:
    payload = _comment_payload("@alice")
    del payload["comment"]["user"]

    response = _post(client, "issue_comment", payload)

    assert response.status_code == 422


def test_invalid_json_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/github-hook",
        content=b"{not json",
        headers={"X-GitHub-Event": "issues"},
    )

    assert response.status_code == 422


def test_signature_is_enforced_when_secret_configured(client: TestClient, settings) -> None:
    settings.webhook_secret = "s3cret"
    payload = _comment_payload("@alice")
    body = json.dumps(payload).encode()

    rejected = _post(client, "issue_comment", payload, **{"X-Hub-Signature-256": "sha256=00"})
    assert rejected.status_code == 403

    accepted = client.post(
        "/github-hook",
        content=body,
        headers={
            "X-GitHub-Event": "issue_comment",
            "X-Hub-Signature-256": compute_signature("s3cret", body),
        },
    )
    assert accepted.status_code == 200
    assert accepted.json()["notified_user_ids"] == [7]


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
