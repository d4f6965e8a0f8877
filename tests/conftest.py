from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from bookmarker.application.services.auth_service import AuthService
from bookmarker.application.services.bookmark_service import BookmarkService
from bookmarker.application.services.user_service import UserService
from bookmarker.core.app_factory import create_application
from bookmarker.infrastructure.persistence.sqlite import SQLitePersistence

TEST_SECRET = "test-secret"


class RecordingEmailService:
    """Stands in for the SMTP mailer and remembers every verification email."""

    def __init__(self, deliver: bool = True) -> None:
        self.deliver = deliver
        self.sent: List[Tuple[str, str, str]] = []

    def send_verification_email(self, to_email: str, verification_token: str, base_url: str) -> bool:
        self.sent.append((to_email, verification_token, base_url))
        return self.deliver


@pytest.fixture
def persistence(tmp_path):
    store = SQLitePersistence(tmp_path / "bookmarker.db")
    yield store
    store.close()


@pytest.fixture
def mailer():
    return RecordingEmailService()


@pytest.fixture
def auth_service(persistence, mailer):
    return AuthService(persistence, mailer, secret_key=TEST_SECRET, base_url="http://testserver")


@pytest.fixture
def bookmark_service(persistence):
    return BookmarkService(persistence)


@pytest.fixture
def user_service(persistence):
    return UserService(persistence)


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "api.db"))
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("APP_BASE_URL", "http://testserver")
    monkeypatch.delenv("SMTP_HOST", raising=False)
    monkeypatch.delenv("JWT_EXP_MINUTES", raising=False)
    app = create_application()
    with TestClient(app) as test_client:
        yield test_client


def verification_token_for(client: TestClient, email: str) -> str:
    user = client.app.state.container.persistence.get_user_by_email(email)
    return user.email_verification_token


def signup_and_login(client: TestClient, email: str, password: str = "secret-pw") -> dict:
    """Register, verify and log in a user; returns the Authorization header."""
    assert client.post("/auth/signup", json={"email": email, "password": password}).status_code == 201
    token = verification_token_for(client, email)
    assert client.get("/auth/verify-email", params={"token": token}).status_code == 200
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}
