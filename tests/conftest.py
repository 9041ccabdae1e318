import json
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

from contact_relay.core.config import Settings, get_settings
from contact_relay.core.http_client import get_http_client
from contact_relay.main import app

VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"
RESEND_URL = "https://api.resend.com/emails"


class FakeProviders:
    """Stands in for Turnstile and Resend, recording every call it receives."""

    def __init__(self):
        self.verify_calls = []
        self.email_calls = []
        self.verify_reply = {"success": True}
        self.email_status = 200
        self.email_body = '{"id": "email_123"}'
        self.error = None

    @property
    def total_calls(self):
        return len(self.verify_calls) + len(self.email_calls)

    def handle(self, request: httpx.Request) -> httpx.Response:
        if self.error is not None:
            raise self.error

        url = str(request.url)
        if url == VERIFY_URL:
            form = {k: v[0] for k, v in parse_qs(request.content.decode(), keep_blank_values=True).items()}
            self.verify_calls.append({"form": form, "headers": request.headers})
            return httpx.Response(200, json=self.verify_reply)

        if url == RESEND_URL:
            self.email_calls.append({"json": json.loads(request.content), "headers": request.headers})
            return httpx.Response(self.email_status, text=self.email_body)

        return httpx.Response(404, text=f"unexpected url {url}")


@pytest.fixture
def settings():
    return Settings(
        turnstile_secret_key="turnstile-test-secret",
        resend_api_key="re_test_key",
        _env_file=None,
    )


@pytest.fixture
def providers():
    return FakeProviders()


@pytest.fixture
def client(settings, providers):
    async def fake_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(providers.handle)) as http:
            yield http

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = fake_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_submission():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "company": "Analytical Engines Ltd",
        "interest": "Partnership",
        "message": "Let's talk about order books.",
        "website": "",
        "turnstileToken": "token-abc",
    }
