import json

import pytest

from app.config import Settings
from app.handler import SubmissionHandler


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload or {})

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeStore:
    def __init__(self, error=None):
        self.error = error
        self.records = []

    def insert_submission(self, record):
        if self.error is not None:
            raise self.error
        self.records.append(record)
        return [record.model_dump()]


class FakeEmailClient:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, notification):
        self.sent.append(notification)
        if self.error is not None:
            raise self.error
        return True


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://db.example.supabase.co",
        supabase_key="anon-key",
        resend_api_key="re_test",
        contact_email="owner@example.com",
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def email_client():
    return FakeEmailClient()


@pytest.fixture
def handler(store, email_client, settings):
    return SubmissionHandler(store, email_client, settings)


def as_body(data):
    return json.dumps(data).encode()
