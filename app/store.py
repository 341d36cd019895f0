import logging

import requests

logger = logging.getLogger(__name__)

SUBMISSIONS_TABLE = "contact_submissions"


class StoreError(Exception):
    """Veritabanı REST gateway'i kaydı reddetti (2xx dışı yanıt)."""

    def __init__(self, status_code, body):
        super().__init__(f"Store rejected write ({status_code})")
        self.status_code = status_code
        self.body = body


class SubmissionStore:
    """
    Supabase REST (PostgREST) üzerinden contact_submissions tablosuna yazar.
    Bağlantı havuzu veya önbellek tutulmaz; her istek için yeni bir örnek kurulur.
    """

    def __init__(self, base_url: str, api_key: str):
        self.base_url = (base_url or "").rstrip("/")
        self.api_key = api_key

    @property
    def submissions_url(self) -> str:
        return f"{self.base_url}/rest/v1/{SUBMISSIONS_TABLE}"

    def _headers(self):
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    def insert_submission(self, record):
        if not self.base_url or not self.api_key:
            raise ValueError("Store URL and API key must be configured")
        response = requests.post(
            self.submissions_url,
            json=record.model_dump(),
            headers=self._headers(),
        )
        if not 200 <= response.status_code < 300:
            raise StoreError(response.status_code, response.text)
        logger.info("Submission stored (%s)", response.status_code)
        try:
            return response.json()
        except ValueError:
            # return=representation olsa da gövde boş gelebilir
            return None
