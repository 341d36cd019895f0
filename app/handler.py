import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from app.config import Settings
from app.schemas import ErrorResponse, SubmissionInput, SubmissionRecord, SuccessResponse
from app.store import StoreError, SubmissionStore
from app.utils.email import EmailClient, build_notification

logger = logging.getLogger(__name__)

MISSING_FIELDS = "All fields are required"
SAVE_FAILED = "Failed to save submission"
UNEXPECTED = "An unexpected error occurred"
SUBMITTED = "Form submitted successfully!"


@dataclass
class HandlerResult:
    status_code: int
    payload: Dict[str, Any] = field(default_factory=dict)


def _error(status_code, message) -> HandlerResult:
    return HandlerResult(status_code, ErrorResponse(error=message).model_dump())


class SubmissionHandler:
    """
    Contact form pipeline: parse -> validate -> store -> notify.

    The store write is mandatory and aborts the request on failure. The
    notification is best-effort; its failures are logged and dropped.
    """

    def __init__(self, store: SubmissionStore, email_client: EmailClient, settings: Settings):
        self.store = store
        self.email_client = email_client
        self.settings = settings

    def handle(self, body: bytes) -> HandlerResult:
        try:
            return self._handle(body)
        except Exception:
            logger.exception("Contact form error")
            return _error(500, UNEXPECTED)

    def _handle(self, body) -> HandlerResult:
        data = json.loads(body)
        if data is None:
            raise ValueError("Request body is null")
        # Dizi veya skaler gövde: tüm alanlar eksik sayılır
        submission = SubmissionInput.model_validate(data if isinstance(data, dict) else {})

        if not submission.is_complete():
            return _error(400, MISSING_FIELDS)

        record = SubmissionRecord(
            name=submission.name,
            email=submission.email,
            message=submission.message,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        try:
            self.store.insert_submission(record)
        except StoreError as e:
            logger.error("Supabase error: %s", e.body)
            return _error(500, SAVE_FAILED)

        self._notify(record)
        return HandlerResult(200, SuccessResponse(message=SUBMITTED).model_dump())

    def _notify(self, record: SubmissionRecord):
        try:
            notification = build_notification(
                record.name, record.email, record.message, self.settings.contact_email
            )
            self.email_client.send(notification)
        except Exception as e:
            # Kayıt zaten yapıldı, mail hatası isteği bozmasın
            logger.error("Email error: %s", getattr(e, "body", e))
