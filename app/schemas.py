from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _present(value) -> bool:
    # Boş liste/sözlük dolu sayılır; sadece None, "", 0 ve False eksik
    if value is None or value == "":
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return True


# --- CONTACT SCHEMAS ---
class SubmissionInput(BaseModel):
    # Alanlar opsiyonel: eksik alan kontrolü handler'da yapılıyor (400 dönmek için)
    model_config = ConfigDict(extra="ignore")

    name: Optional[Any] = None
    email: Optional[Any] = None
    message: Optional[Any] = None

    def is_complete(self) -> bool:
        return all(_present(v) for v in (self.name, self.email, self.message))


class SubmissionRecord(BaseModel):
    name: Any
    email: Any
    message: Any
    created_at: str


class NotificationMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(alias="from")
    to: Optional[str]
    subject: str
    html: str


# --- RESPONSE SCHEMAS ---
class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str
