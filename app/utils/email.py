import html
import logging

import requests

from app.schemas import NotificationMessage

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"
FROM_ADDRESS = "Contact Form <onboarding@resend.dev>"


class NotificationError(Exception):
    def __init__(self, status_code, body):
        super().__init__(f"Email provider rejected send ({status_code})")
        self.status_code = status_code
        self.body = body


def _escape(value) -> str:
    return html.escape(str(value))


def build_notification(name, email, message, to_email) -> NotificationMessage:
    # Satır sonları sadece mail gövdesinde <br> olur, kayıtta değil
    body = _escape(message).replace("\n", "<br>")
    html_content = f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>Name:</strong> {_escape(name)}</p>
        <p><strong>Email:</strong> {_escape(email)}</p>
        <p><strong>Message:</strong></p>
        <p>{body}</p>
    """
    return NotificationMessage(
        sender=FROM_ADDRESS,
        to=to_email,
        subject=f"New Contact Form Submission from {name}",
        html=html_content,
    )


class EmailClient:
    """Resend HTTP API istemcisi. Modül seviyesinde örneklenmez, handler'a verilir."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, notification: NotificationMessage) -> bool:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        data = notification.model_dump(by_alias=True)
        response = requests.post(RESEND_API_URL, json=data, headers=headers)
        if not 200 <= response.status_code < 300:
            raise NotificationError(response.status_code, response.text)
        logger.info("Notification sent to %s", notification.to)
        return True
