"""In-memory email adapter.

Default backend when `EMAIL_BACKEND` is unset. Keeps every delivered
message, Reply-To included, and can be switched to report failures or to
raise like a dropped SMTP connection.
"""

from uuid import uuid4

from notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.raise_on_send = False

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Email delivery failed",
        raise_on_send: bool = False,
    ):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.raise_on_send = raise_on_send

    async def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
        reply_to: str | None = None,
    ) -> dict:
        if self.raise_on_send:
            raise ConnectionError(self.failure_reason)

        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"email-{uuid4().hex[:12]}"
        record = {
            "message_id": message_id,
            "to": to,
            "subject": subject,
            "body": body,
            "html_body": html_body,
            "reply_to": reply_to,
        }
        self.sent_emails.append(record)

        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.raise_on_send = False
