"""SMTP email adapter.

smtplib is blocking, so each send runs in a worker thread to keep the event
loop free.
"""

import asyncio
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

from notifications.channel.email_port import EmailPort
from notifications.domain import logger


class SMTPEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        sender: str,
        timeout: float = 30.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.timeout = timeout

    def _build_message(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None,
        reply_to: str | None,
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain=self.sender.rpartition("@")[2] or None)
        if reply_to:
            message["Reply-To"] = reply_to
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(message)

    async def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
        reply_to: str | None = None,
    ) -> dict:
        message = self._build_message(to, subject, body, html_body, reply_to)
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery failed", to=to, host=self.host, exc_info=exc)
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": message["Message-ID"], "status": "sent"}
