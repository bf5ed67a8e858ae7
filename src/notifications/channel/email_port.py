"""Email port: the one outbound mail interface the dispatcher depends on."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    @abstractmethod
    async def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
        reply_to: str | None = None,
    ) -> dict:
        """Deliver one message, with an optional HTML alternative and Reply-To.

        Delivery problems the adapter can classify come back as
        ``{"status": "failed", "error": ...}``; the dispatcher turns both
        those and raised exceptions into ``EmailDispatchError``.
        """
        ...
