"""Notification Dispatcher — renders templates and hands them to the email channel.

Two delivery modes:
- awaited sends raise ``EmailDispatchError`` on failure (contact form)
- background sends run as detached tasks; their failures are logged by a
  completion callback and never reach the caller (purchase confirmation)
"""

import asyncio
from collections.abc import Coroutine
from typing import Any

from notifications.channel import get_email_channel
from notifications.channel.email_port import EmailPort
from notifications.domain import logger
from notifications.templates import get_template
from shared.errors import EmailDispatchError

# Strong references keep detached tasks alive until they finish.
_background_tasks: set[asyncio.Task] = set()


def _log_task_outcome(task: asyncio.Task) -> None:
    _background_tasks.discard(task)
    if task.cancelled():
        logger.warning("Background notification cancelled", task=task.get_name())
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Background notification failed", task=task.get_name(), exc_info=exc)


def dispatch_in_background(coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task:
    """Start ``coro`` as a detached task whose outcome only ever reaches the log."""
    task = asyncio.create_task(coro, name=name)
    _background_tasks.add(task)
    task.add_done_callback(_log_task_outcome)
    return task


def pending_background_tasks() -> list[asyncio.Task]:
    return [task for task in _background_tasks if not task.done()]


async def drain_background_tasks(timeout: float | None = None) -> None:
    """Wait for in-flight background notifications, e.g. on shutdown."""
    pending = pending_background_tasks()
    if not pending:
        return
    logger.info("Waiting for background notifications", count=len(pending))
    await asyncio.wait(pending, timeout=timeout)


class NotificationDispatcher:
    def __init__(self, channel: EmailPort | None = None, support_email: str | None = None) -> None:
        self._channel = channel
        self.support_email = support_email

    @property
    def channel(self) -> EmailPort:
        return self._channel or get_email_channel()

    async def _send(self, notification_type: str, to: str, context: dict, reply_to: str | None = None) -> dict:
        content = get_template(notification_type).render(context)
        try:
            result = await self.channel.send(
                to=to,
                subject=content["subject"],
                body=content["body"],
                html_body=content.get("html_body"),
                reply_to=reply_to,
            )
        except Exception as exc:
            raise EmailDispatchError(f"{notification_type} email to {to} failed: {exc!r}") from exc

        if result.get("status") != "sent":
            raise EmailDispatchError(
                f"{notification_type} email to {to} failed: {result.get('error', 'Unknown dispatch error')}"
            )
        return result

    async def send_confirmation_email(
        self,
        customer_email: str,
        customer_name: str,
        product_name: str,
        order_id: str,
    ) -> dict:
        logger.info("Sending confirmation email", to=customer_email, order_id=order_id)
        result = await self._send(
            "purchase_confirmation",
            to=customer_email,
            context={"customer_name": customer_name, "product_name": product_name, "order_id": order_id},
        )
        logger.info("Confirmation email sent", to=customer_email, order_id=order_id)
        return result

    def send_confirmation_email_in_background(
        self,
        customer_email: str,
        customer_name: str,
        product_name: str,
        order_id: str,
    ) -> asyncio.Task:
        """Fire-and-forget confirmation. Never raises for delivery problems."""
        return dispatch_in_background(
            self.send_confirmation_email(customer_email, customer_name, product_name, order_id),
            name=f"confirmation-email-{order_id}",
        )

    async def send_contact_email(self, customer_email: str, customer_name: str, message: str) -> dict:
        if not self.support_email:
            raise EmailDispatchError("No support mailbox configured for contact messages")

        logger.info("Sending contact email", from_name=customer_name, from_email=customer_email)
        result = await self._send(
            "contact_message",
            to=self.support_email,
            context={"customer_name": customer_name, "customer_email": customer_email, "message": message},
            reply_to=customer_email,
        )
        logger.info("Contact email sent", from_email=customer_email, to=self.support_email)
        return result
