"""FastAPI routes for the Notifications domain — contact form."""

from fastapi import APIRouter, Depends

from notifications.api.schemas import ContactRequest
from notifications.dispatch import NotificationDispatcher
from shared import responses
from shared.config import get_settings

contact_router = APIRouter(prefix="/contact", tags=["contact"])


def get_notification_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher(support_email=get_settings().support_email)


@contact_router.post("")
async def send_contact_message(
    body: ContactRequest,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Forward a contact-form message to the support mailbox."""
    await dispatcher.send_contact_email(body.customerEmail, body.customerName, body.message)
    return responses.success("Message Sent!")
