"""Contact message template — forwarded to the support mailbox."""

from datetime import UTC, datetime


class ContactMessageTemplate:
    notification_type = "contact_message"

    @staticmethod
    def render(context: dict) -> dict:
        customer_name = context.get("customer_name", "")
        customer_email = context.get("customer_email", "")
        received_at = context.get("received_at") or datetime.now(UTC)
        return {
            "subject": f"Contact message from {customer_name}",
            "body": "\n".join(
                [
                    f"Name: {customer_name}",
                    f"Email: {customer_email}",
                    "",
                    "Message:",
                    context.get("message", ""),
                    "",
                    f"Received at: {received_at.isoformat()}",
                ]
            ),
        }
