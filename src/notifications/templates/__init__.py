"""Template registry — maps notification types to template classes.

Each template knows how to render subject and bodies from a context dict.
"""

from notifications.templates.contact_message import ContactMessageTemplate
from notifications.templates.purchase_confirmation import PurchaseConfirmationTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    PurchaseConfirmationTemplate.notification_type: PurchaseConfirmationTemplate,
    ContactMessageTemplate.notification_type: ContactMessageTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
