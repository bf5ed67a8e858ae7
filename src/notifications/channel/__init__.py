"""Email channel registry.

Provides singleton access to the email adapter. Uses the fake adapter by
default; ``EMAIL_BACKEND=smtp`` selects real SMTP delivery.
"""

from notifications.channel.email_port import EmailPort
from shared.config import get_settings

_email_channel: EmailPort | None = None


def _channel_from_settings() -> EmailPort:
    settings = get_settings()
    if settings.email_backend == "smtp":
        from notifications.channel.smtp_email import SMTPEmailAdapter

        return SMTPEmailAdapter(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_password,
            sender=settings.smtp_from,
        )
    if settings.email_backend == "fake":
        from notifications.channel.fake_email import FakeEmailAdapter

        return FakeEmailAdapter()
    raise ValueError(f"Unknown email backend: {settings.email_backend}")


def get_email_channel() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _email_channel
    if _email_channel is None:
        _email_channel = _channel_from_settings()
    return _email_channel


def set_email_channel(channel: EmailPort) -> None:
    """Override the active email adapter (useful for tests)."""
    global _email_channel
    _email_channel = channel


def reset_channels() -> None:
    """Reset the channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
