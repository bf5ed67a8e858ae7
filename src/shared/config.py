"""Environment-driven configuration shared by every bounded context.

Values are deployment secrets and are only ever read from the process
environment. ``get_settings()`` caches the parsed result; tests that tweak
the environment call ``get_settings.cache_clear()``.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./buynothing.db"
DEFAULT_ALLOWED_ORIGINS = ("http://localhost:5173",)


def _first_env(*names: str, default: str | None = None) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def _database_url() -> str:
    url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    password = os.getenv("DB_PASSWORD")
    if password and "<PASSWORD>" in url:
        url = url.replace("<PASSWORD>", password)
    return url


def _allowed_origins() -> tuple[str, ...]:
    raw = os.getenv("ALLOWED_ORIGINS")
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    environment: str = "production"
    database_url: str = DEFAULT_DATABASE_URL

    payment_gateway: str = "fake"
    razorpay_key_id: str | None = None
    razorpay_key_secret: str | None = None
    gateway_timeout_seconds: float = 10.0
    currency: str = "INR"

    email_backend: str = "fake"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_from: str = "noreply@buynothing.com"
    support_email: str | None = None

    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)
    base_url: str = "https://buynothing.com"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        smtp_user = _first_env("SMTP_USER", "EMAIL_USER")
        return cls(
            environment=(_first_env("APP_ENV", "ENVIRONMENT", "ENV", default="production")).lower(),
            database_url=_database_url(),
            payment_gateway=os.getenv("PAYMENT_GATEWAY", "fake").lower(),
            razorpay_key_id=os.getenv("RAZORPAY_KEY_ID"),
            razorpay_key_secret=os.getenv("RAZORPAY_KEY_SECRET"),
            gateway_timeout_seconds=float(os.getenv("GATEWAY_TIMEOUT_SECONDS", "10")),
            currency=os.getenv("PAYMENT_CURRENCY", "INR"),
            email_backend=os.getenv("EMAIL_BACKEND", "fake").lower(),
            smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            smtp_user=smtp_user,
            smtp_password=_first_env("SMTP_PASSWORD", "EMAIL_PASSWORD"),
            smtp_from=_first_env("SMTP_FROM", "EMAIL_FROM", default="noreply@buynothing.com"),
            support_email=_first_env("SUPPORT_EMAIL", "SMTP_USER", "EMAIL_TO"),
            allowed_origins=_allowed_origins(),
            base_url=os.getenv("BASE_URL", "https://buynothing.com"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, parsed once from the environment."""
    return Settings.from_env()
