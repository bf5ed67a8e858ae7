"""Notifications bounded context — customer and support email.

Sends purchase confirmations (fire-and-forget, never allowed to fail an
order) and contact-form messages (awaited, failures reported).
"""

import structlog

logger = structlog.get_logger(__name__)
