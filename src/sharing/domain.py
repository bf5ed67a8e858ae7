"""Sharing bounded context — social-share links for completed orders."""

import structlog

logger = structlog.get_logger(__name__)
