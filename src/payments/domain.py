"""Payments bounded context — payment gateway integration.

Wraps the external payment provider behind a port: remote order creation
and verification of payment-completion signatures.
"""

import structlog

logger = structlog.get_logger(__name__)
