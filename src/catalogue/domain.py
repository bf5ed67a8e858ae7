"""Catalogue bounded context — read-only product catalog.

Products are owned here. Other contexts only ever receive immutable
``ProductSnapshot`` copies.
"""

import structlog

logger = structlog.get_logger(__name__)
