"""Ordering bounded context — orders and the checkout flow.

Handles the checkout transaction (product lookup, remote payment order,
local order record), payment verification and order confirmation.

Orders are plain SQLAlchemy rows rather than event-sourced aggregates: the
checkout's unit of work is an explicit ``TransactionContext`` handed to each
data call, not an ambient domain context.
"""

import structlog

logger = structlog.get_logger(__name__)
