"""FastAPI routes for the Sharing domain."""

from fastapi import APIRouter, Depends

from ordering.order.store import OrderStore
from shared import responses
from shared.config import get_settings
from shared.db import get_session_factory
from sharing.api.schemas import ShareRequest
from sharing.service import ShareService

share_router = APIRouter(prefix="/share", tags=["share"])


def get_share_service() -> ShareService:
    return ShareService(OrderStore(get_session_factory()), base_url=get_settings().base_url)


@share_router.post("")
async def share_order(body: ShareRequest, service: ShareService = Depends(get_share_service)):
    share_url = await service.share_order(body.orderNumber, body.platform)
    return responses.success(f"Successfully shared on {body.platform}", {"shareUrl": share_url})
