"""Pydantic request schemas for the Sharing API."""

from pydantic import BaseModel, Field


class ShareRequest(BaseModel):
    orderNumber: str = Field(min_length=1, max_length=64)
    platform: str = Field(min_length=1, max_length=50)
