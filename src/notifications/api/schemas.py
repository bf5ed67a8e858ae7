"""Pydantic request schemas for the Notifications API."""

from pydantic import BaseModel, EmailStr, Field


class ContactRequest(BaseModel):
    customerEmail: EmailStr
    customerName: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1, max_length=5000)
