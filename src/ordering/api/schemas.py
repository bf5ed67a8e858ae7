"""Pydantic request schemas for the checkout API.

Field names are the wire names the storefront and the payment widget send.
"""

from pydantic import BaseModel, EmailStr, Field


class CheckoutRequest(BaseModel):
    productId: str = Field(min_length=1, max_length=64)
    customerEmail: EmailStr
    customerName: str = Field(min_length=1, max_length=100)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": "665f1c2ab4d3e81f2c9a0b11",
                    "customerEmail": "a@b.com",
                    "customerName": "A",
                }
            ]
        }
    }


class PaymentDetailsRequest(BaseModel):
    razorpay_order_id: str = Field(min_length=1)
    razorpay_payment_id: str = Field(min_length=1)
    razorpay_signature: str = Field(min_length=1)


class ConfirmOrderRequest(BaseModel):
    customerName: str = Field(min_length=1, max_length=100)
    customerEmail: EmailStr
    productId: str = Field(min_length=1, max_length=64)
    paymentDetails: PaymentDetailsRequest
