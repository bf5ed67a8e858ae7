"""FastAPI routes for the Ordering domain — checkout, payment validation, confirmation."""

from fastapi import APIRouter, Depends

from ordering.api.schemas import CheckoutRequest, ConfirmOrderRequest, PaymentDetailsRequest
from ordering.checkout.factory import build_checkout_orchestrator
from ordering.checkout.orchestrator import CheckoutOrchestrator, PaymentDetails
from shared import responses

checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post("")
async def checkout(
    body: CheckoutRequest,
    orchestrator: CheckoutOrchestrator = Depends(build_checkout_orchestrator),
):
    """Create a remote payment order and the matching local order record."""
    gateway_order = await orchestrator.initiate_checkout(
        product_id=body.productId,
        customer_email=body.customerEmail,
        customer_name=body.customerName,
    )
    return responses.success("Checkout successful", gateway_order.to_json())


@checkout_router.post("/validate-payment")
async def validate_payment(
    body: PaymentDetailsRequest,
    orchestrator: CheckoutOrchestrator = Depends(build_checkout_orchestrator),
):
    orchestrator.validate_payment(body.razorpay_order_id, body.razorpay_payment_id, body.razorpay_signature)
    return responses.success("Payment Validated")


@checkout_router.post("/confirm")
async def confirm_order(
    body: ConfirmOrderRequest,
    orchestrator: CheckoutOrchestrator = Depends(build_checkout_orchestrator),
):
    """Confirm a paid order; the confirmation email is sent in the background."""
    summary = await orchestrator.confirm_order(
        product_id=body.productId,
        customer_name=body.customerName,
        customer_email=body.customerEmail,
        payment=PaymentDetails(
            order_id=body.paymentDetails.razorpay_order_id,
            payment_id=body.paymentDetails.razorpay_payment_id,
            signature=body.paymentDetails.razorpay_signature,
        ),
    )
    return responses.success("Order confirmed", summary.to_json())
