"""Error taxonomy for the checkout backend.

Every error carries two messages: ``detail`` is the full internal description
that gets logged, ``client_message`` is the only text a caller ever sees.
"""


class ShopError(Exception):
    """Base class for all errors raised deliberately by the service."""

    status_code: int = 500
    client_message: str = "Something went wrong"

    def __init__(self, detail: str | None = None, *, client_message: str | None = None) -> None:
        if client_message is not None:
            self.client_message = client_message
        self.detail = detail or self.client_message
        super().__init__(self.detail)


class ValidationError(ShopError):
    """Input rejected before any side effect was performed."""

    status_code = 400
    client_message = "Request validation failed"


class ProductValidationError(ValidationError):
    client_message = "Invalid product ID format"


class NotFoundError(ShopError):
    status_code = 404
    client_message = "Not found"


class ProductNotFoundError(NotFoundError):
    client_message = "Product not found"


class OrderNotFoundError(NotFoundError):
    client_message = "Order not found"


class GatewayError(ShopError):
    """The payment provider was unreachable, timed out, or rejected the request."""

    status_code = 502
    client_message = "Payment service unavailable"


class PersistenceError(ShopError):
    status_code = 500
    client_message = "Failed to create order record"


class SignatureMismatchError(ShopError):
    status_code = 400
    client_message = "Invalid signature"


class EmailDispatchError(ShopError):
    """Mail transport failure. Only the contact endpoint surfaces it."""

    status_code = 502
    client_message = "Error while sending message"


class CheckoutFailedError(ShopError):
    status_code = 500
    client_message = "Checkout process failed"
