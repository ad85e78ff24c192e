"""
Payment gateways used by order creation.

Order code only sees ``PaymentGateway.charge(amount, currency)``; which
implementation answers is picked by ``settings.PAYMENT_BACKEND``.
"""
import secrets
from dataclasses import dataclass
from typing import Protocol
import httpx
from order_service.core.config import settings
from order_service.core.errors import PaymentGatewayError, PaymentGatewayUnavailable
from order_service.core.logging import get_logger

log = get_logger(__name__)

@dataclass(frozen=True)
class PaymentIntent:
    client_secret: str
    amount: int

class PaymentGateway(Protocol):
    def charge(self, amount: int, currency: str) -> PaymentIntent: ...

class FakePaymentGateway:
    """Stands in for Stripe: no network, random secret, amount echoed back."""

    def charge(self, amount: int, currency: str) -> PaymentIntent:
        return PaymentIntent(client_secret=f"secret_{secrets.token_hex(12)}", amount=amount)

class HttpPaymentGateway:
    """Talks to the payment service's create-intent endpoint.

    The intent is created before the order row exists, so ``order_id`` carries a
    random reference instead of the database id.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, transport: httpx.BaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def charge(self, amount: int, currency: str) -> PaymentIntent:
        url = f"{self.base_url}/payment/v1/payments/create-intent"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.post(url, json={
                    "order_id": secrets.randbelow(2**31 - 1) + 1,
                    "amount_cents": amount,
                    "currency": currency.upper(),
                })
        except httpx.RequestError as e:
            log.error("payment gateway unreachable: %s", e)
            raise PaymentGatewayUnavailable("Payment gateway unavailable")
        if resp.status_code >= 400:
            log.error("payment gateway returned %s: %s", resp.status_code, resp.text)
            raise PaymentGatewayError("Payment gateway error")
        try:
            client_secret = resp.json()["client_secret"]
        except (ValueError, KeyError, TypeError):
            log.error("payment gateway sent an unreadable intent: %s", resp.text)
            raise PaymentGatewayError("Payment gateway error")
        return PaymentIntent(client_secret=client_secret, amount=amount)

def get_payment_gateway() -> PaymentGateway:
    if settings.PAYMENT_BACKEND == "http":
        return HttpPaymentGateway(settings.PAYMENT_BASE, timeout=settings.PAYMENT_TIMEOUT_SECONDS)
    return FakePaymentGateway()
