# app/services/payment_client.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

import stripe

from app.domain.schemas import OrderLineItem
from app.utils.logging import get_logger

logger = get_logger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """12.345 EUR -> 1235 centow"""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentClient:
    """
    Cienka warstwa nad Stripe SDK: customer + checkout session.
    Bez retry - blad idzie do wywolujacego.
    """

    def __init__(self, api_key: str, currency: str = "eur"):
        self.api_key = api_key
        self.currency = currency

    def resolve_customer(self, email: str) -> str:
        customers = stripe.Customer.list(email=email, limit=1, api_key=self.api_key)
        if customers.data:
            return customers.data[0].id

        logger.info("Creating new payment customer")
        customer = stripe.Customer.create(email=email, api_key=self.api_key)
        return customer.id

    def build_line_items(self, items: List[OrderLineItem]) -> List[Dict[str, Any]]:
        return [
            {
                "price_data": {
                    "currency": self.currency,
                    "product_data": {
                        "name": item.title,
                        "images": [item.image],
                    },
                    "unit_amount": to_minor_units(item.price),
                },
                "quantity": item.quantity,
            }
            for item in items
        ]

    def create_checkout_session(
        self,
        customer_id: str,
        items: List[OrderLineItem],
        success_url: str,
        cancel_url: str,
        metadata: Dict[str, str],
    ) -> str:
        session = stripe.checkout.Session.create(
            customer=customer_id,
            payment_method_types=["card"],
            line_items=self.build_line_items(items),
            mode="payment",
            success_url=success_url,
            cancel_url=cancel_url,
            metadata=metadata,
            api_key=self.api_key,
        )
        logger.info(f"Checkout session {session.id} created")
        return session.url
