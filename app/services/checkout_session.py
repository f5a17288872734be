# app/services/checkout_session.py
from decimal import Decimal
from typing import List

import requests
import stripe
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.domain.errors import CheckoutSessionError
from app.domain.schemas import OrderLineItem, OrderStatus, ShippingAddressIn
from app.repos.artwork_repo import ArtworkRepo
from app.repos.order_repo import OrderRepo
from app.services.auth_client import Actor, AuthClient
from app.services.payment_client import PaymentClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


def order_total(items: List[OrderLineItem]) -> Decimal:
    return sum((i.price * i.quantity for i in items), Decimal("0.00"))


class CheckoutSessionCreator:
    """
    Tworzy zamowienie (pending) i sesje platnosci.

    1. aktor z tokena (brak / zly token -> gosc)
    2. customer w procesorze platnosci po emailu
    3. insert zamowienia ze statusem pending (flush, bez commita)
    4. checkout session z success_url (order_id) i cancel_url
    5. commit - blad w 2-4 nie zostawia zamowienia w bazie
    Bledy bazy / procesora -> CheckoutSessionError, bez retry.
    """

    def __init__(self, db: Session, payment_client: PaymentClient, auth_client: AuthClient, guest_email: str):
        self.orders = OrderRepo(db)
        self.artworks = ArtworkRepo(db)
        self.payment_client = payment_client
        self.auth_client = auth_client
        self.guest_email = guest_email

    def _resolve_actor(self, token: str | None) -> Actor | None:
        if not token:
            return None
        try:
            return self.auth_client.get_actor(token)
        except requests.RequestException as e:
            # jak w oryginalnym flow: blad auth -> checkout jako gosc
            logger.warning(f"Auth lookup failed, falling back to guest checkout: {e}")
            return None

    def _warn_on_price_mismatch(self, items: List[OrderLineItem]) -> None:
        # ceny przychodza od klienta - tylko logujemy rozbieznosc
        stored = self.artworks.prices_for(i.id for i in items)
        for item in items:
            price = stored.get(item.id)
            if price is None or Decimal(price) != item.price:
                logger.warning(
                    f"Submitted price {item.price} for artwork {item.id} differs from stored price {price}"
                )

    def create(
        self,
        items: List[OrderLineItem],
        shipping_address: ShippingAddressIn,
        origin: str,
        token: str | None = None,
        actor: Actor | None = None,
    ) -> dict:
        if actor is None:
            actor = self._resolve_actor(token)

        email = actor.email if actor and actor.email else self.guest_email
        user_id = actor.id if actor else None
        origin = origin.rstrip("/")

        total = order_total(items)

        try:
            self._warn_on_price_mismatch(items)
            customer_id = self.payment_client.resolve_customer(email)

            order = self.orders.add_order(
                OrderModel(
                    user_id=user_id,
                    items=[i.model_dump(mode="json") for i in items],
                    shipping_address=shipping_address.model_dump(),
                    total_amount=total,
                    status=OrderStatus.PENDING.value,
                )
            )

            url = self.payment_client.create_checkout_session(
                customer_id=customer_id,
                items=items,
                success_url=f"{origin}/payment-success?order_id={order.id}",
                cancel_url=f"{origin}/checkout",
                metadata={"user_id": user_id or "guest", "order_id": order.id},
            )

            # zamowienie zostaje tylko razem z sesja platnosci
            self.orders.commit()
        except (SQLAlchemyError, stripe.StripeError) as e:
            self.orders.rollback()
            logger.error(f"Error creating checkout session: {e}")
            raise CheckoutSessionError(str(e)) from e

        logger.info(f"Order {order.id} created with status pending, total {total}", extra={"order_id": order.id})
        return {"order_id": order.id, "url": url}
