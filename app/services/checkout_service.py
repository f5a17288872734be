# app/services/checkout_service.py
from decimal import Decimal

from app.domain.errors import AuthenticationRequired, CartEmptyError, NoPendingOrderError
from app.domain.schemas import OrderLineItem, ShippingAddressIn
from app.services.auth_client import Actor
from app.services.cart_store import CartStore
from app.services.checkout_session import CheckoutSessionCreator
from app.services.client_storage import CURRENT_ORDER_KEY, ClientStorage
from app.services.payment_finalizer import PaymentFinalizer
from app.utils.logging import get_logger

logger = get_logger(__name__)

LOGIN_REDIRECT = "/login?from=/checkout"


class CheckoutService:
    """
    Strona klienta checkoutu: wyslanie formularza i powrot z platnosci.
    """

    def __init__(
        self,
        storage: ClientStorage,
        session_creator: CheckoutSessionCreator,
        finalizer: PaymentFinalizer,
        session_ttl: int,
    ):
        self.storage = storage
        self.session_creator = session_creator
        self.finalizer = finalizer
        self.session_ttl = session_ttl

    def submit(self, client_id: str, actor: Actor | None, address: ShippingAddressIn, origin: str) -> dict:
        """
        Walidacja (przed jakimkolwiek zdalnym wywolaniem):
        - koszyk nie jest pusty
        - aktor zalogowany
        Potem sesja platnosci i zapamietanie order_id w storage sesyjnym.
        """
        cart = CartStore(self.storage, client_id)

        if cart.is_empty():
            raise CartEmptyError()

        if actor is None:
            raise AuthenticationRequired(LOGIN_REDIRECT)

        items = [
            OrderLineItem(
                id=i.artwork.id,
                title=i.artwork.title,
                image=i.artwork.image,
                price=i.artwork.price or Decimal("0"),
                quantity=i.quantity,
            )
            for i in cart.items
        ]

        logger.info(f"Submitting checkout for client {client_id} with {len(items)} items", extra={"user_id": actor.id})

        result = self.session_creator.create(
            items=items,
            shipping_address=address,
            origin=origin,
            token=actor.token,
            actor=actor,
        )

        self.storage.set(client_id, CURRENT_ORDER_KEY, result["order_id"], ttl=self.session_ttl)
        return result

    def complete_payment(self, client_id: str, order_id: str | None = None) -> dict:
        """Powrot z procesora platnosci (success redirect)."""
        order_id = order_id or self.storage.get(client_id, CURRENT_ORDER_KEY)
        if not order_id:
            raise NoPendingOrderError(client_id)

        result = self.finalizer.finalize(order_id)

        cart = CartStore(self.storage, client_id)
        cart.clear()
        self.storage.delete(client_id, CURRENT_ORDER_KEY)

        return result
