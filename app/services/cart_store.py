# app/services/cart_store.py
from decimal import Decimal
from typing import List

from pydantic import TypeAdapter, ValidationError

from app.domain.messages import translate
from app.domain.schemas import Artwork, CartItem, Language, Notification
from app.services.client_storage import CART_KEY, LANGUAGE_KEY, ClientStorage
from app.utils.logging import get_logger

logger = get_logger(__name__)

_cart_adapter = TypeAdapter(List[CartItem])


def load_language(storage: ClientStorage, client_id: str) -> Language:
    raw = storage.get(client_id, LANGUAGE_KEY)
    try:
        return Language(raw) if raw else Language.EN
    except ValueError:
        return Language.EN


class CartStore:
    """
    Koszyk klienta trzymany w client storage.

    Kazda mutacja zapisuje caly koszyk synchronicznie.
    Przy starcie wczytuje poprzedni stan; uszkodzony payload -> pusty koszyk.
    Komunikaty (toasty) zbierane w `notifications`.
    """

    def __init__(self, storage: ClientStorage, client_id: str, language: Language | None = None):
        self.storage = storage
        self.client_id = client_id
        self.language = language or load_language(storage, client_id)
        self.notifications: List[Notification] = []
        self.items: List[CartItem] = self._load()

    # =====================================================
    # PERSISTENCE
    # =====================================================
    def _load(self) -> List[CartItem]:
        raw = self.storage.get(self.client_id, CART_KEY)
        if not raw:
            return []
        try:
            return _cart_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Failed to parse saved cart for client {self.client_id}: {e.error_count()} errors")
            return []

    def _save(self) -> None:
        self.storage.set(
            self.client_id,
            CART_KEY,
            _cart_adapter.dump_json(self.items).decode("utf-8"),
        )

    def _notify(self, level: str, code: str) -> None:
        self.notifications.append(Notification(level=level, message=translate(code, self.language)))

    def _find(self, artwork_id: int) -> CartItem | None:
        return next((i for i in self.items if i.artwork.id == artwork_id), None)

    # =====================================================
    # COMMANDS
    # =====================================================
    def add(self, artwork: Artwork) -> None:
        if self._find(artwork.id) is not None:
            # bez zwiekszania ilosci
            self._notify("info", "cart_already_present")
            return

        self.items.append(CartItem(artwork=artwork, quantity=1))
        self._save()
        self._notify("success", "cart_added")

    def remove(self, artwork_id: int) -> None:
        self.items = [i for i in self.items if i.artwork.id != artwork_id]
        self._save()
        self._notify("info", "cart_removed")

    def clear(self) -> None:
        self.items = []
        self._save()
        self._notify("info", "cart_cleared")

    def set_quantity(self, artwork_id: int, quantity: int) -> None:
        if quantity <= 0:
            self.remove(artwork_id)
            return

        item = self._find(artwork_id)
        if item is None:
            return
        item.quantity = quantity
        self._save()

    # =====================================================
    # QUERIES
    # =====================================================
    def total_items(self) -> int:
        return sum(i.quantity for i in self.items)

    def total_price(self) -> Decimal:
        return sum(
            ((i.artwork.price or Decimal("0")) * i.quantity for i in self.items),
            Decimal("0.00"),
        )

    def is_present(self, artwork_id: int) -> bool:
        return self._find(artwork_id) is not None

    def is_empty(self) -> bool:
        return not self.items

    def snapshot(self) -> dict:
        return {
            "items": self.items,
            "total_items": self.total_items(),
            "total_price": self.total_price(),
            "notifications": self.notifications,
        }
