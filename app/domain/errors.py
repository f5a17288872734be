# app/domain/errors.py


class StorefrontError(Exception):
    """
    Blad regul domeny (np. pusty koszyk, zamowienie nie istnieje).
    `code` to klucz komunikatu w app.domain.messages.
    """

    def __init__(self, message: str, code: str = "storefront_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class CartEmptyError(StorefrontError, ValueError):
    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message, code="cart_empty")


class AuthenticationRequired(StorefrontError, PermissionError):
    """Brak zalogowanego aktora - klient ma przejsc do logowania."""

    def __init__(self, redirect: str, message: str = "Authentication required"):
        self.redirect = redirect
        super().__init__(message, code="login_required")


class CheckoutSessionError(StorefrontError):
    """Blad bazy lub procesora platnosci przy tworzeniu sesji."""

    def __init__(self, message: str):
        super().__init__(message, code="checkout_failed")


class OrderNotFoundError(StorefrontError, LookupError):
    def __init__(self, order_id: str | None, message: str | None = None, code: str = "order_not_found"):
        self.order_id = order_id
        super().__init__(message or f"Order {order_id} not found", code=code)


class NoPendingOrderError(OrderNotFoundError):
    """Klient nie ma zapamietanego zamowienia do finalizacji."""

    def __init__(self, client_id: str):
        self.client_id = client_id
        super().__init__(None, f"No pending order for client {client_id}", code="no_pending_order")


class OrderStateError(StorefrontError, ValueError):
    def __init__(self, message: str):
        super().__init__(message, code="order_state")


class ArtworkNotFoundError(StorefrontError, LookupError):
    def __init__(self, artwork_id: int):
        self.artwork_id = artwork_id
        super().__init__(f"Artwork {artwork_id} not found", code="artwork_not_found")


class ArtworkUnavailableError(StorefrontError, ValueError):
    def __init__(self, artwork_id: int):
        self.artwork_id = artwork_id
        super().__init__(f"Artwork {artwork_id} is not for sale", code="artwork_unavailable")
