# app/domain/messages.py
from app.domain.schemas import Language

# komunikaty dla klienta (toasty / bledy formularza)
MESSAGES: dict[str, dict[Language, str]] = {
    "cart_added": {
        Language.EN: "Added to cart",
        Language.BG: "Добавено в кошницата",
    },
    "cart_already_present": {
        Language.EN: "This artwork is already in your cart",
        Language.BG: "Тази творба вече е в кошницата ви",
    },
    "cart_removed": {
        Language.EN: "Removed from cart",
        Language.BG: "Премахнато от кошницата",
    },
    "cart_cleared": {
        Language.EN: "Cart cleared",
        Language.BG: "Кошницата е изчистена",
    },
    "cart_empty": {
        Language.EN: "Your cart is empty",
        Language.BG: "Вашата кошница е празна",
    },
    "login_required": {
        Language.EN: "Please log in to proceed with checkout",
        Language.BG: "Моля, влезте за да продължите към плащане",
    },
    "checkout_failed": {
        Language.EN: "Error creating checkout session",
        Language.BG: "Грешка при създаване на плащане",
    },
    "order_not_found": {
        Language.EN: "Order not found",
        Language.BG: "Поръчката не е намерена",
    },
    "no_pending_order": {
        Language.EN: "There is no order awaiting payment",
        Language.BG: "Няма поръчка, очакваща плащане",
    },
    "order_state": {
        Language.EN: "This order can no longer be paid",
        Language.BG: "Тази поръчка вече не може да бъде платена",
    },
    "artwork_not_found": {
        Language.EN: "Artwork not found",
        Language.BG: "Творбата не е намерена",
    },
    "artwork_unavailable": {
        Language.EN: "This artwork is not for sale",
        Language.BG: "Тази творба не се продава",
    },
    "payment_success": {
        Language.EN: "Thank you for your purchase! Your order has been confirmed.",
        Language.BG: "Благодарим ви за покупката! Вашата поръчка е потвърдена.",
    },
}


def translate(code: str, language: Language = Language.EN) -> str:
    entry = MESSAGES.get(code)
    if entry is None:
        return code
    return entry.get(language) or entry[Language.EN]
