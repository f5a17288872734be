# app/api/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import client_language, error_detail, get_actor, get_context, get_db, get_origin
from app.context import AppContext
from app.domain.errors import (
    AuthenticationRequired,
    CartEmptyError,
    CheckoutSessionError,
    OrderNotFoundError,
    OrderStateError,
)
from app.domain.messages import translate
from app.domain.schemas import CheckoutSessionOut, ShippingAddressIn
from app.services.auth_client import Actor
from app.services.checkout_service import CheckoutService
from app.services.checkout_session import CheckoutSessionCreator
from app.services.payment_finalizer import PaymentFinalizer

router = APIRouter(tags=["checkout"])


def get_service(db: Session, context: AppContext) -> CheckoutService:
    return CheckoutService(
        storage=context.client_storage,
        session_creator=CheckoutSessionCreator(
            db=db,
            payment_client=context.payment_client,
            auth_client=context.auth_client,
            guest_email=context.guest_email,
        ),
        finalizer=PaymentFinalizer(db),
        session_ttl=context.session_ttl,
    )


@router.post("/checkout/{client_id}", response_model=CheckoutSessionOut)
def submit_checkout(
    client_id: str,
    payload: ShippingAddressIn,
    actor: Actor | None = Depends(get_actor),
    origin: str = Depends(get_origin),
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """
    Formularz checkoutu -> sesja platnosci.
    Klient przekierowuje przegladarke na zwrocony `url`.
    """
    svc = get_service(db, context)
    language = client_language(context, client_id)
    try:
        return svc.submit(client_id, actor, payload, origin)
    except CartEmptyError as e:
        raise HTTPException(status_code=400, detail=error_detail(e.code, language))
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=error_detail(e.code, language, redirect=e.redirect))
    except CheckoutSessionError as e:
        raise HTTPException(status_code=502, detail=error_detail(e.code, language))


@router.get("/payment-success/{client_id}")
def payment_success(
    client_id: str,
    order_id: str | None = Query(None),
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """
    Cel success redirectu: finalizacja, czyszczenie koszyka.
    order_id z query albo z storage sesyjnego.
    """
    svc = get_service(db, context)
    language = client_language(context, client_id)
    try:
        result = svc.complete_payment(client_id, order_id)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=error_detail(e.code, language))
    except OrderStateError as e:
        raise HTTPException(status_code=409, detail=error_detail(e.code, language))

    return {**result, "message": translate("payment_success", language)}
