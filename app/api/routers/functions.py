# app/api/routers/functions.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_context, get_db, get_origin, get_token
from app.context import AppContext
from app.domain.errors import CheckoutSessionError, OrderNotFoundError, OrderStateError
from app.domain.schemas import CheckoutSessionOut, CreateCheckoutIn, FinalizeOut, ProcessPaymentIn
from app.services.checkout_session import CheckoutSessionCreator
from app.services.payment_finalizer import PaymentFinalizer

# endpointy wywolywane przez klienta zamiast funkcji serverless
router = APIRouter(prefix="/functions", tags=["functions"])


@router.post("/create-checkout", response_model=CheckoutSessionOut)
def create_checkout(
    payload: CreateCheckoutIn,
    token: str | None = Depends(get_token),
    origin: str = Depends(get_origin),
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    creator = CheckoutSessionCreator(
        db=db,
        payment_client=context.payment_client,
        auth_client=context.auth_client,
        guest_email=context.guest_email,
    )
    try:
        return creator.create(
            items=payload.items,
            shipping_address=payload.shipping_address,
            origin=origin,
            token=token,
        )
    except CheckoutSessionError as e:
        return JSONResponse(status_code=500, content={"error": e.message})


@router.post("/process-payment", response_model=FinalizeOut)
def process_payment(payload: ProcessPaymentIn, db: Session = Depends(get_db)):
    finalizer = PaymentFinalizer(db)
    try:
        return finalizer.finalize(payload.order_id)
    except OrderNotFoundError:
        return JSONResponse(status_code=404, content={"error": "Order not found"})
    except OrderStateError as e:
        return JSONResponse(status_code=409, content={"error": e.message})
