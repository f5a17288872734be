# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_actor
from app.domain.errors import OrderNotFoundError
from app.domain.schemas import OrderOut, OrderSummaryOut
from app.services.auth_client import Actor
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("/", response_model=List[OrderSummaryOut])
def list_orders(actor: Actor = Depends(require_actor), db: Session = Depends(get_db)):
    """
    Wszystkie zamowienia aktora, najnowsze pierwsze (bez paginacji).
    """
    return get_service(db).list_orders(actor)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    actor: Actor = Depends(require_actor),
    db: Session = Depends(get_db),
):
    """
    Szczegoly zamowienia: adres dostawy i pozycje.
    """
    svc = get_service(db)
    try:
        return svc.get_order(order_id, actor)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
