#app/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import client_language, error_detail, get_context, get_db
from app.context import AppContext
from app.domain.errors import ArtworkNotFoundError, ArtworkUnavailableError
from app.domain.schemas import CartItemIn, CartOut, QuantityIn
from app.services.artwork_service import ArtworkService
from app.services.cart_store import CartStore

router = APIRouter(prefix="/carts", tags=["carts"])


def get_store(client_id: str, context: AppContext) -> CartStore:
    return CartStore(context.client_storage, client_id)


@router.get("/{client_id}", response_model=CartOut)
def get_cart(client_id: str, context: AppContext = Depends(get_context)):
    return get_store(client_id, context).snapshot()


@router.post("/{client_id}/items", response_model=CartOut)
def add_item(
    client_id: str,
    payload: CartItemIn,
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    language = client_language(context, client_id)
    try:
        artwork = ArtworkService(db).get_purchasable(payload.artwork_id)
    except ArtworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=error_detail(e.code, language))
    except ArtworkUnavailableError as e:
        raise HTTPException(status_code=400, detail=error_detail(e.code, language))

    store = get_store(client_id, context)
    store.add(artwork)
    return store.snapshot()


@router.put("/{client_id}/items/{artwork_id}", response_model=CartOut)
def set_quantity(
    client_id: str,
    artwork_id: int,
    payload: QuantityIn,
    context: AppContext = Depends(get_context),
):
    store = get_store(client_id, context)
    store.set_quantity(artwork_id, payload.quantity)
    return store.snapshot()


@router.delete("/{client_id}/items/{artwork_id}", response_model=CartOut)
def remove_item(client_id: str, artwork_id: int, context: AppContext = Depends(get_context)):
    store = get_store(client_id, context)
    store.remove(artwork_id)
    return store.snapshot()


@router.delete("/{client_id}", response_model=CartOut)
def clear_cart(client_id: str, context: AppContext = Depends(get_context)):
    store = get_store(client_id, context)
    store.clear()
    return store.snapshot()
