# app/api/routers/artworks.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import get_actor, get_db
from app.domain.errors import ArtworkNotFoundError
from app.domain.schemas import Artwork, ArtworkCreate, ArtworkTag, ForSaleIn
from app.services.artwork_service import ArtworkService
from app.services.auth_client import Actor

router = APIRouter(tags=["artworks"])


def get_service(db: Session):
    return ArtworkService(db)


@router.get("/artworks", response_model=List[Artwork])
def list_artworks(tag: List[str] | None = Query(None), db: Session = Depends(get_db)):
    return get_service(db).list_artworks(tag)


@router.get("/artworks/for-sale", response_model=List[Artwork])
def list_for_sale(db: Session = Depends(get_db)):
    return get_service(db).list_for_sale()


@router.get("/artworks/{artwork_id}", response_model=Artwork)
def get_artwork(artwork_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_artwork(artwork_id)
    except ArtworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/tags", response_model=List[ArtworkTag])
def list_tags(db: Session = Depends(get_db)):
    return get_service(db).list_tags()


@router.post("/artworks", response_model=Artwork, status_code=201)
def create_artwork(
    payload: ArtworkCreate,
    actor: Actor | None = Depends(get_actor),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).create_artwork(payload, actor)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.put("/artworks/{artwork_id}/for-sale", response_model=Artwork)
def set_for_sale(
    artwork_id: int,
    payload: ForSaleIn,
    actor: Actor | None = Depends(get_actor),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.set_for_sale(artwork_id, payload.price, actor)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ArtworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/artworks/{artwork_id}/for-sale", response_model=Artwork)
def remove_from_sale(
    artwork_id: int,
    actor: Actor | None = Depends(get_actor),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.remove_from_sale(artwork_id, actor)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ArtworkNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
