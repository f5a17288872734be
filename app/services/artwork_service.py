# app/services/artwork_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from app.data.models.artwork import ArtworkModel
from app.domain.errors import ArtworkNotFoundError, ArtworkUnavailableError
from app.domain.schemas import Artwork, ArtworkCreate, ArtworkTag
from app.repos.artwork_repo import ArtworkRepo
from app.services.auth_client import Actor
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ArtworkService:
    """
    Katalog galerii: przegladanie, tagi, sprzedaz.
    Komendy (create, for-sale) tylko dla admina.
    """

    def __init__(self, db: Session):
        self.repo = ArtworkRepo(db)

    #query
    def list_artworks(self, tag_ids: List[str] | None = None) -> List[Artwork]:
        return [Artwork.model_validate(a) for a in self.repo.list_artworks(tag_ids)]

    def list_for_sale(self) -> List[Artwork]:
        return [Artwork.model_validate(a) for a in self.repo.list_for_sale()]

    def list_tags(self) -> List[ArtworkTag]:
        return [ArtworkTag.model_validate(t) for t in self.repo.list_used_tags()]

    def get_artwork(self, artwork_id: int) -> Artwork:
        artwork = self.repo.get_artwork(artwork_id)
        if not artwork:
            raise ArtworkNotFoundError(artwork_id)
        return Artwork.model_validate(artwork)

    def get_purchasable(self, artwork_id: int) -> Artwork:
        artwork = self.get_artwork(artwork_id)
        if not artwork.for_sale or artwork.price is None:
            raise ArtworkUnavailableError(artwork_id)
        return artwork

    #commands
    @staticmethod
    def _ensure_admin(actor: Actor | None) -> None:
        if actor is None or not actor.is_admin:
            raise PermissionError("Admin access required")

    def create_artwork(self, payload: ArtworkCreate, actor: Actor | None) -> Artwork:
        self._ensure_admin(actor)

        tags = [self.repo.get_or_create_tag(t.id, t.name, t.name_bg) for t in payload.tags]
        artwork = ArtworkModel(
            title=payload.title,
            title_bg=payload.title_bg,
            image=payload.image,
            description=payload.description,
            description_bg=payload.description_bg,
            tags=tags,
            for_sale=False,
            price=None,
            created_by=actor.id,
        )
        created = self.repo.create_artwork(artwork)
        logger.info(f"Artwork {created.id} created by {actor.id}")
        return Artwork.model_validate(created)

    def set_for_sale(self, artwork_id: int, price: Decimal, actor: Actor | None) -> Artwork:
        self._ensure_admin(actor)

        if price <= 0:
            raise ValueError("Price must be greater than 0")

        artwork = self.repo.get_artwork(artwork_id)
        if not artwork:
            raise ArtworkNotFoundError(artwork_id)

        artwork.for_sale = True
        artwork.price = price
        saved = self.repo.save(artwork)
        logger.info(f"Artwork {artwork_id} set for sale at {price}")
        return Artwork.model_validate(saved)

    def remove_from_sale(self, artwork_id: int, actor: Actor | None) -> Artwork:
        self._ensure_admin(actor)

        artwork = self.repo.get_artwork(artwork_id)
        if not artwork:
            raise ArtworkNotFoundError(artwork_id)

        artwork.for_sale = False
        artwork.price = None
        saved = self.repo.save(artwork)
        logger.info(f"Artwork {artwork_id} removed from sale")
        return Artwork.model_validate(saved)
