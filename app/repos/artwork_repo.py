# app/repos/artwork_repo.py
from decimal import Decimal
from typing import Dict, Iterable, List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.data.models.artwork import ArtworkModel, TagModel, artwork_tags


class ArtworkRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_artwork(self, artwork_id: int) -> ArtworkModel | None:
        return self.db.get(ArtworkModel, artwork_id)

    def list_artworks(self, tag_ids: List[str] | None = None) -> List[ArtworkModel]:
        stmt = select(ArtworkModel).order_by(ArtworkModel.id)
        if tag_ids:
            # artwork z ktorymkolwiek z wybranych tagow
            stmt = stmt.where(ArtworkModel.tags.any(TagModel.id.in_(tag_ids)))
        return list(self.db.execute(stmt).scalars())

    def list_for_sale(self) -> List[ArtworkModel]:
        return list(
            self.db.execute(
                select(ArtworkModel)
                .where(ArtworkModel.for_sale.is_(True))
                .order_by(ArtworkModel.id)
            ).scalars()
        )

    def list_used_tags(self) -> List[TagModel]:
        return list(
            self.db.execute(
                select(TagModel)
                .join(artwork_tags, artwork_tags.c.tag_id == TagModel.id)
                .distinct()
                .order_by(TagModel.id)
            ).scalars()
        )

    def get_or_create_tag(self, tag_id: str, name: str, name_bg: str | None = None) -> TagModel:
        tag = self.db.get(TagModel, tag_id)
        if tag is None:
            tag = TagModel(id=tag_id, name=name, name_bg=name_bg)
            self.db.add(tag)
        return tag

    def create_artwork(self, artwork: ArtworkModel) -> ArtworkModel:
        self.db.add(artwork)
        self.db.commit()
        self.db.refresh(artwork)
        return artwork

    def save(self, artwork: ArtworkModel) -> ArtworkModel:
        self.db.add(artwork)
        self.db.commit()
        self.db.refresh(artwork)
        return artwork

    def prices_for(self, artwork_ids: Iterable[int]) -> Dict[int, Decimal | None]:
        ids = list(artwork_ids)
        if not ids:
            return {}
        rows = self.db.execute(
            select(ArtworkModel.id, ArtworkModel.price).where(ArtworkModel.id.in_(ids))
        ).all()
        return {row.id: row.price for row in rows}

    #bez commita - wywolujacy kontroluje transakcje
    def mark_sold(self, artwork_ids: Iterable[int]) -> int:
        ids = list(artwork_ids)
        if not ids:
            return 0
        result = self.db.execute(
            update(ArtworkModel)
            .where(ArtworkModel.id.in_(ids))
            .values(for_sale=False, price=None)
        )
        return result.rowcount
