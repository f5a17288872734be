# app/data/models/artwork.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship

from app.data.database import Base


def _now():
    return datetime.now(timezone.utc)


artwork_tags = Table(
    "artwork_tags",
    Base.metadata,
    Column("artwork_id", Integer, ForeignKey("artworks.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", String(64), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class TagModel(Base):
    __tablename__ = "tags"

    id = Column(String(64), primary_key=True)  # slug, np. "landscape"
    name = Column(String(100), nullable=False)
    name_bg = Column(String(100), nullable=True)


class ArtworkModel(Base):
    __tablename__ = "artworks"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    title_bg = Column(String(200), nullable=True)
    image = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    description_bg = Column(Text, nullable=True)

    # projekcja "na sprzedaz" - czyszczona po oplaceniu zamowienia
    for_sale = Column(Boolean, nullable=False, default=False)
    price = Column(Numeric(10, 2), nullable=True)

    created_by = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)

    tags = relationship("TagModel", secondary=artwork_tags, lazy="selectin", order_by="TagModel.id")
