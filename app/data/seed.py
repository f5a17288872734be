# app/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from app.data.models.artwork import ArtworkModel, TagModel
from app.utils.logging import get_logger

logger = get_logger(__name__)

# (tytul, obraz, opis, tagi, cena albo None)
SAMPLE_ARTWORKS = [
    ("Serene Lake", "https://images.unsplash.com/photo-1506744038136-46273834b3fb",
     "Acrylic on canvas, 24x36 inches", ["nature", "landscape"], Decimal("450.00")),
    ("Abstract Forms", "https://images.unsplash.com/photo-1493397212122-2b85dda8106b",
     "Mixed media on paper, 18x24 inches", ["abstract", "modern"], None),
    ("Mountain Vista", "https://images.unsplash.com/photo-1501854140801-50d01698950b",
     "Digital print on archival paper, 16x20 inches", ["nature", "landscape"], Decimal("120.00")),
    ("Urban Geometry", "https://images.unsplash.com/photo-1487958449943-2429e8be8625",
     "Digital photography, limited edition print", ["urban", "architecture"], None),
    ("Night Sky", "https://images.unsplash.com/photo-1470813740244-df37b8c1edcb",
     "Oil on canvas, 30x40 inches", ["nature", "night"], Decimal("800.00")),
]

TAG_NAMES = {
    "nature": ("Nature", "Природа"),
    "landscape": ("Landscape", "Пейзаж"),
    "abstract": ("Abstract", "Абстракция"),
    "modern": ("Modern", "Модерно"),
    "urban": ("Urban", "Градско"),
    "architecture": ("Architecture", "Архитектура"),
    "night": ("Night", "Нощ"),
}


def seed(db: Session) -> int:
    # not forcing: only seed if empty
    if db.query(ArtworkModel).first():
        return 0

    tags = {
        slug: TagModel(id=slug, name=name, name_bg=name_bg)
        for slug, (name, name_bg) in TAG_NAMES.items()
    }
    for title, image, description, tag_ids, price in SAMPLE_ARTWORKS:
        db.add(
            ArtworkModel(
                title=title,
                image=image,
                description=description,
                tags=[tags[t] for t in tag_ids],
                for_sale=price is not None,
                price=price,
            )
        )
    db.commit()
    logger.info(f"Seeded {len(SAMPLE_ARTWORKS)} artworks")
    return len(SAMPLE_ARTWORKS)


if __name__ == "__main__":
    from app.context import init_app_context

    context = init_app_context()
    session = context.session_factory()
    try:
        seed(session)
    finally:
        session.close()
