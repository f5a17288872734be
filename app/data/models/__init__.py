#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.artwork import ArtworkModel, TagModel, artwork_tags
from app.data.models.order import OrderModel

__all__ = ["ArtworkModel", "TagModel", "artwork_tags", "OrderModel"]
