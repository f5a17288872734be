# app/data/models/order.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Numeric, Boolean, JSON

from app.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=True, index=True)  # None = gosc

    # [{id, title, image, price, quantity}]
    items = Column(JSON, nullable=False, default=list)
    # {full_name, address, city, postal_code, country, phone, notes}
    shipping_address = Column(JSON, nullable=False)

    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, completed, cancelled

    # ustawiane gdy zamowienie completed, ale update artworkow sie nie udal
    needs_reconciliation = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)
