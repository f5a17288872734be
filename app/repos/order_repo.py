# app/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    #flush zamiast commita - id jest znane, transakcja nadal otwarta
    def add_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: str) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_for_user(self, user_id: str) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.created_at.desc())
            ).scalars()
        )

    def list_needing_reconciliation(self) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.needs_reconciliation.is_(True))
                .order_by(OrderModel.created_at)
            ).scalars()
        )

    #bez commita - transakcja po stronie serwisu
    def set_status(self, order: OrderModel, status: str) -> None:
        order.status = status
        self.db.add(order)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
