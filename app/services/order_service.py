# app/services/order_service.py
from typing import List

from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.domain.errors import OrderNotFoundError
from app.domain.schemas import OrderOut, OrderSummaryOut
from app.repos.order_repo import OrderRepo
from app.services.auth_client import Actor


class OrderService:
    """
    Historia zamowien aktora - tylko odczyt.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def list_orders(self, actor: Actor) -> List[OrderSummaryOut]:
        return [self._summary(o) for o in self.repo.list_for_user(actor.id)]

    def get_order(self, order_id: str, actor: Actor) -> OrderOut:
        order = self.repo.get_order(order_id)

        if not order:
            raise OrderNotFoundError(order_id)

        if order.user_id != actor.id:
            raise PermissionError("No access to this order")

        return OrderOut.model_validate(order)

    @staticmethod
    def _summary(order: OrderModel) -> OrderSummaryOut:
        items = order.items or []
        return OrderSummaryOut(
            id=order.id,
            status=order.status,
            created_at=order.created_at,
            total_amount=order.total_amount,
            item_count=sum(int(i.get("quantity", 1)) for i in items),
            thumbnails=[i["image"] for i in items if i.get("image")],
        )
