# app/services/payment_finalizer.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.domain.errors import OrderNotFoundError, OrderStateError
from app.domain.schemas import OrderStatus
from app.repos.artwork_repo import ArtworkRepo
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def artwork_ids_of(order: OrderModel) -> List[int]:
    ids = []
    for item in order.items or []:
        artwork_id = item.get("id")
        if artwork_id is not None and int(artwork_id) not in ids:
            ids.append(int(artwork_id))
    return ids


class PaymentFinalizer:
    """
    Po udanej platnosci: zamowienie -> completed, artworki -> nie na sprzedaz.

    Oba update'y w jednej transakcji. Jesli update artworkow padnie,
    zamowienie i tak jest completed, ale z markerem needs_reconciliation;
    sweep w tle (app.tasks.reconcile) ponawia update artworkow.
    """

    def __init__(self, db: Session):
        self.db = db
        self.orders = OrderRepo(db)
        self.artworks = ArtworkRepo(db)

    def finalize(self, order_id: str) -> dict:
        order = self.orders.get_order(order_id)

        if not order:
            raise OrderNotFoundError(order_id)

        if order.status == OrderStatus.CANCELLED.value:
            raise OrderStateError(f"Order {order_id} is cancelled")

        if order.status == OrderStatus.COMPLETED.value:
            # np. zdublowany callback - update'y sa idempotentne
            logger.info(f"Order {order_id} already completed", extra={"order_id": order_id})

        artwork_ids = artwork_ids_of(order)

        try:
            self.orders.set_status(order, OrderStatus.COMPLETED.value)
            order.needs_reconciliation = False
            updated = self.artworks.mark_sold(artwork_ids)
            self.db.commit()
            logger.info(
                f"Order {order_id} completed, {updated} artworks marked as sold",
                extra={"order_id": order_id},
            )
            return self._result(order_id, needs_reconciliation=False)

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating artworks for order {order_id}: {e}", extra={"order_id": order_id})

        # druga transakcja: tylko status + marker do sweepa
        order = self.orders.get_order(order_id)
        self.orders.set_status(order, OrderStatus.COMPLETED.value)
        order.needs_reconciliation = True
        self.db.commit()
        logger.warning(f"Order {order_id} completed, artworks queued for reconciliation", extra={"order_id": order_id})

        return self._result(order_id, needs_reconciliation=True)

    def reconcile(self) -> int:
        """Ponawia update artworkow dla zamowien z markerem. Zwraca ile sie udalo."""
        pending_ids = [o.id for o in self.orders.list_needing_reconciliation()]
        logger.info(f"Found {len(pending_ids)} orders to reconcile")

        done = 0
        for order_id in pending_ids:
            order = self.orders.get_order(order_id)
            if order is None or not order.needs_reconciliation:
                continue
            try:
                self.artworks.mark_sold(artwork_ids_of(order))
                order.needs_reconciliation = False
                self.db.commit()
                done += 1
                logger.info(f"Order {order_id} reconciled", extra={"order_id": order_id})
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.warning(f"Reconciliation of order {order_id} failed, will retry: {e}")

        return done

    @staticmethod
    def _result(order_id: str, needs_reconciliation: bool) -> dict:
        return {
            "success": True,
            "order_id": order_id,
            "status": OrderStatus.COMPLETED,
            "needs_reconciliation": needs_reconciliation,
        }
