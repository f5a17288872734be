from decimal import Decimal

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.data.models.artwork import ArtworkModel
from app.data.models.order import OrderModel
from app.domain.errors import OrderNotFoundError, OrderStateError
from app.repos.artwork_repo import ArtworkRepo
from app.services.payment_finalizer import PaymentFinalizer
from app.tasks.reconcile import run_reconciliation

from conftest import line


@pytest.fixture
def finalizer(db):
    return PaymentFinalizer(db)


def artwork_state(db, artwork_id):
    db.expire_all()
    a = db.get(ArtworkModel, artwork_id)
    return a.for_sale, a.price


def test_finalize_marks_order_completed_and_artworks_sold(finalizer, db, artworks, make_order):
    order_id = make_order([line(1, "10.00"), line(2, "25.50")])

    result = finalizer.finalize(order_id)

    assert result["success"] is True
    assert result["needs_reconciliation"] is False
    assert db.get(OrderModel, order_id).status == "completed"
    assert artwork_state(db, 1) == (False, None)
    assert artwork_state(db, 2) == (False, None)
    assert artwork_state(db, 3) == (True, Decimal("40.00"))


def test_finalize_twice_is_idempotent(finalizer, db, artworks, make_order):
    order_id = make_order([line(1, "10.00")])

    finalizer.finalize(order_id)
    finalizer.finalize(order_id)

    db.expire_all()
    assert db.query(OrderModel).count() == 1
    assert db.get(OrderModel, order_id).status == "completed"
    assert artwork_state(db, 1) == (False, None)


def test_finalize_unknown_order(finalizer):
    with pytest.raises(OrderNotFoundError):
        finalizer.finalize("does-not-exist")


def test_cancelled_order_is_not_completed(finalizer, db, artworks, make_order):
    order_id = make_order([line(1, "10.00")], status="cancelled")

    with pytest.raises(OrderStateError):
        finalizer.finalize(order_id)

    db.expire_all()
    assert db.get(OrderModel, order_id).status == "cancelled"
    assert artwork_state(db, 1) == (True, Decimal("10.00"))


def test_artwork_failure_still_completes_order_and_sweep_repairs_it(
    finalizer, db, context, artworks, make_order, monkeypatch
):
    order_id = make_order([line(1, "10.00"), line(2, "25.50")])
    original = ArtworkRepo.mark_sold

    def broken(self, artwork_ids):
        raise SQLAlchemyError("artworks table locked")

    monkeypatch.setattr(ArtworkRepo, "mark_sold", broken)
    result = finalizer.finalize(order_id)

    assert result["success"] is True
    assert result["needs_reconciliation"] is True
    db.expire_all()
    order = db.get(OrderModel, order_id)
    assert order.status == "completed"
    assert order.needs_reconciliation is True
    assert artwork_state(db, 1) == (True, Decimal("10.00"))

    # sweep keeps the marker while the update still fails
    assert run_reconciliation(context) == 0

    monkeypatch.setattr(ArtworkRepo, "mark_sold", original)
    assert run_reconciliation(context) == 1

    db.expire_all()
    assert db.get(OrderModel, order_id).needs_reconciliation is False
    assert artwork_state(db, 1) == (False, None)
    assert artwork_state(db, 2) == (False, None)
    assert artwork_state(db, 3) == (True, Decimal("40.00"))


def test_reconcile_with_nothing_to_do(finalizer):
    assert finalizer.reconcile() == 0


# =====================================================
# HTTP
# =====================================================
def test_process_payment_function(client, db, artworks, make_order):
    order_id = make_order([line(3, "40.00")])

    resp = client.post("/functions/process-payment", json={"orderId": order_id})

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert resp.json()["status"] == "completed"
    assert artwork_state(db, 3) == (False, None)


def test_process_payment_unknown_order(client):
    resp = client.post("/functions/process-payment", json={"orderId": "missing"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Order not found"}
