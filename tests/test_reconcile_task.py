import pytest
from celery.signals import worker_process_init

from app.celery_worker import celery_app
from app.data.models.artwork import ArtworkModel
from app.data.models.order import OrderModel
from app.tasks import reconcile as reconcile_tasks
from app.tasks.reconcile import reconcile_orders_task

from conftest import line


def test_worker_process_init_builds_context(context, monkeypatch):
    monkeypatch.setattr(celery_app, "app_context", None, raising=False)
    monkeypatch.setattr(reconcile_tasks, "init_app_context", lambda: context)

    worker_process_init.send(sender=None)

    assert celery_app.app_context is context


def test_reconcile_task_uses_worker_context(context, db, artworks, make_order, monkeypatch):
    order_id = make_order([line(2, "25.50")], status="completed")
    order = db.get(OrderModel, order_id)
    order.needs_reconciliation = True
    db.commit()
    monkeypatch.setattr(celery_app, "app_context", context, raising=False)

    assert reconcile_orders_task() == 1

    db.expire_all()
    assert db.get(OrderModel, order_id).needs_reconciliation is False
    assert db.get(ArtworkModel, 2).for_sale is False


def test_reconcile_task_without_worker_init(monkeypatch):
    monkeypatch.setattr(celery_app, "app_context", None, raising=False)

    with pytest.raises(RuntimeError):
        reconcile_orders_task()
