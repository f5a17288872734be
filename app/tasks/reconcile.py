# app/tasks/reconcile.py
from celery.signals import worker_process_init

from app.celery_worker import celery_app
from app.context import AppContext, init_app_context
from app.services.payment_finalizer import PaymentFinalizer
from app.utils.logging import get_logger

logger = get_logger(__name__)


@worker_process_init.connect
def init_worker(**kwargs):
    # kazdy proces workera (po forku) dostaje wlasny engine i storage
    celery_app.app_context = init_app_context()
    logger.info("Worker context ready")


def run_reconciliation(context: AppContext) -> int:
    db = context.session_factory()
    try:
        return PaymentFinalizer(db).reconcile()
    finally:
        db.close()


@celery_app.task(bind=True, name="app.tasks.reconcile.reconcile_orders_task")
def reconcile_orders_task(self):
    context = getattr(self.app, "app_context", None)
    if context is None:
        raise RuntimeError("Worker context is not initialised, worker_process_init did not run")

    logger.info("Reconcile orders task started")
    done = run_reconciliation(context)
    logger.info(f"Reconciled {done} orders")
    return done
