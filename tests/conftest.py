"""Shared pytest fixtures for the storefront tests."""

from decimal import Decimal

import pytest
import stripe
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.context import AppContext, init_app_context
from app.data.database import make_session_factory
from app.data.models.artwork import ArtworkModel, TagModel
from app.data.models.order import OrderModel
from app.services.auth_client import Actor
from app.services.client_storage import MemoryClientStorage
from app.services.payment_client import PaymentClient

FRONTEND_URL = "http://gallery.test"

BUYER = Actor(id="user-1", email="buyer@example.com", token="buyer-token")
OTHER = Actor(id="user-2", email="other@example.com", token="other-token")
ADMIN = Actor(id="admin-1", email="admin@example.com", is_admin=True, token="admin-token")


class FakePaymentClient(PaymentClient):
    """Records calls instead of talking to Stripe."""

    def __init__(self):
        super().__init__(api_key="sk_test_fake", currency="eur")
        self.calls = []
        self.sessions = []
        self.fail = False
        self.fail_session = False

    def resolve_customer(self, email):
        self.calls.append(("resolve_customer", email))
        if self.fail:
            raise stripe.StripeError("payment processor unavailable")
        return "cus_test_1"

    def create_checkout_session(self, customer_id, items, success_url, cancel_url, metadata):
        self.calls.append(("create_checkout_session", customer_id))
        if self.fail_session:
            raise stripe.StripeError("checkout session rejected")
        self.sessions.append(
            {
                "customer": customer_id,
                "line_items": self.build_line_items(items),
                "success_url": success_url,
                "cancel_url": cancel_url,
                "metadata": metadata,
            }
        )
        return f"https://checkout.stripe.test/c/pay/{len(self.sessions)}"


class FakeAuthClient:
    def __init__(self, actors):
        self.actors = {a.token: a for a in actors}
        self.lookups = []

    def get_actor(self, token):
        self.lookups.append(token)
        if not token:
            return None
        return self.actors.get(token)


def auth(actor: Actor) -> dict:
    return {"Authorization": f"Bearer {actor.token}"}


@pytest.fixture
def payment_client():
    return FakePaymentClient()


@pytest.fixture
def auth_client():
    return FakeAuthClient([BUYER, OTHER, ADMIN])


@pytest.fixture
def context(payment_client, auth_client):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    ctx = AppContext(
        engine=engine,
        session_factory=make_session_factory(engine),
        client_storage=MemoryClientStorage(),
        payment_client=payment_client,
        auth_client=auth_client,
        app_base_url=FRONTEND_URL,
        guest_email="guest@example.com",
        session_ttl=3600,
    )
    init_app_context(ctx)
    yield ctx
    engine.dispose()


@pytest.fixture
def storage(context):
    return context.client_storage


@pytest.fixture
def db(context):
    session = context.session_factory()
    yield session
    session.close()


@pytest.fixture
def client(context):
    with TestClient(create_app(context)) as c:
        yield c


@pytest.fixture
def artworks(db):
    """Artworks 1-3 for sale, 4 only in the gallery."""
    nature = TagModel(id="nature", name="Nature", name_bg="Природа")
    abstract = TagModel(id="abstract", name="Abstract", name_bg="Абстракция")
    rows = [
        ArtworkModel(id=1, title="Serene Lake", image="https://img.test/1.jpg",
                     description="Acrylic on canvas", tags=[nature], for_sale=True, price=Decimal("10.00")),
        ArtworkModel(id=2, title="Abstract Forms", image="https://img.test/2.jpg",
                     description="Mixed media", tags=[abstract], for_sale=True, price=Decimal("25.50")),
        ArtworkModel(id=3, title="Mountain Vista", image="https://img.test/3.jpg",
                     description="Digital print", tags=[nature], for_sale=True, price=Decimal("40.00")),
        ArtworkModel(id=4, title="Night Sky", image="https://img.test/4.jpg",
                     description="Oil on canvas", tags=[], for_sale=False, price=None),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def make_order(db):
    def _make(items, user_id=BUYER.id, status="pending", total=None):
        if total is None:
            total = sum(Decimal(str(i["price"])) * i["quantity"] for i in items)
        order = OrderModel(
            user_id=user_id,
            items=items,
            shipping_address={
                "full_name": "Ivan Petrov",
                "address": "12 Vitosha Blvd",
                "city": "Sofia",
                "postal_code": "1000",
                "country": "Bulgaria",
                "phone": "+359888123456",
                "notes": None,
            },
            total_amount=total,
            status=status,
        )
        db.add(order)
        db.commit()
        return order.id

    return _make


def line(artwork_id, price, quantity=1):
    return {
        "id": artwork_id,
        "title": f"Artwork {artwork_id}",
        "image": f"https://img.test/{artwork_id}.jpg",
        "price": str(price),
        "quantity": quantity,
    }
