# app/context.py
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.data.database import Base, make_engine, make_session_factory
from app.services.auth_client import AuthClient
from app.services.client_storage import ClientStorage, make_client_storage
from app.services.payment_client import PaymentClient
from app.utils import settings
from app.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class AppContext:
    """
    Wszystkie zasoby aplikacji w jednym obiekcie.
    Budowany raz (lifespan FastAPI / worker celery) i przekazywany dalej,
    zamiast globalnego stanu tworzonego przy imporcie.
    """

    engine: Engine
    session_factory: sessionmaker
    client_storage: ClientStorage
    payment_client: PaymentClient
    auth_client: AuthClient
    app_base_url: str = settings.APP_BASE_URL
    guest_email: str = settings.GUEST_EMAIL
    session_ttl: int = settings.SESSION_TTL_SECONDS


def build_app_context() -> AppContext:
    engine = make_engine(settings.DATABASE_URL)
    return AppContext(
        engine=engine,
        session_factory=make_session_factory(engine),
        client_storage=make_client_storage(settings.CLIENT_STORAGE_BACKEND, settings.REDIS_URL),
        payment_client=PaymentClient(settings.STRIPE_SECRET_KEY, settings.PAYMENT_CURRENCY),
        auth_client=AuthClient(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY,
            admin_emails=settings.ADMIN_EMAILS,
            timeout=settings.AUTH_TIMEOUT_SECONDS,
        ),
    )


def init_app_context(context: AppContext | None = None) -> AppContext:
    """
    Jawny krok inicjalizacji: rejestracja modeli + create_all.
    Blad jest propagowany - aplikacja nie startuje bez bazy.
    """
    configure_logging()
    context = context or build_app_context()

    # import modeli PRZED create_all
    import app.data.models  # noqa: F401

    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=context.engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")

    if not context.payment_client.api_key:
        logger.warning("STRIPE_SECRET_KEY is not set, checkout sessions will fail")

    return context
