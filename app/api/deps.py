# app/api/deps.py
from typing import Iterator

from fastapi import Depends, Header, HTTPException, Request
from requests import RequestException
from sqlalchemy.orm import Session

from app.context import AppContext
from app.data.database import session_scope
from app.domain.messages import translate
from app.domain.schemas import Language
from app.services.auth_client import Actor, bearer_token
from app.services.cart_store import load_language
from app.utils.logging import get_logger

logger = get_logger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)) -> Iterator[Session]:
    yield from session_scope(context.session_factory)


def get_token(authorization: str | None = Header(None)) -> str | None:
    return bearer_token(authorization)


def get_actor(
    token: str | None = Depends(get_token),
    context: AppContext = Depends(get_context),
) -> Actor | None:
    if not token:
        return None
    try:
        return context.auth_client.get_actor(token)
    except RequestException as e:
        logger.error(f"Auth provider unavailable: {e}")
        raise HTTPException(status_code=503, detail="Authentication service unavailable")


def require_actor(actor: Actor | None = Depends(get_actor)) -> Actor:
    if actor is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return actor


def get_origin(request: Request, context: AppContext = Depends(get_context)) -> str:
    return request.headers.get("origin") or context.app_base_url


def client_language(context: AppContext, client_id: str) -> Language:
    return load_language(context.client_storage, client_id)


def error_detail(code: str, language: Language, **extra) -> dict:
    return {"code": code, "message": translate(code, language), **extra}
