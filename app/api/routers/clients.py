# app/api/routers/clients.py
from fastapi import APIRouter, Depends

from app.api.deps import get_context
from app.context import AppContext
from app.domain.schemas import LanguageIn
from app.services.client_storage import LANGUAGE_KEY

router = APIRouter(prefix="/clients", tags=["clients"])


@router.put("/{client_id}/language", response_model=LanguageIn)
def set_language(client_id: str, payload: LanguageIn, context: AppContext = Depends(get_context)):
    context.client_storage.set(client_id, LANGUAGE_KEY, payload.language.value)
    return payload
