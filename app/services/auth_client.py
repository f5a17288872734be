# app/services/auth_client.py
from dataclasses import dataclass
from typing import List

import requests

from app.utils.retry import http_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Actor:
    """Zalogowany uzytkownik (z hostowanego auth providera)."""

    id: str
    email: str
    is_admin: bool = False
    token: str | None = None


class AuthClient:
    """
    Weryfikacja bearer tokena przez REST API auth providera.
    GET {base}/auth/v1/user -> {id, email, ...}
    """

    def __init__(self, base_url: str, api_key: str, admin_emails: List[str] | None = None, timeout: int = 5):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.admin_emails = {e.lower() for e in (admin_emails or [])}
        self.timeout = timeout

    @http_retry()
    def _fetch_user(self, token: str) -> requests.Response:
        url = f"{self.base_url}/auth/v1/user"
        logger.info(f"AuthClient GET {url}")
        return requests.get(
            url,
            headers={"apikey": self.api_key, "Authorization": f"Bearer {token}"},
            timeout=self.timeout,
        )

    def get_actor(self, token: str | None) -> Actor | None:
        if not token:
            return None

        resp = self._fetch_user(token)
        # niewazny / wygasly token
        if resp.status_code in (401, 403):
            logger.info("Bearer token rejected by auth provider")
            return None
        resp.raise_for_status()

        data = resp.json()
        email = (data.get("email") or "").lower()
        return Actor(
            id=str(data["id"]),
            email=email,
            is_admin=email in self.admin_emails,
            token=token,
        )


def bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
