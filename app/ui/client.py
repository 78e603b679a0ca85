# app/ui/client.py
import requests

from app.utils.settings import API_BASE_URL, HTTP_TIMEOUT
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UsersClient:
    """
    Klient HTTP dla /users.
    Bez retry: błąd leci do kontrolera, który pokazuje komunikat.
    `http` może być requests.Session albo dowolny obiekt z tym samym api
    (np. TestClient w testach).
    """

    def __init__(self, base_url: str | None = None, timeout: float = HTTP_TIMEOUT, http=None):
        self.base_url = (base_url if base_url is not None else API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.http = http or requests.Session()

    def _url(self, user_id: int | None = None) -> str:
        if user_id is None:
            return f"{self.base_url}/users"
        return f"{self.base_url}/users/{user_id}"

    def _send(self, method: str, url: str, **kwargs) -> dict | list:
        logger.info(f"UsersClient {method.upper()} {url}")
        resp = getattr(self.http, method)(url, timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp.json()

    def list_users(self) -> list[dict]:
        return self._send("get", self._url())

    def create_user(self, name: str, email: str) -> dict:
        return self._send("post", self._url(), json={"name": name, "email": email})

    def update_user(self, user_id: int, name: str, email: str) -> dict:
        return self._send("put", self._url(user_id), json={"name": name, "email": email})

    def delete_user(self, user_id: int) -> dict:
        return self._send("delete", self._url(user_id))
