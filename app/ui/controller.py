# app/ui/controller.py
"""
Kontroler UI listy użytkowników.

Stan trzymany w jawnym `UiState`. Po każdej udanej zmianie (add/edit/delete)
lista jest pobierana od nowa z serwera, bez lokalnych wstawek.

Maszyny stanów:
- edycja:   idle -> editing (start_edit) -> idle (save ok | cancel_edit)
- usuwanie: idle -> confirming (confirm_delete) -> idle (delete ok | cancel_delete)
"""
import time
from dataclasses import dataclass, field
from typing import Callable

from app.ui.client import UsersClient
from app.utils.settings import ERROR_DISPLAY_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class UiState:
    users: list[dict] = field(default_factory=list)
    new_name: str = ""
    new_email: str = ""
    editing_user: dict | None = None
    user_to_delete: dict | None = None
    error_msg: str = ""
    error_expires_at: float | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_user is not None

    @property
    def is_confirming_delete(self) -> bool:
        return self.user_to_delete is not None


class UserController:
    def __init__(
        self,
        client: UsersClient | None = None,
        error_display_seconds: float = ERROR_DISPLAY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client or UsersClient()
        self.state = UiState()
        self.error_display_seconds = error_display_seconds
        self.clock = clock

    # =====================================================
    # błędy
    # =====================================================
    def display_error(self, msg: str):
        self.state.error_msg = msg
        self.state.error_expires_at = self.clock() + self.error_display_seconds

    @property
    def error(self) -> str:
        """Aktualny komunikat, pusty po upływie czasu wyświetlania."""
        expires = self.state.error_expires_at
        if expires is not None and self.clock() >= expires:
            self.state.error_msg = ""
            self.state.error_expires_at = None
        return self.state.error_msg

    # =====================================================
    # lista
    # =====================================================
    def mount(self):
        self.fetch_users()

    def fetch_users(self) -> bool:
        try:
            self.state.users = self.client.list_users()
        except Exception as e:
            logger.warning(f"Fetching users failed: {e}")
            self.display_error("Failed to fetch users.")
            return False
        return True

    # =====================================================
    # dodawanie
    # =====================================================
    def set_new_user(self, name: str | None = None, email: str | None = None):
        if name is not None:
            self.state.new_name = name
        if email is not None:
            self.state.new_email = email

    def add_user(self) -> bool:
        if not self.state.new_name or not self.state.new_email:
            self.display_error("Name and Email required.")
            return False
        try:
            self.client.create_user(self.state.new_name, self.state.new_email)
        except Exception as e:
            logger.warning(f"Adding user failed: {e}")
            self.display_error("Failed to add user.")
            return False

        self.state.new_name = ""
        self.state.new_email = ""
        self.fetch_users()
        return True

    # =====================================================
    # edycja
    # =====================================================
    def start_edit(self, user: dict):
        # kopia, żeby edycja nie ruszała wiersza na liście
        self.state.editing_user = dict(user)

    def set_edit_field(self, name: str | None = None, email: str | None = None):
        if self.state.editing_user is None:
            return
        if name is not None:
            self.state.editing_user["name"] = name
        if email is not None:
            self.state.editing_user["email"] = email

    def cancel_edit(self):
        self.state.editing_user = None

    def save_edit(self) -> bool:
        draft = self.state.editing_user
        if not draft or not draft.get("name") or not draft.get("email"):
            self.display_error("Name/Email cannot be empty.")
            return False
        try:
            self.client.update_user(draft["id"], draft["name"], draft["email"])
        except Exception as e:
            logger.warning(f"Updating user {draft['id']} failed: {e}")
            self.display_error("Failed to update user.")
            return False

        self.state.editing_user = None
        self.fetch_users()
        return True

    # =====================================================
    # usuwanie
    # =====================================================
    def confirm_delete(self, user: dict):
        self.state.user_to_delete = user

    def cancel_delete(self):
        self.state.user_to_delete = None

    def delete_confirmed(self) -> bool:
        target = self.state.user_to_delete
        if target is None:
            return False
        try:
            self.client.delete_user(target["id"])
        except Exception as e:
            logger.warning(f"Deleting user {target['id']} failed: {e}")
            self.display_error("Failed to delete user.")
            return False

        self.state.user_to_delete = None
        self.fetch_users()
        return True
