"""
Session Store for HealthSaaS

Remembers the signed-in staff user between runs. The storage key is private
to this module; consumers only ever see get/set/clear.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from healthsaas.config.settings import get_settings
from healthsaas.models.domain import User
from healthsaas.storage.local_storage import LocalStorage
from healthsaas.utils.logging import get_logger

logger = get_logger(__name__)

USER_KEY = "healthsaas_user"


class SessionStore:
    """The single optional User representing the current session."""

    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def get(self) -> Optional[User]:
        """
        Return the stored user, or None.

        A value that does not parse back into a User is treated as no
        session rather than raised to the caller.
        """
        raw = self._storage.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable session value: {e.error_count()} validation error(s)")
            return None

    def set(self, user: User) -> None:
        self._storage.set_item(USER_KEY, user.model_dump_json())
        logger.info(f"Session stored for user {user.user_id}")

    def clear(self) -> None:
        self._storage.remove_item(USER_KEY)
        logger.info("Session cleared")

    def is_authenticated(self) -> bool:
        return self.get() is not None


# Global session store instance
_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get or create the session store backed by the configured storage file."""
    global _session_store
    if _session_store is None:
        settings = get_settings()
        _session_store = SessionStore(LocalStorage(settings.storage.local_storage_path))
    return _session_store
