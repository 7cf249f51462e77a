from .local_storage import LocalStorage
from .session_store import SessionStore, get_session_store

__all__ = ["LocalStorage", "SessionStore", "get_session_store"]
