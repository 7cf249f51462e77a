"""
Sign-in / sign-out flow shared by the console pages.

The login endpoint only answers who the user is; remembering them is done
here, explicitly, after a successful login.
"""

from __future__ import annotations

import logging
from typing import Optional

from healthsaas.errors import MalformedResponseError
from healthsaas.integrations.api_client import ApiClient
from healthsaas.models.domain import User
from healthsaas.storage.session_store import SessionStore
from healthsaas.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)


def sign_in(client: ApiClient, store: SessionStore, email: str, password: str) -> User:
    """
    Log in and persist the returned user as the current session.

    Raises:
        ApiError: The login call failed; the stored session is left as it was
        MalformedResponseError: The backend accepted the login but sent no user
    """
    response = client.auth.login(email, password)
    if response.data is None:
        raise MalformedResponseError("Login response did not include a user")

    store.set(response.data)
    log_with_context(logger, logging.INFO, "User signed in", user_id=response.data.user_id)
    return response.data


def sign_out(store: SessionStore) -> None:
    user = store.get()
    store.clear()
    log_with_context(logger, logging.INFO, "User signed out", user_id=user.user_id if user else None)


def current_user(store: SessionStore) -> Optional[User]:
    return store.get()
