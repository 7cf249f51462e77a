"""Tests for sign-in / sign-out across the client and the session store."""

import pytest

from healthsaas.errors import ApiHttpError, MalformedResponseError
from healthsaas.models.domain import User
from healthsaas.session import current_user, sign_in, sign_out


def test_sign_in_persists_the_returned_user(client, mock_request, response_factory, session_store, user_payload):
    mock_request.return_value = response_factory(200, {"message": "ok", "data": user_payload})

    user = sign_in(client, session_store, "a@b.com", "pw")

    assert user == User(**user_payload)
    assert current_user(session_store) == user
    assert session_store.is_authenticated()


def test_failed_sign_in_keeps_the_previous_session(client, mock_request, response_factory, session_store):
    previous = User(user_id="2", name="Omar", email="omar@clinic.org", role="admin")
    session_store.set(previous)
    mock_request.return_value = response_factory(401, {"detail": "Invalid email or password"})

    with pytest.raises(ApiHttpError, match="Invalid email or password"):
        sign_in(client, session_store, "a@b.com", "wrong")

    assert session_store.get() == previous


def test_sign_in_without_user_data_is_an_error(client, mock_request, response_factory, session_store):
    mock_request.return_value = response_factory(200, {"message": "ok"})

    with pytest.raises(MalformedResponseError):
        sign_in(client, session_store, "a@b.com", "pw")

    assert not session_store.is_authenticated()


def test_sign_out_clears_the_session(session_store, user_payload):
    session_store.set(User(**user_payload))

    sign_out(session_store)

    assert current_user(session_store) is None


def test_sign_out_when_already_signed_out(session_store):
    sign_out(session_store)
    assert not session_store.is_authenticated()
