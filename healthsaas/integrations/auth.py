"""Sign-in and registration endpoints."""
from __future__ import annotations

from typing import Any, Mapping, Union

from healthsaas.integrations.base import ResourceAPI, request_body
from healthsaas.models.domain import ApiResponse, RegisterRequest, User, UserCreated


class AuthAPI(ResourceAPI):

    def login(self, email: str, password: str) -> ApiResponse[User]:
        """
        Check credentials and return the user's identity.

        Persisting the returned user is the caller's decision; this method
        never touches the session store.
        """
        return self._client.request(
            "/users/login",
            method="POST",
            json={"email": email, "password": password},
            data_model=User,
        )

    def register(self, fields: Union[RegisterRequest, Mapping[str, Any]]) -> ApiResponse[UserCreated]:
        return self._client.request(
            "/users/register",
            method="POST",
            json=request_body(RegisterRequest, fields),
            data_model=UserCreated,
        )
