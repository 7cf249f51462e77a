"""Shared plumbing for the per-resource API wrappers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import ValidationError

from healthsaas.errors import InvalidRequestError
from healthsaas.models.domain import RequestRecord

if TYPE_CHECKING:
    from healthsaas.integrations.api_client import ApiClient

R = TypeVar("R", bound=RequestRecord)


def path_segment(value: str) -> str:
    """Quote a record id for use as a single URL path segment."""
    return quote(str(value), safe="")


def describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "body"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def request_body(record_type: Type[R], fields: Union[R, Mapping[str, Any]]) -> dict:
    """
    Serialize a request record, accepting either the record or a plain mapping.

    Raises:
        InvalidRequestError: The mapping is missing a required field or has a
            value of the wrong type; no request is sent
    """
    if isinstance(fields, record_type):
        return fields.to_body()
    try:
        record = record_type.model_validate(dict(fields))
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid {record_type.__name__}: {describe_validation_error(e)}") from e
    return record.to_body()


class ResourceAPI:
    """One backend resource; every call is delegated to ApiClient.request."""

    def __init__(self, client: "ApiClient"):
        self._client = client
