"""Turn a completed ``requests.Response`` into a typed value, a list, a map or text."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from .errors import EmptyResponseError, RequestFailedError, ResponseDecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def ensure_success(response: requests.Response) -> None:
    """Raise ``RequestFailedError`` unless the status is in 200..299."""
    if not 200 <= response.status_code < 300:
        raise RequestFailedError(response.status_code, response.reason or "", response.text)


def _body(response: requests.Response) -> str:
    ensure_success(response)
    if not response.content:
        raise EmptyResponseError()
    return response.text


def validate_json(body: str, shape: Any = None) -> Any:
    """Decode ``body`` into ``shape``; ``None`` means plain JSON values."""
    try:
        return _adapter(Any if shape is None else shape).validate_json(body)
    except ValidationError as exc:
        raise ResponseDecodeError(f"Response did not match {shape!r}: {exc}") from exc


def validate_python(data: Any, shape: Any) -> Any:
    """Same as ``validate_json`` for data that is already decoded."""
    try:
        return _adapter(shape).validate_python(data)
    except ValidationError as exc:
        raise ResponseDecodeError(f"Response did not match {shape!r}: {exc}") from exc


def parse_response(response: requests.Response, shape: Optional[Any] = None) -> Any:
    return validate_json(_body(response), shape)


def parse_response_list(response: requests.Response, model: Type[T]) -> List[T]:
    return parse_response(response, List[model])


def parse_response_map(response: requests.Response, model: Type[T]) -> Dict[str, T]:
    return parse_response(response, Dict[str, model])


def parse_response_string(response: requests.Response) -> str:
    return _body(response)


__all__ = [
    "ensure_success",
    "validate_json",
    "validate_python",
    "parse_response",
    "parse_response_list",
    "parse_response_map",
    "parse_response_string",
]
