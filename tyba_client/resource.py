from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import requests

if TYPE_CHECKING:
    from .client import TybaClient


class Resource:
    """Base for resource clients: prefixes every route with ``route_base``."""

    route_base: str = ""

    def __init__(self, client: "TybaClient") -> None:
        self.client = client

    def _route(self, route: str) -> str:
        return f"{self.route_base}/{route}"

    def _get(self, route: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self.client.get(self._route(route), params)

    def _get_json(self, route: str, params: Optional[Dict[str, Any]] = None,
                  shape: Optional[Any] = None) -> Any:
        return self.client.get_json(self._route(route), params, shape)

    def _post(self, route: str, payload: Any) -> requests.Response:
        return self.client.post(self._route(route), payload)
