"""Tyba public API client.

``TybaClient`` owns the HTTP session and configuration and hands out the
resource clients (forecast, services, operations) that build each request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
import json
import logging
import os
import threading

import requests

from .forecast import Forecast
from .operations import Operations
from .params import encode_query
from .responses import parse_response
from .services import LMP, Ancillary, Services

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://dev.tybaenergy.com"
DEFAULT_VERSION = "0.1"
TOKEN_ENV_VAR = "TYBA_PAT"
HOST_ENV_VAR = "TYBA_HOST"


@dataclass(frozen=True)
class TybaClientConfig:
    host: Optional[str] = None
    version: str = DEFAULT_VERSION
    connect_timeout: float = 30.0
    read_timeout: float = 60.0


def load_personal_access_token(token: Optional[str] = None) -> str:
    """Return ``token`` or fall back to the ``TYBA_PAT`` environment variable."""
    if token:
        return token
    value = os.environ.get(TOKEN_ENV_VAR)
    if value:
        return value
    raise RuntimeError(
        f"Missing personal access token. Pass it explicitly or set {TOKEN_ENV_VAR}; contact Tyba to obtain one."
    )


class TybaClient:
    """High level interface for interacting with Tyba's API.

    Use it as a context manager (or call ``close()``) so pooled connections
    are released:

        with TybaClient("my-token") as client:
            isos = client.services.get_all_isos()
    """

    def __init__(
        self,
        personal_access_token: Optional[str] = None,
        *,
        host: Optional[str] = None,
        version: Optional[str] = None,
        config: Optional[TybaClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        base = config or TybaClientConfig()
        self.config = TybaClientConfig(
            host=(host or base.host or os.environ.get(HOST_ENV_VAR) or DEFAULT_HOST).rstrip("/"),
            version=version or base.version,
            connect_timeout=base.connect_timeout,
            read_timeout=base.read_timeout,
        )
        self._personal_access_token = load_personal_access_token(personal_access_token)
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._closed = False
        self._lock = threading.Lock()
        self._services: Optional[Services] = None
        self._forecast: Optional[Forecast] = None
        self._operations: Optional[Operations] = None

    def __enter__(self) -> "TybaClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        if self._owns_session:
            self._session.close()

    # ---- Configuration ----
    @property
    def host(self) -> str:
        return self.config.host

    @property
    def version(self) -> str:
        return self.config.version

    @property
    def base_url(self) -> str:
        return f"{self.config.host}/public/{self.config.version}/"

    @property
    def timeout(self) -> tuple:
        return (self.config.connect_timeout, self.config.read_timeout)

    # ---- Resource clients ----
    @property
    def services(self) -> Services:
        """Interface for accessing Tyba's historical price data."""
        with self._lock:
            if self._services is None:
                self._services = Services(self)
            return self._services

    @property
    def forecast(self) -> Forecast:
        """Interface for accessing Tyba's forecast data."""
        with self._lock:
            if self._forecast is None:
                self._forecast = Forecast(self)
            return self._forecast

    @property
    def operations(self) -> Operations:
        """Interface for accessing Tyba's operations data."""
        with self._lock:
            if self._operations is None:
                self._operations = Operations(self)
            return self._operations

    @property
    def ancillary(self) -> Ancillary:
        """Shortcut to ``services.ancillary``."""
        return self.services.ancillary

    @property
    def lmp(self) -> LMP:
        """Shortcut to ``services.lmp``."""
        return self.services.lmp

    # ---- Transport ----
    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {"Authorization": self._personal_access_token}
        headers.update(extra or {})
        return headers

    def _request(self, method: str, url: str, *, data: Optional[str] = None,
                 headers: Optional[Dict[str, str]] = None) -> requests.Response:
        return self._session.request(
            method=method,
            url=url,
            headers=self._headers(headers),
            data=data,
            timeout=self.timeout,
        )

    def get(self, route: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """GET ``{base_url}{route}``; ``None``-valued params are left out."""
        url = f"{self.base_url}{route.lstrip('/')}"
        query = encode_query(params)
        if query:
            url = f"{url}?{query}"
        logger.debug("GET %s", url)
        return self._request("GET", url)

    def post(self, route: str, payload: Any) -> requests.Response:
        """POST ``payload`` as a JSON body to ``{base_url}{route}``."""
        url = f"{self.base_url}{route.lstrip('/')}"
        body = json.dumps(payload)
        logger.debug("POST %s with body: %s", url, body)
        return self._request("POST", url, data=body, headers={"Content-Type": "application/json"})

    def get_json(self, route: str, params: Optional[Dict[str, Any]] = None,
                 shape: Optional[Any] = None) -> Any:
        """GET ``route`` and decode the body into ``shape`` (plain JSON when ``None``)."""
        return parse_response(self.get(route, params), shape)


__all__ = [
    "TybaClient",
    "TybaClientConfig",
    "load_personal_access_token",
    "DEFAULT_HOST",
    "DEFAULT_VERSION",
    "TOKEN_ENV_VAR",
    "HOST_ENV_VAR",
]
