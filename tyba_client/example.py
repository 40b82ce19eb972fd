"""Example usage of TybaClient: Houston forecasts over a Central-time window.

    TYBA_PAT=... tyba-forecast-example most_recent vintaged by_vintage
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import os
import sys
from typing import Any, Callable, List, Optional
from zoneinfo import ZoneInfo

from .client import DEFAULT_HOST, HOST_ENV_VAR, TOKEN_ENV_VAR, TybaClient
from .errors import RequestFailedError

NODE_NAME = "HB_HOUSTON"
CENTRAL = ZoneInfo("America/Chicago")
ENDPOINTS = ("most_recent", "vintaged", "by_vintage", "actuals", "probabilistic")


def _show(title: str, data: Any) -> None:
    print(f"\n{title}\n")
    print(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None, client_factory: Callable[..., TybaClient] = TybaClient) -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    pat = os.getenv(TOKEN_ENV_VAR)
    if not pat:
        print(f"Please set {TOKEN_ENV_VAR} environment variable", file=sys.stderr)
        return 1
    host = os.getenv(HOST_ENV_VAR) or DEFAULT_HOST
    print("Using host:", host)

    endpoints = list(argv if argv is not None else sys.argv[1:]) or ["most_recent"]
    unknown = [name for name in endpoints if name not in ENDPOINTS]
    if unknown:
        print(f"Unknown endpoints: {', '.join(unknown)}. Choose from {', '.join(ENDPOINTS)}", file=sys.stderr)
        return 2

    start_time = dt.datetime(2024, 2, 5, tzinfo=CENTRAL)
    end_time = dt.datetime(2024, 2, 10, tzinfo=CENTRAL)

    with client_factory(pat, host=host) as client:
        forecast = client.forecast
        if "most_recent" in endpoints:
            _show("most recent example", forecast.get_most_recent(
                NODE_NAME, "rt", start_time, end_time, forecast_type="day-ahead"))
        if "vintaged" in endpoints:
            try:
                _show("vintaged example", forecast.get_vintaged(
                    NODE_NAME, "rt", start_time, end_time, 1, dt.time(10, 0)))
            except RequestFailedError as exc:
                print("No results found:", exc)
        if "by_vintage" in endpoints:
            _show("by vintage example", forecast.get_by_vintage(
                NODE_NAME, "da", start_time - dt.timedelta(days=1), start_time))
        if "actuals" in endpoints:
            _show("actuals example", forecast.get_actuals(
                NODE_NAME, "da", start_time, end_time, forecast_type="day-ahead"))
        if "probabilistic" in endpoints:
            _show("probabilistic example", forecast.get_most_recent_probabilistic(
                NODE_NAME, "da", start_time, end_time, [0.1, 0.5, 0.9]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
