"""Forecast endpoints (``/forecasts``).

Every method takes timezone-aware datetimes; their UTC offset is sent as-is.
The optional keyword arguments shared by all endpoints are left out of the
query string when they are ``None``:

- ``forecast_type``: e.g. ``"day-ahead"`` or ``"real-time"``.
- ``predictions_per_hour``: number of predictions per hour.
- ``prediction_lead_time_mins``: lead time of the prediction in minutes.
- ``horizon_mins``: forecast horizon in minutes.

Results are returned as decoded JSON (lists/dicts).
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Optional, Sequence

from .params import build_params, format_datetime, format_time
from .resource import Resource


def _forecast_options(
    forecast_type: Optional[str],
    predictions_per_hour: Optional[int],
    prediction_lead_time_mins: Optional[int],
    horizon_mins: Optional[int],
) -> Dict[str, Any]:
    return {
        "forecast_type": forecast_type,
        "predictions_per_hour": predictions_per_hour,
        "prediction_lead_time_mins": prediction_lead_time_mins,
        "horizon_mins": horizon_mins,
    }


def _window(object_name: str, product: str, start_time: dt.datetime, end_time: dt.datetime) -> Dict[str, Any]:
    return {
        "object_name": object_name,
        "product": product,
        "start_time": format_datetime(start_time),
        "end_time": format_datetime(end_time),
    }


class Forecast(Resource):
    """Interface for accessing Tyba's forecast data."""

    route_base = "forecasts"

    def get_most_recent(
        self,
        object_name: str,
        product: str,
        start_time: dt.datetime,
        end_time: dt.datetime,
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/most_recent_forecast"""
        params = build_params(
            _window(object_name, product, start_time, end_time),
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("most_recent_forecast", params)

    def get_most_recent_probabilistic(
        self,
        object_name: str,
        product: str,
        start_time: dt.datetime,
        end_time: dt.datetime,
        quantiles: Sequence[float],
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/most_recent_probabilistic_forecast"""
        required = _window(object_name, product, start_time, end_time)
        required["quantiles"] = _as_list(quantiles)
        params = build_params(
            required,
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("most_recent_probabilistic_forecast", params)

    def get_vintaged(
        self,
        object_name: str,
        product: str,
        start_time: dt.datetime,
        end_time: dt.datetime,
        days_ago: int,
        before_time: dt.time,
        exact_vintage: bool = False,
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/vintaged_forecast

        Returns the forecast produced ``days_ago`` days before each forecasted
        day, at or before ``before_time`` local time. With ``exact_vintage``
        only forecasts produced exactly at ``before_time`` are considered.
        """
        required = _window(object_name, product, start_time, end_time)
        required.update(_vintage(days_ago, before_time, exact_vintage))
        params = build_params(
            required,
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("vintaged_forecast", params)

    def get_vintaged_probabilistic(
        self,
        object_name: str,
        product: str,
        start_time: dt.datetime,
        end_time: dt.datetime,
        quantiles: Sequence[float],
        days_ago: int,
        before_time: dt.time,
        exact_vintage: bool = False,
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/vintaged_probabilistic_forecast"""
        required = _window(object_name, product, start_time, end_time)
        required["quantiles"] = _as_list(quantiles)
        required.update(_vintage(days_ago, before_time, exact_vintage))
        params = build_params(
            required,
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("vintaged_probabilistic_forecast", params)

    def get_by_vintage(
        self,
        object_name: str,
        product: str,
        vintage_start_time: dt.datetime,
        vintage_end_time: dt.datetime,
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/forecasts_by_vintage

        Returns every forecast whose vintage falls between the two times.
        """
        params = build_params(
            _window(object_name, product, vintage_start_time, vintage_end_time),
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("forecasts_by_vintage", params)

    def get_by_vintage_probabilistic(
        self,
        object_name: str,
        product: str,
        quantiles: Sequence[float],
        vintage_start_time: dt.datetime,
        vintage_end_time: dt.datetime,
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/probabilistic_forecasts_by_vintage"""
        required = _window(object_name, product, vintage_start_time, vintage_end_time)
        required["quantiles"] = _as_list(quantiles)
        params = build_params(
            required,
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("probabilistic_forecasts_by_vintage", params)

    def get_actuals(
        self,
        object_name: str,
        product: str,
        start_time: dt.datetime,
        end_time: dt.datetime,
        *,
        forecast_type: Optional[str] = None,
        predictions_per_hour: Optional[int] = None,
        prediction_lead_time_mins: Optional[int] = None,
        horizon_mins: Optional[int] = None,
    ) -> Any:
        """GET /forecasts/actuals"""
        params = build_params(
            _window(object_name, product, start_time, end_time),
            _forecast_options(forecast_type, predictions_per_hour, prediction_lead_time_mins, horizon_mins),
        )
        return self._get_json("actuals", params)


def _as_list(quantiles: Optional[Sequence[float]]) -> Optional[list]:
    return None if quantiles is None else list(quantiles)


def _vintage(days_ago: int, before_time: dt.time, exact_vintage: bool) -> Dict[str, Any]:
    return {
        "days_ago": days_ago,
        "before_time": format_time(before_time),
        "exact_vintage": exact_vintage,
    }


__all__ = ["Forecast"]
