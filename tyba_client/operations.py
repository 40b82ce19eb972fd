"""Operations endpoints (``/operations/internal_api``).

Asset reports identify the asset either by ``asset_name`` or by
``display_name``; at least one is required and ``asset_name`` wins when both
are given. Report endpoints return the raw response text.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .models import OverrideAggregation
from .params import asset_identifier, build_params, format_date
from .resource import Resource
from .responses import parse_response, parse_response_string

logger = logging.getLogger(__name__)


class Operations(Resource):
    """Interface for accessing Tyba's operations data."""

    route_base = "operations"

    def _report(self, route: str, required: Dict[str, Any], optional: Optional[Dict[str, Any]] = None) -> str:
        return parse_response_string(self._get(route, build_params(required, optional)))

    def get_performance_report(
        self,
        start_date: dt.date,
        end_date: dt.date,
        *,
        asset_name: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> str:
        """GET /operations/internal_api/performance_report"""
        required = asset_identifier(asset_name, display_name)
        required.update(start_date=format_date(start_date), end_date=format_date(end_date))
        return self._report("internal_api/performance_report", required)

    def get_da_snapshot(
        self,
        start_date: dt.date,
        end_date: dt.date,
        *,
        asset_name: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> str:
        """GET /operations/internal_api/da_snapshot"""
        required = asset_identifier(asset_name, display_name)
        required.update(start_date=format_date(start_date), end_date=format_date(end_date))
        return self._report("internal_api/da_snapshot", required)

    def get_telemetry(
        self,
        start_date: dt.date,
        end_date: dt.date,
        interval_mins: int,
        metrics: Sequence[str],
        *,
        asset_name: Optional[str] = None,
        display_name: Optional[str] = None,
        solar_asset_telemetry: bool = False,
    ) -> str:
        """GET /operations/internal_api/telemetry"""
        required = asset_identifier(asset_name, display_name)
        required.update(
            start_date=format_date(start_date),
            end_date=format_date(end_date),
            interval_mins=interval_mins,
            metrics=list(metrics) if metrics is not None else None,
            solar_asset_telemetry=solar_asset_telemetry,
        )
        return self._report("internal_api/telemetry", required)

    def get_asset_details(
        self,
        *,
        asset_name: Optional[str] = None,
        display_name: Optional[str] = None,
        date: Optional[dt.date] = None,
    ) -> str:
        """GET /operations/internal_api/asset_details"""
        required = asset_identifier(asset_name, display_name)
        optional = {"date": format_date(date) if date is not None else None}
        return self._report("internal_api/asset_details", required, optional)

    def get_assets(self, *, org_id: Optional[str] = None, include_disabled: bool = False) -> str:
        """GET /operations/internal_api/assets"""
        return self._report(
            "internal_api/assets",
            {"include_disabled": include_disabled},
            {"org_id": org_id},
        )

    def set_asset_overrides(
        self,
        asset_names: Sequence[str],
        field: str,
        aggregation: Union[OverrideAggregation, str],
        values: Any,
        *,
        service: Optional[str] = None,
        date: Optional[dt.date] = None,
    ) -> Any:
        """POST /operations/internal_api/assets/override/

        ``aggregation`` decides how ``values`` is sent:

        - ``global``: a single value, sent as ``value``.
        - ``single_day`` / ``single_day_hourly``: sent as ``values`` along with ``date``.
        - ``12x24``: a mapping merged into the ``data`` block.

        A non-2xx answer is returned, not raised, as a dict with
        ``status_code``, ``reason`` and ``message`` (the response body).
        """
        payload = {
            "asset_names": list(asset_names),
            "assumption": build_override_assumption(field, aggregation, values, service=service, date=date),
        }
        response = self._post("internal_api/assets/override/", payload)
        if not 200 <= response.status_code < 300:
            logger.warning("Asset override rejected with status %s", response.status_code)
            return {
                "status_code": response.status_code,
                "reason": response.reason,
                "message": response.text,
            }
        return parse_response(response)

    def get_overrides_schema(self) -> Any:
        """GET /operations/internal_api/overrides_schema"""
        return self._get_json("internal_api/overrides_schema")


def build_override_assumption(
    field: str,
    aggregation: Union[OverrideAggregation, str],
    values: Any,
    *,
    service: Optional[str] = None,
    date: Optional[dt.date] = None,
) -> Dict[str, Any]:
    """Build the ``assumption`` block of an asset override request."""
    kind = OverrideAggregation(aggregation)
    data: Dict[str, Any] = {"aggregation": kind.value}
    if kind is OverrideAggregation.GLOBAL:
        data["value"] = values
    elif kind in (OverrideAggregation.SINGLE_DAY, OverrideAggregation.SINGLE_DAY_HOURLY):
        data["values"] = values
        data["date"] = format_date(date) if date is not None else None
    else:
        if not isinstance(values, Mapping):
            raise ValueError(f"'{kind.value}' overrides require a mapping of values, got {type(values).__name__}")
        data.update(values)

    assumption: Dict[str, Any] = {"field": field, "data": data}
    if service is not None:
        assumption["service"] = service
    return assumption


__all__ = ["Operations", "build_override_assumption"]
