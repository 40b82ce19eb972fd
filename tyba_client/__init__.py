"""Simple Python client for the Tyba public API."""

from .client import TybaClient, TybaClientConfig, load_personal_access_token
from .errors import EmptyResponseError, RequestFailedError, ResponseDecodeError, TybaAPIError
from .forecast import Forecast
from .models import (
    AncillaryRegionData,
    AncillaryService,
    Market,
    NodeData,
    NodeSearchData,
    NodeType,
    OverrideAggregation,
    PriceTimeSeries,
)
from .operations import Operations
from .services import LMP, Ancillary, Services

__all__ = [
    "TybaClient",
    "TybaClientConfig",
    "load_personal_access_token",
    "Forecast",
    "Services",
    "LMP",
    "Ancillary",
    "Operations",
    "AncillaryRegionData",
    "AncillaryService",
    "Market",
    "NodeData",
    "NodeSearchData",
    "NodeType",
    "OverrideAggregation",
    "PriceTimeSeries",
    "TybaAPIError",
    "RequestFailedError",
    "EmptyResponseError",
    "ResponseDecodeError",
]
