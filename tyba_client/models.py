"""Value records and enumerations returned by (or sent to) the Tyba API."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireEnum(str, Enum):
    """Enum whose member value is the exact string used on the wire.

    ``Member.value`` encodes, ``Enum("wire string")`` decodes and raises
    ``ValueError`` for anything outside the closed set.
    """

    def __str__(self) -> str:
        return self.value


class Market(_WireEnum):
    """Indicator for which market to pull pricing data for."""

    REALTIME = "realtime"
    DAYAHEAD = "dayahead"


class AncillaryService(_WireEnum):
    """Indicator for which ancillary service to pull pricing data for."""

    REGULATION_UP = "Regulation Up"
    REGULATION_DOWN = "Regulation Down"
    RESERVES = "Reserves"
    # ERCOT Contingency Reserve Service
    ECRS = "ECRS"


class NodeType(_WireEnum):
    """Physical infrastructure associated with a market node."""

    GENERATOR = "GENERATOR"
    SPTIE = "SPTIE"
    LOAD = "LOAD"
    INTERTIE = "INTERTIE"
    AGGREGATE = "AGGREGATE"
    HUB = "HUB"
    NA = "N/A"


class OverrideAggregation(_WireEnum):
    """Shape of the ``data`` block sent with an asset override."""

    GLOBAL = "global"
    SINGLE_DAY = "single_day"
    SINGLE_DAY_HOURLY = "single_day_hourly"
    TWELVE_BY_24 = "12x24"


class PriceTimeSeries(BaseModel):
    """Pricing data for an energy price node or an ancillary pricing region.

    Attributes:
        datetimes: Beginning-of-interval datetimes for the hourly prices, in
            local time. Energy prices are timezone-naive but include DST;
            ancillary prices are in local standard time with a ``Z`` suffix.
        prices: Average hourly settlement prices, paired positionally with
            ``datetimes``. An hour with no published price is ``None``.
    """

    model_config = ConfigDict(frozen=True)

    datetimes: List[str]
    prices: List[Optional[float]]


class NodeData(BaseModel):
    """Node metadata returned by ``LMP.get_all_nodes``.

    Attributes:
        name: Name of the node.
        id: ID of the node.
        zone: Zone of the ISO territory the node sits in.
        type: Physical infrastructure associated with the node.
        da_start_year: First year of day-ahead prices for the node.
        da_end_year: Final year of day-ahead prices for the node.
        rt_start_year: First year of real-time prices for the node.
        rt_end_year: Final year of real-time prices for the node.
        substation: Grid substation associated with the node (not always present).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    id: str
    zone: Optional[str] = None
    type: Optional[NodeType] = None
    da_start_year: Optional[int] = None
    da_end_year: Optional[int] = None
    rt_start_year: Optional[int] = None
    rt_end_year: Optional[int] = None
    substation: Optional[str] = None


class NodeSearchData(BaseModel):
    """Node metadata returned by ``LMP.search_nodes``.

    Attributes:
        node_id: ID of the node (wire key ``node/id``).
        node_name: Name of the node (wire key ``node/name``).
        node_iso: ISO the node belongs to (wire key ``node/iso``).
        node_latitude: Latitude of the node (wire key ``node/lat``).
        node_longitude: Longitude of the node (wire key ``node/lng``).
        node_distance_meters: Distance to the searched location; only present
            when a location was given (wire key ``node/distance-meters``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node_id: str = Field(alias="node/id")
    node_name: str = Field(alias="node/name")
    node_iso: Optional[str] = Field(None, alias="node/iso")
    node_latitude: Optional[float] = Field(None, alias="node/lat")
    node_longitude: Optional[float] = Field(None, alias="node/lng")
    node_distance_meters: Optional[float] = Field(None, alias="node/distance-meters")


class AncillaryRegionData(BaseModel):
    """Ancillary pricing region and the years of data available for it.

    Attributes:
        region: Name of the region.
        start_year: First year in the price dataset for the region and service.
        end_year: Final year in the price dataset for the region and service.
    """

    model_config = ConfigDict(frozen=True)

    region: str
    start_year: int
    end_year: int


__all__ = [
    "Market",
    "AncillaryService",
    "NodeType",
    "OverrideAggregation",
    "PriceTimeSeries",
    "NodeData",
    "NodeSearchData",
    "AncillaryRegionData",
]
