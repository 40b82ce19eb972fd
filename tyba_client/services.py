"""Historical price endpoints (``/services``, ``/services/lmp``, ``/services/ancillary``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from .errors import ResponseDecodeError
from .models import (
    AncillaryRegionData,
    AncillaryService,
    Market,
    NodeData,
    NodeSearchData,
    PriceTimeSeries,
)
from .params import build_params
from .resource import Resource
from .responses import parse_response, validate_python

if TYPE_CHECKING:
    from .client import TybaClient

logger = logging.getLogger(__name__)

MAX_PRICE_NODE_IDS = 8


class LMP(Resource):
    """Interface for accessing Tyba's historical energy price data."""

    route_base = "services/lmp"

    def get_all_nodes(self, iso: str) -> List[NodeData]:
        """GET /services/lmp/nodes

        Node names, IDs and other metadata for all nodes within the ISO
        territory. Possible ISO values come from ``Services.get_all_isos``.
        """
        params = build_params({"iso": iso})
        return self._get_json("nodes", params, List[NodeData])

    def get_prices(
        self,
        node_ids: Sequence[str],
        market: Market,
        start_year: int,
        end_year: int,
    ) -> Dict[str, PriceTimeSeries]:
        """GET /services/lmp/prices

        Price time series keyed by node ID, for at most 8 node IDs.
        """
        if len(node_ids) > MAX_PRICE_NODE_IDS:
            raise ValueError(f"Maximum of {MAX_PRICE_NODE_IDS} node IDs allowed, got {len(node_ids)}")
        params = build_params(
            {
                "node_ids": ",".join(node_ids),
                "market": Market(market),
                "start_year": start_year,
                "end_year": end_year,
            }
        )
        return self._get_json("prices", params, Dict[str, PriceTimeSeries])

    def search_nodes(
        self,
        location: Optional[str] = None,
        node_name_filter: Optional[str] = None,
        iso_override: Optional[str] = None,
    ) -> List[NodeSearchData]:
        """GET /services/lmp/search-nodes

        Any combination of criteria may be given, including none.

        Args:
            location: city/state (``"dallas, tx"``), street address, or
                ``"lat, lng"`` (``"29.760427, -95.369804"``). When given, each
                result carries its distance to this location.
            node_name_filter: partial node name to pattern-match, e.g. ``"HB_"``.
            iso_override: restrict the search to a single ISO.
        """
        params = build_params(
            {},
            {
                "location": location,
                "node_name_filter": node_name_filter,
                "iso_override": iso_override,
            },
        )
        result = parse_response(self._get("search-nodes", params))
        if not isinstance(result, dict) or "nodes" not in result:
            raise ResponseDecodeError("No nodes found or error in response")
        nodes = validate_python(result["nodes"], List[NodeSearchData])
        logger.debug("search-nodes matched %d nodes", len(nodes))
        return nodes

    def search_nodes_by_location(self, location: str) -> List[NodeSearchData]:
        return self.search_nodes(location=location)

    def search_nodes_by_name(self, node_name_filter: str) -> List[NodeSearchData]:
        return self.search_nodes(node_name_filter=node_name_filter)


class Ancillary(Resource):
    """Interface for accessing Tyba's historical ancillary price data."""

    route_base = "services/ancillary"

    def get_pricing_regions(
        self,
        iso: str,
        service: AncillaryService,
        market: Market,
    ) -> List[AncillaryRegionData]:
        """GET /services/ancillary/regions

        Names and available year ranges of all ancillary pricing regions for
        the ISO, service and market.
        """
        params = build_params(
            {
                "iso": iso,
                "service": AncillaryService(service),
                "market": Market(market),
            }
        )
        return self._get_json("regions", params, List[AncillaryRegionData])

    def get_prices(
        self,
        iso: str,
        service: AncillaryService,
        market: Market,
        region: str,
        start_year: int,
        end_year: int,
    ) -> PriceTimeSeries:
        """GET /services/ancillary/prices

        Price time series for a single region/service combination. Possible
        regions come from ``get_pricing_regions``.
        """
        params = build_params(
            {
                "iso": iso,
                "service": AncillaryService(service),
                "market": Market(market),
                "region": region,
                "start_year": start_year,
                "end_year": end_year,
            }
        )
        return self._get_json("prices", params, PriceTimeSeries)


class Services(Resource):
    """Interface for accessing Tyba's historical price data."""

    route_base = "services"

    def __init__(self, client: "TybaClient") -> None:
        super().__init__(client)
        self.ancillary = Ancillary(client)
        self.lmp = LMP(client)

    def get_all_isos(self) -> List[str]:
        """GET /services/isos

        All ISOs/RTOs represented in Tyba's historical price data.
        """
        return self._get_json("isos", shape=List[str])


__all__ = ["Services", "LMP", "Ancillary", "MAX_PRICE_NODE_IDS"]
