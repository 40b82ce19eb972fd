from __future__ import annotations

import pytest
from pydantic import ValidationError

from tyba_client.models import (
    AncillaryRegionData,
    AncillaryService,
    Market,
    NodeData,
    NodeSearchData,
    NodeType,
    OverrideAggregation,
    PriceTimeSeries,
)

WIRE_VALUES = [
    (Market.REALTIME, "realtime"),
    (Market.DAYAHEAD, "dayahead"),
    (AncillaryService.REGULATION_UP, "Regulation Up"),
    (AncillaryService.REGULATION_DOWN, "Regulation Down"),
    (AncillaryService.RESERVES, "Reserves"),
    (AncillaryService.ECRS, "ECRS"),
    (NodeType.GENERATOR, "GENERATOR"),
    (NodeType.SPTIE, "SPTIE"),
    (NodeType.LOAD, "LOAD"),
    (NodeType.INTERTIE, "INTERTIE"),
    (NodeType.AGGREGATE, "AGGREGATE"),
    (NodeType.HUB, "HUB"),
    (NodeType.NA, "N/A"),
    (OverrideAggregation.TWELVE_BY_24, "12x24"),
]


@pytest.mark.parametrize("member,wire", WIRE_VALUES)
def test_enum_wire_mapping(member, wire):
    assert member.value == wire
    assert str(member) == wire
    assert type(member)(wire) is member


@pytest.mark.parametrize("enum_cls", [Market, AncillaryService, NodeType, OverrideAggregation])
def test_unknown_wire_string_fails(enum_cls):
    with pytest.raises(ValueError):
        enum_cls("not-a-value")


def test_node_data_optional_fields():
    node = NodeData.model_validate({"id": "1", "name": "HB_HOUSTON", "type": "N/A"})
    assert node.type is NodeType.NA
    assert node.zone is None
    assert node.substation is None
    assert node.da_start_year is None


def test_node_data_unknown_type_fails():
    with pytest.raises(ValidationError):
        NodeData.model_validate({"id": "1", "name": "X", "type": "PLANT"})


def test_node_data_is_frozen():
    node = NodeData(id="1", name="X")
    with pytest.raises(ValidationError):
        node.name = "Y"


def test_node_search_data_aliases():
    node = NodeSearchData.model_validate(
        {"node/id": "1", "node/name": "HB_HOUSTON", "node/iso": "ERCOT", "node/lat": 29.7, "node/lng": -95.3}
    )
    assert node.node_name == "HB_HOUSTON"
    assert node.node_iso == "ERCOT"
    assert node.node_latitude == 29.7
    assert node.node_distance_meters is None


def test_node_search_data_requires_name():
    with pytest.raises(ValidationError):
        NodeSearchData.model_validate({"node/id": "1"})


def test_price_time_series():
    series = PriceTimeSeries.model_validate({"datetimes": ["2024-01-01T00:00:00"], "prices": [25.5]})
    assert series.prices == [25.5]


def test_ancillary_region_data():
    region = AncillaryRegionData.model_validate({"region": "SP15", "start_year": 2019, "end_year": 2023})
    assert (region.region, region.start_year, region.end_year) == ("SP15", 2019, 2023)
