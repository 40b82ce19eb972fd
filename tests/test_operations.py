from __future__ import annotations

import datetime as dt
import json

import pytest

from tyba_client.errors import RequestFailedError
from tyba_client.models import OverrideAggregation
from tyba_client.operations import build_override_assumption

START = dt.date(2024, 1, 1)
END = dt.date(2024, 1, 31)


def test_performance_report_by_asset_name(client, session):
    session.queue_response(content=b"date,revenue\n2024-01-01,10\n")
    report = client.operations.get_performance_report(START, END, asset_name="Solar_1")
    assert session.last_path() == "/public/0.1/operations/internal_api/performance_report"
    assert session.last_query() == {"asset_name": "Solar_1", "start_date": "2024-01-01", "end_date": "2024-01-31"}
    assert report == "date,revenue\n2024-01-01,10\n"


def test_asset_name_wins_over_display_name(client, session):
    session.queue_response(content=b"ok")
    client.operations.get_da_snapshot(START, END, asset_name="a", display_name="A")
    query = session.last_query()
    assert query["asset_name"] == "a"
    assert "asset_display_name" not in query
    assert session.last_path().endswith("/internal_api/da_snapshot")


def test_display_name_used_when_asset_name_absent(client, session):
    session.queue_response(content=b"ok")
    client.operations.get_da_snapshot(START, END, display_name="Solar One")
    assert "asset_display_name=Solar%20One" in session.last["url"]
    assert "asset_name=" not in session.last["url"]


@pytest.mark.parametrize(
    "call",
    [
        lambda ops: ops.get_performance_report(START, END),
        lambda ops: ops.get_da_snapshot(START, END),
        lambda ops: ops.get_telemetry(START, END, 15, ["power"]),
        lambda ops: ops.get_asset_details(),
    ],
)
def test_missing_asset_identity_rejected(client, session, call):
    with pytest.raises(ValueError, match="Must provide either 'asset_name' or 'display_name'"):
        call(client.operations)
    assert session.requests == []


def test_get_telemetry(client, session):
    session.queue_response(content=b"telemetry")
    client.operations.get_telemetry(START, END, 15, ["power", "soc"], asset_name="Battery_1")
    query = session.last_query()
    assert session.last_path().endswith("/internal_api/telemetry")
    assert query["interval_mins"] == "15"
    assert json.loads(query["metrics"]) == ["power", "soc"]
    assert query["solar_asset_telemetry"] == "false"


def test_get_asset_details_optional_date(client, session):
    session.queue_response(content=b"{}")
    client.operations.get_asset_details(asset_name="Solar_1")
    assert "date" not in session.last_query()

    session.queue_response(content=b"{}")
    client.operations.get_asset_details(asset_name="Solar_1", date=dt.date(2024, 3, 1))
    assert session.last_query()["date"] == "2024-03-01"


def test_get_assets(client, session):
    session.queue_response(content=b"[]")
    assert client.operations.get_assets() == "[]"
    assert session.last_query() == {"include_disabled": "false"}

    session.queue_response(content=b"[]")
    client.operations.get_assets(org_id="org-1", include_disabled=True)
    assert session.last_query() == {"include_disabled": "true", "org_id": "org-1"}


def test_report_error_raises(client, session):
    session.queue_response(payload={"error": "unknown asset"}, status_code=404, reason="Not Found")
    with pytest.raises(RequestFailedError, match="404"):
        client.operations.get_assets()


def test_set_asset_overrides_global(client, session):
    session.queue_response(payload={"status": "ok"})
    result = client.operations.set_asset_overrides(["a", "b"], "availability", "global", 0.5, service="energy")
    req = session.last
    assert req["method"] == "POST"
    assert session.last_path() == "/public/0.1/operations/internal_api/assets/override/"
    assert json.loads(req["data"]) == {
        "asset_names": ["a", "b"],
        "assumption": {
            "field": "availability",
            "data": {"aggregation": "global", "value": 0.5},
            "service": "energy",
        },
    }
    assert result == {"status": "ok"}


def test_set_asset_overrides_error_returned(client, session):
    session.queue_response(content=b"field not overridable", status_code=422, reason="Unprocessable Entity")
    result = client.operations.set_asset_overrides(["a"], "bogus", OverrideAggregation.GLOBAL, 1)
    assert result == {
        "status_code": 422,
        "reason": "Unprocessable Entity",
        "message": "field not overridable",
    }


def test_override_single_day_shapes():
    day = dt.date(2024, 5, 1)
    assert build_override_assumption("f", "single_day", [1, 2], date=day) == {
        "field": "f",
        "data": {"aggregation": "single_day", "values": [1, 2], "date": "2024-05-01"},
    }
    hourly = build_override_assumption("f", OverrideAggregation.SINGLE_DAY_HOURLY, [0.0] * 24)
    assert hourly["data"]["date"] is None
    assert len(hourly["data"]["values"]) == 24
    assert "service" not in hourly


def test_override_12x24_merges_mapping():
    values = {"months": [1, 2], "hours": [0, 1], "values": [[1, 2], [3, 4]]}
    data = build_override_assumption("f", "12x24", values)["data"]
    assert data == {"aggregation": "12x24", **values}


def test_override_12x24_requires_mapping():
    with pytest.raises(ValueError, match="mapping"):
        build_override_assumption("f", "12x24", [1, 2, 3])


def test_override_unknown_aggregation(client, session):
    with pytest.raises(ValueError):
        client.operations.set_asset_overrides(["a"], "f", "weekly", 1)
    assert session.requests == []


def test_get_overrides_schema(client, session):
    session.queue_response(payload={"fields": ["availability"]})
    assert client.operations.get_overrides_schema() == {"fields": ["availability"]}
    assert session.last_path() == "/public/0.1/operations/internal_api/overrides_schema"
