from __future__ import annotations

from tyba_client.client import TybaClient
from tests.fakes import FakeSession
from tyba_client.example import main


def test_main_requires_token(monkeypatch, capsys):
    monkeypatch.delenv("TYBA_PAT", raising=False)
    assert main([]) == 1
    assert "TYBA_PAT" in capsys.readouterr().err


def test_main_rejects_unknown_endpoint(monkeypatch):
    monkeypatch.setenv("TYBA_PAT", "tok")
    assert main(["nope"]) == 2


def test_main_runs_requested_endpoints(monkeypatch, capsys):
    monkeypatch.setenv("TYBA_PAT", "tok")
    monkeypatch.setenv("TYBA_HOST", "https://api.example.com")
    session = FakeSession()
    session.queue_response(payload=[{"value": 1.0}])
    session.queue_response(payload={"error": "no vintage"}, status_code=404, reason="Not Found")

    def factory(token, host):
        return TybaClient(token, host=host, session=session)

    assert main(["most_recent", "vintaged"], client_factory=factory) == 0
    out = capsys.readouterr().out
    assert "Using host: https://api.example.com" in out
    assert "most recent example" in out
    assert "No results found" in out
    assert [req["url"].split("?")[0] for req in session.requests] == [
        "https://api.example.com/public/0.1/forecasts/most_recent_forecast",
        "https://api.example.com/public/0.1/forecasts/vintaged_forecast",
    ]
