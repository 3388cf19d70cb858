"""Tests for the Streamlit app module."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from ledger_dashboard.adapters.interface.streamlit import app
from ledger_dashboard.domain.models import WorkRecord
from ledger_dashboard.infrastructure.settings import DashboardSettings


class _FakeStreamlit:
    def __init__(self, query: str = "") -> None:
        self.query = query
        self.infos: list[str] = []
        self.subheaders: list[str] = []
        self.dataframe_payload = None
        self.text_inputs: list[str] = []

    def text_input(self, label: str, **kwargs) -> str:
        self.text_inputs.append(label)
        return self.query

    def info(self, text: str) -> None:
        self.infos.append(text)

    def subheader(self, text: str) -> None:
        self.subheaders.append(text)

    def dataframe(self, data, **kwargs) -> None:
        self.dataframe_payload = (data, kwargs)


def test_run_refresh_builds_use_case_from_settings(monkeypatch):
    """_run_refresh should wire the feed source and store into the use case."""
    settings = DashboardSettings()
    store = object()
    feed_source = object()
    fake_use_case = MagicMock()
    fake_use_case.run.return_value = "result"

    def _fake_build_feed_source(received):
        assert received is settings
        return feed_source

    def _fake_build_refresh(received_store, received_source):
        assert received_store is store
        assert received_source is feed_source
        return fake_use_case

    monkeypatch.setattr(app, "build_feed_source", _fake_build_feed_source)
    monkeypatch.setattr(app, "build_refresh_use_case", _fake_build_refresh)

    assert app._run_refresh(store, settings) == "result"
    fake_use_case.run.assert_called_once()


def test_refresh_due_after_interval():
    now = datetime(2024, 11, 11, 12, 0, tzinfo=timezone.utc)

    assert app._refresh_due(None, now, 30)
    assert not app._refresh_due(now - timedelta(seconds=10), now, 30)
    assert app._refresh_due(now - timedelta(seconds=30), now, 30)


def test_render_works_filters_and_logs_search(monkeypatch):
    fake_st = _FakeStreamlit(query="acme")
    usage_logger = MagicMock()
    search = MagicMock()
    search.search_works.return_value = [
        WorkRecord("Nov 11, 2024", "Acme", "Logo", Decimal("1500"), "Paid")
    ]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)

    app._render_works(search)

    search.search_works.assert_called_once_with("acme")
    rows, kwargs = fake_st.dataframe_payload
    assert rows[0]["Client"] == "Acme"
    assert rows[0]["Price"] == "₹1,500"
    assert kwargs["hide_index"] is True
    usage_logger.info.assert_called_once()


def test_render_expenses_shows_placeholder_when_empty(monkeypatch):
    fake_st = _FakeStreamlit()
    usage_logger = MagicMock()
    search = MagicMock()
    search.search_expenses.return_value = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)

    app._render_expenses(search)

    assert fake_st.infos == [app.NO_DATA_MESSAGE]
    assert fake_st.dataframe_payload is None
    usage_logger.info.assert_not_called()


def test_client_chart_placeholder_without_clients(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_client_chart(())

    assert fake_st.subheaders == ["Top Clients"]
    assert fake_st.infos == [app.NO_CLIENT_DATA_MESSAGE]


def test_render_dashboard_refreshes_once_per_interval(monkeypatch):
    session_state: dict = {}
    fake_st = MagicMock()
    fake_st.session_state = session_state
    fake_st.columns.side_effect = lambda n: [MagicMock() for _ in range(n)]
    fake_st.tabs.return_value = [MagicMock(), MagicMock(), MagicMock()]
    fake_st.text_input.return_value = ""
    outcome = SimpleNamespace(updated=True, feed="works")
    refresh = MagicMock(
        return_value=SimpleNamespace(works=outcome, expenses=outcome)
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_run_refresh", refresh)
    store = app.build_dashboard_store()
    settings = DashboardSettings(refresh_interval_seconds=3600)

    app._render_dashboard(store, settings)
    app._render_dashboard(store, settings)

    refresh.assert_called_once_with(store, settings)
    assert app.LAST_REFRESH_KEY in session_state
    fake_st.toast.assert_not_called()
    fake_st.tabs.assert_called_with(["Works", "Expenses", "Summary"])
