"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, datetime, timezone

import altair as alt
import streamlit as st

from ledger_dashboard.adapters.interface.streamlit.dashboard_view import (
    NO_CLIENT_DATA_MESSAGE,
    NO_DATA_MESSAGE,
    build_client_chart_data,
    build_expenses_table,
    build_works_table,
    format_inr,
    format_month_title,
)
from ledger_dashboard.application.ports.dashboard_store import (
    DashboardStorePort,
)
from ledger_dashboard.application.use_cases.refresh_dashboard import (
    RefreshResult,
)
from ledger_dashboard.application.use_cases.search_records import (
    SearchRecordsUseCase,
)
from ledger_dashboard.domain.models import (
    ClientRevenueEntry,
    DashboardSummary,
)
from ledger_dashboard.infrastructure.container import (
    build_dashboard_store,
    build_feed_source,
    build_refresh_use_case,
    build_search_use_case,
    build_settings,
    build_summary_use_case,
)
from ledger_dashboard.infrastructure.logging.logger import get_usage_logger
from ledger_dashboard.infrastructure.settings import DashboardSettings

LAST_REFRESH_KEY = "last_refresh_at"


@st.cache_resource(show_spinner=False)
def _get_store() -> DashboardStorePort:
    """Return the store shared by every rerun of the app."""
    return build_dashboard_store()


def _run_refresh(
    store: DashboardStorePort,
    settings: DashboardSettings,
) -> RefreshResult:
    """Run one refresh cycle against the configured feeds."""
    use_case = build_refresh_use_case(store, build_feed_source(settings))
    return use_case.run()


def _refresh_due(
    last_refresh: datetime | None,
    now: datetime,
    interval_seconds: float,
) -> bool:
    """Return True when the previous cycle is older than the interval."""
    if last_refresh is None:
        return True
    return (now - last_refresh).total_seconds() >= interval_seconds


def _render_header(summary: DashboardSummary, today: date) -> None:
    """Render the month label and the three header metrics."""
    st.caption(format_month_title(today))
    revenue_col, credit_col, balance_col = st.columns(3)
    revenue_col.metric("Total Revenue", format_inr(summary.total_revenue))
    credit_col.metric("Total Credit", format_inr(summary.total_credit))
    balance_col.metric("Current Balance", format_inr(summary.current_balance))


def _render_table(rows: Sequence[dict[str, str]]) -> None:
    if not rows:
        st.info(NO_DATA_MESSAGE)
        return
    st.dataframe(rows, width="stretch", hide_index=True)


def _log_search(table: str, query: str, matches: int) -> None:
    if query:
        get_usage_logger().info(
            f"search table={table} query={query!r} matches={matches}"
        )


def _render_works(search: SearchRecordsUseCase) -> None:
    """Render the works table with its search box."""
    query = st.text_input(
        "Search works",
        key="search_works",
        placeholder="Client, work or date",
    )
    records = search.search_works(query)
    _log_search("works", query, len(records))
    _render_table(build_works_table(records))


def _render_expenses(search: SearchRecordsUseCase) -> None:
    """Render the expenses table with its search box."""
    query = st.text_input(
        "Search expenses",
        key="search_expenses",
        placeholder="To/from, client or date",
    )
    records = search.search_expenses(query)
    _log_search("expenses", query, len(records))
    _render_table(build_expenses_table(records))


def _render_client_chart(entries: Sequence[ClientRevenueEntry]) -> None:
    """Render a horizontal bar chart of the top clients by revenue."""
    st.subheader("Top Clients")
    if not entries:
        st.info(NO_CLIENT_DATA_MESSAGE)
        return
    data = build_client_chart_data(entries)
    bars = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
        color="#2e7d32",
    ).encode(
        x=alt.X("revenue:Q", title="Revenue (₹)"),
        y=alt.Y("client:N", sort=None, title=None),
        tooltip=[
            alt.Tooltip("client:N"),
            alt.Tooltip("revenue_label:N", title="Revenue"),
            alt.Tooltip("share:Q", title="% of top", format=".1f"),
        ],
    )
    labels = bars.mark_text(align="left", dx=4, color="#e7ecf3").encode(
        text="revenue_label:N"
    )
    st.altair_chart(alt.layer(bars, labels), width="stretch")


def _render_summary(summary: DashboardSummary) -> None:
    """Render the summary tab metrics and chart."""
    revenue_col, credit_col, balance_col, clients_col = st.columns(4)
    revenue_col.metric("Revenue", format_inr(summary.total_revenue))
    credit_col.metric("Credit", format_inr(summary.total_credit))
    balance_col.metric("Balance", format_inr(summary.current_balance))
    clients_col.metric("Clients", summary.client_count)
    _render_client_chart(summary.top_clients)


def _render_dashboard(
    store: DashboardStorePort,
    settings: DashboardSettings,
) -> None:
    """Refresh when due, then render header and tabs."""
    now = datetime.now(timezone.utc)
    if _refresh_due(
        st.session_state.get(LAST_REFRESH_KEY),
        now,
        settings.refresh_interval_seconds,
    ):
        result = _run_refresh(store, settings)
        st.session_state[LAST_REFRESH_KEY] = now
        for outcome in (result.works, result.expenses):
            if not outcome.updated:
                st.toast(f"Could not refresh {outcome.feed}; showing last data")

    summary = build_summary_use_case(store).execute()
    search = build_search_use_case(store)
    _render_header(summary, date.today())

    works_tab, expenses_tab, summary_tab = st.tabs(
        ["Works", "Expenses", "Summary"]
    )
    with works_tab:
        _render_works(search)
    with expenses_tab:
        _render_expenses(search)
    with summary_tab:
        _render_summary(summary)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    settings = build_settings()
    store = _get_store()
    dashboard = st.fragment(run_every=settings.refresh_interval_seconds)(
        _render_dashboard
    )
    dashboard(store, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
