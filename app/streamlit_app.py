"""
Token Bloom — Premium Token Growth Dashboard
============================================

Two ways in:
  1. Step-by-Step Guide:  five-step walkthrough of a single month
  2. Advanced Simulator:  full parameter set, multi-month projection, charts

Both call engine.project; nothing here re-implements the pool math.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_TOKEN_ID, SimulationParameters, default_parameters
from core.errors import SimulationError
from core.utils import format_currency, format_percent, format_rate

from engine.pool import estimate_initial_pool_size
from engine.projection import ProjectionResult, project

from inputs.validators import validate_parameters

from reports.metrics import summarize_projection
from reports.tables import format_month_table, projection_to_frame

from wizard.labels import token_labels
from wizard.stepper import (
    LAST_STEP,
    STEP_TITLES,
    StepValidationError,
    WizardStep,
    advance,
    new_wizard,
    rate_increase,
    retreat,
)

logger = logging.getLogger(__name__)

WIZARD_KEY = "wizard_state"
TOKEN_ID_KEY = "token_id"
WALKTHROUGH_KEY = "walkthrough_result"

# (min, max) of the sidebar inputs, matching the original form fields
INPUT_RANGES = {
    "monthly_revenue": (1_000.0, 10_000_000.0),
    "on_chain_sales_percent": (0.0, 100.0),
    "monthly_revenue_increase": (0.0, 100.0),
    "revenue_share": (0.0, 100.0),
    "months": (1, 60),
}


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_line(df, *, x, y, title, y_title, y_format=",.2f", height=300):
    if not isinstance(df, pd.DataFrame) or len(df) == 0 or x not in df.columns or y not in df.columns:
        st.info("No data to plot.")
        return
    chart = (
        alt.Chart(df[[x, y]]).mark_line(point=True)
        .encode(
            x=alt.X(f"{x}:O", title="Month"),
            y=alt.Y(f"{y}:Q", title=y_title, axis=alt.Axis(format=y_format)),
            tooltip=[x, alt.Tooltip(f"{y}:Q", format=y_format)],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_pool(df, *, height=300):
    """Pool size as a line with the monthly top-up as bars underneath."""
    if not isinstance(df, pd.DataFrame) or len(df) == 0:
        return
    base = alt.Chart(df).encode(x=alt.X("month:O", title="Month"))
    bars = base.mark_bar(opacity=0.4).encode(
        y=alt.Y("pool_top_up:Q", title="Monthly Pool Top Up ($)", axis=alt.Axis(format=",.0f")),
    )
    line = base.mark_line(point=True, strokeWidth=2).encode(
        y=alt.Y("pool_size:Q", title="Pool Size ($)", axis=alt.Axis(format=",.0f")),
    )
    chart = (
        alt.layer(bars, line).resolve_scale(y="independent")
        .properties(title="Pool Size and Monthly Top Up", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Shared projection display
# ---------------------------------------------------------------------------
def _display_projection(result: ProjectionResult, premium_label: str):
    summary = summarize_projection(result)

    k1, k2, k3, k4 = st.columns(4)
    k1.metric(f"Final {premium_label} Rate", format_rate(summary.final_token_rate),
              delta=format_percent(summary.rate_change_pct))
    k2.metric("APY", format_percent(summary.apy))
    k3.metric("Final Pool Size", format_currency(summary.final_pool_size))
    k4.metric("Total Top Up", format_currency(summary.total_pool_top_up))

    for flag in summary.flags:
        st.warning(flag)

    df = projection_to_frame(result)
    left, right = st.columns(2)
    with left:
        _plot_line(df, x="month", y="token_rate",
                   title=f"{premium_label} Token Rate", y_title="Rate ($)")
    with right:
        _plot_pool(df)

    st.markdown("**Monthly Projection**")
    st.dataframe(format_month_table(result), use_container_width=True, hide_index=True)

    with st.expander("Summary", expanded=False):
        st.dataframe(summary.to_dataframe(), use_container_width=True, hide_index=True)


def _model_explanation():
    with st.expander("How it works", expanded=False):
        st.markdown(
            "Premium tokens appreciate as a share of revenue from on-chain product "
            "sales is contributed to a pool. Each month:\n\n"
            "- **Product Sales** = Monthly Revenue × On-Chain Sales %\n"
            "- **Revenue Share** = Product Sales × Revenue Share %\n"
            "- **Pool Size** = Previous Pool Size + Revenue Share\n"
            "- **Token Rate** = Pool Size ÷ Premium Token Emission\n"
            "- **APY** = ((Final Rate ÷ Initial Rate) − 1) × 100 × (12 ÷ months)\n\n"
            "APY rescales the growth seen over the horizon linearly to twelve "
            "months; it is not a compounded yield."
        )


# ---------------------------------------------------------------------------
# Step-by-step guide
# ---------------------------------------------------------------------------
def _render_wizard(labels):
    state = st.session_state.get(WIZARD_KEY)
    if state is None:
        state = new_wizard()

    st.progress(state.progress, text=f"Step {int(state.step)} of {int(LAST_STEP)}")
    st.subheader(STEP_TITLES[state.step])

    if state.step == WizardStep.REVENUE:
        text = st.text_input("Your revenue is ($ / month):", value=state.revenue_text)
        state = state.with_inputs(revenue_text=text)

    elif state.step == WizardStep.REVENUE_SHARE:
        st.caption(f"Your monthly revenue: {state.revenue_text}")
        text = st.text_input("Share this percentage of revenue (%):", value=state.revenue_share_text)
        state = state.with_inputs(revenue_share_text=text)

    elif state.result is not None:
        first = state.result.months[0]
        if state.step == WizardStep.POOL_TOP_UP:
            st.markdown("Based on your inputs, the revenue share has topped up the pool with:")
            st.metric("Pool Top Up", f"{first.revenue_share_amount:,.2f} {labels.basic}")
        elif state.step == WizardStep.POOL_SIZE:
            st.markdown("The pool has been increased to:")
            st.metric("Pool Size", f"{first.pool_size:,.2f} {labels.basic}")
        elif state.step == WizardStep.RATE_INCREASE:
            inc = rate_increase(state.result)
            st.markdown(f"The premium token ({labels.premium}) rate has increased:")
            st.metric(
                "Token Rate",
                f"{format_rate(state.result.initial_token_rate)} → {format_rate(inc.new_rate)}",
                delta=f"+{inc.increase_pct:.1f}% / ~{inc.apy:.2f}% APY",
            )
            st.caption("This is just for one month. Over a year, the growth can be substantial.")
        st.dataframe(format_month_table(state.result, show_all_months=False),
                     use_container_width=True, hide_index=True)

    st.session_state[WIZARD_KEY] = state

    back_col, next_col = st.columns([1, 1])
    with back_col:
        if st.button("Back", disabled=state.step == WizardStep.REVENUE):
            st.session_state[WIZARD_KEY] = retreat(state)
            st.rerun()
    with next_col:
        label = "Complete" if state.step == LAST_STEP else "Next"
        if st.button(label, type="primary", disabled=state.completed):
            try:
                st.session_state[WIZARD_KEY] = advance(state)
            except StepValidationError as exc:
                st.error(str(exc))
            else:
                st.rerun()

    if state.completed and state.result is not None:
        st.success("Walkthrough complete. Open the Advanced Simulator to project further.")
        st.session_state[WALKTHROUGH_KEY] = state.result
        if st.button("Start over"):
            st.session_state[WIZARD_KEY] = new_wizard()
            st.session_state.pop(WALKTHROUGH_KEY, None)
            st.rerun()


# ---------------------------------------------------------------------------
# Advanced simulator
# ---------------------------------------------------------------------------
def _sidebar_parameters() -> SimulationParameters:
    defaults = default_parameters()

    st.sidebar.title("Simulation Parameters")
    monthly_revenue = st.sidebar.number_input(
        "Monthly Revenue ($)", *INPUT_RANGES["monthly_revenue"],
        value=defaults.monthly_revenue, step=1_000.0,
    )
    on_chain = st.sidebar.slider(
        "On-Chain Sales (%)", *INPUT_RANGES["on_chain_sales_percent"],
        value=defaults.on_chain_sales_percent, step=1.0,
    )
    increase = st.sidebar.slider(
        "Monthly Revenue Increase (%)", *INPUT_RANGES["monthly_revenue_increase"],
        value=defaults.monthly_revenue_increase, step=0.5,
    )
    share = st.sidebar.slider(
        "Revenue Share (%)", *INPUT_RANGES["revenue_share"],
        value=defaults.revenue_share, step=0.5,
    )
    months = st.sidebar.slider(
        "Months", *INPUT_RANGES["months"], value=defaults.months, step=1,
    )

    with st.sidebar.expander("Pool & Emission", expanded=False):
        emission = st.number_input(
            "Premium Token Emission", min_value=1.0,
            value=defaults.premium_token_emission, step=1_000.0,
        )
        suggested = estimate_initial_pool_size(monthly_revenue, on_chain, premium_token_emission=emission)
        use_suggested = st.checkbox("Use suggested initial pool", value=True,
                                    help=f"Suggested: {format_currency(suggested)}")
        initial_pool = suggested if use_suggested else st.number_input(
            "Initial Pool Size ($)", min_value=0.0, value=float(emission), step=1_000.0,
        )
        fallback = st.selectbox(
            "Empty pool policy", ["emission", "none"],
            help="'emission' seeds an empty pool with the emission so the rate opens at 1.00.",
        )

    return defaults.with_updates(
        monthly_revenue=float(monthly_revenue),
        on_chain_sales_percent=float(on_chain),
        monthly_revenue_increase=float(increase),
        revenue_share=float(share),
        months=int(months),
        premium_token_emission=float(emission),
        initial_pool_size=float(initial_pool),
        pool_size_fallback=fallback,
    )


def _render_simulator(params: SimulationParameters, labels):
    validation = validate_parameters(params)
    if not validation.is_valid:
        for err in validation.errors:
            st.error(err)
        return

    try:
        result = project(params)
    except SimulationError as exc:
        logger.warning("Projection rejected: %s", exc)
        st.error(str(exc))
        return

    _display_projection(result, labels.premium)
    _model_explanation()

    walkthrough = st.session_state.get(WALKTHROUGH_KEY)
    if walkthrough is not None:
        with st.expander("Walkthrough result (1 month)", expanded=False):
            st.dataframe(format_month_table(walkthrough), use_container_width=True, hide_index=True)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Token Bloom Simulator", layout="wide")

    st.title("Token Bloom Simulator")
    st.caption(
        "Visualize premium token rate growth based on revenue share "
        "from digital product sales on-chain."
    )

    token_id = st.text_input("Token ID", value=st.session_state.get(TOKEN_ID_KEY, DEFAULT_TOKEN_ID))
    st.session_state[TOKEN_ID_KEY] = token_id
    labels = token_labels(token_id)

    params = _sidebar_parameters()

    guide_tab, sim_tab = st.tabs(["Step-by-Step Guide", "Advanced Simulator"])
    with guide_tab:
        _render_wizard(labels)
    with sim_tab:
        _render_simulator(params, labels)


if __name__ == "__main__":
    main()
