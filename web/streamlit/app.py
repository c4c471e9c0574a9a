"""Policy Space Coalition Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import polars as pl  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from policy_space.container import container  # noqa: E402
from settings import GRID_STEP  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web import charts  # noqa: E402
from web.api import coalitions  # noqa: E402

setup_logging(to_file=False)

# Ensure container is initialized
container.init()

st.set_page_config(page_title="Policy Space", page_icon="🏛️", layout="wide")

STEPS = [0.05, 0.1, 0.2, 0.25, 0.5]


@st.cache_data(show_spinner="Sampling policy space...")
def get_model_data(step: float):
    """Get all views for one grid step."""
    logger.info("Loading model data for step {}", step)

    parties = coalitions.get_parties(step)
    return {
        "parties": parties.model_dump(),
        "grid": coalitions.get_grid(step).model_dump(),
        "ranking": [c.model_dump() for c in coalitions.get_coalitions(step).items],
        "buckets": [c.model_dump() for c in coalitions.get_coalitions(step, majority_only=False).items],
        "report": coalitions.get_report(step).text,
    }


def space_tab(data: dict):
    """Policy space tab."""
    parties = data["parties"]

    st.subheader("🧭 Indifference Circles")
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(
            charts.positions_chart(parties["items"], (parties["pivot_x"], parties["pivot_y"])),
            width="stretch",
        )
    with col2:
        st.plotly_chart(
            charts.majority_chart(data["grid"], "Majority-held points (covering seats)"),
            width="stretch",
        )


def coalitions_tab(data: dict):
    """Coalition ranking tab."""
    ranking = data["ranking"]

    if not ranking:
        st.info("No majority coalition shares common ground anywhere on the grid.")
        return

    st.subheader("🤝 Majority Coalitions by Area Share")
    st.plotly_chart(charts.coalition_chart(ranking), width="stretch")

    for i, c in enumerate(ranking[:5]):
        parties_str = " + ".join(c["parties"])
        st.write(f"{i + 1}. **{parties_str}**: {c['seats']} seats, {c['percent']:.1f}% of the space")

    with st.expander("All covering sets"):
        st.dataframe(pl.DataFrame(data["buckets"]), width="stretch")


def main():
    st.title("🏛️ Policy Space Coalitions")
    st.markdown("*Which governing coalitions do all their members find acceptable, and where?*")

    default = GRID_STEP if GRID_STEP in STEPS else STEPS[1]
    step = st.sidebar.select_slider("Grid step", options=STEPS, value=default)

    with st.spinner("Running model..."):
        data = get_model_data(step)

    parties = data["parties"]

    # Metrics
    cols = st.columns(4)
    cols[0].metric("Total Seats", parties["total_seats"])
    cols[1].metric("Majority", parties["threshold"])
    cols[2].metric("Pivot", f"({parties['pivot_x']:.1f}, {parties['pivot_y']:.1f})")
    cols[3].metric("Grid Points", data["grid"]["num_x"] * data["grid"]["num_y"])

    st.info(data["report"])

    tab1, tab2, tab3 = st.tabs(["🧭 Policy Space", "🤝 Coalitions", "📋 Parties"])

    with tab1:
        space_tab(data)

    with tab2:
        coalitions_tab(data)

    with tab3:
        st.dataframe(pl.DataFrame(parties["items"]), width="stretch")
        pivots = parties["pivot_parties"]
        st.write(f"Pivot parties: **{pivots['lr']}** (economic), **{pivots['conlib']}** (moral)")


if __name__ == "__main__":
    main()
