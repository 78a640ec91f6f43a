# app.py
import asyncio

import altair as alt
import streamlit as st

from plots import GALLERY

# ----------------- Page setup -----------------
st.set_page_config(page_title="Plot Gallery", page_icon="📈", layout="wide")
st.title("📈 Plot Gallery")
st.caption("Tables built with pandas, charts declared with Altair.")

# ----------------- Helpers -----------------
def chart_tables(chart):
    """Data frames behind a chart, one per layer that carries its own data."""
    layers = chart.layer if isinstance(chart, alt.LayerChart) else [chart]
    return [layer.data for layer in layers if layer.data is not alt.Undefined]

# ----------------- Sidebar Controls -----------------
st.sidebar.header("Examples")
choice = st.sidebar.radio("Choose a plot", list(GALLERY.keys()), index=0)
show_data = st.sidebar.checkbox("Show data", value=False)

# ----------------- Plot -----------------
try:
    chart = asyncio.run(GALLERY[choice]())
except Exception as e:
    st.error(f"Could not build **{choice}**: {e}")
    st.stop()

st.subheader(choice)
st.altair_chart(chart, width="stretch")

if show_data:
    with st.expander("Data", expanded=True):
        for table in chart_tables(chart):
            st.dataframe(table, width="stretch", hide_index=True)

st.divider()
st.caption("Tip: run me from the repository root so `data/gistemp.csv` can be found. "
           "That file is an illustrative sample (one row every five years), not official GISTEMP data.")
