"""Rowbot report style gallery.

Run with:
    streamlit run streamlit_app/app.py

Renders the sample workouts (or an uploaded logbook result JSON) in every
report style, exactly as the webhook service would post them.
"""

from __future__ import annotations

import json

import streamlit as st

from logbook_client import LogbookDataError, map_result
from row_report import STYLES, RenderError, build_report_plan, render_workout_report
from row_report.layout.styles import DEFAULT_STYLE
from row_report.normalizer import normalize

from helpers import (
    SAMPLE_RESULTS,
    canvas_size,
    format_spread,
    pace_spread,
    rows_frame,
    summary_time,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Rowbot Report Gallery",
    page_icon="🚣",
    layout="wide",
)


@st.cache_data
def _render(sample: str, style: str, username: str) -> bytes:
    return render_workout_report(SAMPLE_RESULTS[sample](), style=style, username=username)


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

st.sidebar.title("Workout")
source = st.sidebar.radio("Source", ["Sample", "Upload JSON"], horizontal=True)
username = st.sidebar.text_input("Username", value="rower")

raw = None
sample_name = None
if source == "Sample":
    sample_name = st.sidebar.selectbox("Sample workout", list(SAMPLE_RESULTS))
    raw = SAMPLE_RESULTS[sample_name]()
else:
    uploaded = st.sidebar.file_uploader("Logbook result (.json)", type=["json"])
    if uploaded is not None:
        try:
            raw = map_result(json.load(uploaded))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            st.sidebar.error(f"Not valid JSON: {exc}")
        except LogbookDataError as exc:
            st.sidebar.error(f"Not a logbook result: {exc}")

style_names = list(STYLES)
show_all = st.sidebar.checkbox("Show all styles", value=False)
if not show_all:
    selected = [
        st.sidebar.selectbox("Style", style_names, index=style_names.index(DEFAULT_STYLE))
    ]
else:
    selected = style_names

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

st.title("Report Gallery")

if raw is None:
    st.info("Pick a sample workout or upload a logbook result to preview the report.")
    st.stop()

rows = normalize(raw)

col1, col2, col3, col4 = st.columns(4)
col1.metric("Distance", f"{raw.distance} m")
col2.metric("Time", summary_time(raw))
col3.metric("Rows", len(rows))
col4.metric("Pace spread", format_spread(pace_spread(raw)))

tab_images, tab_table, tab_plan = st.tabs(["Report", "Table", "Layout plan"])

with tab_images:
    columns = st.columns(min(len(selected), 2))
    for i, style_name in enumerate(selected):
        with columns[i % len(columns)]:
            style = STYLES[style_name]
            try:
                if sample_name is not None:
                    image = _render(sample_name, style_name, username)
                else:
                    image = render_workout_report(raw, style=style, username=username)
            except RenderError as exc:
                st.error(f"{style_name}: {exc}")
                continue
            st.image(image, caption=f"{style_name} · {canvas_size(style, rows)}")
            st.download_button(
                "Download PNG",
                data=image,
                file_name=f"row-results-{style_name}.png",
                mime="image/png",
                key=f"download_{style_name}",
            )

with tab_table:
    st.dataframe(rows_frame(rows), hide_index=True, use_container_width=True)

with tab_plan:
    plan_style = st.selectbox("Plan for style", selected, key="plan_style")
    plan = build_report_plan(raw, plan_style, username)
    st.caption(
        f"{plan.width} x {plan.height} px · rows start at y={plan.rows_top} · "
        f"footer at y={plan.footer_top} · {len(plan.elements)} draw operations"
    )
    with st.expander("Draw operations"):
        for op in plan.elements:
            st.text(repr(op))
