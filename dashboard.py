#!/usr/bin/env python3
"""
Movie Log Dashboard
Single-file Streamlit application over a checklist movie log.

Run:  streamlit run dashboard.py
"""

import sys
import pandas as pd
import streamlit as st
import plotly.graph_objects as go
from pathlib import Path

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BAND_COLORS = {
    'rating-10':  '#7B2CBF',
    'rating-9':   '#C44E52',
    'rating-8':   '#DD8452',
    'rating-7':   '#55A868',
    'rating-6':   '#4C72B0',
    'rating-lt6': '#8C8C8C',
}

BUCKET_COLORS = ['#C44E52', '#DD8452', '#55A868', '#4C72B0', '#8C8C8C']

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Movie Log",
    page_icon="\U0001F3AC",
    layout="wide",
)

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from movielog.config import ConfigError, load_config  # noqa: E402
from movielog.display import format_rating, rating_band, shows_rating  # noqa: E402
from movielog.parser import MovieLog  # noqa: E402
from movielog.source import load_movie_log  # noqa: E402
from movielog.stats import compute_stats  # noqa: E402
from movielog.views import Divider, ranked, timeline, watchlist_sections  # noqa: E402


# ---------------------------------------------------------------------------
# Data loading
# ---------------------------------------------------------------------------

@st.cache_data
def load_log(source: str, timeout: float) -> MovieLog:
    """Fetch and parse once per source; the log does not change during a session."""
    return load_movie_log(source, timeout=timeout)


def entries_frame(entries) -> pd.DataFrame:
    """Tabular form of entries for st.dataframe"""
    rows = [{
        'Title': e.title,
        'Rating': format_rating(e.rating) if shows_rating(e) else '',
        'Watched': e.watched,
    } for e in entries]
    return pd.DataFrame(rows, columns=['Title', 'Rating', 'Watched'])


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def _entry_markdown(entry) -> str:
    box = '☑' if entry.watched else '☐'
    line = f"{box} {entry.title}"
    if shows_rating(entry):
        color = BAND_COLORS.get(rating_band(entry.rating), '#8C8C8C')
        line += f' &nbsp; <span style="color:{color}"><b>{format_rating(entry.rating)}/10</b></span>'
    return line


def render_timeline(sections, include_current: bool):
    if not any(s.items for s in sections):
        st.info("No movies to show.")
        return
    for row in timeline(sections, include_current):
        if isinstance(row, Divider):
            st.divider()
            st.caption(row.label)
        else:
            st.markdown(_entry_markdown(row), unsafe_allow_html=True)


def render_ranked(entries):
    ranked_entries = ranked(entries)
    if not ranked_entries:
        st.info("No rated movies yet.")
        return
    df = entries_frame(ranked_entries).drop(columns=['Watched'])
    df.index = range(1, len(df) + 1)
    st.dataframe(df, use_container_width=True)


def render_stats(entries, top_n: int):
    stats = compute_stats(entries, top_n=top_n)

    cols = st.columns(3)
    cols[0].metric("Watched", stats.watched_count)
    cols[1].metric("Watchlist", stats.unwatched_count)
    cols[2].metric("Average Rating", format_rating(stats.average_rating))

    st.divider()
    left, right = st.columns(2)

    with left:
        st.subheader(f"Top {top_n}")
        if stats.top:
            df = entries_frame(stats.top).drop(columns=['Watched'])
            df.index = range(1, len(df) + 1)
            st.dataframe(df, use_container_width=True)
        else:
            st.info("No rated movies yet.")

    with right:
        st.subheader("Rating Distribution")
        labels = list(stats.distribution.keys())
        counts = list(stats.distribution.values())
        fig = go.Figure(data=[go.Bar(
            y=labels, x=counts,
            orientation='h',
            marker_color=BUCKET_COLORS[:len(labels)],
            text=counts,
            textposition='inside',
            hovertemplate='%{y}: %{x} movies<extra></extra>',
        )])
        fig.update_layout(
            height=320, margin=dict(t=10, b=30, l=10, r=10),
            showlegend=False,
            yaxis=dict(autorange='reversed'),
        )
        st.plotly_chart(fig, use_container_width=True)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main():
    st.title("\U0001F3AC Movie Log")

    try:
        config = load_config(PROJECT_ROOT / 'config.yaml')
    except ConfigError as e:
        st.error(str(e))
        return

    source = st.sidebar.text_input("Movie log (path or URL)", value=str(config['source']))
    include_current = st.sidebar.checkbox("Show CURRENT marker", value=bool(config['include_current']))
    top_n = st.sidebar.number_input("Top N", min_value=1, max_value=100, value=int(config['top_n']))

    log = load_log(source, float(config['timeout']))
    if not log.entries:
        st.warning(f"No movies found in {source}")

    tab_all, tab_ranked, tab_watchlist, tab_stats = st.tabs(["All", "Ranked", "Watchlist", "Stats"])

    with tab_all:
        render_timeline(log.sections, include_current)

    with tab_ranked:
        render_ranked(log.entries)

    with tab_watchlist:
        render_timeline(watchlist_sections(log.sections), include_current)

    with tab_stats:
        render_stats(log.entries, int(top_n))


main()
