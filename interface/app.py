# interface/app.py
"""
Order List - Main Application

Streamlit page that loads an order sheet, merges repeated lines and shows
a searchable, sortable product grid with CSV/Excel export.

Run with:  streamlit run interface/app.py
"""

from pathlib import Path

import streamlit as st

from aggregation.duplicates import duplicate_names
from aggregation.view import compute_view, default_sort_state, next_sort_state
from config.logging import configure_logging
from config.settings import DEFAULT_INPUT_PATH, LOG_LEVEL
from domain.records import ViewParams
from interface.components import (
    render_cards,
    render_download_buttons,
    render_filters,
    render_header,
    render_sort_buttons,
    render_source_picker,
)
from interface.processor import load_batch

configure_logging(LOG_LEVEL)

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Siparişler",
    page_icon="🛒",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "records" not in st.session_state:
    st.session_state.records = None
if "load_error" not in st.session_state:
    st.session_state.load_error = None
if "sort_state" not in st.session_state:
    st.session_state.sort_state = default_sort_state()
if "loaded_source" not in st.session_state:
    st.session_state.loaded_source = None

# ============================================================================
# LOADING
# ============================================================================
uploaded_file, batch_date = render_source_picker()

source_id = (uploaded_file.name, uploaded_file.size, batch_date) if uploaded_file else (str(DEFAULT_INPUT_PATH), batch_date)

if st.session_state.loaded_source != source_id:
    with st.spinner("Ürünler yükleniyor..."):
        if uploaded_file:
            success, records, error = load_batch(uploaded_file.getvalue(), batch_date, filename=uploaded_file.name)
        else:
            success, records, error = load_batch(Path(DEFAULT_INPUT_PATH), batch_date)

    st.session_state.records = records if success else None
    st.session_state.load_error = error
    st.session_state.loaded_source = source_id

if st.session_state.load_error:
    st.error(f"**Hata Oluştu**\n\n{st.session_state.load_error}")
    st.stop()

records = st.session_state.records or []

# ============================================================================
# VIEW
# ============================================================================
render_header(len(records))

available_dates = sorted({r.date for r in records if r.date})
search_text, date_filter = render_filters(available_dates)

clicked = render_sort_buttons(st.session_state.sort_state)
if clicked:
    st.session_state.sort_state = next_sort_state(st.session_state.sort_state, clicked)
    st.rerun()

view = compute_view(
    records,
    ViewParams(date=date_filter, search_text=search_text, sort=st.session_state.sort_state),
)

repeated = duplicate_names(view.records)
if repeated:
    st.warning("Birden fazla miktarla listelenen ürünler: " + ", ".join(repeated))

render_cards(view.records, search_text)

# ============================================================================
# EXPORT
# ============================================================================
st.divider()
render_download_buttons(view.records)
