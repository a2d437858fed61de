"""Streamlit building blocks for the order list page."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import streamlit as st

from aggregation.export import build_export_rows
from domain.records import SORT_NAME, SORT_QUANTITY, AggregatedRecord, SortState
from fields.quantity import format_quantity
from interface.formatting import (
    SORT_LABELS,
    duplicate_note,
    empty_state,
    format_badge,
    results_caption,
    sort_indicator,
    total_label,
)
from writers import suggested_filename, write_rows_to_csv, write_rows_to_xlsx

CARD_COLUMNS = 4


def render_header(total_count: int) -> None:
    left, right = st.columns([3, 1])
    with left:
        st.title("🛒 Siparişler")
    with right:
        st.metric(label="Ürünler", value=total_label(total_count))


def render_source_picker() -> Tuple[Optional[object], date]:
    """Uploader plus batch date. Returns (uploaded_file or None, batch_date)."""
    with st.expander("📂 Sipariş dosyası", expanded=False):
        uploaded = st.file_uploader(
            "CSV veya Excel yükleyin",
            type=["csv", "xlsx", "xlsm"],
            accept_multiple_files=False,
        )
        batch_date = st.date_input("Sipariş tarihi", value=date.today(), format="DD.MM.YYYY")
    return uploaded, batch_date


def render_filters(available_dates: Sequence[str]) -> Tuple[str, Optional[str]]:
    """Search box and optional date filter. Returns (search_text, date or None)."""
    search_col, date_col = st.columns([3, 2])
    with search_col:
        search_text = st.text_input("Ürün ara...", key="search_text", placeholder="Ürün ara...")
    with date_col:
        options = ["Tümü"] + list(available_dates)
        choice = st.selectbox("Tarih", options=options, key="date_choice")
    return search_text, (None if choice == "Tümü" else choice)


def render_sort_buttons(state: SortState) -> Optional[str]:
    """Return the column whose sort button was clicked, if any."""
    clicked = None
    cols = st.columns(2)
    for col, column in zip(cols, (SORT_NAME, SORT_QUANTITY)):
        with col:
            active = state.column == column and state.active
            label = f"{sort_indicator(state, column)} {SORT_LABELS[column]}"
            if st.button(label, key=f"sort_{column}", type="primary" if active else "secondary", width="stretch"):
                clicked = column
    return clicked


def render_cards(records: Sequence[AggregatedRecord], search_text: str) -> None:
    if not records:
        title, message = empty_state(search_text)
        st.info(f"📦 **{title}**\n\n{message}")
        return

    for start in range(0, len(records), CARD_COLUMNS):
        row: List = st.columns(CARD_COLUMNS)
        for col, record in zip(row, records[start:start + CARD_COLUMNS]):
            with col:
                with st.container(border=True):
                    st.caption(format_badge(record.id))
                    st.markdown(f"**{record.name}**")
                    st.markdown(f"Miktar: **{format_quantity(record.quantity_text)}**")
                    note = duplicate_note(record)
                    if note:
                        st.warning(f"⚠️ {note}")

    caption = results_caption(search_text, len(records))
    if caption:
        st.caption(caption)


def render_download_buttons(records: Sequence[AggregatedRecord]) -> None:
    if not records:
        return

    export_rows = build_export_rows(records)
    csv_col, xlsx_col = st.columns(2)

    with csv_col:
        result = write_rows_to_csv(export_rows)
        st.download_button(
            label="📥 CSV indir",
            data=result.csv_bytes,
            file_name=result.suggested_filename,
            mime="text/csv",
            width="stretch",
            key="download_csv",
        )

    with xlsx_col:
        output_path = Path(tempfile.gettempdir()) / suggested_filename(".xlsx")
        write_rows_to_xlsx(output_path, export_rows)
        with open(output_path, "rb") as f:
            st.download_button(
                label="📥 Excel indir",
                data=f.read(),
                file_name=output_path.name,
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                width="stretch",
                key="download_xlsx",
            )
