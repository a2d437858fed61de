"""
Display helpers shared by the Streamlit app and the CLI.

Nothing here touches Streamlit, so the wording of badges, captions and
empty states can be tested on its own.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pandas as pd

from aggregation.export import format_display_date
from domain.records import SORT_ASC, SORT_DESC, AggregatedRecord, SortState
from fields.quantity import format_quantity

SORT_LABELS = {"name": "İsme Göre", "quantity": "Miktara Göre"}

TABLE_COLUMNS = ["No", "Ürün", "Miktar", "Tarih", "Tekrar"]


def format_badge(record_id: int) -> str:
    return f"#{record_id:03d}"


def total_label(count: int) -> str:
    return f"Toplam {count} Ürün"


def sort_indicator(state: SortState, column: str) -> str:
    if state.column != column:
        return "↕"
    if state.direction == SORT_ASC:
        return "↑"
    if state.direction == SORT_DESC:
        return "↓"
    return "↕"


def results_caption(search_text: str, count: int) -> Optional[str]:
    if not search_text:
        return None
    return f'"{search_text}" için {count} sonuç bulundu'


def empty_state(search_text: str) -> Tuple[str, str]:
    """Title and message for an empty list."""
    if search_text:
        return "Ürün bulunamadı", "Arama kriterlerinize uygun ürün bulunamadı."
    return "Henüz ürün yok", "Envantere ürün eklenmeyi bekliyor."


def duplicate_note(record: AggregatedRecord) -> str:
    if not record.is_duplicate:
        return ""
    return f"{record.duplicate_count} farklı miktar"


def records_frame(records: Sequence[AggregatedRecord]) -> pd.DataFrame:
    """Tabular form of the view for st.dataframe and CLI output."""
    return pd.DataFrame(
        [
            {
                "No": format_badge(r.id),
                "Ürün": r.name,
                "Miktar": format_quantity(r.quantity_text),
                "Tarih": format_display_date(r.date),
                "Tekrar": duplicate_note(r),
            }
            for r in records
        ],
        columns=TABLE_COLUMNS,
    )
