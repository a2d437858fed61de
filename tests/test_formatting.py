from domain.records import AggregatedRecord, SortState
from interface.formatting import (
    TABLE_COLUMNS,
    duplicate_note,
    empty_state,
    format_badge,
    records_frame,
    results_caption,
    sort_indicator,
    total_label,
)


def _record(**overrides):
    values = dict(id=7, name="Elma", quantity_text="2 kg 3 kg", date="2026-10-17", group_key="k", duplicate_count=1)
    values.update(overrides)
    return AggregatedRecord(**values)


def test_format_badge_pads_to_three_digits():
    assert format_badge(1) == "#001"
    assert format_badge(42) == "#042"
    assert format_badge(1234) == "#1234"


def test_sort_indicator():
    state = SortState("name", "asc")
    assert sort_indicator(state, "name") == "↑"
    assert sort_indicator(state, "quantity") == "↕"
    assert sort_indicator(SortState("quantity", "desc"), "quantity") == "↓"
    assert sort_indicator(SortState("quantity", "none"), "quantity") == "↕"


def test_captions_and_empty_states():
    assert total_label(3) == "Toplam 3 Ürün"
    assert results_caption("", 4) is None
    assert results_caption("elma", 2) == '"elma" için 2 sonuç bulundu'
    assert empty_state("elma")[0] == "Ürün bulunamadı"
    assert empty_state("")[0] == "Henüz ürün yok"


def test_duplicate_note():
    assert duplicate_note(_record()) == ""
    assert duplicate_note(_record(duplicate_count=3)) == "3 farklı miktar"


def test_records_frame():
    df = records_frame([_record(), _record(id=12, name="Armut", quantity_text="1 adet", duplicate_count=2)])

    assert list(df.columns) == TABLE_COLUMNS
    assert df.iloc[0].to_dict() == {"No": "#007", "Ürün": "Elma", "Miktar": "5 kg", "Tarih": "17.10.2026", "Tekrar": ""}
    assert df.iloc[1]["Tekrar"] == "2 farklı miktar"
    assert records_frame([]).empty
