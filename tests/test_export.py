from aggregation.aggregator import aggregate
from aggregation.export import EXPORT_HEADERS, build_export_rows, format_display_date


def test_export_rows_have_four_fields_in_order(make_records):
    records = aggregate(make_records(("Elma", "2 kg"), ("Elma", "3 kg"), ("Maydanoz", "demet")))
    rows = build_export_rows(records)

    assert [r.as_tuple() for r in rows] == [
        ("17.10.2026", "Elma", "kg", 5),
        ("17.10.2026", "Maydanoz", "demet", 0),
    ]
    assert len(EXPORT_HEADERS) == 4


def test_export_rows_accept_custom_date_formatter(make_records):
    rows = build_export_rows(aggregate(make_records(("Elma", "2 kg"))), date_formatter=lambda d: f"<{d}>")
    assert rows[0].date == "<2026-10-17>"


def test_format_display_date():
    assert format_display_date("2026-10-17") == "17.10.2026"
    assert format_display_date("") == ""
    assert format_display_date(None) == ""
    assert format_display_date("dün") == "dün"


def test_export_empty():
    assert build_export_rows([]) == []
