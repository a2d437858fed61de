from fields.normalization import normalize_records, resolve_field


def test_normalize_accepts_either_header_casing():
    rows = [
        {"ürün": "Elma", "miktar": "2 kg"},
        {"Ürün": "Armut", "Miktar": "1 adet"},
    ]
    records = normalize_records(rows, date="2026-10-17")

    assert [(r.id, r.name, r.quantity_text, r.date) for r in records] == [
        (1, "Elma", "2 kg", "2026-10-17"),
        (2, "Armut", "1 adet", "2026-10-17"),
    ]


def test_normalize_trims_and_drops_incomplete_rows():
    rows = [
        {"ürün": "  Domates ", "miktar": " 5 kg "},
        {"ürün": "", "miktar": "3 kasa"},
        {"ürün": "Biber", "miktar": "   "},
        {"ürün": None, "miktar": None},
        {"ürün": "Patates", "miktar": "10 kg"},
    ]
    records = normalize_records(rows)

    assert [r.name for r in records] == ["Domates", "Patates"]
    assert records[0].quantity_text == "5 kg"
    # ids follow input position, dropped rows included
    assert [r.id for r in records] == [1, 5]
    assert all(r.date == "" for r in records)


def test_resolve_field_prefers_first_non_empty_alias():
    row = {"ürün": "", "Ürün": "Kiraz"}
    assert resolve_field(row, ("ürün", "Ürün")) == "Kiraz"
    assert resolve_field({"ürün": "Elma", "Ürün": "Kiraz"}, ("ürün", "Ürün")) == "Elma"
    assert resolve_field({}, ("ürün", "Ürün")) == ""


def test_resolve_field_whitespace_value_still_wins():
    row = {"ürün": "  ", "Ürün": "Kiraz"}
    assert resolve_field(row, ("ürün", "Ürün")) == ""


def test_normalize_empty_input():
    assert normalize_records([]) == []
