from datetime import date

from openpyxl import load_workbook

from domain.records import ExportRow
from writers import suggested_filename, write_rows_to_csv, write_rows_to_xlsx

ROWS = [
    ExportRow(date="17.10.2026", name="Elma", unit="kg", magnitude=5),
    ExportRow(date="17.10.2026", name="Çilek, taze", unit="kasa", magnitude=2),
]


def test_write_rows_to_csv():
    result = write_rows_to_csv(ROWS, on=date(2026, 10, 17))

    assert result.csv_bytes.startswith(b"\xef\xbb\xbf")
    lines = result.csv_bytes.decode("utf-8-sig").splitlines()
    assert lines == [
        "Tarih,Ürün,Birim,Miktar",
        "17.10.2026,Elma,kg,5",
        '17.10.2026,"Çilek, taze",kasa,2',
    ]
    assert result.row_count == 2
    assert result.suggested_filename == "siparisler_2026-10-17.csv"


def test_write_rows_to_csv_empty():
    result = write_rows_to_csv([])
    assert result.csv_bytes.decode("utf-8-sig").splitlines() == ["Tarih,Ürün,Birim,Miktar"]


def test_write_rows_to_xlsx(tmp_path):
    path = write_rows_to_xlsx(tmp_path / "out" / "export.xlsx", ROWS)

    ws = load_workbook(path).active
    values = [list(row) for row in ws.iter_rows(values_only=True)]
    assert values == [
        ["Tarih", "Ürün", "Birim", "Miktar"],
        ["17.10.2026", "Elma", "kg", 5],
        ["17.10.2026", "Çilek, taze", "kasa", 2],
    ]


def test_suggested_filename():
    assert suggested_filename(".xlsx", date(2026, 1, 2)) == "siparisler_2026-01-02.xlsx"
