import pytest
from openpyxl import Workbook

import input_readers.csv_reader as csv_reader_module
import input_readers.excel as excel_module
from input_readers import LoadError, load_rows, read_csv_rows, read_excel
from interface.processor import load_batch


def test_read_csv_rows_returns_strings(tmp_path):
    path = tmp_path / "urunler.csv"
    path.write_text("Ürün,Miktar\nElma,2 kg\n\nArmut,12\n", encoding="utf-8")

    rows = read_csv_rows(path)

    assert rows == [{"Ürün": "Elma", "Miktar": "2 kg"}, {"Ürün": "Armut", "Miktar": "12"}]


def test_read_csv_rows_handles_bom_and_bytes():
    data = "ürün,miktar\nDomates,5 kg\nBiber,\n".encode("utf-8-sig")
    rows = read_csv_rows(data)

    assert rows[0] == {"ürün": "Domates", "miktar": "5 kg"}
    assert rows[1]["miktar"] == ""


def test_read_csv_rows_missing_file(tmp_path):
    with pytest.raises(LoadError, match="CSV dosyası bulunamadı"):
        read_csv_rows(tmp_path / "yok.csv")


def test_read_csv_rows_empty_file(tmp_path):
    path = tmp_path / "bos.csv"
    path.write_bytes(b"")
    with pytest.raises(LoadError, match="okunurken hata"):
        read_csv_rows(path)


def test_read_excel_stringifies_cells(tmp_path):
    path = tmp_path / "siparis.xlsx"
    wb = Workbook()
    ws = wb.active
    ws.append(["ürün", "miktar"])
    ws.append(["Elma", "2 kg"])
    ws.append([None, None])
    ws.append(["Karpuz", 3])
    wb.save(path)

    rows = read_excel(path)

    assert rows == [{"ürün": "Elma", "miktar": "2 kg"}, {"ürün": "Karpuz", "miktar": "3"}]


def test_read_excel_missing_file(tmp_path):
    with pytest.raises(LoadError):
        read_excel(tmp_path / "yok.xlsx")


def test_load_rows_dispatches_by_suffix(tmp_path):
    csv_path = tmp_path / "a.csv"
    csv_path.write_text("ürün,miktar\nElma,1 kg\n", encoding="utf-8")
    xlsx_path = tmp_path / "a.xlsx"
    wb = Workbook()
    wb.active.append(["ürün", "miktar"])
    wb.active.append(["Armut", "2 adet"])
    wb.save(xlsx_path)

    assert load_rows(csv_path)[0]["ürün"] == "Elma"
    assert load_rows(xlsx_path)[0]["ürün"] == "Armut"


def _write_xlsx(path, data_rows):
    wb = Workbook()
    wb.active.append(["ürün", "miktar"])
    for row in data_rows:
        wb.active.append(row)
    wb.save(path)
    return path


def test_read_csv_rows_rejects_too_many_rows(tmp_path, monkeypatch):
    monkeypatch.setattr(csv_reader_module, "MAX_ROWS", 2)
    path = tmp_path / "uzun.csv"
    path.write_text("ürün,miktar\nA,1 kg\nB,2 kg\nC,3 kg\n", encoding="utf-8")

    with pytest.raises(LoadError, match="en fazla 2 satır"):
        read_csv_rows(path)


def test_read_csv_rows_accepts_exactly_max_rows(tmp_path, monkeypatch):
    monkeypatch.setattr(csv_reader_module, "MAX_ROWS", 2)
    path = tmp_path / "tam.csv"
    path.write_text("ürün,miktar\nA,1 kg\nB,2 kg\n", encoding="utf-8")

    assert [r["ürün"] for r in read_csv_rows(path)] == ["A", "B"]


def test_read_excel_rejects_too_many_rows(tmp_path, monkeypatch):
    monkeypatch.setattr(excel_module, "MAX_ROWS", 2)
    path = _write_xlsx(tmp_path / "uzun.xlsx", [["A", "1 kg"], ["B", "2 kg"], ["C", "3 kg"]])

    with pytest.raises(LoadError, match="en fazla 2 satır"):
        read_excel(path)


def test_read_excel_accepts_exactly_max_rows(tmp_path, monkeypatch):
    monkeypatch.setattr(excel_module, "MAX_ROWS", 2)
    path = _write_xlsx(tmp_path / "tam.xlsx", [["A", "1 kg"], ["B", "2 kg"]])

    assert [r["ürün"] for r in read_excel(path)] == ["A", "B"]


def test_load_batch_fails_instead_of_truncating(tmp_path, monkeypatch):
    monkeypatch.setattr(csv_reader_module, "MAX_ROWS", 2)
    path = tmp_path / "uzun.csv"
    path.write_text("ürün,miktar\nA,1 kg\nB,2 kg\nC,3 kg\n", encoding="utf-8")

    success, records, error = load_batch(path)

    assert success is False
    assert records == []
    assert "en fazla 2 satır" in error
