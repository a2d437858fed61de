import pytest

from domain.records import NormalizedRecord


@pytest.fixture()
def make_records():
    """Build NormalizedRecords from (name, quantity[, date]) tuples, numbered from 1."""

    def _make(*items, date="2026-10-17"):
        records = []
        for index, item in enumerate(items, start=1):
            name, quantity = item[0], item[1]
            record_date = item[2] if len(item) > 2 else date
            records.append(NormalizedRecord(id=index, name=name, quantity_text=quantity, date=record_date))
        return records

    return _make
