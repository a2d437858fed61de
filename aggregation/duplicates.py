"""Flag product names that appear under more than one aggregated group."""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import List, Sequence

from domain.records import AggregatedRecord


def annotate_duplicates(records: Sequence[AggregatedRecord]) -> List[AggregatedRecord]:
    """Set `duplicate_count` on every record to the number of groups sharing its name."""
    counts = Counter(record.name for record in records)
    return [replace(record, duplicate_count=counts[record.name]) for record in records]


def duplicate_names(records: Sequence[AggregatedRecord]) -> List[str]:
    """Names flagged as duplicates, in first-seen order."""
    names: List[str] = []
    for record in records:
        if record.is_duplicate and record.name not in names:
            names.append(record.name)
    return names
