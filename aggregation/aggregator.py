"""
Merging of repeated order lines.

Rows are grouped by product name plus the *phrasing* of their quantity
text: the original text with each digit run replaced by "#". "Elma / 2 kg"
and "Elma / 3 kg" share a group and merge into "Elma / 5 kg"; "3kg" and
"3 kg" are phrased differently and stay apart, as do "5 kg" and "3 kasa".

Merging is a left fold in encounter order. The first record of a group is
the accumulator and keeps its id, name and date. Each later member adds its
magnitude and sets the unit (the last merged member's unit wins). Groups
that never receive a second member keep their original quantity text.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from config.logging import get_logger
from domain.records import AggregatedRecord, NormalizedRecord
from fields.quantity import parse_magnitude, parse_unit, quantity_phrasing

logger = get_logger(__name__)

KEY_SEPARATOR = "\u0000"


def group_key(name: str, quantity_text: str) -> str:
    return f"{name}{KEY_SEPARATOR}{quantity_phrasing(quantity_text)}"


def _merge(accumulator: AggregatedRecord, member: NormalizedRecord) -> AggregatedRecord:
    total = parse_magnitude(accumulator.quantity_text) + parse_magnitude(member.quantity_text)
    return AggregatedRecord(
        id=accumulator.id,
        name=accumulator.name,
        quantity_text=f"{total} {parse_unit(member.quantity_text)}",
        date=accumulator.date,
        group_key=accumulator.group_key,
        duplicate_count=accumulator.duplicate_count,
    )


def aggregate(records: Iterable[NormalizedRecord]) -> List[AggregatedRecord]:
    """Group records by name and quantity phrasing; emit groups in first-seen order."""
    groups: Dict[str, AggregatedRecord] = {}
    seen = 0

    for record in records:
        seen += 1
        key = group_key(record.name, record.quantity_text)
        current = groups.get(key)
        if current is None:
            groups[key] = AggregatedRecord(
                id=record.id,
                name=record.name,
                quantity_text=record.quantity_text,
                date=record.date,
                group_key=key,
            )
        else:
            groups[key] = _merge(current, record)

    logger.debug("records_aggregated", records_in=seen, groups_out=len(groups))
    return list(groups.values())
