"""
Quantity string parsing.

Order sheets carry quantities as free text ("3 kasa", "12 adet", "2 kg 1 bağ").
Two pure helpers turn that text into something countable:

- parse_magnitude(text): sum of every run of ASCII digits in the text.
  "." and "," are not decimal separators; "1,5 kg" counts as 1 + 5 = 6.
- parse_unit(text): first unit token from UNITS found in the text
  (case-insensitive, original casing returned), or DEFAULT_UNIT.

Neither helper raises; None and empty strings are valid input.
"""

from __future__ import annotations

import re
from typing import Optional

from domain.records import Quantity

UNITS = ("kg", "kasa", "adet", "paket", "demet", "bağ", "çubuk", "tane", "çuval", "salkım")
DEFAULT_UNIT = "adet"

_DIGIT_RUN = re.compile(r"[0-9]+")
_UNIT_PATTERN = re.compile("|".join(re.escape(u) for u in UNITS), flags=re.IGNORECASE)


def parse_magnitude(text: Optional[str]) -> int:
    """Return the sum of all digit runs in `text` (0 when there are none)."""
    return sum(int(run) for run in _DIGIT_RUN.findall(text or ""))


def parse_unit(text: Optional[str]) -> str:
    """Return the first known unit token in `text`, in its matched casing."""
    match = _UNIT_PATTERN.search(text or "")
    return match.group(0) if match else DEFAULT_UNIT


def parse_quantity(text: Optional[str]) -> Quantity:
    """Magnitude and unit of `text` together."""
    return Quantity(magnitude=parse_magnitude(text), unit=parse_unit(text))


def quantity_phrasing(text: Optional[str]) -> str:
    """
    Return `text` with each digit run replaced by "#".

    "2 kg" and "3 kg" share the phrasing "# kg"; "3kg" ("#kg") does not.
    """
    return _DIGIT_RUN.sub("#", text or "")


def format_quantity(text: Optional[str]) -> str:
    """Display form of a quantity string, e.g. "5 kg"."""
    return parse_quantity(text).display()
