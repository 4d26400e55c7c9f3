"""Totals and ordering for the MOI ledger."""

from collections.abc import Sequence
from decimal import Decimal

from lend_track.models import MoiEntry


def total_moi(entries: Sequence[MoiEntry]) -> Decimal:
    """Sum of all MOI entry amounts."""
    return sum((entry.amount for entry in entries), Decimal("0"))


def sorted_moi_entries(entries: Sequence[MoiEntry]) -> list[MoiEntry]:
    """Entries newest first; entries on the same date keep their input order."""
    return sorted(entries, key=lambda entry: entry.date, reverse=True)
