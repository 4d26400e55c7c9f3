"""MOI ledger model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class MoiEntry:
    """Monetary entry in the MOI ledger, unrelated to the loan book."""

    entry_id: str
    name: str
    amount: Decimal
    date: date
    description: str | None = None
