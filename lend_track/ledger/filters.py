"""Search, filter and sort for the loan list."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from lend_track.ledger.aggregator import loan_remaining_principal
from lend_track.models import Loan, LoanType


class SortField(str, Enum):
    NAME = "name"
    AMOUNT = "amount"
    DATE = "date"
    INTEREST = "interest"
    REMAINING = "remaining"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class AmountRange:
    """Inclusive bounds on a loan's original amount; ``maximum=None`` is open."""

    minimum: Decimal = Decimal("0")
    maximum: Decimal | None = None

    def contains(self, amount: Decimal) -> bool:
        if amount < self.minimum:
            return False
        return self.maximum is None or amount <= self.maximum


@dataclass(frozen=True)
class LoanQuery:
    """Everything the loan list view can narrow and order by."""

    search: str = ""
    loan_types: tuple[LoanType | str, ...] = field(default_factory=tuple)
    amount_range: AmountRange | None = None
    sort_by: SortField | str | None = None
    sort_order: SortOrder | str = SortOrder.ASC


SORT_KEYS: dict[SortField, Callable[[Loan], Any]] = {
    SortField.NAME: lambda loan: loan.borrower_name.casefold(),
    SortField.AMOUNT: lambda loan: loan.amount,
    SortField.DATE: lambda loan: loan.start_date,
    SortField.INTEREST: lambda loan: loan.interest_rate,
    SortField.REMAINING: loan_remaining_principal,
}


def amount_text(amount: Decimal) -> str:
    """Plain rendering of an amount for text search (``50000``, ``1250.5``)."""
    text = format(amount, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def matches_search(loan: Loan, query: str) -> bool:
    """Case-insensitive match on borrower name, loan type or amount text.

    A blank query matches every loan.
    """
    needle = query.strip().casefold()
    if not needle:
        return True
    return (
        needle in loan.borrower_name.casefold()
        or needle in loan.loan_type.value.casefold()
        or needle in amount_text(loan.amount)
    )


def _type_value(loan_type: LoanType | str) -> str:
    return loan_type.value if isinstance(loan_type, LoanType) else str(loan_type)


def filter_and_sort(loans: Sequence[Loan], query: LoanQuery | None = None) -> list[Loan]:
    """Apply search, type filter, amount range and sort, in that order.

    Parameters
    ----------
    loans : Sequence[Loan]
        Loan book snapshot.
    query : LoanQuery | None
        Criteria; ``None`` returns the loans unchanged.

    Returns
    -------
    list[Loan]
        Matching loans. Sorting is stable, so loans with equal keys keep
        their input order in both directions.
    """
    query = query or LoanQuery()
    result = [loan for loan in loans if matches_search(loan, query.search)]

    if query.loan_types:
        wanted = {_type_value(t) for t in query.loan_types}
        result = [loan for loan in result if loan.loan_type.value in wanted]

    if query.amount_range is not None:
        result = [loan for loan in result if query.amount_range.contains(loan.amount)]

    if query.sort_by is not None:
        key = SORT_KEYS[SortField(query.sort_by)]
        descending = SortOrder(query.sort_order) == SortOrder.DESC
        result = sorted(result, key=key, reverse=descending)

    return result
