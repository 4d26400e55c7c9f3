"""Derived monetary figures for a loan book snapshot.

Every function here is a pure reduction over the loans it is given.
Unknown loan ids produce zero.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from lend_track.models import Loan, LoanType, PaymentType

ZERO = Decimal("0")
MONTHS_PER_YEAR = Decimal("12")
PERCENT = Decimal("100")


@dataclass(frozen=True)
class LoanSummary:
    """Per-loan figures shown on a loan's detail view."""

    loan_id: str
    principal_paid: Decimal
    interest_received: Decimal
    remaining_principal: Decimal
    monthly_interest: Decimal
    is_active: bool


@dataclass(frozen=True)
class PortfolioSummary:
    """Loan book totals shown on the dashboard."""

    total_loans: int
    active_loans: int
    completed_loans: int
    total_lent: Decimal
    total_principal_paid: Decimal
    total_interest_received: Decimal
    monthly_interest: Decimal
    gold_grams_held: Decimal


def monthly_interest(principal: Decimal, annual_rate: Decimal) -> Decimal:
    """One month of simple interest on ``principal`` at an annual percentage.

    Multiplies before dividing so round figures stay exact
    (30000 at 10% gives 250, not 249.999...).
    """
    return principal * annual_rate / PERCENT / MONTHS_PER_YEAR


def get_loan(loans: Iterable[Loan], loan_id: str) -> Loan | None:
    """Find a loan by id, or ``None`` if it is not in the snapshot."""
    for loan in loans:
        if loan.loan_id == loan_id:
            return loan
    return None


def _sum_payments(loan: Loan, payment_type: PaymentType) -> Decimal:
    return sum(
        (p.amount for p in loan.payments if p.payment_type == payment_type),
        ZERO,
    )


def loan_principal_paid(loan: Loan) -> Decimal:
    return _sum_payments(loan, PaymentType.PRINCIPAL)


def loan_interest_received(loan: Loan) -> Decimal:
    return _sum_payments(loan, PaymentType.INTEREST)


def loan_remaining_principal(loan: Loan) -> Decimal:
    """Original amount less principal repaid, floored at zero."""
    return max(ZERO, loan.amount - loan_principal_paid(loan))


def loan_monthly_interest(loan: Loan) -> Decimal:
    """Interest one month would accrue on what is still outstanding."""
    remaining = loan_remaining_principal(loan)
    if remaining <= 0:
        return ZERO
    return monthly_interest(remaining, loan.interest_rate)


def is_active(loan: Loan) -> bool:
    return loan_remaining_principal(loan) > 0


def _per_loan_or_total(loans, loan_id, per_loan) -> Decimal:
    if loan_id is not None:
        loan = get_loan(loans, loan_id)
        return per_loan(loan) if loan is not None else ZERO
    return sum((per_loan(loan) for loan in loans), ZERO)


def remaining_principal(loans: Sequence[Loan], loan_id: str | None = None) -> Decimal:
    """Remaining principal of one loan, or of the whole book.

    Parameters
    ----------
    loans : Sequence[Loan]
        Loan book snapshot.
    loan_id : str | None
        Restrict to this loan. Unknown ids give zero.

    Returns
    -------
    Decimal
        Outstanding principal, never negative.
    """
    return _per_loan_or_total(loans, loan_id, loan_remaining_principal)


def interest_received(loans: Sequence[Loan], loan_id: str | None = None) -> Decimal:
    """Interest collected on one loan, or across the whole book."""
    return _per_loan_or_total(loans, loan_id, loan_interest_received)


def principal_paid(loans: Sequence[Loan], loan_id: str | None = None) -> Decimal:
    """Principal repaid on one loan, or across the whole book."""
    return _per_loan_or_total(loans, loan_id, loan_principal_paid)


def total_lent(loans: Sequence[Loan]) -> Decimal:
    """Current exposure: remaining principal summed over all loans.

    Fully or partly repaid loans count only what is still outstanding,
    not their original face value.
    """
    return remaining_principal(loans)


def monthly_interest_projection(loans: Sequence[Loan]) -> Decimal:
    """Interest the book earns next month on outstanding principal."""
    return sum((loan_monthly_interest(loan) for loan in loans), ZERO)


def partition_by_status(loans: Sequence[Loan]) -> tuple[list[Loan], list[Loan]]:
    """Split loans into ``(active, completed)``, keeping input order."""
    active: list[Loan] = []
    completed: list[Loan] = []
    for loan in loans:
        (active if is_active(loan) else completed).append(loan)
    return active, completed


def loan_summary(loan: Loan) -> LoanSummary:
    """Collect the derived figures of a single loan."""
    remaining = loan_remaining_principal(loan)
    return LoanSummary(
        loan_id=loan.loan_id,
        principal_paid=loan_principal_paid(loan),
        interest_received=loan_interest_received(loan),
        remaining_principal=remaining,
        monthly_interest=loan_monthly_interest(loan),
        is_active=remaining > 0,
    )


def portfolio_summary(loans: Sequence[Loan]) -> PortfolioSummary:
    """Collect the dashboard totals for a loan book."""
    active, completed = partition_by_status(loans)
    gold_grams = sum(
        (
            loan.gold_grams
            for loan in active
            if loan.loan_type == LoanType.GOLD and loan.gold_grams is not None
        ),
        ZERO,
    )
    return PortfolioSummary(
        total_loans=len(loans),
        active_loans=len(active),
        completed_loans=len(completed),
        total_lent=total_lent(loans),
        total_principal_paid=principal_paid(loans),
        total_interest_received=interest_received(loans),
        monthly_interest=monthly_interest_projection(loans),
        gold_grams_held=gold_grams,
    )
