"""Loan and payment models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from lend_track.models.enums import LoanType, PaymentType


@dataclass(frozen=True)
class Payment:
    """A single transfer recorded against a loan."""

    payment_id: str
    amount: Decimal
    date: date
    payment_type: PaymentType
    notes: str | None = None


@dataclass(frozen=True)
class Loan:
    """Principal lent to a borrower at a fixed annual interest rate.

    ``interest_rate`` is an annual percentage (``12`` means 12% a year).
    The day-of-month of ``start_date`` is the monthly interest due day.
    ``amount`` is the original principal and never changes after creation.
    """

    loan_id: str
    borrower_name: str
    amount: Decimal
    interest_rate: Decimal
    start_date: date
    loan_type: LoanType
    gold_grams: Decimal | None = None  # Gold loans only
    notes: str | None = None
    payments: tuple[Payment, ...] = field(default_factory=tuple)
