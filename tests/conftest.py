"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from lend_track.models import Loan, LoanType, Payment, PaymentType
from lend_track.store import InMemoryRecordStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> InMemoryRecordStore:
    """Create a fresh store for each test."""
    return InMemoryRecordStore()


def make_payment(
    amount: str | int,
    payment_type: PaymentType = PaymentType.PRINCIPAL,
    paid_on: date = date(2024, 2, 1),
    payment_id: str | None = None,
) -> Payment:
    """Build a payment with sensible defaults."""
    return Payment(
        payment_id=payment_id or f"pay-{payment_type.value}-{amount}-{paid_on.isoformat()}",
        amount=Decimal(str(amount)),
        date=paid_on,
        payment_type=payment_type,
    )


def make_loan(
    loan_id: str = "loan-001",
    amount: str | int = 50000,
    interest_rate: str | int = 10,
    start_date: date = date(2024, 1, 1),
    borrower_name: str = "Asha Verma",
    loan_type: LoanType = LoanType.BOND,
    payments: tuple[Payment, ...] = (),
    gold_grams: str | None = None,
) -> Loan:
    """Build a loan with sensible defaults."""
    if loan_type == LoanType.GOLD and gold_grams is None:
        gold_grams = "25"
    return Loan(
        loan_id=loan_id,
        borrower_name=borrower_name,
        amount=Decimal(str(amount)),
        interest_rate=Decimal(str(interest_rate)),
        start_date=start_date,
        loan_type=loan_type,
        gold_grams=Decimal(gold_grams) if gold_grams is not None else None,
        payments=payments,
    )


@pytest.fixture
def loan_factory() -> Callable[..., Loan]:
    """Factory for loans."""
    return make_loan


@pytest.fixture
def payment_factory() -> Callable[..., Payment]:
    """Factory for payments."""
    return make_payment


@pytest.fixture
def sample_loan() -> Loan:
    """50000 at 10% with 20000 principal and 2500 interest repaid."""
    return make_loan(
        payments=(
            make_payment(20000, PaymentType.PRINCIPAL),
            make_payment(2500, PaymentType.INTEREST),
        ),
    )
