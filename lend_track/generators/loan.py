"""Loan and payment generators."""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator

from lend_track.generators.base import BaseGenerator
from lend_track.ledger.aggregator import monthly_interest
from lend_track.models import Loan, LoanType, Payment, PaymentType
from lend_track.reminders.scanner import due_date_in_month

CENTS = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    """Round to whole paise/cents."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class PaymentGenerator(BaseGenerator):
    """Generate a plausible payment history for a loan."""

    def generate_history(
        self,
        loan: Loan,
        as_of: date,
        max_payments: int = 6,
        repay_in_full: bool = False,
        on_time_rate: float = 0.85,
        prepayment_rate: float = 0.15,
    ) -> tuple[Payment, ...]:
        """Generate payments from the loan's start up to ``as_of``.

        Parameters
        ----------
        loan : Loan
            Loan to generate payments for.
        as_of : date
            No payment is dated after this day.
        max_payments : int
            Upper bound on the number of payments generated.
        repay_in_full : bool
            Close the loan with a final principal payment.
        on_time_rate : float
            Probability that a month's interest is paid.
        prepayment_rate : float
            Probability of a partial principal payment in a month.

        Returns
        -------
        tuple[Payment, ...]
            Payments in date order.
        """
        payments: list[Payment] = []
        balance = loan.amount
        budget = max(0, max_payments - 1) if repay_in_full else max_payments

        year, month = loan.start_date.year, loan.start_date.month
        while len(payments) < budget:
            year, month = (year + 1, 1) if month == 12 else (year, month + 1)
            due = due_date_in_month(year, month, loan.start_date.day)
            if due > as_of:
                break

            paid_on = min(due + timedelta(days=random.randint(0, 5)), as_of)
            if random.random() < on_time_rate:
                interest = to_money(monthly_interest(balance, loan.interest_rate))
                if interest > 0:
                    payments.append(
                        self._payment(interest, paid_on, PaymentType.INTEREST, "Monthly interest")
                    )

            if len(payments) < budget and random.random() < prepayment_rate:
                share = Decimal(str(round(random.uniform(0.1, 0.3), 2)))
                part = (balance * share / 100).quantize(Decimal("1")) * 100
                if 0 < part < balance:
                    balance -= part
                    payments.append(self._payment(part, paid_on, PaymentType.PRINCIPAL))

        if repay_in_full and balance > 0:
            last = payments[-1].date if payments else loan.start_date
            closing_date = max(last, min(as_of, last + timedelta(days=random.randint(1, 30))))
            payments.append(
                self._payment(balance, closing_date, PaymentType.PRINCIPAL, "Loan closed")
            )

        return tuple(payments)

    def _payment(
        self,
        amount: Decimal,
        paid_on: date,
        payment_type: PaymentType,
        notes: str | None = None,
    ) -> Payment:
        return Payment(
            payment_id=self.new_id(),
            amount=amount,
            date=paid_on,
            payment_type=payment_type,
            notes=notes,
        )


class LoanGenerator(BaseGenerator):
    """Generate synthetic gold-backed and bond loans."""

    LOAN_TYPES = list(LoanType)

    # Annual rates, percent
    INTEREST_RATES = {
        LoanType.GOLD: [Decimal("9"), Decimal("10.5"), Decimal("12"), Decimal("14")],
        LoanType.BOND: [Decimal("12"), Decimal("15"), Decimal("18"), Decimal("24")],
    }

    # Value lent per gram of gold pledged
    GOLD_RATE_PER_GRAM = (4000, 5500)

    def __init__(self, seed: int | None = None, locale: str = "en_IN") -> None:
        super().__init__(seed, locale)
        # Offset so payment ids do not repeat loan ids
        payment_seed = None if seed is None else seed + 1
        self._payment_gen = PaymentGenerator(seed=payment_seed, locale=locale)

    def generate(
        self,
        loan_type: LoanType | None = None,
        as_of: date | None = None,
        max_payments: int = 6,
        repay_in_full: bool = False,
    ) -> Loan:
        """Generate a loan with its payment history.

        Parameters
        ----------
        loan_type : LoanType | None
            Gold or Bond; random when omitted.
        as_of : date | None
            Reference day (default today). The loan starts 1-24 months earlier.
        max_payments : int
            Upper bound on payments generated for the loan.
        repay_in_full : bool
            Generate a loan whose principal has been fully repaid.

        Returns
        -------
        Loan
            Generated loan.
        """
        as_of = as_of or date.today()
        loan_type = loan_type or random.choice(self.LOAN_TYPES)

        if loan_type == LoanType.GOLD:
            gold_grams = Decimal(str(round(random.uniform(5, 200), 1)))
            per_gram = random.randint(*self.GOLD_RATE_PER_GRAM)
            amount = Decimal(max(1000, int(gold_grams * per_gram) // 1000 * 1000))
        else:
            gold_grams = None
            amount = self.round_amount(10000, 500000, 1000)

        loan = Loan(
            loan_id=self.new_id(),
            borrower_name=self.fake.name(),
            amount=amount,
            interest_rate=random.choice(self.INTEREST_RATES[loan_type]),
            start_date=as_of - timedelta(days=random.randint(30, 730)),
            loan_type=loan_type,
            gold_grams=gold_grams,
            notes=self.fake.sentence(nb_words=5) if random.random() < 0.3 else None,
        )

        payments = self._payment_gen.generate_history(
            loan,
            as_of=as_of,
            max_payments=max_payments,
            repay_in_full=repay_in_full,
        )
        return replace(loan, payments=payments)

    def generate_batch(self, count: int, as_of: date | None = None) -> Iterator[Loan]:
        """Generate ``count`` loans of random type."""
        for _ in range(count):
            yield self.generate(as_of=as_of)
