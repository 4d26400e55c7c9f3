"""Payoff estimate for a loan repaid with a fixed monthly payment."""

from dataclasses import dataclass
from decimal import Decimal

from lend_track.ledger.aggregator import ZERO, monthly_interest
from lend_track.validation import require_positive, validate_interest_rate

MAX_MONTHS = 1000


@dataclass(frozen=True)
class PayoffEstimate:
    """Outcome of repaying ``amount`` with a fixed monthly payment."""

    months: int
    total_interest: Decimal
    total_payment: Decimal
    paid_off: bool

    @property
    def interest_cost_percent(self) -> Decimal:
        """Total interest as a percentage of the amount borrowed."""
        principal = self.total_payment - self.total_interest
        if principal <= 0:
            return ZERO
        return self.total_interest / principal * 100


def estimate_payoff(amount, annual_rate, monthly_payment) -> PayoffEstimate:
    """Simulate monthly payments until the balance is cleared.

    Each month simple interest accrues on the balance; the payment covers
    that interest first and the rest (capped at the balance) reduces
    principal. The simulation stops when the balance reaches zero, when
    the payment no longer covers the month's interest, or after
    ``MAX_MONTHS`` months.

    Parameters
    ----------
    amount : Decimal | int | float | str
        Amount borrowed.
    annual_rate : Decimal | int | float | str
        Annual interest rate in percent.
    monthly_payment : Decimal | int | float | str
        Fixed amount paid every month.

    Returns
    -------
    PayoffEstimate
        Months taken, interest and total paid. ``paid_off`` is False when
        the payment never clears the balance.
    """
    principal = require_positive(amount, "amount")
    rate = validate_interest_rate(annual_rate)
    payment = require_positive(monthly_payment, "monthly_payment")

    balance = principal
    months = 0
    total_interest = ZERO

    while balance > 0 and months < MAX_MONTHS:
        interest = monthly_interest(balance, rate)
        total_interest += interest
        months += 1

        principal_part = min(payment - interest, balance) if payment > interest else ZERO
        if principal_part <= 0:
            break
        balance -= principal_part

    return PayoffEstimate(
        months=months,
        total_interest=total_interest,
        total_payment=principal + total_interest,
        paid_off=balance <= 0,
    )
