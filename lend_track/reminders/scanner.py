"""Interest-due reminders for a loan book.

Interest on a loan falls due every month on the day-of-month of its start
date. A reminder is raised for each due date that lands inside the
look-ahead window and whose month has no interest payment recorded yet.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

from lend_track.config import DEFAULT_REMINDER_WINDOW_DAYS, ReminderConfig
from lend_track.ledger.aggregator import monthly_interest
from lend_track.models import Loan, Payment, PaymentType
from lend_track.store.base import RecordStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime | date]


@dataclass(frozen=True)
class Reminder:
    """Interest due on a loan for one monthly period."""

    loan_id: str
    borrower_name: str
    due_date: date
    interest_amount: Decimal

    @property
    def reminder_id(self) -> str:
        return f"{self.loan_id}-{self.due_date.isoformat()}"

    @property
    def period_label(self) -> str:
        """Month covered by the reminder, e.g. ``March 2024``."""
        return f"{calendar.month_name[self.due_date.month]} {self.due_date.year}"


def due_date_in_month(year: int, month: int, due_day: int) -> date:
    """Due date for ``due_day`` in the given month.

    Days past the end of a short month clamp to its last day (31 in April
    gives April 30; 30 in February gives the 28th or 29th).
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(due_day, last_day))


def candidate_due_dates(loan: Loan, today: date) -> tuple[date, date]:
    """This month's and next month's due dates for a loan."""
    due_day = loan.start_date.day
    if today.month == 12:
        next_year, next_month = today.year + 1, 1
    else:
        next_year, next_month = today.year, today.month + 1
    return (
        due_date_in_month(today.year, today.month, due_day),
        due_date_in_month(next_year, next_month, due_day),
    )


def has_interest_payment_in_month(payments: Sequence[Payment], due_date: date) -> bool:
    """True if any interest payment falls in the due date's calendar month."""
    return any(
        p.payment_type == PaymentType.INTEREST
        and p.date.year == due_date.year
        and p.date.month == due_date.month
        for p in payments
    )


def _as_date(now: datetime | date) -> date:
    return now.date() if isinstance(now, datetime) else now


def scan_reminders(
    loans: Sequence[Loan],
    now: datetime | date,
    window_days: int = DEFAULT_REMINDER_WINDOW_DAYS,
) -> list[Reminder]:
    """Find interest due between today and ``window_days`` days ahead.

    Parameters
    ----------
    loans : Sequence[Loan]
        Loan book snapshot.
    now : datetime | date
        Current instant. The window runs from the start of its day to the
        end of the day ``window_days`` later, both inclusive.
    window_days : int
        Look-ahead in days (default 7).

    Returns
    -------
    list[Reminder]
        Unpaid reminders sorted by due date. The interest amount is one
        month on the loan's original amount, not its remaining principal.
    """
    window_start = _as_date(now)
    window_end = window_start + timedelta(days=window_days)

    reminders: list[Reminder] = []
    for loan in loans:
        for due in candidate_due_dates(loan, window_start):
            if not window_start <= due <= window_end:
                continue
            if has_interest_payment_in_month(loan.payments, due):
                continue
            reminders.append(
                Reminder(
                    loan_id=loan.loan_id,
                    borrower_name=loan.borrower_name,
                    due_date=due,
                    interest_amount=monthly_interest(loan.amount, loan.interest_rate),
                )
            )

    reminders.sort(key=lambda r: r.due_date)
    logger.debug(
        "Scanned %d loans for %s..%s: %d reminders",
        len(loans),
        window_start,
        window_end,
        len(reminders),
    )
    return reminders


class ReminderScanner:
    """Reminder scanning bound to a clock and a look-ahead window.

    Parameters
    ----------
    clock : Clock | None
        Returns the current instant (default ``datetime.now``). Inject a
        fixed clock in tests.
    config : ReminderConfig | None
        Look-ahead window configuration.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        config: ReminderConfig | None = None,
    ) -> None:
        self.clock = clock or datetime.now
        self.config = config or ReminderConfig()

    def scan(self, loans: Sequence[Loan]) -> list[Reminder]:
        """Reminders due within the configured window from now."""
        return scan_reminders(loans, self.clock(), self.config.window_days)

    def mark_paid(self, store: RecordStore, reminder: Reminder) -> Payment:
        """Record the reminder's interest as paid today."""
        from lend_track.reminders.actions import mark_reminder_paid

        return mark_reminder_paid(store, reminder, self.clock())
