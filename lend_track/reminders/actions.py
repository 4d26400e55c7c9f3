"""Settle an interest reminder by recording the payment."""

from __future__ import annotations

import logging
from datetime import date, datetime

from lend_track.models import Payment, PaymentType
from lend_track.reminders.scanner import Reminder
from lend_track.store.base import RecordStore

logger = logging.getLogger(__name__)


def mark_reminder_paid(
    store: RecordStore,
    reminder: Reminder,
    now: datetime | date,
) -> Payment:
    """Create the interest payment that clears a reminder.

    The payment is dated ``now``, carries the reminder's interest amount and
    a note naming the month it covers. Nothing else happens until the store
    has accepted the write.

    Parameters
    ----------
    store : RecordStore
        Store that owns the loan.
    reminder : Reminder
        Reminder to settle.
    now : datetime | date
        Payment date.

    Returns
    -------
    Payment
        The payment the store created.

    Raises
    ------
    EntityNotFoundError
        If the loan was deleted after the reminder was computed.
    StoreError
        If the store write fails; propagated unchanged.
    """
    payment_date = now.date() if isinstance(now, datetime) else now
    payment = store.create_payment(
        reminder.loan_id,
        amount=reminder.interest_amount,
        payment_date=payment_date,
        payment_type=PaymentType.INTEREST,
        notes=f"Interest payment for {reminder.period_label}",
    )
    logger.info(
        "Marked interest for %s on loan %s as paid (%s)",
        reminder.period_label,
        reminder.loan_id,
        reminder.interest_amount,
    )
    return payment
