"""Interest-due reminders and their settlement."""

from lend_track.reminders.actions import mark_reminder_paid
from lend_track.reminders.scanner import (
    Clock,
    Reminder,
    ReminderScanner,
    candidate_due_dates,
    due_date_in_month,
    scan_reminders,
)

__all__ = [
    "Clock",
    "Reminder",
    "ReminderScanner",
    "candidate_due_dates",
    "due_date_in_month",
    "mark_reminder_paid",
    "scan_reminders",
]
