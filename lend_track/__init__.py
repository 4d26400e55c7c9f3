"""Personal lending tracker: loan book aggregation and interest reminders."""

__version__ = "0.1.0"
