"""Domain models for the loan book and MOI ledger."""

from lend_track.models.enums import LoanType, PaymentType
from lend_track.models.loan import Loan, Payment
from lend_track.models.moi import MoiEntry

__all__ = ["Loan", "LoanType", "MoiEntry", "Payment", "PaymentType"]
