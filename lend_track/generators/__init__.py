"""Sample data generators for the loan book and MOI ledger."""

from lend_track.generators.loan import LoanGenerator, PaymentGenerator
from lend_track.generators.moi import MoiEntryGenerator

__all__ = ["LoanGenerator", "MoiEntryGenerator", "PaymentGenerator"]
