"""Ledger aggregation: derived figures over a loan book snapshot."""

from lend_track.ledger.aggregator import (
    LoanSummary,
    PortfolioSummary,
    get_loan,
    interest_received,
    is_active,
    loan_summary,
    monthly_interest,
    monthly_interest_projection,
    partition_by_status,
    portfolio_summary,
    principal_paid,
    remaining_principal,
    total_lent,
)
from lend_track.ledger.calculator import PayoffEstimate, estimate_payoff
from lend_track.ledger.filters import (
    AmountRange,
    LoanQuery,
    SortField,
    SortOrder,
    filter_and_sort,
    matches_search,
)
from lend_track.ledger.moi import sorted_moi_entries, total_moi

__all__ = [
    "AmountRange",
    "LoanQuery",
    "LoanSummary",
    "PayoffEstimate",
    "PortfolioSummary",
    "SortField",
    "SortOrder",
    "estimate_payoff",
    "filter_and_sort",
    "get_loan",
    "interest_received",
    "is_active",
    "loan_summary",
    "matches_search",
    "monthly_interest",
    "monthly_interest_projection",
    "partition_by_status",
    "portfolio_summary",
    "principal_paid",
    "remaining_principal",
    "sorted_moi_entries",
    "total_lent",
    "total_moi",
]
