"""Sample loan book scenario with payment histories and an MOI ledger."""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Any

from lend_track.config import ScenarioConfig
from lend_track.generators import LoanGenerator, MoiEntryGenerator
from lend_track.ledger import partition_by_status, portfolio_summary, sorted_moi_entries, total_moi
from lend_track.models import LoanType
from lend_track.store import InMemoryRecordStore

logger = logging.getLogger(__name__)


class LoanBookScenario:
    """Populate a record store with a realistic personal loan book.

    This scenario creates:
    - Gold-backed and bond loans to individual borrowers
    - Monthly interest payments, with some months missed
    - Occasional partial principal repayments
    - A share of loans repaid in full
    - Independent MOI ledger entries
    """

    def __init__(
        self,
        num_loans: int = 25,
        gold_loan_rate: float = 0.6,
        repaid_rate: float = 0.2,
        payments_per_loan: int = 6,
        moi_entries: int = 10,
        as_of: date | None = None,
        seed: int | None = None,
        locale: str = "en_IN",
        *,
        config: ScenarioConfig | None = None,
    ) -> None:
        """Initialize loan book scenario.

        Parameters
        ----------
        num_loans : int
            Number of loans to generate.
        gold_loan_rate : float
            Share of loans that are gold-backed (0.0 to 1.0).
        repaid_rate : float
            Share of loans whose principal is fully repaid.
        payments_per_loan : int
            Upper bound on payments generated per loan.
        moi_entries : int
            Number of MOI ledger entries.
        as_of : date | None
            Reference day for the book (default today).
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for borrower names.
        config : ScenarioConfig | None
            Optional scenario configuration. If provided, overrides the
            count and rate arguments.
        """
        if config is not None:
            num_loans = config.num_loans
            gold_loan_rate = config.gold_loan_rate
            repaid_rate = config.repaid_rate
            payments_per_loan = config.payments_per_loan
            moi_entries = config.moi_entries

        self.config = config
        self.num_loans = num_loans
        self.gold_loan_rate = gold_loan_rate
        self.repaid_rate = repaid_rate
        self.payments_per_loan = payments_per_loan
        self.num_moi_entries = moi_entries
        self.as_of = as_of or date.today()
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self.store = InMemoryRecordStore()
        self._loan_gen = LoanGenerator(seed=seed, locale=locale)
        self._moi_gen = MoiEntryGenerator(seed=seed, locale=locale)

    def generate(self) -> InMemoryRecordStore:
        """Generate all data for the scenario.

        Returns
        -------
        InMemoryRecordStore
            Store containing the generated loan book.
        """
        logger.info(
            "Starting loan book scenario: %d loans, %.0f%% gold, %.0f%% repaid",
            self.num_loans,
            self.gold_loan_rate * 100,
            self.repaid_rate * 100,
        )

        num_gold = round(self.num_loans * self.gold_loan_rate)
        num_repaid = round(self.num_loans * self.repaid_rate)
        repaid = set(random.sample(range(self.num_loans), num_repaid))

        for i in range(self.num_loans):
            loan = self._loan_gen.generate(
                loan_type=LoanType.GOLD if i < num_gold else LoanType.BOND,
                as_of=self.as_of,
                max_payments=self.payments_per_loan,
                repay_in_full=i in repaid,
            )
            self.store.add_loan(loan)

        for entry in self._moi_gen.generate_batch(self.num_moi_entries, as_of=self.as_of):
            self.store.add_moi_entry(entry)

        counts = self.store.summary()
        logger.info(
            "Generated %d loans (%d gold, %d bond) with %d payments and %d MOI entries",
            counts["loans"],
            num_gold,
            self.num_loans - num_gold,
            counts["payments"],
            counts["moi_entries"],
        )
        return self.store

    def export(self, sinks: list[Any]) -> None:
        """Export generated data to sinks.

        Parameters
        ----------
        sinks : list[Any]
            Sink instances (ConsoleSink, JsonFileSink).
        """
        loans = self.store.list_loans()
        active, completed = partition_by_status(loans)
        moi = sorted_moi_entries(self.store.list_moi_entries())

        for sink in sinks:
            sink.write_batch("active_loans", active)
            sink.write_batch("completed_loans", completed)
            sink.write_batch("moi_entries", moi)

        logger.info("Exported loan book to %d sinks", len(sinks))

    def get_portfolio_summary(self) -> dict[str, Any]:
        """Get summary statistics for the loan book.

        Returns
        -------
        dict[str, Any]
            Portfolio figures from the ledger plus MOI totals.
        """
        loans = self.store.list_loans()
        if not loans:
            return {}

        summary = portfolio_summary(loans)
        return {
            "total_loans": summary.total_loans,
            "active_loans": summary.active_loans,
            "completed_loans": summary.completed_loans,
            "total_lent": summary.total_lent,
            "total_principal_paid": summary.total_principal_paid,
            "total_interest_received": summary.total_interest_received,
            "monthly_interest": summary.monthly_interest,
            "gold_grams_held": summary.gold_grams_held,
            "gold_loans": sum(1 for loan in loans if loan.loan_type == LoanType.GOLD),
            "bond_loans": sum(1 for loan in loans if loan.loan_type == LoanType.BOND),
            "moi_total": total_moi(self.store.list_moi_entries()),
        }
