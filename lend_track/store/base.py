"""Record store contract consumed by the ledger and reminder layers."""

from __future__ import annotations

from datetime import date
from typing import Any, Protocol

from lend_track.models import Loan, LoanType, MoiEntry, Payment, PaymentType


class RecordStore(Protocol):
    """CRUD operations over loans, their payments and MOI entries.

    Backends signal failed reads and writes with ``StoreError`` and unknown
    ids with ``EntityNotFoundError``.
    """

    def list_loans(self) -> list[Loan]: ...

    def list_moi_entries(self) -> list[MoiEntry]: ...

    def create_loan(
        self,
        borrower_name: str,
        amount: Any,
        interest_rate: Any,
        start_date: date,
        loan_type: LoanType | str,
        gold_grams: Any = None,
        notes: str | None = None,
    ) -> Loan: ...

    def update_loan(self, loan_id: str, **changes: Any) -> Loan: ...

    def delete_loan(self, loan_id: str) -> None: ...

    def create_payment(
        self,
        loan_id: str,
        amount: Any,
        payment_date: date,
        payment_type: PaymentType | str,
        notes: str | None = None,
    ) -> Payment: ...

    def delete_payment(self, loan_id: str, payment_id: str) -> None: ...

    def create_moi_entry(
        self,
        name: str,
        amount: Any,
        entry_date: date,
        description: str | None = None,
    ) -> MoiEntry: ...

    def delete_moi_entry(self, entry_id: str) -> None: ...
