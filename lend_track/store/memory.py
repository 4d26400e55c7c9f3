"""In-memory record store for loans, payments and MOI entries."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any

from lend_track.exceptions import EntityNotFoundError, InvalidEntityStateError, ValidationError
from lend_track.models import Loan, LoanType, MoiEntry, Payment, PaymentType
from lend_track.validation import (
    clean_text,
    require_positive,
    require_text,
    to_decimal,
    validate_gold_grams,
    validate_interest_rate,
    validate_loan,
    validate_loan_type,
    validate_moi_entry,
    validate_payment_type,
)

logger = logging.getLogger(__name__)

UPDATABLE_LOAN_FIELDS = frozenset(
    {"borrower_name", "interest_rate", "start_date", "loan_type", "gold_grams", "notes"}
)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class InMemoryRecordStore:
    """Record store holding the loan book in process memory.

    Entities are frozen, so every read hands out a snapshot that later
    writes cannot change. Payments live inside their loan and are removed
    with it.
    """

    loans: dict[str, Loan] = field(default_factory=dict)
    moi_entries: dict[str, MoiEntry] = field(default_factory=dict)

    # Read side
    def list_loans(self) -> list[Loan]:
        """Return every loan with its payments, in insertion order."""
        return list(self.loans.values())

    def list_moi_entries(self) -> list[MoiEntry]:
        """Return every MOI entry, in insertion order."""
        return list(self.moi_entries.values())

    def get_loan(self, loan_id: str) -> Loan:
        """Get a loan by id."""
        try:
            return self.loans[loan_id]
        except KeyError:
            raise EntityNotFoundError(f"Loan {loan_id} not found") from None

    # Loans
    def create_loan(
        self,
        borrower_name: str,
        amount: Any,
        interest_rate: Any,
        start_date: date,
        loan_type: LoanType | str,
        gold_grams: Any = None,
        notes: str | None = None,
    ) -> Loan:
        """Validate and add a new loan with no payments."""
        kind = validate_loan_type(loan_type)
        loan = Loan(
            loan_id=_new_id(),
            borrower_name=require_text(borrower_name, "borrower_name"),
            amount=require_positive(amount, "amount"),
            interest_rate=validate_interest_rate(interest_rate),
            start_date=_require_date(start_date, "start_date"),
            loan_type=kind,
            gold_grams=validate_gold_grams(kind, gold_grams),
            notes=clean_text(notes),
        )
        self.loans[loan.loan_id] = loan
        logger.info("Created loan %s for %s (%s)", loan.loan_id, loan.borrower_name, loan.amount)
        return loan

    def add_loan(self, loan: Loan) -> None:
        """Add a fully built loan, payments included (bulk import)."""
        if loan.loan_id in self.loans:
            raise InvalidEntityStateError(f"Loan {loan.loan_id} already exists")
        validate_loan(loan)
        self.loans[loan.loan_id] = loan
        logger.debug("Imported loan %s with %d payments", loan.loan_id, len(loan.payments))

    def update_loan(self, loan_id: str, **changes: Any) -> Loan:
        """Apply a partial update to a loan.

        ``amount`` cannot be changed once a loan exists.
        """
        loan = self.get_loan(loan_id)

        if "amount" in changes:
            if to_decimal(changes["amount"], "amount") != loan.amount:
                raise InvalidEntityStateError(f"Loan {loan_id} amount cannot be changed")
            del changes["amount"]

        unknown = set(changes) - UPDATABLE_LOAN_FIELDS
        if unknown:
            raise ValidationError(f"Unknown loan fields: {', '.join(sorted(unknown))}")

        values: dict[str, Any] = {}
        if "borrower_name" in changes:
            values["borrower_name"] = require_text(changes["borrower_name"], "borrower_name")
        if "interest_rate" in changes:
            values["interest_rate"] = validate_interest_rate(changes["interest_rate"])
        if "start_date" in changes:
            values["start_date"] = _require_date(changes["start_date"], "start_date")
        if "notes" in changes:
            values["notes"] = clean_text(changes["notes"])

        kind = validate_loan_type(changes.get("loan_type", loan.loan_type))
        values["loan_type"] = kind
        values["gold_grams"] = validate_gold_grams(kind, changes.get("gold_grams", loan.gold_grams))

        updated = replace(loan, **values)
        self.loans[loan_id] = updated
        logger.info("Updated loan %s: %s", loan_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def delete_loan(self, loan_id: str) -> None:
        """Delete a loan together with its payments."""
        loan = self.get_loan(loan_id)
        del self.loans[loan_id]
        logger.info("Deleted loan %s and %d payments", loan_id, len(loan.payments))

    # Payments
    def create_payment(
        self,
        loan_id: str,
        amount: Any,
        payment_date: date,
        payment_type: PaymentType | str,
        notes: str | None = None,
    ) -> Payment:
        """Validate and append a payment to a loan."""
        loan = self.get_loan(loan_id)
        payment = Payment(
            payment_id=_new_id(),
            amount=require_positive(amount, "amount"),
            date=_require_date(payment_date, "payment_date"),
            payment_type=validate_payment_type(payment_type),
            notes=clean_text(notes),
        )
        self.loans[loan_id] = replace(loan, payments=loan.payments + (payment,))
        logger.info(
            "Recorded %s payment %s of %s on loan %s",
            payment.payment_type.value,
            payment.payment_id,
            payment.amount,
            loan_id,
        )
        return payment

    def delete_payment(self, loan_id: str, payment_id: str) -> None:
        """Remove a single payment from a loan."""
        loan = self.get_loan(loan_id)
        remaining = tuple(p for p in loan.payments if p.payment_id != payment_id)
        if len(remaining) == len(loan.payments):
            raise EntityNotFoundError(f"Payment {payment_id} not found on loan {loan_id}")
        self.loans[loan_id] = replace(loan, payments=remaining)
        logger.info("Deleted payment %s from loan %s", payment_id, loan_id)

    # MOI ledger
    def create_moi_entry(
        self,
        name: str,
        amount: Any,
        entry_date: date,
        description: str | None = None,
    ) -> MoiEntry:
        """Validate and add an MOI entry."""
        entry = MoiEntry(
            entry_id=_new_id(),
            name=require_text(name, "name"),
            amount=to_decimal(amount, "amount"),
            date=_require_date(entry_date, "entry_date"),
            description=clean_text(description),
        )
        self.moi_entries[entry.entry_id] = entry
        logger.info("Created MOI entry %s (%s)", entry.entry_id, entry.amount)
        return entry

    def add_moi_entry(self, entry: MoiEntry) -> None:
        """Add a fully built MOI entry (bulk import)."""
        if entry.entry_id in self.moi_entries:
            raise InvalidEntityStateError(f"MOI entry {entry.entry_id} already exists")
        validate_moi_entry(entry)
        self.moi_entries[entry.entry_id] = entry
        logger.debug("Imported MOI entry %s", entry.entry_id)

    def delete_moi_entry(self, entry_id: str) -> None:
        """Delete an MOI entry."""
        if entry_id not in self.moi_entries:
            raise EntityNotFoundError(f"MOI entry {entry_id} not found")
        del self.moi_entries[entry_id]
        logger.info("Deleted MOI entry %s", entry_id)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "loans": len(self.loans),
            "payments": sum(len(loan.payments) for loan in self.loans.values()),
            "moi_entries": len(self.moi_entries),
        }


def _require_date(value: Any, field_name: str) -> date:
    if not isinstance(value, date):
        raise ValidationError(f"{field_name} must be a date, got {value!r}")
    # datetime is a date subclass; keep only the calendar date
    if isinstance(value, datetime):
        return value.date()
    return value

