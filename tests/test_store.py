"""Tests for InMemoryRecordStore."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from lend_track.exceptions import EntityNotFoundError, InvalidEntityStateError, ValidationError
from lend_track.models import Loan, LoanType, PaymentType
from lend_track.store import InMemoryRecordStore
from tests.conftest import make_loan, make_payment


@pytest.fixture
def bond_loan(store: InMemoryRecordStore) -> Loan:
    """Create a Bond loan in the store."""
    return store.create_loan(
        borrower_name="  Asha Verma ",
        amount="50000",
        interest_rate=10,
        start_date=date(2024, 1, 15),
        loan_type=LoanType.BOND,
        notes="   ",
    )


class TestCreateLoan:
    """Tests for loan creation."""

    def test_create_loan(self, store, bond_loan) -> None:
        assert bond_loan.borrower_name == "Asha Verma"
        assert bond_loan.amount == Decimal("50000")
        assert bond_loan.interest_rate == Decimal("10")
        assert bond_loan.loan_type == LoanType.BOND
        assert bond_loan.gold_grams is None
        assert bond_loan.notes is None
        assert bond_loan.payments == ()
        assert store.list_loans() == [bond_loan]

    def test_ids_are_unique(self, store) -> None:
        ids = {
            store.create_loan("Ravi", 1000, 12, date(2024, 1, 1), "Bond").loan_id
            for _ in range(5)
        }
        assert len(ids) == 5

    def test_gold_loan_requires_grams(self, store) -> None:
        with pytest.raises(ValidationError, match="gold_grams"):
            store.create_loan("Ravi", 1000, 12, date(2024, 1, 1), LoanType.GOLD)

        loan = store.create_loan("Ravi", 1000, 12, date(2024, 1, 1), "Gold", gold_grams="12.5")
        assert loan.gold_grams == Decimal("12.5")

    def test_bond_loan_drops_grams(self, store) -> None:
        loan = store.create_loan("Ravi", 1000, 12, date(2024, 1, 1), "Bond", gold_grams=10)
        assert loan.gold_grams is None

    def test_float_inputs_convert_exactly(self, store) -> None:
        loan = store.create_loan("Ravi", 1000.1, 0.1, date(2024, 1, 1), "Bond")
        assert loan.amount == Decimal("1000.1")
        assert loan.interest_rate == Decimal("0.1")

    def test_datetime_start_date_keeps_calendar_date(self, store) -> None:
        loan = store.create_loan("Ravi", 1000, 12, datetime(2024, 1, 5, 17, 30), "Bond")
        assert loan.start_date == date(2024, 1, 5)

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"borrower_name": "   "}, "borrower_name"),
            ({"amount": 0}, "amount"),
            ({"amount": -5}, "amount"),
            ({"amount": "lots"}, "amount"),
            ({"amount": True}, "amount"),
            ({"amount": float("nan")}, "amount"),
            ({"interest_rate": -1}, "interest_rate"),
            ({"interest_rate": 101}, "interest_rate"),
            ({"start_date": "2024-01-01"}, "start_date"),
            ({"loan_type": "Silver"}, "loan_type"),
        ],
    )
    def test_invalid_input(self, store, kwargs, message) -> None:
        values = {
            "borrower_name": "Ravi",
            "amount": 1000,
            "interest_rate": 12,
            "start_date": date(2024, 1, 1),
            "loan_type": "Bond",
        }
        values.update(kwargs)

        with pytest.raises(ValidationError, match=message):
            store.create_loan(**values)
        assert store.list_loans() == []

    def test_zero_rate_allowed(self, store) -> None:
        loan = store.create_loan("Ravi", 1000, 0, date(2024, 1, 1), "Bond")
        assert loan.interest_rate == 0


class TestAddLoan:
    """Tests for bulk import of built loans."""

    def test_add_loan_with_payments(self, store, sample_loan) -> None:
        store.add_loan(sample_loan)

        assert store.get_loan("loan-001") is sample_loan

    def test_duplicate_loan_rejected(self, store, sample_loan) -> None:
        store.add_loan(sample_loan)

        with pytest.raises(InvalidEntityStateError, match="already exists"):
            store.add_loan(sample_loan)

    def test_duplicate_payment_ids_rejected(self, store) -> None:
        payment = make_payment(100, payment_id="dup")
        loan = make_loan(payments=(payment, payment))

        with pytest.raises(ValidationError, match="Duplicate payment"):
            store.add_loan(loan)

    def test_invalid_payment_rejected(self, store) -> None:
        loan = make_loan(payments=(make_payment(0),))

        with pytest.raises(ValidationError):
            store.add_loan(loan)


class TestUpdateLoan:
    """Tests for partial loan updates."""

    def test_update_fields(self, store, bond_loan) -> None:
        updated = store.update_loan(
            bond_loan.loan_id,
            borrower_name="Asha V.",
            interest_rate="11.5",
            notes="renegotiated",
        )

        assert updated.borrower_name == "Asha V."
        assert updated.interest_rate == Decimal("11.5")
        assert updated.notes == "renegotiated"
        assert updated.amount == bond_loan.amount
        assert store.get_loan(bond_loan.loan_id) == updated

    def test_snapshot_is_unchanged(self, store, bond_loan) -> None:
        store.update_loan(bond_loan.loan_id, borrower_name="Someone Else")
        assert bond_loan.borrower_name == "Asha Verma"

    def test_amount_change_rejected(self, store, bond_loan) -> None:
        with pytest.raises(InvalidEntityStateError, match="amount"):
            store.update_loan(bond_loan.loan_id, amount=60000)
        assert store.get_loan(bond_loan.loan_id).amount == Decimal("50000")

    def test_same_amount_is_accepted(self, store, bond_loan) -> None:
        updated = store.update_loan(bond_loan.loan_id, amount="50000.00", notes="ok")
        assert updated.amount == Decimal("50000")

    def test_unknown_field_rejected(self, store, bond_loan) -> None:
        with pytest.raises(ValidationError, match="colour"):
            store.update_loan(bond_loan.loan_id, colour="red")

    def test_switch_to_gold_needs_grams(self, store, bond_loan) -> None:
        with pytest.raises(ValidationError, match="gold_grams"):
            store.update_loan(bond_loan.loan_id, loan_type="Gold")

        updated = store.update_loan(bond_loan.loan_id, loan_type="Gold", gold_grams=20)
        assert updated.loan_type == LoanType.GOLD
        assert updated.gold_grams == Decimal("20")

    def test_switch_to_bond_drops_grams(self, store) -> None:
        loan = store.create_loan("Ravi", 1000, 12, date(2024, 1, 1), "Gold", gold_grams=5)

        updated = store.update_loan(loan.loan_id, loan_type=LoanType.BOND)

        assert updated.gold_grams is None

    def test_payments_survive_update(self, store, bond_loan) -> None:
        store.create_payment(bond_loan.loan_id, 500, date(2024, 2, 15), "interest")

        updated = store.update_loan(bond_loan.loan_id, notes="x")

        assert len(updated.payments) == 1

    def test_missing_loan(self, store) -> None:
        with pytest.raises(EntityNotFoundError):
            store.update_loan("missing", notes="x")


class TestDeleteLoan:
    """Tests for loan deletion."""

    def test_delete_cascades_payments(self, store, bond_loan) -> None:
        store.create_payment(bond_loan.loan_id, 500, date(2024, 2, 15), PaymentType.INTEREST)

        store.delete_loan(bond_loan.loan_id)

        assert store.list_loans() == []
        assert store.summary()["payments"] == 0

    def test_delete_missing(self, store) -> None:
        with pytest.raises(EntityNotFoundError):
            store.delete_loan("missing")


class TestPayments:
    """Tests for payment writes."""

    def test_create_payment(self, store, bond_loan) -> None:
        payment = store.create_payment(
            bond_loan.loan_id,
            amount="2000",
            payment_date=date(2024, 2, 15),
            payment_type="principal",
            notes="first",
        )

        loan = store.get_loan(bond_loan.loan_id)
        assert loan.payments == (payment,)
        assert payment.payment_type == PaymentType.PRINCIPAL
        assert payment.amount == Decimal("2000")
        assert payment.notes == "first"

    def test_payments_keep_order(self, store, bond_loan) -> None:
        first = store.create_payment(bond_loan.loan_id, 100, date(2024, 3, 1), "interest")
        second = store.create_payment(bond_loan.loan_id, 100, date(2024, 2, 1), "interest")

        assert store.get_loan(bond_loan.loan_id).payments == (first, second)

    def test_payment_on_missing_loan(self, store) -> None:
        with pytest.raises(EntityNotFoundError):
            store.create_payment("missing", 100, date(2024, 2, 1), "interest")

    @pytest.mark.parametrize(
        ("amount", "payment_type"),
        [(0, "interest"), (-10, "principal"), (100, "fees")],
    )
    def test_invalid_payment(self, store, bond_loan, amount, payment_type) -> None:
        with pytest.raises(ValidationError):
            store.create_payment(bond_loan.loan_id, amount, date(2024, 2, 1), payment_type)
        assert store.get_loan(bond_loan.loan_id).payments == ()

    def test_delete_payment(self, store, bond_loan) -> None:
        keep = store.create_payment(bond_loan.loan_id, 100, date(2024, 2, 1), "interest")
        drop = store.create_payment(bond_loan.loan_id, 200, date(2024, 3, 1), "interest")

        store.delete_payment(bond_loan.loan_id, drop.payment_id)

        assert store.get_loan(bond_loan.loan_id).payments == (keep,)

    def test_delete_missing_payment(self, store, bond_loan) -> None:
        with pytest.raises(EntityNotFoundError, match="Payment"):
            store.delete_payment(bond_loan.loan_id, "missing")


class TestMoiEntries:
    """Tests for MOI ledger writes."""

    def test_create_and_delete(self, store) -> None:
        entry = store.create_moi_entry("Wedding gift", "5001", date(2024, 5, 12), "  ")

        assert entry.amount == Decimal("5001")
        assert entry.description is None
        assert store.list_moi_entries() == [entry]

        store.delete_moi_entry(entry.entry_id)
        assert store.list_moi_entries() == []

    def test_negative_amount_allowed(self, store) -> None:
        entry = store.create_moi_entry("Returned", -500, date(2024, 5, 12))
        assert entry.amount == Decimal("-500")

    def test_name_required(self, store) -> None:
        with pytest.raises(ValidationError, match="name"):
            store.create_moi_entry("", 100, date(2024, 5, 12))

    def test_delete_missing(self, store) -> None:
        with pytest.raises(EntityNotFoundError):
            store.delete_moi_entry("missing")


class TestSummary:
    """Tests for store summary."""

    def test_empty_store(self, store) -> None:
        assert store.summary() == {"loans": 0, "payments": 0, "moi_entries": 0}

    def test_counts(self, store, sample_loan) -> None:
        store.add_loan(sample_loan)
        store.create_moi_entry("Gift", 100, date(2024, 1, 1))

        assert store.summary() == {"loans": 1, "payments": 2, "moi_entries": 1}
