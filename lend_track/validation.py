"""Input validation for the record store's write paths.

The ledger and reminder functions trust the entities they are given; every
check on user-supplied values happens here, before anything is written.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from lend_track.exceptions import ValidationError
from lend_track.models import Loan, LoanType, MoiEntry, Payment, PaymentType

MAX_INTEREST_RATE = Decimal("100")


def to_decimal(value: Any, field_name: str) -> Decimal:
    """Convert a numeric input to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValidationError(f"{field_name} must be numeric, got {value!r}") from exc
    else:
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")

    if not result.is_finite():
        raise ValidationError(f"{field_name} must be finite, got {value!r}")
    return result


def clean_text(value: str | None) -> str | None:
    """Normalize optional free text: blank strings become ``None``."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_text(value: str | None, field_name: str) -> str:
    text = clean_text(value)
    if text is None:
        raise ValidationError(f"{field_name} is required")
    return text


def require_positive(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than zero, got {amount}")
    return amount


def validate_interest_rate(value: Any) -> Decimal:
    rate = to_decimal(value, "interest_rate")
    if rate < 0 or rate > MAX_INTEREST_RATE:
        raise ValidationError(f"interest_rate must be between 0 and 100, got {rate}")
    return rate


def validate_loan_type(value: Any) -> LoanType:
    try:
        return LoanType(value)
    except ValueError as exc:
        allowed = ", ".join(t.value for t in LoanType)
        raise ValidationError(f"loan_type must be one of {allowed}, got {value!r}") from exc


def validate_payment_type(value: Any) -> PaymentType:
    try:
        return PaymentType(value)
    except ValueError as exc:
        allowed = ", ".join(t.value for t in PaymentType)
        raise ValidationError(f"payment_type must be one of {allowed}, got {value!r}") from exc


def validate_gold_grams(loan_type: LoanType, gold_grams: Any) -> Decimal | None:
    """Gold loans carry a positive weight; Bond loans carry none."""
    if loan_type == LoanType.GOLD:
        if gold_grams is None:
            raise ValidationError("gold_grams is required for Gold loans")
        return require_positive(gold_grams, "gold_grams")
    return None


def validate_payment(payment: Payment) -> None:
    """Check an already-built payment before it is stored."""
    require_positive(payment.amount, "amount")
    validate_payment_type(payment.payment_type)
    if not isinstance(payment.date, date):
        raise ValidationError(f"payment date must be a date, got {payment.date!r}")


def validate_loan(loan: Loan) -> None:
    """Check an already-built loan and its payments before it is stored."""
    require_text(loan.borrower_name, "borrower_name")
    require_positive(loan.amount, "amount")
    validate_interest_rate(loan.interest_rate)
    if not isinstance(loan.start_date, date):
        raise ValidationError(f"start_date must be a date, got {loan.start_date!r}")
    kind = validate_loan_type(loan.loan_type)
    validate_gold_grams(kind, loan.gold_grams)

    seen: set[str] = set()
    for payment in loan.payments:
        if payment.payment_id in seen:
            raise ValidationError(
                f"Duplicate payment {payment.payment_id} on loan {loan.loan_id}"
            )
        seen.add(payment.payment_id)
        validate_payment(payment)


def validate_moi_entry(entry: MoiEntry) -> None:
    """Check an already-built MOI entry before it is stored."""
    require_text(entry.name, "name")
    to_decimal(entry.amount, "amount")
    if not isinstance(entry.date, date):
        raise ValidationError(f"entry date must be a date, got {entry.date!r}")
