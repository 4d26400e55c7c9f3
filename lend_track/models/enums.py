"""Enumeration types for loan book entities."""

from enum import Enum


class LoanType(str, Enum):
    GOLD = "Gold"
    BOND = "Bond"


class PaymentType(str, Enum):
    PRINCIPAL = "principal"
    INTEREST = "interest"
