"""Scenarios for generating sample loan books."""

from lend_track.scenarios.loan_book import LoanBookScenario

__all__ = ["LoanBookScenario"]
