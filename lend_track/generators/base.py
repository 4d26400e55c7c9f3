"""Shared setup for the sample data generators."""

from __future__ import annotations

import random
from abc import ABC
from decimal import Decimal

from faker import Faker


class BaseGenerator(ABC):
    """Faker-backed generator with reproducible output.

    Passing a seed seeds both this generator's Faker instance and the
    module-level ``random`` used for amounts, dates and choices.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for names and free text (default ``en_IN``).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_IN",
    ) -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def new_id(self) -> str:
        """Opaque entity id, seeded like the rest of the output."""
        return self.fake.uuid4().replace("-", "")

    @staticmethod
    def round_amount(low: int, high: int, step: int) -> Decimal:
        """Random amount between ``low`` and ``high`` in multiples of ``step``."""
        return Decimal(random.randint(low // step, high // step) * step)
