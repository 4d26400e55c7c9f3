"""MOI entry generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Iterator

from lend_track.generators.base import BaseGenerator
from lend_track.models import MoiEntry


class MoiEntryGenerator(BaseGenerator):
    """Generate synthetic MOI ledger entries."""

    def generate(self, as_of: date | None = None) -> MoiEntry:
        """Generate a single entry dated within the year before ``as_of``."""
        as_of = as_of or date.today()
        amount = self.round_amount(500, 100000, 500)

        return MoiEntry(
            entry_id=self.new_id(),
            name=self.fake.name(),
            amount=amount,
            date=as_of - timedelta(days=random.randint(0, 365)),
            description=self.fake.sentence(nb_words=6) if random.random() < 0.5 else None,
        )

    def generate_batch(self, count: int, as_of: date | None = None) -> Iterator[MoiEntry]:
        """Generate ``count`` entries."""
        for _ in range(count):
            yield self.generate(as_of)
