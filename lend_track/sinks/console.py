"""Console sink for inspecting a generated loan book."""

import json
from typing import Any

from lend_track.sinks.serialization import to_dict

RULE = "=" * 60


class ConsoleSink:
    """Print each batch of records to stdout as JSON.

    Parameters
    ----------
    pretty : bool
        Indent each record over several lines.
    max_records : int | None
        Print at most this many records per batch; ``None`` prints all.
    """

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def _dump(self, record: Any) -> str:
        indent = 2 if self.pretty else None
        return json.dumps(to_dict(record), indent=indent, ensure_ascii=False)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Print a header and the (possibly truncated) batch."""
        print(f"\n{RULE}\nEntity: {entity_type} ({len(records)} records)\n{RULE}")

        shown = records if self.max_records is None else records[: self.max_records]
        for record in shown:
            print(self._dump(record))

        hidden = len(records) - len(shown)
        if hidden > 0:
            print(f"... and {hidden} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print how many records of each kind went through the sink."""
        print(f"\n{RULE}\nConsole Sink Summary\n{RULE}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
