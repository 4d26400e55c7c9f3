"""JSON file sink: one file per record kind."""

import json
import logging
from pathlib import Path
from typing import Any

from lend_track.exceptions import SinkError
from lend_track.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each batch to ``<output_dir>/<entity_type>.json``.

    A later batch of the same kind replaces the earlier file.

    Parameters
    ----------
    output_dir : str | Path
        Target directory, created if missing.
    pretty : bool
        Indent the JSON.

    Raises
    ------
    SinkError
        If the directory cannot be created.
    """

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkError(f"Cannot create output directory {self.output_dir}: {exc}") from exc

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Serialize ``records`` and write them as a JSON array."""
        path = self.output_dir / f"{entity_type}.json"
        rows = [to_dict(record) for record in records]

        try:
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(rows, fh, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Failed to write {path}: {exc}") from exc

        self._counts[entity_type] = len(rows)
        logger.debug("Wrote %d %s to %s", len(rows), entity_type, path)

    def close(self) -> None:
        """Report the files written."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
