"""Output sinks for exporting a loan book."""

from lend_track.sinks.console import ConsoleSink
from lend_track.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
