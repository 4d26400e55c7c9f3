"""Configuration management for lend-track."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lend_track.exceptions import ConfigurationError

DEFAULT_REMINDER_WINDOW_DAYS = 7


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in ("1", "true", "yes")


@dataclass
class ReminderConfig:
    """How far ahead the reminder scan looks, in days (0 means today only)."""

    window_days: int = DEFAULT_REMINDER_WINDOW_DAYS

    def __post_init__(self) -> None:
        if self.window_days < 0:
            raise ConfigurationError(
                f"Reminder window must be non-negative, got {self.window_days}"
            )


@dataclass
class OutputConfig:
    """Where exported JSON files go."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ScenarioConfig:
    """Shape of a generated sample loan book."""

    name: str
    num_loans: int = 25
    gold_loan_rate: float = 0.6
    payments_per_loan: int = 6
    repaid_rate: float = 0.2
    moi_entries: int = 10
    labels: dict[str, Any] = field(default_factory=dict)


@dataclass
class LendTrackConfig:
    """Top-level settings: reminders, output, sample data and logging."""

    reminders: ReminderConfig = field(default_factory=ReminderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    scenario: ScenarioConfig | None = None
    seed: int | None = None
    log_level: str = "INFO"
    locale: str = "en_IN"

    @classmethod
    def from_env(cls) -> "LendTrackConfig":
        """Build settings from environment variables.

        Reads ``REMINDER_WINDOW_DAYS``, ``OUTPUT_DIR``, ``PRETTY_JSON``,
        ``SEED``, ``LOG_LEVEL`` and ``FAKER_LOCALE``; anything unset keeps
        its default.

        Raises
        ------
        ConfigurationError
            If an integer variable does not parse or the window is negative.
        """
        return cls(
            reminders=ReminderConfig(
                window_days=_env_int("REMINDER_WINDOW_DAYS", DEFAULT_REMINDER_WINDOW_DAYS),
            ),
            output=OutputConfig(
                json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
                pretty_json=_env_flag("PRETTY_JSON"),
            ),
            seed=_env_int("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            locale=os.getenv("FAKER_LOCALE", "en_IN"),
        )
