"""Configuration management."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .domain.models import PeriodType

# Load .env file from current working directory
load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class NoteSettings:
    """Folder and name templates for one kind of periodic note."""

    format: str
    folder: str = ""


DEFAULT_FORMATS = {
    PeriodType.DAILY: "yyyy-MM-dd",
    PeriodType.WEEKLY: "yyyy-'W'ww",
    PeriodType.MONTHLY: "yyyy-MM",
    PeriodType.QUARTERLY: "yyyy-qqq",
    PeriodType.YEARLY: "yyyy",
}


def default_notes() -> dict[PeriodType, NoteSettings]:
    return {kind: NoteSettings(format=fmt) for kind, fmt in DEFAULT_FORMATS.items()}


@dataclass
class Config:
    """Application configuration."""

    vault_path: Path | None = None
    notes: dict[PeriodType, NoteSettings] = field(default_factory=default_notes)

    def settings_for(self, period_type: PeriodType) -> NoteSettings:
        return self.notes[period_type]

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Each period type (daily, weekly, monthly, quarterly, yearly) may have
        its own mapping with ``folder`` and ``format`` keys; missing keys keep
        their defaults.

        Environment variables take precedence over YAML values:
        - PERIODIC_NOTES_VAULT_PATH: Path to the vault the notes live in
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a mapping")

        known = {kind.value for kind in PeriodType}
        unknown = sorted(set(data) - known - {"vault_path"})
        if unknown:
            raise ValueError(f"Unknown period types in {path}: {', '.join(unknown)}")

        notes = default_notes()
        for kind in PeriodType:
            section = data.get(kind.value) or {}
            if not isinstance(section, dict):
                raise ValueError(f"Section '{kind.value}' in {path} must be a mapping")
            notes[kind] = NoteSettings(
                format=section.get("format", notes[kind].format),
                folder=section.get("folder", notes[kind].folder),
            )

        # Environment variables take precedence over YAML config
        vault_path = os.environ.get("PERIODIC_NOTES_VAULT_PATH") or data.get("vault_path")

        logger.info(f"Loaded configuration from {path}")
        return cls(
            vault_path=Path(vault_path).expanduser() if vault_path else None,
            notes=notes,
        )
