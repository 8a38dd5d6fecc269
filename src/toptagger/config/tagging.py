"""Defaults for a top-seller tagging run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_TAG_NAME: Final[str] = "api-top-seller"
DEFAULT_PACING_SECONDS: Final[float] = 0.5
DEFAULT_SEARCH_LIMIT: Final[int] = 10
DEFAULT_INTAKE_DIR: Final[Path] = Path("intake")
DEFAULT_INPUT_FILENAME: Final[str] = "best sellers.csv"
DEFAULT_REPORT_TIMEZONE: Final[str] = "America/New_York"


@dataclass(frozen=True, slots=True)
class TaggingConfig:
    tag_name: str = DEFAULT_TAG_NAME
    pacing_seconds: float = DEFAULT_PACING_SECONDS
    search_limit: int = DEFAULT_SEARCH_LIMIT
    strict_matching: bool = False
    input_path: Path = DEFAULT_INTAKE_DIR / DEFAULT_INPUT_FILENAME
    report_dir: Path = DEFAULT_INTAKE_DIR
    report_timezone: str = DEFAULT_REPORT_TIMEZONE

    def __post_init__(self) -> None:
        if not self.tag_name.strip():
            raise ValueError("Tag name must not be blank")
        if self.pacing_seconds < 0:
            raise ValueError("Pacing delay must be non-negative")
        if self.search_limit < 1:
            raise ValueError("Search limit must be at least 1")


def get_tagging_config() -> TaggingConfig:
    return TaggingConfig()
