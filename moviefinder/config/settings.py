"""
Central configuration for MovieFinder.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class IndexSettings:
    """Settings for the title index."""

    # Title dataset file, looked up under the data directory
    data_file_name: str = "moviedata.tsv"

    # Suggestions returned when the caller does not ask for a limit,
    # and the ceiling on any requested limit
    max_suggestions: int = 10
    max_suggestions_cap: int = 100


@dataclass(frozen=True)
class ApiSettings:
    """Settings for the HTTP API."""

    title: str = "MovieFinder API"
    version: str = "0.1.0"

    # Bind address and port for the uvicorn server
    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.index.max_suggestions)
        print(settings.data_file)
    """

    project_root: Path = field(default_factory=_project_root)
    index: IndexSettings = field(default_factory=IndexSettings)
    api: ApiSettings = field(default_factory=ApiSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for runtime data (title file, logs)."""
        return self.project_root / "data"

    @property
    def data_file(self) -> Path:
        """Full path to the title dataset."""
        return self.data_dir / self.index.data_file_name

    @property
    def logs_dir(self) -> Path:
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create the data directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
