"""Import settings, read from key/value environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass(frozen=True)
class ImportSettings:
    source_dir: Path
    dest_dir: Path | None = None
    poll_interval_ms: int = 2000
    file_suffix: str = ".txt"
    encoding: str = "utf-8"
    line_mapper: str | None = None

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000

    @classmethod
    def from_env(cls) -> "ImportSettings | None":
        """Build settings from the environment; None when no source directory is configured."""
        source_dir = _optional_path("SOURCE_DIRECTORY_PATH")
        if source_dir is None:
            return None

        return cls(
            source_dir=source_dir,
            dest_dir=_optional_path("DEST_DIRECTORY_PATH"),
            poll_interval_ms=int(os.getenv("IMPORT_POLL_INTERVAL_MS", "2000")),
            file_suffix=os.getenv("IMPORT_FILE_SUFFIX", ".txt"),
            encoding=os.getenv("IMPORT_ENCODING", "utf-8"),
            line_mapper=os.getenv("IMPORT_LINE_MAPPER") or None,
        )
