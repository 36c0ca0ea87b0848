"""File import flow: poll a directory, split files into lines, persist records.

One poll:
    1. make sure the source directory exists
    2. pick up files not seen before, in name order
    3. ignore names without the configured suffix
    4. read each file, split it on newlines, skip blank lines
    5. map every line to a record and add it in its own unit of work
    6. move the file to the destination directory, or delete it

A failing line stops its file: the lines before it stay committed and the
file is left where it is. The flow remembers every file it has looked at, so
a failed file is not retried by the same flow.
"""

import shutil
from pathlib import Path

import structlog
from protean import UnitOfWork

from importing.config import ImportSettings
from importing.mapping import LineMapper

logger = structlog.get_logger(__name__)


def split_lines(text: str) -> list[str]:
    lines = (line.rstrip("\r") for line in text.split("\n"))
    return [line for line in lines if line.strip()]


class FileImportFlow:
    def __init__(self, domain, settings: ImportSettings, mapper: LineMapper):
        self.domain = domain
        self.settings = settings
        self.mapper = mapper
        self._seen: set[Path] = set()

    def poll(self) -> list[Path]:
        """Import every new file once. Returns the files that were fully imported."""
        source_dir = self.settings.source_dir
        source_dir.mkdir(parents=True, exist_ok=True)

        imported = []
        for path in self._new_files(source_dir):
            if not path.name.endswith(self.settings.file_suffix):
                logger.debug("Skipping file with unexpected suffix", file=path.name)
                continue

            try:
                count = self.import_file(path)
            except Exception:
                logger.exception("File import failed", file=path.name)
                continue

            self._dispose(path)
            imported.append(path)
            logger.info("File imported", file=path.name, records=count)

        return imported

    def import_file(self, path: Path) -> int:
        """Persist one record per non-blank line of `path`. Returns the record count."""
        lines = split_lines(path.read_text(encoding=self.settings.encoding))

        with self.domain.domain_context():
            for line in lines:
                record = self.mapper(line)
                with UnitOfWork():
                    self.domain.repository_for(type(record)).add(record)

        return len(lines)

    def _new_files(self, source_dir: Path) -> list[Path]:
        files = sorted(p for p in source_dir.iterdir() if p.is_file() and p not in self._seen)
        self._seen.update(files)
        return files

    def _dispose(self, path: Path) -> None:
        dest_dir = self.settings.dest_dir
        if dest_dir is None:
            path.unlink()
            return

        dest_dir.mkdir(parents=True, exist_ok=True)
        target = dest_dir / path.name
        if target.exists():
            target.unlink()
        shutil.move(str(path), str(target))
