"""Directory-polling file import: text files in, one persisted record per line."""

from importing.config import ImportSettings
from importing.flow import FileImportFlow
from importing.mapping import load_line_mapper
from importing.poller import DirectoryPoller

__all__ = ["ImportSettings", "FileImportFlow", "DirectoryPoller", "load_line_mapper"]
