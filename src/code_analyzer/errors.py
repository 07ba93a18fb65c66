# --- Error taxonomy ----------------------------------------------------------
from dataclasses import dataclass


class AnalyzerError(Exception):
    """Base class for everything the analyzer raises on purpose."""


class ScanError(AnalyzerError):
    """The scan could not start at all (missing or unreadable root)."""


class FileParseError(AnalyzerError):
    """One source file failed structural extraction."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryListError(AnalyzerError):
    """A directory could not be listed during the walk."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidThresholdError(AnalyzerError, ValueError):
    """The method-count threshold was not a non-negative integer."""

    def __init__(self, value):
        super().__init__(f"threshold must be a non-negative integer, got {value!r}")
        self.value = value


@dataclass(frozen=True)
class ScanDiagnostic:
    """A non-fatal failure recorded during a scan."""
    kind: str  # "file_parse" or "directory_list"
    path: str
    reason: str

    @classmethod
    def from_error(cls, error) -> "ScanDiagnostic":
        kind = "directory_list" if isinstance(error, DirectoryListError) else "file_parse"
        return cls(kind=kind, path=str(error.path), reason=error.reason)
