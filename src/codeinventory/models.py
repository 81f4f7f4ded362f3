"""Data models for codeinventory."""

import enum
import pathlib
from dataclasses import dataclass


class SkipReason(str, enum.Enum):
    """Why a discovered file was left out of the document."""

    HIDDEN_FILE = "hidden-file"
    NOT_IN_INCLUDE_FILTER = "not-in-include-filter"
    MATCHED_EXCLUDE_FILTER = "matched-exclude-filter"
    NON_TEXT_FILE = "non-text-file"


@dataclass(frozen=True)
class DiscoveredFile:
    """A regular file found while walking the target directory.

    Attributes:
        path: Absolute path to the file
        relative_path: Path relative to the target directory
        is_hidden: Whether any component of the relative path starts with a dot
    """

    path: pathlib.Path
    relative_path: pathlib.Path
    is_hidden: bool

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class Classification:
    """A discovered file tagged as kept, or skipped with a reason."""

    file: DiscoveredFile
    skip_reason: SkipReason | None = None

    @property
    def kept(self) -> bool:
        return self.skip_reason is None


@dataclass(frozen=True)
class FileRecord:
    """Metadata for a single kept file.

    Attributes:
        id: 1-based sequence number in sorted path order
        path: Absolute path to the file
        relative_path: Path relative to the target directory
        extension: Text after the last dot of the filename, or the whole
            filename when it has no dot
        lines: Number of lines, counting a final unterminated line
        size: File size in bytes
        language: Code fence language tag
    """

    id: int
    path: pathlib.Path
    relative_path: pathlib.Path
    extension: str
    lines: int
    size: int
    language: str
