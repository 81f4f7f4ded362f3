"""File system operations and file processing utilities."""

import os
import pathlib
import stat
from collections.abc import Iterable

import pathspec
from tqdm import tqdm

from codeinventory.config import Config
from codeinventory.language_detection import get_extension, get_language_tag, is_text_file
from codeinventory.models import Classification, DiscoveredFile, FileRecord, SkipReason


def compile_extension_pattern(extensions: Iterable[str]) -> pathspec.PathSpec:
    """Compile extensions into a PathSpec matching filenames ending in them.

    Each extension becomes an escaped ``*.<ext>`` pattern, so matching is
    case-sensitive and anchored to the end of the filename. No extensions
    gives a spec that matches nothing.

    Args:
        extensions: Extensions without the leading dot

    Returns:
        PathSpec to be matched against bare filenames
    """
    patterns = [
        "*." + pathspec.patterns.GitWildMatchPattern.escape(ext.strip())
        for ext in sorted(extensions)
        if ext.strip()
    ]
    return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, patterns)


def is_hidden_path(relative_path: pathlib.Path) -> bool:
    """Check whether any component of a relative path starts with a dot."""
    return any(part.startswith(".") for part in relative_path.parts)


def discover_files(
    start_path: pathlib.Path,
    exclude_hidden: bool = False,
    skip_paths: Iterable[pathlib.Path] = (),
) -> list[DiscoveredFile]:
    """Recursively list the regular files under start_path.

    With exclude_hidden, dot directories are not descended into and dotfiles
    are not listed. The result is sorted by absolute path string so that
    repeated runs over an unchanged tree give the same order.

    Args:
        start_path: Absolute directory to walk
        exclude_hidden: Prune anything with a dot-prefixed path component
        skip_paths: Absolute paths to leave out, such as the output file

    Returns:
        Discovered files in sorted order
    """
    skipped = {str(p) for p in skip_paths}
    discovered = []

    for root, dirs, files in os.walk(start_path, topdown=True):
        root_path = pathlib.Path(root)

        if exclude_hidden:
            dirs[:] = [d for d in dirs if not d.startswith(".")]

        for filename in files:
            if exclude_hidden and filename.startswith("."):
                continue

            file_path = root_path / filename
            if str(file_path) in skipped:
                continue
            if not stat.S_ISREG(os.lstat(file_path).st_mode):
                continue

            relative_path = file_path.relative_to(start_path)
            discovered.append(
                DiscoveredFile(
                    path=file_path,
                    relative_path=relative_path,
                    is_hidden=is_hidden_path(relative_path),
                )
            )

    discovered.sort(key=lambda f: str(f.path))
    return discovered


def classify_file(
    discovered: DiscoveredFile,
    config: Config,
    include_spec: pathspec.PathSpec,
    exclude_spec: pathspec.PathSpec,
) -> Classification:
    """Decide whether a discovered file is kept.

    Checks run in a fixed order and stop at the first one that skips the
    file: hidden name, include filter, exclude filter, then content type.

    Args:
        discovered: File to classify
        config: Run configuration
        include_spec: Compiled include extensions
        exclude_spec: Compiled exclude extensions

    Returns:
        Classification carrying the skip reason, if any
    """
    name = discovered.name

    if config.exclude_hidden and name.startswith("."):
        return Classification(discovered, SkipReason.HIDDEN_FILE)
    if config.include_extensions and not include_spec.match_file(name):
        return Classification(discovered, SkipReason.NOT_IN_INCLUDE_FILTER)
    if config.exclude_extensions and exclude_spec.match_file(name):
        return Classification(discovered, SkipReason.MATCHED_EXCLUDE_FILTER)
    if not is_text_file(discovered.path):
        return Classification(discovered, SkipReason.NON_TEXT_FILE)
    return Classification(discovered)


def count_lines(file_path: pathlib.Path) -> int:
    """Count lines in a file, including a final line with no newline.

    Args:
        file_path: Path to the file

    Returns:
        Number of lines in the file
    """
    with open(file_path, "rb") as f:
        return sum(1 for _ in f)


def build_file_record(file_id: int, discovered: DiscoveredFile) -> FileRecord:
    """Extract the metadata rendered for a kept file."""
    extension = get_extension(discovered.name)
    return FileRecord(
        id=file_id,
        path=discovered.path,
        relative_path=discovered.relative_path,
        extension=extension,
        lines=count_lines(discovered.path),
        size=discovered.path.stat().st_size,
        language=get_language_tag(extension),
    )


def collect_file_records(kept: list[DiscoveredFile], verbose: bool = False) -> list[FileRecord]:
    """Number kept files from 1 in their discovery order and build records."""
    records = []
    with tqdm(total=len(kept), desc="Processing", unit="file", disable=not verbose) as pbar:
        for file_id, discovered in enumerate(kept, start=1):
            records.append(build_file_record(file_id, discovered))
            pbar.update(1)
    return records
