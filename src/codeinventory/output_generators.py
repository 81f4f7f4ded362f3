"""Markdown output generation utilities."""

import sys

from tqdm import tqdm

from codeinventory.config import Config
from codeinventory.constants import (
    FILE_BEGIN,
    FILE_END,
    INVENTORY_BEGIN,
    INVENTORY_END,
    NO_FILES_MESSAGE,
    SKIPPED_FILE,
)
from codeinventory.file_operations import (
    classify_file,
    collect_file_records,
    compile_extension_pattern,
    discover_files,
)
from codeinventory.models import Classification, FileRecord


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string like "1.5 MB"
    """
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} TB"


def generate_inventory(records: list[FileRecord]) -> str:
    """Generate the inventory block listing every kept file.

    Args:
        records: FileRecord objects in id order

    Returns:
        Markdown inventory wrapped in the inventory sentinel comments
    """
    inventory = f"{INVENTORY_BEGIN}\n"
    inventory += "# File Inventory\n\n"
    inventory += f"Total files: {len(records)}\n\n"
    inventory += "| ID | Path | Type | Lines | Size |\n"
    inventory += "|----|------|------|-------|------|\n"

    for record in records:
        inventory += (
            f"| {record.id} | `{record.relative_path.as_posix()}` | {record.extension} | "
            f"{record.lines} | {record.size} |\n"
        )

    inventory += f"{INVENTORY_END}\n"
    return inventory


def generate_skip_annotation(classification: Classification) -> str:
    return (
        SKIPPED_FILE.format(
            path=classification.file.relative_path.as_posix(),
            reason=classification.skip_reason.value,
        )
        + "\n"
    )


def generate_file_section(record: FileRecord) -> str:
    """Render one kept file: header, metadata line and fenced contents.

    The contents are copied verbatim, newlines included.
    """
    with open(record.path, encoding="utf-8", errors="strict", newline="") as code_file:
        content = code_file.read()

    path = record.relative_path.as_posix()
    section = FILE_BEGIN.format(id=record.id, path=path) + "\n"
    section += f"## File {record.id}: `{path}`\n\n"
    section += (
        f"**Type:** {record.extension} | **Lines:** {record.lines} | "
        f"**Size:** {record.size} bytes\n\n"
    )
    # Code fence with language hint for syntax highlighting
    section += f"```{record.language}\n"
    section += content
    if content and not content.endswith("\n"):
        section += "\n"
    section += "```\n"
    section += FILE_END.format(id=record.id) + "\n"
    return section


def render_document(
    records: list[FileRecord], skipped: list[Classification], verbose: bool = False
) -> str:
    """Assemble the full document from finalized records.

    Args:
        records: Kept files in id order
        skipped: Skipped files to annotate, in discovery order
        verbose: Show a progress bar on stderr

    Returns:
        The document text, or the no-files message when nothing was kept
    """
    if not records:
        return NO_FILES_MESSAGE + "\n"

    parts = [generate_inventory(records), "\n"]
    if skipped:
        parts.extend(generate_skip_annotation(c) for c in skipped)
        parts.append("\n")

    sections = []
    for record in tqdm(records, desc="Writing", unit="file", disable=not verbose):
        sections.append(generate_file_section(record))
    parts.append("\n".join(sections))
    return "".join(parts)


def create_document(config: Config) -> tuple[str, list[FileRecord]]:
    """Run the pipeline for a configuration and return the document.

    Discovery and classification finish, and every kept file has its id,
    before rendering starts.

    Args:
        config: Validated run configuration

    Returns:
        The rendered document and the records it was built from
    """
    start_path = config.target_directory
    skip_paths = [config.output] if config.output else []

    if config.verbose:
        print(f"📂 Scanning directory: {start_path}", file=sys.stderr)

    include_spec = compile_extension_pattern(config.include_extensions)
    exclude_spec = compile_extension_pattern(config.exclude_extensions)

    kept = []
    skipped = []
    for discovered in discover_files(start_path, config.exclude_hidden, skip_paths):
        classification = classify_file(discovered, config, include_spec, exclude_spec)
        if classification.kept:
            kept.append(discovered)
        elif config.verbose:
            skipped.append(classification)

    if config.verbose:
        print(f"✓ Found {len(kept)} files to process, skipped {len(skipped)}", file=sys.stderr)

    records = collect_file_records(kept, config.verbose)
    return render_document(records, skipped, config.verbose), records
