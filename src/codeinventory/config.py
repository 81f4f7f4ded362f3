"""Run configuration for codeinventory."""

import pathlib
from dataclasses import dataclass


class ConfigError(Exception):
    """Raised when the requested configuration cannot be run."""


@dataclass(frozen=True)
class Config:
    """Validated settings for a single run.

    Attributes:
        target_directory: Directory to scan (absolute)
        include_extensions: Only keep files with one of these extensions
        exclude_extensions: Drop files with one of these extensions
        exclude_hidden: Leave out dotfiles and anything under a dot directory
        verbose: Annotate skipped files and report progress on stderr
        output: File to write the document to, or None for stdout
    """

    target_directory: pathlib.Path
    include_extensions: frozenset[str] = frozenset()
    exclude_extensions: frozenset[str] = frozenset()
    exclude_hidden: bool = False
    verbose: bool = False
    output: pathlib.Path | None = None


def parse_extensions(value: str | None) -> frozenset[str]:
    """Split a comma-separated extension list, trimming each token.

    Examples:
        >>> sorted(parse_extensions(" py, md ,,"))
        ['md', 'py']
    """
    if not value:
        return frozenset()
    return frozenset(token.strip() for token in value.split(",") if token.strip())


def build_config(
    target_directory: str = ".",
    include: str | None = None,
    exclude: str | None = None,
    exclude_hidden: bool = False,
    verbose: bool = False,
    output: str | None = None,
) -> Config:
    """Build and validate a Config from raw option values.

    Raises:
        ConfigError: if both include and exclude lists are non-empty, or the
            target directory does not exist
    """
    include_extensions = parse_extensions(include)
    exclude_extensions = parse_extensions(exclude)
    if include_extensions and exclude_extensions:
        raise ConfigError("Cannot use both include (-i) and exclude (-e) options together.")

    target_path = pathlib.Path(target_directory)
    if not target_path.is_dir():
        raise ConfigError(f"Directory not found: {target_directory}")

    return Config(
        target_directory=target_path.resolve(),
        include_extensions=include_extensions,
        exclude_extensions=exclude_extensions,
        exclude_hidden=exclude_hidden,
        verbose=verbose,
        output=pathlib.Path(output).resolve() if output else None,
    )
