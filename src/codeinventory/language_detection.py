"""Language tag and text content detection utilities."""

import codecs
import pathlib

from codeinventory.constants import DEFAULT_LANGUAGE, LANGUAGE_MAP, TEXT_CHUNK_BYTES


def get_extension(filename: str) -> str:
    """Return the text after the last dot of a filename.

    A filename without any dot is its own extension.

    Examples:
        >>> get_extension("main.py")
        'py'
        >>> get_extension("README")
        'README'
    """
    return filename.rsplit(".", 1)[-1]


def get_language_tag(extension: str) -> str:
    """Map an extension to the language tag used on the code fence.

    Args:
        extension: Extension as returned by get_extension (case-sensitive)

    Returns:
        Language tag, 'text' for anything not in LANGUAGE_MAP

    Examples:
        >>> get_language_tag("yml")
        'yaml'
        >>> get_language_tag("PY")
        'text'
    """
    return LANGUAGE_MAP.get(extension, DEFAULT_LANGUAGE)


def is_text_file(file_path: pathlib.Path) -> bool:
    """Check whether a file holds text, reading it in chunks.

    Every chunk must be free of NUL bytes and the whole file must decode as
    UTF-8, so a kept file can always be read back strictly. Empty files are
    text; unreadable files are not.

    Args:
        file_path: Path to the file

    Returns:
        True if the file is UTF-8 text
    """
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(TEXT_CHUNK_BYTES), b""):
                if b"\x00" in chunk:
                    return False
                decoder.decode(chunk, final=False)
        decoder.decode(b"", final=True)
    except (OSError, UnicodeDecodeError):
        return False
    return True
