"""Static tables and markers shared across codeinventory."""

# Extension (as extracted, case-sensitive) -> code fence language tag
LANGUAGE_MAP: dict[str, str] = {
    "js": "javascript",
    "py": "python",
    "rb": "ruby",
    "sh": "bash",
    "bash": "bash",
    "php": "php",
    "java": "java",
    "go": "go",
    "rs": "rust",
    "cpp": "cpp",
    "cc": "cpp",
    "c": "c",
    "cs": "csharp",
    "ts": "typescript",
    "html": "html",
    "css": "css",
    "md": "markdown",
    "json": "json",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
}

__version__ = "0.1.0"

DEFAULT_LANGUAGE = "text"

# Read size used while checking that a file is text
TEXT_CHUNK_BYTES = 8192

NO_FILES_MESSAGE = "No matching files found."

INVENTORY_BEGIN = "<!-- BEGIN_FILE_INVENTORY -->"
INVENTORY_END = "<!-- END_FILE_INVENTORY -->"
FILE_BEGIN = '<!-- BEGIN_FILE id="{id}" path="{path}" -->'
FILE_END = '<!-- END_FILE id="{id}" -->'
SKIPPED_FILE = "<!-- SKIPPED_FILE: {path} (Reason: {reason}) -->"
