"""CodeInventory: bundle a directory tree into a single Markdown document.

This package walks a directory, filters files by extension, visibility and
content type, and renders an inventory table followed by every kept file's
contents in a fenced code block.
"""

from codeinventory.cli import main
from codeinventory.constants import __version__
from codeinventory.models import FileRecord

__all__ = ["main", "FileRecord", "__version__"]
