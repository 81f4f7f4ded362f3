"""Command-line interface for codeinventory."""

import argparse
import sys

from codeinventory.config import ConfigError, build_config
from codeinventory.constants import __version__
from codeinventory.output_generators import create_document, format_size


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad flags as invalid options with status 1."""

    def error(self, message):
        print(f"Invalid option: {message}", file=sys.stderr)
        self.print_usage(sys.stderr)
        self.exit(1)


class _HelpAction(argparse.Action):
    """Print help and stop at once with the help exit status."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        parser.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="codeinventory",
        description=(
            "Bundle the text files of a directory tree into one Markdown "
            "document with a file inventory, for use as LLM context."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "positional",
        nargs="*",
        metavar="DIRECTORY",
        help="Directory to scan, when -d is not given and exactly one is passed.",
    )
    parser.add_argument(
        "-i",
        "--include",
        metavar="EXTENSIONS",
        help="Only include files with these comma-separated extensions.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="EXTENSIONS",
        help="Exclude files with these comma-separated extensions.",
    )
    parser.add_argument(
        "-d",
        "--directory",
        help="The target directory to scan; overrides DIRECTORY.",
    )
    parser.add_argument(
        "-H",
        "--exclude-hidden",
        action="store_true",
        help="Exclude hidden files and directories.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Annotate skipped files and show progress on stderr.",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the document to this file instead of standard output.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-h", "--help", action=_HelpAction, help="Show this help message and exit.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the codeinventory CLI.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # A trailing positional names the directory only when it is the sole one
    target_dir = args.directory
    if target_dir is None:
        target_dir = args.positional[0] if len(args.positional) == 1 else "."

    try:
        config = build_config(
            target_dir,
            include=args.include,
            exclude=args.exclude,
            exclude_hidden=args.exclude_hidden,
            verbose=args.verbose,
            output=args.output,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    document, records = create_document(config)

    if config.output is None:
        sys.stdout.write(document)
        sys.stdout.flush()
    else:
        try:
            config.output.parent.mkdir(parents=True, exist_ok=True)
            with open(config.output, "w", encoding="utf-8", newline="") as out_file:
                out_file.write(document)
        except OSError as e:
            print(f"Error: Could not write to {config.output}: {e}", file=sys.stderr)
            return 1

    if config.verbose:
        print(f"✅ Processed {len(records)} files", file=sys.stderr)
        print(f"📊 Total lines: {sum(r.lines for r in records):,}", file=sys.stderr)
        print(f"💾 Total size: {format_size(sum(r.size for r in records))}", file=sys.stderr)
        if config.output is not None:
            print(f"📄 Output: {config.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
