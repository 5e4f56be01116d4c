"""Command-line interface for issue-shelf."""

import argparse
import logging
import sys
from pathlib import Path

from issue_shelf.builder import build_site
from issue_shelf.exceptions import SiteBuildError

DEFAULT_METADATA_PATH = Path("metadata.json")
DEFAULT_TEMPLATE_PATH = Path("index.template.html")
DEFAULT_OUTPUT_PATH = Path("index.html")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build(args: argparse.Namespace) -> int:
    """Execute the build.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        result = build_site(
            metadata_path=args.metadata,
            template_path=args.template,
            output_path=args.output,
        )
    except SiteBuildError as e:
        logger.error(f"Failed to generate {args.output}: {e}")
        return 1

    print(f"✅ Successfully generated {result.output_path} with {result.issue_count} issues")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="issue-shelf",
        description="Generate a static landing page listing a magazine's issues",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=DEFAULT_METADATA_PATH,
        help=f"Site metadata JSON document (default: {DEFAULT_METADATA_PATH})",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=DEFAULT_TEMPLATE_PATH,
        help=f"Page template with placeholder tokens (default: {DEFAULT_TEMPLATE_PATH})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help=f"Generated page, overwritten on each run (default: {DEFAULT_OUTPUT_PATH})",
    )

    args = parser.parse_args(argv)
    return build(args)


if __name__ == "__main__":
    sys.exit(main())
