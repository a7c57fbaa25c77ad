"""Main module for the EXIF labeler CLI."""

import sys
import argparse
from typing import List, Optional

from . import __version__
from .core import (
    ExifLabelerError,
    LabelerConfig,
    LabelingPipelineFactory,
    get_logger,
    run_labeling,
    set_debug_logging,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exif-labeler",
        description="Stamp a camera/lens/exposure caption onto every JPEG in images/original/",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Label images/original/*.jpg into images/output/
  exif-labeler

  # Same, with debug logging
  exif-labeler run --debug

  # Show version
  exif-labeler version
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    run_parser = subparsers.add_parser(
        "run", help="Label images/original/ into images/output/ (default)"
    )
    run_parser.add_argument(
        "--debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )

    subparsers.add_parser("version", help="Show version information")

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run(debug: bool = False) -> None:
    """Label the whole input directory; exit non-zero on the first failure."""
    logger = get_logger("exif-labeler")
    config = LabelerConfig(debug=debug)

    if config.debug:
        set_debug_logging()

    try:
        orchestrator = LabelingPipelineFactory.create_pipeline(debug=config.debug)
        summary = run_labeling(config, orchestrator)
        logger.debug(f"Run finished in state {summary.state.value}")
    except KeyboardInterrupt:
        logger.warning("Labeling interrupted by user.")
        sys.exit(130)
    except ExifLabelerError as e:
        logger.error(f"Labeling failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Labeling failed with unexpected error: {e}", exc_info=True)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the ``exif-labeler`` command.

    Without a subcommand it behaves like ``run``: process every JPEG in the
    fixed input directory once.
    """
    parser = build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    if args.command in (None, "run"):
        run(debug=args.debug)

    elif args.command == "version":
        print("EXIF Labeler CLI")
        print(f"Version {__version__}")
        print("Camera settings captions for JPEG photos")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
