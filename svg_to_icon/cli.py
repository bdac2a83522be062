"""
Command-line interface for converting SVG files into icon components.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from svg_to_icon.config.default import load_settings
from svg_to_icon.core.converter import SVGConverter, results_frame, summarize
from svg_to_icon.core.extractor import MarkupExtractor
from svg_to_icon.core.generator import ComponentGenerator
from svg_to_icon.core.validator import MarkupValidator
from svg_to_icon.utils.io import save_config, save_results

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def ask_overwrite(file_name: str) -> bool:
    """Ask on the terminal whether an existing file may be replaced."""
    answer = input(f"File {file_name} already exists. Overwrite? [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def build_converter(args: argparse.Namespace, settings: Dict[str, Any]) -> SVGConverter:
    """
    Create a converter from parsed arguments and settings.

    Args:
        args: Parsed command-line arguments
        settings: Settings merged over the defaults

    Returns:
        Configured SVGConverter
    """
    confirm = ask_overwrite if sys.stdin is not None and sys.stdin.isatty() else None

    return SVGConverter(
        output_dir=args.output_dir,
        overwrite=args.force,
        confirm_overwrite=confirm,
        check_markup=settings["check_markup"] and not args.no_check,
        extractor=MarkupExtractor(default_size=settings["default_size"]),
        generator=ComponentGenerator(
            component_package=settings["component_package"],
            wrapper_component=settings["wrapper_component"],
            props_type=settings["props_type"],
            component_suffix=settings["component_suffix"],
            file_extension=settings["file_extension"],
        ),
        validator=MarkupValidator(max_markup_size=settings["max_markup_size"]),
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert SVG files into icon components.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "input",
        type=str,
        help="SVG file or directory of SVG files to convert",
    )

    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        help="Directory to write components to (defaults to the source directory)",
    )

    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing component files without asking",
    )

    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Descend into subdirectories when converting a directory",
    )

    parser.add_argument(
        "--report",
        type=str,
        help="Save conversion results to this CSV or JSON file",
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file",
    )

    parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip checking the inner markup before writing",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
        converter = build_converter(args, settings)
        input_path = Path(args.input)

        if input_path.is_dir():
            results_df = converter.convert_directory(input_path, recursive=args.recursive)
        else:
            results_df = results_frame([converter.convert_file(input_path)])

        summary = summarize(results_df)
        logger.info(
            f"Converted {summary['created']} of {summary['total']} SVG files "
            f"({summary['skipped']} skipped, {summary['error']} failed)"
        )

        if args.report:
            report_path = save_results(results_df, args.report)
            save_config(
                {"input": str(input_path), "settings": settings, "summary": summary},
                report_path.with_name("conversion_config.json"),
            )

        return 1 if summary["error"] else 0

    except Exception as e:
        logger.error(f"Failed to convert SVG: {e}", exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
