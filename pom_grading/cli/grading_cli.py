"""
Command-line interface for POM size grading.
"""
import argparse
import math
import logging
import sys
from typing import Dict, List, Optional
from pom_grading.main import GradingApp
from pom_grading.config.app_config import DEFAULT_RULES_STORE, DEFAULT_SIZE_SYSTEM
from pom_grading.config.size_systems import SIZE_SYSTEMS, default_base_size
from pom_grading.data.connectors.json_file_store import JsonFileStore
from pom_grading.exceptions import GradingError
from pom_grading.utils.validation import validate_base_size


def parse_rule_overrides(values: Optional[List[str]]) -> Dict[str, float]:
    """
    Parse repeated CODE=INCREMENT arguments.

    Args:
        values (Optional[List[str]]): Raw argument values

    Returns:
        Dict[str, float]: POM code -> increment

    Raises:
        argparse.ArgumentTypeError: If a value is not CODE=NUMBER
    """
    overrides = {}
    for value in values or []:
        code, sep, increment = value.partition("=")
        if not sep or not code.strip():
            raise argparse.ArgumentTypeError(f"Expected CODE=INCREMENT, got {value!r}")
        try:
            number = float(increment)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Increment for {code.strip()} is not a number: {increment!r}")
        if not math.isfinite(number):
            raise argparse.ArgumentTypeError(f"Increment for {code.strip()} must be finite: {increment!r}")
        overrides[code.strip()] = number
    return overrides


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="POM Size Grader - Generate graded size charts from base size measurements"
    )

    parser.add_argument(
        "--input",
        type=str,
        help="File containing POM lines (default: read from stdin)"
    )

    parser.add_argument(
        "--system",
        type=str,
        default=DEFAULT_SIZE_SYSTEM,
        choices=list(SIZE_SYSTEMS),
        help=f"Size system of the base size (default: {DEFAULT_SIZE_SYSTEM})"
    )

    parser.add_argument(
        "--base-size",
        type=str,
        help="Base size the measurements were taken at (default: the system's second size, "
             "or POM_GRADING_DEFAULT_BASE_SIZE when it belongs to the system)"
    )

    parser.add_argument(
        "--rules-profile",
        type=str,
        help="Saved custom grading profile to apply to the base system"
    )

    parser.add_argument(
        "--rules-store",
        type=str,
        default=DEFAULT_RULES_STORE,
        help=f"JSON file holding saved grading profiles (default: {DEFAULT_RULES_STORE})"
    )

    parser.add_argument(
        "--set-rule",
        action="append",
        metavar="CODE=INCREMENT",
        help="Override the grading increment for a POM code (repeatable)"
    )

    parser.add_argument(
        "--save-profile",
        type=str,
        help="Save the active custom rules under this profile name"
    )

    parser.add_argument(
        "--image-name",
        type=str,
        help="Name of the source garment image, recorded in the project summary"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Output directory for results (default: auto-generated based on timestamp)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)

    # Set log level based on verbosity
    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO

    base_size = parsed_args.base_size or default_base_size(parsed_args.system)

    if not validate_base_size(parsed_args.system, base_size):
        sizes = ", ".join(SIZE_SYSTEMS[parsed_args.system].sizes)
        print(f"Error: Base size {base_size} is not a {parsed_args.system} size ({sizes}).")
        return 1

    try:
        overrides = parse_rule_overrides(parsed_args.set_rule)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}")
        return 1

    try:
        if parsed_args.input:
            with open(parsed_args.input, "r", encoding="utf-8") as f:
                pom_text = f.read()
        else:
            pom_text = sys.stdin.read()

        app = GradingApp(
            rules_store=JsonFileStore(parsed_args.rules_store),
            log_level=log_level
        )
        app.configure(
            base_size_system=parsed_args.system,
            base_size=base_size,
            rules_profile=parsed_args.rules_profile,
            custom_grading_rules=overrides,
            output_dir=parsed_args.output_dir
        )

        if parsed_args.save_profile:
            app.save_profile(parsed_args.save_profile)

        output_dir = app.run_grading(pom_text, original_image_name=parsed_args.image_name)

        print(f"\nSize grading complete. Results saved in {output_dir}")
        return 0

    except (GradingError, OSError, ValueError) as e:
        print(f"\nError during grading: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
