"""
Command-line interface for the complexity scanner.

Reads JavaScript/TypeScript files from disk, runs the analysis engine
and prints the report.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from complexityscanner import __version__
from complexityscanner.config import (
    AnalysisConfig,
    create_default_config,
    find_config,
    load_config,
)
from complexityscanner.core.engine import AnalysisEngine
from complexityscanner.formatters import get_formatter
from complexityscanner.parsers import get_parser, list_parsers
from complexityscanner.utils.files import read_source_files

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="complexityscanner",
        description="Complexity, dependency and maintainability analysis for JavaScript modules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  complexityscanner analyze ./src                  # Analyze a directory
  complexityscanner analyze app.js utils.js        # Analyze single files
  complexityscanner analyze . --format json        # Output as JSON
  complexityscanner analyze . --parser tree-sitter # TypeScript-capable parser
  complexityscanner analyze . --fail-under 70      # Fail CI on low scores
  complexityscanner init                           # Create config file
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze source files")
    analyze_parser.add_argument(
        "targets",
        nargs="*",
        default=["."],
        help="Files or directories to analyze (default: current directory)",
    )
    analyze_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    analyze_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    analyze_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    analyze_parser.add_argument(
        "--parser",
        help="Parser backend to use (default: esprima)",
    )
    analyze_parser.add_argument(
        "--script",
        action="store_true",
        help="Parse as scripts instead of ES modules",
    )
    analyze_parser.add_argument(
        "--strict",
        action="store_true",
        help="Disable tolerant parsing",
    )
    analyze_parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of parallel workers (default: 4)",
    )
    analyze_parser.add_argument(
        "--exclude",
        action="append",
        help="Exclude patterns (can be specified multiple times)",
    )
    analyze_parser.add_argument(
        "--include-ast",
        action="store_true",
        help="Embed syntax trees in JSON output",
    )
    analyze_parser.add_argument(
        "--top",
        type=int,
        default=0,
        help="Only list the N most complex functions in text output",
    )
    analyze_parser.add_argument(
        "--fail-under",
        type=int,
        metavar="SCORE",
        help="Exit with status 2 when the maintainability score is below SCORE",
    )
    analyze_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    analyze_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging",
    )

    # Init command
    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    subparsers.add_parser("list-parsers", help="List parser backends")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Load the config file and apply command-line overrides."""
    data = {}

    if args.config:
        data = load_config(args.config)
    else:
        start = args.targets[0] if args.targets else "."
        config_path = find_config(start)
        if config_path:
            logger.debug("Using configuration %s", config_path)
            data = load_config(config_path)

    config = AnalysisConfig.from_dict(data)

    if args.parser:
        config.parser = args.parser
    if args.script:
        config.source_type = "script"
    if args.strict:
        config.tolerant = False
    if args.jobs is not None:
        config.max_workers = max(1, args.jobs)
    if args.exclude:
        config.exclude_patterns = config.exclude_patterns + args.exclude
    if args.format:
        config.output.format = args.format
    if args.output:
        config.output.output_file = args.output
    if args.include_ast:
        config.output.include_ast = True
    if args.no_color:
        config.output.color = False

    return config


def cmd_analyze(args: argparse.Namespace) -> int:
    """Execute the analyze command."""
    configure_logging(args.verbose)
    config = build_config(args)

    files = read_source_files(args.targets, config.exclude_patterns)
    logger.info("Collected %d source file(s)", len(files))

    engine = AnalysisEngine(config)
    report = engine.analyze(files)

    formatter = get_formatter(config.output.format)

    if hasattr(formatter, "use_color"):
        formatter.use_color = formatter.use_color and config.output.color
    if hasattr(formatter, "max_functions"):
        formatter.max_functions = args.top
    if hasattr(formatter, "include_ast"):
        formatter.include_ast = config.output.include_ast

    output = formatter.format_result(report)

    if config.output.output_file:
        with open(config.output.output_file, "w", encoding="utf-8") as f:
            f.write(output)
        if config.output.format == "text":
            print(f"Results written to {config.output.output_file}")
    else:
        print(output)

    if not report.succeeded:
        return 1
    if args.fail_under is not None and report.stats.score < args.fail_under:
        return 2
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    config_file = ".complexityscanner.yaml"

    if os.path.exists(config_file) and not args.force:
        print(f"Configuration file {config_file} already exists.")
        print("Use --force to overwrite.")
        return 1

    with open(config_file, "w", encoding="utf-8") as f:
        f.write(create_default_config())

    print(f"Created configuration file: {config_file}")
    return 0


def cmd_list_parsers(args: argparse.Namespace) -> int:
    """Execute the list-parsers command."""
    print("\nParser Backends")
    print("=" * 40)
    for name in list_parsers():
        status = "✓" if get_parser(name).available() else "○"
        print(f"  {status} {name}")
    print("\n✓ = available, ○ = missing optional dependency")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "analyze":
            return cmd_analyze(args)
        elif args.command == "init":
            return cmd_init(args)
        elif args.command == "list-parsers":
            return cmd_list_parsers(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nAnalysis interrupted.")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
