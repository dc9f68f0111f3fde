"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the demo registry and configuration
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from gof_patterns._package import __version__
from gof_patterns.cli.formatters import format_output
from gof_patterns.config.defaults import LogLevel
from gof_patterns.config.manager import get_config_manager
from gof_patterns.config.schemas import AppConfig
from gof_patterns.domain.exceptions import PatternError
from gof_patterns.infrastructure.console import BufferedConsole, get_console
from gof_patterns.infrastructure.logging.logger import get_logger, setup_logging
from gof_patterns.infrastructure.registry import DemoCategory, DemoRegistry
from gof_patterns.infrastructure.registry.registration import register_all_demos

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "gof-patterns",
        description="GoF Patterns - Gang-of-Four design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                               # List all demos
  %(prog)s list --category structural         # List structural demos
  %(prog)s run observer                       # Run one demo
  %(prog)s run --all --format json            # Run every demo, JSON output
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Set logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="action", help="Available actions")

    list_parser = subparsers.add_parser("list", help="List registered demos")
    list_parser.add_argument(
        "--category", choices=[c.value for c in DemoCategory], help="Filter by pattern category"
    )
    list_parser.add_argument(
        "--format", choices=["table", "text", "json"], default="table", help="Output format"
    )

    run_parser = subparsers.add_parser("run", help="Run one or more demos")
    run_parser.add_argument("names", nargs="*", help="Demo names to run")
    run_parser.add_argument("--all", action="store_true", help="Run every registered demo")
    run_parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    return parser.parse_args(argv)


def list_demos(registry: DemoRegistry, category: Optional[str] = None) -> Dict[str, Any]:
    """Build the demo listing."""
    return {
        "demos": [
            {
                "name": registration.name,
                "category": registration.category.value,
                "description": registration.description,
            }
            for registration in registry.registrations(DemoCategory(category) if category else None)
        ]
    }


def run_demos_text(registry: DemoRegistry, names: List[str], config: AppConfig) -> None:
    """Run demos straight to stdout."""
    console = get_console()
    for index, name in enumerate(names):
        if index and config.console.section_separator:
            console.write_line()
        console.write_line(f"=== {name} ===")
        registry.run(name, console, config)


def run_demos_json(registry: DemoRegistry, names: List[str], config: AppConfig) -> Dict[str, Any]:
    """Run demos into buffers and collect their output."""
    results = []
    for name in names:
        console = BufferedConsole()
        registration = registry.get(name)
        registry.run(name, console, config)
        results.append(
            {"name": name, "category": registration.category.value, "output": console.lines}
        )
    return {"demos": results}


def execute_command(args: argparse.Namespace, config: AppConfig) -> Optional[Dict[str, Any]]:
    """Execute the requested action; returns data to print, if any."""
    registry = register_all_demos()

    if args.action == "list":
        return list_demos(registry, args.category)

    if args.action == "run":
        names = registry.names() if args.all else list(args.names)
        if not names:
            raise ValueError("No demos specified. Pass demo names or --all.")
        # Fail before any output if a name is unknown
        for name in names:
            registry.get(name)
        if args.format == "json":
            return run_demos_json(registry, names, config)
        run_demos_text(registry, names, config)
        return None

    raise ValueError(f"Unknown command: {args.action}")


def format_error_details(details: Any) -> List[str]:
    """Render ConfigurationError details as indented lines, one per problem."""
    if not details:
        return []
    if not isinstance(details, list):
        return [f"  {details}"]
    lines = []
    for error in details:
        if isinstance(error, dict):
            location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            lines.append(f"  {location}: {error.get('msg', '')}")
        else:
            lines.append(f"  {error}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.action:
            print("Error: No action specified. Use --help for usage information.", file=sys.stderr)
            return 1

        try:
            config_manager = get_config_manager(args.config)
            config = config_manager.app_config
            logging_config = config.logging
            if args.log_level:
                logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
            setup_logging(logging_config)
        except PatternError as e:
            print(f"Error: {e}", file=sys.stderr)
            for line in format_error_details(getattr(e, "details", None)):
                print(line, file=sys.stderr)
            return 1

        try:
            result = execute_command(args, config)
            if result is not None:
                print(format_output(result, args.format))
            return 0
        except PatternError as e:
            logger.error("Pattern error", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
