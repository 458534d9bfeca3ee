"""CLI entry point for uischema.

This module acts as the central entry point for the project's CLI tools.
It reads component files, runs the schema analyzer and prints the results.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from uischema.analyzer import SchemaAnalyzer, SourceUnit
from uischema.config import (
    AnalyzerSettings,
    EnvVar,
    get_environment,
    list_environment_variables,
)
from uischema.core import get_logger, setup_logging
from uischema.detection import detect_platform, detect_runtime_platform
from uischema.sampling import generate_sample_props
from uischema.schema import ComponentSchema, export_json_schema

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

# File suffix -> tree-sitter grammar. Anything else parses as TSX.
SUFFIX_GRAMMARS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
}


# =============================================================================
# Input Helpers
# =============================================================================


def _grammar_for(path: Path) -> str:
    """Pick the grammar for a component file by its suffix."""
    return SUFFIX_GRAMMARS.get(path.suffix.lower(), "tsx")


def _read_unit(path: Path, name: str | None) -> SourceUnit:
    """Load a component file as a SourceUnit.

    JSON files are read as runtime descriptors; everything else is source text.
    The component name defaults to the file stem.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If a JSON file does not hold valid JSON.
    """
    component = name or path.stem
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return SourceUnit(name=component, runtime_ref=json.loads(text))
    return SourceUnit(name=component, source_text=text)


def _analyze_file(path: Path, name: str | None) -> ComponentSchema | None:
    """Analyze one file, logging read errors and returning None."""
    try:
        unit = _read_unit(path, name)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {path}: {e}")
        return None

    settings = AnalyzerSettings.from_environment(grammar=_grammar_for(path))
    schema = SchemaAnalyzer(settings=settings).analyze(unit)
    if schema.degraded:
        logger.warning(f"{path}: analysis failed, printing fallback schema")
    return schema


# =============================================================================
# Commands
# =============================================================================


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the analyze command."""
    schema = _analyze_file(args.file, args.name)
    if schema is None:
        return 1

    print(json.dumps(schema.to_wire(), indent=args.indent))
    if args.strict and schema.degraded:
        return 2
    return 0


def cmd_detect(args: argparse.Namespace) -> int:
    """Handle the detect command."""
    try:
        unit = _read_unit(args.file, None)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return 1

    if unit.source_text is not None:
        platform = detect_platform(unit.source_text)
    else:
        platform = detect_runtime_platform(unit.runtime_ref)
    print(platform.value)
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Handle the sample command."""
    schema = _analyze_file(args.file, args.name)
    if schema is None:
        return 1

    print(json.dumps(generate_sample_props(schema), indent=args.indent))
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    """Handle the schema command."""
    print(json.dumps(export_json_schema(), indent=args.indent))
    return 0


def cmd_env(args: argparse.Namespace) -> int:
    """Handle the env command."""
    variables = list_environment_variables(args.category)
    if not variables:
        logger.error(f"No variables in category: {args.category}")
        return 1

    print("Configuration")
    print("=" * 60)
    for var in variables:
        config = var.value
        print(f"{config.name} [{config.category}]")
        print(f"  {config.description}")
        print(f"  default: {config.default!r}  current: {get_environment(var)!r}")
    return 0


# =============================================================================
# Argument Parsing
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="python .",
        description="Extract component schemas from UI component sources",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print the schema of a component file as JSON",
    )
    analyze_parser.add_argument(
        "file",
        type=Path,
        help="Component source file, or a .json runtime descriptor",
    )
    analyze_parser.add_argument(
        "--name",
        "-n",
        type=str,
        default=None,
        help="Component name (default: file stem)",
    )
    analyze_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    analyze_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when the fallback schema is produced",
    )
    analyze_parser.set_defaults(func=cmd_analyze)

    # detect command
    detect_parser = subparsers.add_parser(
        "detect",
        help="Print the detected platform of a component file",
    )
    detect_parser.add_argument(
        "file",
        type=Path,
        help="Component source file, or a .json runtime descriptor",
    )
    detect_parser.set_defaults(func=cmd_detect)

    # sample command
    sample_parser = subparsers.add_parser(
        "sample",
        help="Print generated sample props for a component file",
    )
    sample_parser.add_argument(
        "file",
        type=Path,
        help="Component source file, or a .json runtime descriptor",
    )
    sample_parser.add_argument(
        "--name",
        "-n",
        type=str,
        default=None,
        help="Component name (default: file stem)",
    )
    sample_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    sample_parser.set_defaults(func=cmd_sample)

    # schema command
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema of the component schema wire format",
    )
    schema_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    schema_parser.set_defaults(func=cmd_schema)

    # env command
    env_parser = subparsers.add_parser(
        "env",
        help="List configuration environment variables",
    )
    env_parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        choices=["analysis", "logging"],
        help="Only show one category",
    )
    env_parser.set_defaults(func=cmd_env)

    return parser


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Analysis ===")
    print("  analyze    Print the schema of a component file")
    print("  detect     Print the detected platform of a component file")
    print("  sample     Print generated sample props for a component file")
    print("\n=== Reference ===")
    print("  schema     Print the JSON Schema of the wire format")
    print("  env        List configuration environment variables")
    print("\nExamples:")
    print("  python . analyze src/Button.tsx")
    print("  python . analyze widget.ts --name Widget --indent 4")
    print("  python . analyze button.json          # runtime descriptor")
    print("  python . detect src/Card.vue")
    print("  python . sample src/Input.tsx")
    print("  python . env --category analysis")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    if sys.argv[1] in ("-h", "--help"):
        show_help()
        return 0

    parser = build_parser()
    args = parser.parse_args(sys.argv[1:])

    if not args.command:
        show_help()
        return 1

    setup_logging(get_environment(EnvVar.LOG_LEVEL))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
