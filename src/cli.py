"""Command-line interface for classdeps."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from analysis.analyzer import DependencyAnalyzer, InvalidDependencyDataError
from contract.tables import TableLoadError
from extract.sources import collect_dependency_table
from output import FORMATS, render
from rules.config import ConfigError, ExplorerConfig, config_root, load_config

logger = logging.getLogger(__name__)

_SECTION_FLAGS = ("circular", "depth", "stats", "structure")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="classdeps")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze class dependencies"
    )
    analyze_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory, Python file or JSON dependency table (default: .)",
    )
    analyze_parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: config output_format)",
    )
    analyze_parser.add_argument(
        "--circular", action="store_true", help="Show circular dependencies"
    )
    analyze_parser.add_argument(
        "--depth", action="store_true", help="Show dependency depth"
    )
    analyze_parser.add_argument(
        "--stats", action="store_true", help="Show dependency statistics"
    )
    analyze_parser.add_argument(
        "--structure", action="store_true", help="Show graph structure metrics"
    )
    analyze_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on invalid dependency data instead of reporting it",
    )
    analyze_parser.add_argument(
        "--output",
        default=None,
        help="Write the report to this file instead of stdout",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _selected_sections(args: argparse.Namespace) -> dict[str, bool]:
    if not any(getattr(args, flag) for flag in _SECTION_FLAGS):
        return {}

    return {
        "circular": args.circular,
        "depth": args.depth,
        "statistics": args.stats,
        "structure": args.structure,
        "cross_namespace": args.circular,
    }


def _write_output(text: str, output: str | None) -> None:
    if output is None:
        sys.stdout.write(f"{text}\n")
        return
    out_path = Path(output).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(f"{text}\n", encoding="utf-8")


def _handle_analyze(args: argparse.Namespace, config: ExplorerConfig) -> int:
    path = Path(args.path).expanduser().resolve()

    try:
        table = collect_dependency_table(path, config)
    except TableLoadError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    analyzer = DependencyAnalyzer(
        table,
        error_handling="strict" if args.strict else config.error_handling,
        include_metadata=config.include_metadata,
        namespace_separator=config.namespace_separator,
    )
    try:
        report = analyzer.analyze(**_selected_sections(args))
    except InvalidDependencyDataError as exc:
        sys.stderr.write(f"{path}: {exc}\n")
        return 2

    if report.error is not None:
        sys.stderr.write(f"{path}: {report.error.type}: {report.error.message}\n")
        return 1

    fmt = args.format or config.output_format
    _write_output(render(report, table, fmt), args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    path = Path(args.path).expanduser().resolve()
    if not path.exists():
        sys.stderr.write(f"error: path does not exist: {path}\n")
        return 2

    try:
        config = load_config(config_root(path))
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    logger.debug("Loaded config for %s: %s", path, config)

    if args.command == "analyze":
        return _handle_analyze(args, config)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
