"""Command-line interface for trafficreport."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from trafficreport.config import ReportOptions
from trafficreport.logging import get_logger, set_global_log_level
from trafficreport.report import ReportGenerator
from trafficreport.types.records import CoverageRecord, ValidationIssue

logger = get_logger(__name__)


def _load_json_list(path: Path, key: str) -> List[Dict[str, Any]]:
    """Load a JSON list of records, or the ``key`` list of a JSON object.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the content is not JSON or holds no record list.
    """
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of records (or a '{key}' list)")
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"Each record in {path} must be a JSON object")
    return data


def load_validation_results(path: Path) -> List[ValidationIssue]:
    return [ValidationIssue.from_dict(d) for d in _load_json_list(path, "results")]


def load_coverage_results(path: Path) -> List[CoverageRecord]:
    return [CoverageRecord.from_dict(d) for d in _load_json_list(path, "coverage")]


def _build_options(args: argparse.Namespace) -> ReportOptions:
    """Merge the optional YAML config with explicit command-line flags."""
    options = ReportOptions.from_file(args.config) if args.config else ReportOptions()

    overrides: Dict[str, Any] = {}
    if args.output is not None:
        overrides["report_path"] = str(args.output)
    if args.package is not None:
        overrides["sdk_package"] = args.package
    if args.language is not None:
        overrides["sdk_language"] = args.language
    if args.override_links:
        overrides["override_link_in_report"] = True
    if args.include_exceptions:
        overrides["output_exception_in_report"] = True
    if args.spec_link_prefix is not None:
        overrides["spec_link_prefix"] = args.spec_link_prefix
    if args.payload_link_prefix is not None:
        overrides["payload_link_prefix"] = args.payload_link_prefix
    if args.error_definitions is not None:
        overrides["error_definitions_location"] = args.error_definitions
    if args.template is not None:
        overrides["template_path"] = str(args.template)
    return replace(options, **overrides)


def _render_report(args: argparse.Namespace) -> None:
    """Load inputs, render the report and exit non-zero on failure."""
    _start_time = perf_counter()
    try:
        options = _build_options(args)
        validation_results = load_validation_results(args.validation)
        coverage_results = load_coverage_results(args.coverage)
        logger.info(
            f"Loaded {len(validation_results)} validation results and "
            f"{len(coverage_results)} coverage records"
        )

        generator = ReportGenerator(
            validation_results,
            coverage_results,
            args.undefined_operations,
            options,
        )
        report_path = generator.generate()

        elapsed = perf_counter() - _start_time
        logger.info(f"Report generated in {elapsed:.2f}s")
        print(f"✅ Report written to: {report_path}")
    except FileNotFoundError as e:
        logger.error(str(e))
        print(f"❌ ERROR: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to generate report: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to generate report: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``trafficreport`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="trafficreport",
        description="Render API traffic validation results as an HTML report.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{render}",
        help="Available commands",
    )

    render_parser = subparsers.add_parser(
        "render", help="Render validation and coverage results"
    )
    render_parser.add_argument(
        "validation", type=Path, help="JSON file with validation results"
    )
    render_parser.add_argument(
        "coverage", type=Path, help="JSON file with coverage records"
    )
    render_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML file with report options; flags below take precedence",
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Report destination (default: report.html)",
    )
    render_parser.add_argument(
        "--undefined-operations",
        type=int,
        default=0,
        help="Number of exchanges that matched no spec operation",
    )
    render_parser.add_argument("--package", default=None, help="SDK package label")
    render_parser.add_argument("--language", default=None, help="SDK language label")
    render_parser.add_argument(
        "--override-links",
        action="store_true",
        help="Rewrite spec and payload links under the link prefixes",
    )
    render_parser.add_argument(
        "--spec-link-prefix", default=None, help="Base URL for spec links"
    )
    render_parser.add_argument(
        "--payload-link-prefix", default=None, help="Base URL for payload links"
    )
    render_parser.add_argument(
        "--include-exceptions",
        action="store_true",
        help="Include runtime exceptions in the report",
    )
    render_parser.add_argument(
        "--error-definitions",
        default=None,
        help="URL or path of the error definitions catalog",
    )
    render_parser.add_argument(
        "--template", type=Path, default=None, help="Custom Jinja2 template"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "render":
        _render_report(args)


if __name__ == "__main__":
    main()
