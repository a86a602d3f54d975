"""Entry point for the log verifier.

Reads the four pipeline logs and the two test-name sets, runs the
verification engine, prints one summary line per outcome, and optionally
writes a JSON or YAML report.  The exit code reflects the configured
blocking statuses.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from log_verifier.analysis.engine import AnalysisRequest, analyze
from log_verifier.config import DEFAULT_CONFIG_PATH, OUTPUT_FORMATS, VerifierConfig
from log_verifier.exit_code import compute_exit_code
from log_verifier.reporting.reporter import Reporter

# CLI option dest -> AnalysisRequest attribute, for options naming a file
_LOG_FILE_OPTIONS = {
    "base_log": "base_log",
    "before_log": "before_log",
    "after_log": "after_log",
    "post_agent_patch_log": "post_agent_patch_log",
    "main_tests_file": "main_json_tests",
    "report_tests_file": "report_json_tests",
}

# CLI option dest -> AnalysisRequest attribute, for inline string options
_INLINE_OPTIONS = {
    "main_tests": "main_json_tests",
    "report_tests": "report_json_tests",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify test execution status in test-runner logs"
    )
    parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="Path to a JSON request (baseLog, beforeLog, afterLog, "
             "postAgentPatchLog, mainJsonTests, reportJsonTests)",
    )
    parser.add_argument(
        "--base-log", type=Path, default=None, help="Path to the base log file",
    )
    parser.add_argument(
        "--before-log", type=Path, default=None, help="Path to the before log file",
    )
    parser.add_argument(
        "--after-log", type=Path, default=None, help="Path to the after log file",
    )
    parser.add_argument(
        "--post-agent-patch-log",
        type=Path,
        default=None,
        help="Path to the post-agent-patch log file",
    )
    parser.add_argument(
        "--main-tests",
        type=str,
        default=None,
        help="Main test names, separated by newlines, commas or semicolons",
    )
    parser.add_argument(
        "--main-tests-file",
        type=Path,
        default=None,
        help="File holding the main test names",
    )
    parser.add_argument(
        "--report-tests",
        type=str,
        default=None,
        help="Report test names, separated by newlines, commas or semicolons",
    )
    parser.add_argument(
        "--report-tests-file",
        type=Path,
        default=None,
        help="File holding the report test names",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to write the report file",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Report format (default: from config, else json)",
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to the verifier config JSON file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=False,
        help="Do not print per-outcome summary lines",
    )
    return parser.parse_args(argv)


def _load_request_file(path: Path) -> dict[str, Any]:
    """Load a JSON request file.

    Raises:
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in request file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Request file {path} must contain a JSON object")
    return data


def build_request(args: argparse.Namespace) -> AnalysisRequest:
    """Assemble the analysis request from a request file and CLI options.

    Options given on the command line override the request file.

    Raises:
        FileNotFoundError: If a referenced file does not exist.
        ValueError: If the request file is malformed.
    """
    request = AnalysisRequest()
    if args.request is not None:
        request = AnalysisRequest.from_dict(_load_request_file(args.request))

    values: dict[str, str] = {}
    for dest, attr in _LOG_FILE_OPTIONS.items():
        path = getattr(args, dest)
        if path is not None:
            values[attr] = path.read_text(errors="replace")

    for dest, attr in _INLINE_OPTIONS.items():
        value = getattr(args, dest)
        if value is not None:
            values[attr] = value

    return replace(request, **values)


def _describe_inputs(args: argparse.Namespace) -> dict[str, Any]:
    """Record which files fed the run, for the report."""
    info: dict[str, Any] = {}
    if args.request is not None:
        info["request"] = str(args.request)
    for dest in _LOG_FILE_OPTIONS:
        path = getattr(args, dest)
        if path is not None:
            info[dest] = str(path)
    return info


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = VerifierConfig(args.config_file)

    try:
        request = build_request(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    outcomes = analyze(request)
    if not outcomes:
        print("Warning: no test names supplied, nothing to verify", file=sys.stderr)

    reporter = Reporter()
    reporter.set_request_info(_describe_inputs(args))
    reporter.add_outcomes(outcomes)

    if not args.quiet:
        for line in reporter.format_summary_lines():
            print(line)

    if args.output:
        output_format = args.format or config.output_format
        if output_format == "yaml":
            reporter.write_yaml(args.output)
        else:
            reporter.write_report(args.output)
        if not args.quiet:
            print(f"\nReport written to {args.output}")

    summary = compute_exit_code(outcomes, config.blocking_statuses)
    for warning in summary.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
