"""CLI - Command line interface for Resume Linter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import RENDER_FORMATS, LinterConfig, load_raw_config
from .config_validator import Severity as ConfigSeverity
from .config_validator import has_errors, validate_config
from .domain import (
    ATSCheck,
    Diagnostic,
    Severity,
    build_grammar_runner,
    build_prompt_runner,
    format_as_html,
    format_as_html_document,
    format_as_rtf,
    format_ats_report,
    format_diagnostics_report,
    parse_resume_text,
    parsed_resume_to_json,
    perform_ats_checks,
    strip_line_anchors,
    validate_markdown_resume_prompt,
    validate_resume,
)
from .observability import configure_logging, log_duration

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_USAGE = 2

SEVERITY_STYLES = {
    Severity.PASS: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
}


class InputError(Exception):
    """Input text could not be read or is over the configured size limit."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-linter",
        description="Resume Linter - parse, render and lint plain-text/markdown resumes",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to configuration file (default: config/config.yaml + config/config.local.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Verbose output (INFO logging)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=False,
        help="Plain-text reports instead of tables",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Parse resume text and print the document model as JSON")
    parse_cmd.add_argument("file", help="Resume file, or - for stdin")
    parse_cmd.set_defaults(handler=_cmd_parse)

    render_cmd = sub.add_parser("render", help="Render resume text as HTML or RTF")
    render_cmd.add_argument("file", help="Resume file, or - for stdin")
    render_cmd.add_argument("--format", "-f", choices=RENDER_FORMATS, default=None, help="Output format")
    render_cmd.add_argument("--standalone", action="store_true", help="Wrap HTML in a complete document")
    render_cmd.add_argument("--output", "-o", default=None, help="Write to this path instead of stdout")
    render_cmd.set_defaults(handler=_cmd_render)

    ats_cmd = sub.add_parser("ats", help="Run ATS content checks")
    ats_cmd.add_argument("file", help="Resume file, or - for stdin")
    ats_cmd.set_defaults(handler=_cmd_ats)

    validate_cmd = sub.add_parser("validate", help="Lint markdown resume text")
    validate_cmd.add_argument("file", help="Resume file, or - for stdin")
    validate_cmd.add_argument(
        "--prompt-only",
        action="store_true",
        help="Only check markdown generation-prompt compliance",
    )
    validate_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any error-severity finding is reported",
    )
    validate_cmd.set_defaults(handler=_cmd_validate)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    # Load environment variables from .env file
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        raw_config = load_raw_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        err_console.print(f"Config error: {exc}", style="red", markup=False)
        return EXIT_USAGE

    issues = validate_config(raw_config)
    for issue in issues:
        style = "red" if issue.severity == ConfigSeverity.ERROR else "yellow"
        err_console.print(f"  [{issue.field}] {issue.message}", style=style, markup=False)
    if has_errors(issues):
        return EXIT_USAGE

    config = LinterConfig.from_dict(raw_config)
    configure_logging(verbose=args.verbose, level=config.log_level)

    try:
        text = read_input(args.file, config.max_input_chars)
    except InputError as exc:
        err_console.print(str(exc), style="red", markup=False)
        return EXIT_USAGE

    logger.info("Running %s on %s (%d characters)", args.command, args.file, len(text))
    status = args.handler(args, text, config)
    logger.info("%s finished with exit status %d", args.command, status)
    return status


def read_input(source: str, max_chars: int) -> str:
    """Read resume text from a path or ``-`` (stdin), enforcing *max_chars*."""
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read {source}: {exc}") from exc

    if len(text) > max_chars:
        raise InputError(f"Input is {len(text)} characters; the limit is {max_chars}")
    return text


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_parse(args: argparse.Namespace, text: str, config: LinterConfig) -> int:
    with log_duration("parse"):
        doc = parse_resume_text(text)
    _write(parsed_resume_to_json(doc) + "\n")
    return EXIT_OK


def _cmd_render(args: argparse.Namespace, text: str, config: LinterConfig) -> int:
    fmt = args.format or config.default_render_format
    with log_duration(f"render:{fmt}"):
        doc = parse_resume_text(text)
        if fmt == "rtf":
            rendered = format_as_rtf(doc)
        elif args.standalone:
            rendered = format_as_html_document(doc)
        else:
            rendered = format_as_html(doc)

    if args.output:
        Path(args.output).write_text(rendered, encoding="utf-8")
        console.print(f"Wrote {fmt.upper()} to {args.output}", style="green", markup=False)
    else:
        _write(rendered + "\n")
    return EXIT_OK


def _cmd_ats(args: argparse.Namespace, text: str, config: LinterConfig) -> int:
    with log_duration("ats"):
        checks = perform_ats_checks(parse_resume_text(text), text)

    if args.plain:
        _print_plain(format_ats_report(checks))
    else:
        console.print(_ats_table(checks))
    return EXIT_OK


def _cmd_validate(args: argparse.Namespace, text: str, config: LinterConfig) -> int:
    prompt_runner = build_prompt_runner(config.rules)
    with log_duration("validate"):
        if args.prompt_only:
            findings = validate_markdown_resume_prompt(text, runner=prompt_runner)
            title = "Prompt Compliance"
        else:
            findings = validate_resume(
                text,
                runner=build_grammar_runner(config.rules),
                prompt_runner=prompt_runner,
            )
            title = "Resume Validation"

    logger.info(
        "%s: %d error(s), %d warning(s)",
        title,
        sum(1 for d in findings if d.severity == Severity.ERROR),
        sum(1 for d in findings if d.severity == Severity.WARNING),
    )

    if args.plain:
        _print_plain(format_diagnostics_report(findings, title))
    else:
        console.print(_diagnostics_table(findings, title))

    if args.strict and any(d.severity == Severity.ERROR for d in findings):
        return EXIT_LINT_ERRORS
    return EXIT_OK


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _diagnostics_table(findings: List[Diagnostic], title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Result", width=8)
    table.add_column("Finding", no_wrap=False)

    for i, finding in enumerate(findings, 1):
        table.add_row(
            str(i),
            Text(finding.severity.value, style=SEVERITY_STYLES[finding.severity]),
            Text(strip_line_anchors(finding.message)),
        )
    return table


def _ats_table(checks: List[ATSCheck]) -> Table:
    table = Table(title="ATS Checks", show_header=True, header_style="bold cyan")
    table.add_column("Result", width=8)
    table.add_column("Category", style="cyan", width=10)
    table.add_column("Finding", no_wrap=False)
    table.add_column("Suggestion", style="dim", no_wrap=False)

    for check in checks:
        table.add_row(
            Text(check.severity.value, style=SEVERITY_STYLES[check.severity]),
            check.category.value,
            Text(check.message),
            Text(check.suggestion or ""),
        )
    return table


def _print_plain(report: str) -> None:
    console.print(report, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _write(output: str) -> None:
    sys.stdout.write(output)
    sys.stdout.flush()


if __name__ == "__main__":
    sys.exit(main())
