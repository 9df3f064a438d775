"""CLI - Command line interface for Resume Tuner."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import DEFAULT_CONFIG_PATH, TunerConfig, has_errors, load_raw_config, validate_config
from .domain import PREVIEW_THEMES, LineKind, check_format, classify, format_check_report
from .errors import ResumeTunerError
from .flows import improve_experience, improve_summary, optimize_resume
from .observability import FlowObserver, setup_logging
from .providers import ChatProvider, create_provider
from .retry import RetryConfig
from .tools import export_resume, read_resume_file

console = Console()

_KIND_STYLES = {
    LineKind.BLANK: "dim",
    LineKind.SECTION_HEADING: "bold cyan",
    LineKind.NAME_HEADING: "bold magenta",
    LineKind.CONTACT_INFO: "green",
    LineKind.BODY: "",
}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_classify(args: argparse.Namespace) -> int:
    records = classify(_read_text(args.file))
    if args.json:
        console.print_json(json.dumps([r.to_dict() for r in records]))
        return 0

    table = Table(title=f"Line classification: {args.file}")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for record in records:
        style = _KIND_STYLES[record.kind]
        table.add_row(str(record.index), record.kind.value, Text(record.trimmed_text), style=style)
    console.print(table)
    return 0


def cmd_preview(args: argparse.Namespace, config: TunerConfig) -> int:
    theme = args.theme or config.default_theme
    output = args.output or str(Path(args.file).with_suffix(".html"))
    result = export_resume(_read_text(args.file), output, theme=theme)
    console.print(f"Preview written to {result.path} ({theme} theme)", style="green")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    result = check_format(classify(_read_text(args.file)))
    console.print(format_check_report(result), markup=False, highlight=False)
    return 1 if args.strict and result.warnings else 0


def cmd_export(args: argparse.Namespace, config: TunerConfig) -> int:
    result = export_resume(_read_text(args.file), args.output, theme=args.theme or config.default_theme)
    console.print(f"Exported {result.format} to {result.path} ({result.size} chars)", style="green")
    return 0


async def cmd_optimize(args: argparse.Namespace, provider: ChatProvider, config: TunerConfig) -> int:
    observer = FlowObserver()
    result = await optimize_resume(
        provider,
        _read_text(args.file),
        _read_text(args.job),
        retry=_retry_config(config),
        observer=observer,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )

    missing = ", ".join(result.missing_keywords) or "No missing keywords found. Great job!"
    suggested = ", ".join(result.suggested_keywords) or "No specific keywords to suggest."
    console.print(Panel(Text(missing), title="Missing Keywords"))
    console.print(Panel(Text(suggested), title="Suggested Keywords"))

    if args.output:
        export_resume(result.optimized_resume, args.output)
        console.print(f"Optimized resume written to {args.output}", style="green")
    else:
        console.print(Panel(Text(result.optimized_resume), title="Optimized Resume"))
    return 0


async def cmd_improve(args: argparse.Namespace, provider: ChatProvider, config: TunerConfig) -> int:
    text = _read_text(args.file)
    settings = {
        "retry": _retry_config(config),
        "max_tokens": config.max_tokens,
        "temperature": config.temperature,
    }
    if args.command == "improve-summary":
        summary = await improve_summary(provider, text, **settings)
        console.print(Panel(Text(summary.improved_summary), title="Improved Summary"))
    else:
        experience = await improve_experience(provider, text, **settings)
        console.print(Panel(Text(experience.improved_experience), title="Improved Experience"))
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-tuner",
        description="Resume Tuner - preview, check and AI-optimize plain-text resumes",
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Path to configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output (log model requests)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("classify", help="Show how each line of a resume is classified")
    p.add_argument("file")
    p.add_argument("--json", action="store_true", help="Print records as JSON")

    p = sub.add_parser("preview", help="Render a styled HTML preview")
    p.add_argument("file")
    p.add_argument("--output", "-o", help="Output .html path (default: next to the input)")
    p.add_argument("--theme", "-t", choices=list(PREVIEW_THEMES))

    p = sub.add_parser("check", help="Run the format check")
    p.add_argument("file")
    p.add_argument("--strict", action="store_true", help="Exit 1 when any warning is reported")

    p = sub.add_parser("export", help="Export to .txt, .md or .html")
    p.add_argument("file")
    p.add_argument("output")
    p.add_argument("--theme", "-t", choices=list(PREVIEW_THEMES))

    p = sub.add_parser("optimize", help="Find missing keywords and optimize for a job description")
    p.add_argument("file")
    p.add_argument("--job", "-j", required=True, help="Job description file")
    p.add_argument("--output", "-o", help="Write the optimized resume here")

    for name, help_text in (
        ("improve-summary", "Rewrite the summary section"),
        ("improve-experience", "Rewrite the work experience section"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = _load_config(args.config)
        if args.command == "classify":
            return cmd_classify(args)
        if args.command == "preview":
            return cmd_preview(args, config)
        if args.command == "check":
            return cmd_check(args)
        if args.command == "export":
            return cmd_export(args, config)

        provider = create_provider(config.provider, config.api_key, config.model, config.api_base)
        if args.command == "optimize":
            return asyncio.run(cmd_optimize(args, provider, config))
        return asyncio.run(cmd_improve(args, provider, config))
    except (ResumeTunerError, ValueError) as e:
        console.print(f"❌ Error: {e}", style="red", markup=False)
        return 1


def _load_config(path: str) -> TunerConfig:
    try:
        raw = load_raw_config(path)
    except FileNotFoundError:
        return TunerConfig.from_dict({})

    issues = [i for i in validate_config(raw) if i.field != "api_key"]
    for issue in issues:
        console.print(f"⚠️ {issue.field}: {issue.message}", style="yellow")
    if has_errors(issues):
        raise ValueError(f"Invalid configuration in {path}")
    return TunerConfig.from_dict(raw)


def _read_text(path: str) -> str:
    return read_resume_file(path).text


def _retry_config(config: TunerConfig) -> RetryConfig:
    return RetryConfig(max_attempts=config.retry_max_attempts)


if __name__ == "__main__":
    sys.exit(main())
