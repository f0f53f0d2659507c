"""
Command-line front end.

Examples:
    phishcheck analyze suspicious_email.txt
    cat message.txt | phishcheck analyze --json
    phishcheck analyze message.txt --pdf report.pdf
    phishcheck rules
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from . import config
from .pipeline.analyze import analyze_message
from .pipeline.errors import ValidationError
from .pipeline.rules import PatternRegistry
from .report import build_pdf, report_filename, render_text

logger = logging.getLogger(__name__)


def _read_input(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="ignore")


def _cmd_analyze(args: argparse.Namespace, registry: PatternRegistry) -> int:
    try:
        message = _read_input(args.file)
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    try:
        verdict = analyze_message(message, registry=registry)
    except ValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(asdict(verdict), indent=2))
    else:
        print(render_text(verdict, message.strip() if args.show_content else None))

    if args.pdf is not None:
        generated_at = datetime.now()
        target = Path(args.pdf or report_filename(generated_at))
        try:
            target.write_bytes(build_pdf(verdict, message.strip(), generated_at))
        except OSError as exc:
            print(f"Cannot write {target}: {exc}", file=sys.stderr)
            return 1
        print(f"PDF report written to {target}", file=sys.stderr)
    return 0


def _cmd_rules(args: argparse.Namespace, registry: PatternRegistry) -> int:
    registry.load()
    for rule in registry.get_all():
        print(f"{rule.weight}  {rule.origin:<13}  {rule.rationale}  /{rule.source}/")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phishcheck", description="Rule-based phishing message triage")
    parser.add_argument("--patterns", default=config.LOCAL_PATTERNS_SOURCE,
                        help="Path or URL of the supplementary (regional) rules; '' disables them")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, type=str.upper, choices=config.LOG_LEVELS)
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Analyze a message from FILE or stdin")
    p_analyze.add_argument("file", nargs="?", help="Message file ('-' or omitted for stdin)")
    p_analyze.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    p_analyze.add_argument("--show-content", action="store_true", help="Echo the analyzed text in the report")
    p_analyze.add_argument("--pdf", nargs="?", const="", default=None,
                           help="Also write a PDF report (default name Phishing_Report_<ms>.pdf)")
    p_analyze.set_defaults(func=_cmd_analyze)

    p_rules = sub.add_parser("rules", help="List the effective rules")
    p_rules.set_defaults(func=_cmd_rules)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    registry = PatternRegistry(args.patterns)
    return args.func(args, registry)


if __name__ == "__main__":
    sys.exit(main())
