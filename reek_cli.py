#!/usr/bin/env python3
"""
Command-line wrapper around the Reek analysis pipeline.

Runs Reek over one Ruby file the same way an editor integration would: the
file's content is copied to a temporary working file, analyzed, and the
warnings are reported against the original path.

Usage:
  python reek_cli.py app/models/user.rb
  python reek_cli.py app/models/user.rb --config config.reek --format json
  python reek_cli.py app/models/user.rb --executable /usr/local/bin/reek
  python reek_cli.py app/models/user.rb --ruby ~/.rbenv/shims/ruby --output report.json

Exit codes:
  0 - no warnings
  1 - warnings found
  2 - execution failed
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import yaml

from pipeline.settings import load_run_configuration, load_timeout_seconds
from pipeline.wiring import build_pipeline, configure_logging
from reek_runner.domain import ReekRunnerError, WarningRecord
from reek_runner.io import write_json_atomic
from tools.reek import DEFAULT_TIMEOUT_SECONDS, RubyGemEnvironment, reek_version, resolve_command

EXIT_CLEAN = 0
EXIT_WARNINGS = 1
EXIT_FAILED = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run Reek on a Ruby file and report code smells.")
    ap.add_argument("file", help="Ruby source file to analyze.")
    ap.add_argument(
        "--project-root",
        default=None,
        help="Project root (working directory for Reek, settings lookup). Default: current directory.",
    )
    ap.add_argument("--executable", default=None, help="Explicit Reek executable. Overrides Ruby lookup.")
    ap.add_argument("--config", default=None, help="Reek configuration file (passed as --config).")
    ap.add_argument("--ruby", default=None, help="Ruby interpreter used to locate the reek gem. Default: ruby on PATH.")
    ap.add_argument(
        "--timeout-seconds",
        type=float,
        default=None,
        help=f"Reek timeout. 0 = no timeout. Default: {DEFAULT_TIMEOUT_SECONDS}.",
    )
    ap.add_argument("--format", choices=("text", "json"), default="text", help="Output format. Default: text.")
    ap.add_argument("--output", default=None, help="Also write warnings as JSON to this path.")
    ap.add_argument("--show-version", action="store_true", help="Print the resolved Reek version and exit.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return ap.parse_args(argv)


def render_text(warnings: List[WarningRecord]) -> str:
    return "\n".join(w.describe() for w in warnings)


def render_json(warnings: List[WarningRecord]) -> str:
    return json.dumps([w.to_dict() for w in warnings], indent=2, ensure_ascii=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    project_root = Path(args.project_root).resolve() if args.project_root else Path.cwd()
    source_path = Path(args.file)

    try:
        config = load_run_configuration(project_root)
        timeout = args.timeout_seconds
        if timeout is None:
            timeout = load_timeout_seconds(project_root, default=DEFAULT_TIMEOUT_SECONDS)
    except (ValueError, yaml.YAMLError) as e:
        print(f"❌ Invalid settings in {project_root}: {e}", file=sys.stderr)
        return EXIT_FAILED

    if args.executable:
        config = replace(config, explicit_executable_path=args.executable)
    if args.config:
        config = replace(config, explicit_config_file_path=str(Path(args.config).resolve()))

    environment = RubyGemEnvironment.from_path(args.ruby)

    if args.show_version:
        try:
            command = resolve_command(config, environment, module=str(project_root))
        except ReekRunnerError as e:
            print(f"❌ {e}", file=sys.stderr)
            return EXIT_FAILED
        print(reek_version(command))
        return EXIT_CLEAN

    try:
        content = source_path.read_text()
    except OSError as e:
        print(f"❌ Cannot read {source_path}: {e}", file=sys.stderr)
        return EXIT_FAILED

    pipeline = build_pipeline(timeout_seconds=timeout, module=str(project_root))
    try:
        warnings = pipeline.execute_analysis(
            content,
            config,
            environment,
            project_root,
            display_path=str(source_path),
        )
    except ReekRunnerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_FAILED

    if args.output:
        write_json_atomic(Path(args.output), [w.to_dict() for w in warnings])

    rendered = render_json(warnings) if args.format == "json" else render_text(warnings)
    if rendered:
        print(rendered)

    return EXIT_WARNINGS if warnings else EXIT_CLEAN


if __name__ == "__main__":
    raise SystemExit(main())
