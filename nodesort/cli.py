#!/usr/bin/env python3
"""Classify and order a list of proxy share links.

Pipeline:
- Read links (one per line) from a file or stdin
- Extract each link's remark and classify it against the naming rules
- Optionally sort by priority (ruled first, then unruled, then invalid)
- Print the reordered link text, or a labelled report with --report
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from nodesort.config import MESSAGE_LOCALES, merge_cfg
from nodesort.ordering.board import NodeBoard

USAGE = "usage: {exe} [--sort] [--report] [--stats] <path-to-links|->"
FLAGS = {"--sort", "--report", "--stats"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on", "y"}


def _env_choice(name: str, allowed: set, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    candidate = value.strip().lower()
    if candidate in allowed:
        return candidate
    return default


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return max(minimum, parsed)


def cfg_from_env() -> Dict:
    return merge_cfg(
        {
            "messageLocale": _env_choice("NODESORT_LOCALE", MESSAGE_LOCALES, "en"),
            "previewMaxLen": _env_int("NODESORT_PREVIEW_LEN", 20),
        }
    )


def _read_source(source: str, stdin: TextIO) -> str:
    if source == "-":
        return stdin.read()
    path = Path(source).expanduser().resolve()
    return path.read_text(encoding="utf-8-sig", errors="replace")


def main(
    argv: List[str],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    exe = Path(argv[0]).name if argv else "nodesort"

    flags = {arg for arg in argv[1:] if arg.startswith("--")}
    positional = [arg for arg in argv[1:] if not arg.startswith("--")]
    unknown = flags - FLAGS
    if unknown or len(positional) != 1:
        if unknown:
            print(f"unknown option(s): {', '.join(sorted(unknown))}", file=stderr)
        print(USAGE.format(exe=exe), file=stderr)
        return 2

    try:
        text = _read_source(positional[0], stdin)
    except OSError as exc:
        print(f"cannot read {positional[0]}: {exc}", file=stderr)
        return 2

    board = NodeBoard(cfg_from_env(), stderr=stderr)
    items = board.rebuild(text)
    if not items:
        print("No links found in the input; nothing to do.", file=stderr)
        return 3

    if "--sort" in flags or _env_flag("NODESORT_SORT", default=False):
        board.sort()

    if "--report" in flags:
        for label in board.labels():
            print(label, file=stdout)
    else:
        print(board.text(), file=stdout)

    if "--stats" in flags:
        board.report_diagnostics()
    return 0


def run() -> int:
    return main(sys.argv)


if __name__ == "__main__":
    raise SystemExit(run())
