#!/usr/bin/env python3
"""Installation check for webshot renderers."""

import importlib
import shutil
import sys
from typing import List, Optional

from ..config import Config, config
from ..config_logger import format_config_lines
from ..renderers.chromium import CHROMIUM_CANDIDATES, find_chromium_binary


def print_header(text):
    """Print a formatted header."""
    print(f"\n{'='*70}")
    print(f"  {text}")
    print(f"{'='*70}\n")


def print_check(text):
    """Print a check being performed."""
    print(f"Checking {text}...", end=" ")


def print_ok(detail=""):
    print(f"✓ OK ({detail})" if detail else "✓ OK")


def print_fail(reason=""):
    print(f"✗ FAIL ({reason})" if reason else "✗ FAIL")


def check_chromium(cfg: Config) -> bool:
    """Check that the chromium binary resolves to something on disk or PATH."""
    print_check("chromium binary")
    binary = find_chromium_binary(cfg.chromium_bin)
    resolved = shutil.which(binary)
    if resolved:
        print_ok(resolved)
        return True
    if cfg.chromium_bin:
        print_fail(f"{cfg.chromium_bin} not found")
    else:
        print_fail(f"none of {', '.join(CHROMIUM_CANDIDATES)} on PATH")
    return False


def check_module(label: str, module: str) -> bool:
    """Check that a Python module imports."""
    print_check(label)
    try:
        importlib.import_module(module)
    except ImportError as e:
        print_fail(str(e))
        return False
    print_ok()
    return True


def main(argv: Optional[List[str]] = None, cfg: Optional[Config] = None) -> int:
    """Run all checks. Exit 0 when the configured renderer looks usable."""
    cfg = cfg or config

    print_header("webshot doctor")
    chromium_ok = check_chromium(cfg)
    playwright_ok = check_module("playwright", "playwright.sync_api")
    check_module("Pillow (--verify)", "PIL.Image")

    print_header("Configuration")
    for line in format_config_lines(cfg):
        print(f"  {line}")

    usable = playwright_ok if cfg.renderer == "playwright" else chromium_ok
    print()
    if usable:
        print(f"Renderer '{cfg.renderer}' is ready.")
        return 0
    print(f"Renderer '{cfg.renderer}' is not usable.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
