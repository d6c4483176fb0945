"""
Capture request parsing.

Turns ``<url> <output_path> [width] [height]`` plus options into a
:class:`CaptureRequest`. Nothing here touches the filesystem or spawns
anything, so a :class:`UsageError` always happens before any side effect.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import Config, config
from .errors import UsageError

logger = logging.getLogger(__name__)

USAGE = "webshot <url> <output_path> [width] [height]"


@dataclass(frozen=True)
class CaptureRequest:
    """One screenshot to take. Built once, consumed once."""
    url: str
    output_path: str
    width: int = 1400
    height: int = 900
    virtual_time_budget: int = 5000
    timeout: Optional[float] = None

    def __post_init__(self):
        if not self.url:
            raise UsageError("url is required", usage=USAGE)
        if not self.output_path:
            raise UsageError("output path is required", usage=USAGE)
        for name in ("width", "height", "virtual_time_budget"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise UsageError(f"{name} must be a positive integer, got {value!r}", usage=USAGE)
        if self.timeout is not None and self.timeout <= 0:
            raise UsageError(f"timeout must be positive, got {self.timeout!r}", usage=USAGE)


def positive_int(name: str, raw: str) -> int:
    """Parse a positive integer argument, raising UsageError otherwise."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise UsageError(f"{name} must be a positive integer, got {raw!r}", usage=USAGE)
    if value <= 0:
        raise UsageError(f"{name} must be a positive integer, got {raw!r}", usage=USAGE)
    return value


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that reports problems as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message, usage=USAGE)


def build_parser(cfg: Optional[Config] = None) -> argparse.ArgumentParser:
    cfg = cfg or config
    p = _ArgumentParser(
        prog="webshot",
        usage=USAGE,
        description="webshot - capture a web page with a headless browser",
        epilog="Put -- before the positionals when the URL itself starts with a dash.",
    )
    # Positionals are optional at the argparse level so a missing one is
    # reported by parse_capture_args with the usage line.
    p.add_argument("url", nargs="?", help="Page to capture")
    p.add_argument("output_path", nargs="?", help="Where to write the PNG (parent must exist)")
    p.add_argument("width", nargs="?", default=str(cfg.default_width),
                   help=f"Viewport width (default: {cfg.default_width})")
    p.add_argument("height", nargs="?", default=str(cfg.default_height),
                   help=f"Viewport height (default: {cfg.default_height})")
    p.add_argument("--budget", default=str(cfg.virtual_time_budget),
                   help=f"Virtual time budget in ms (default: {cfg.virtual_time_budget})")
    p.add_argument("--timeout", type=float, default=cfg.timeout,
                   help="Wall-clock deadline for the renderer in seconds (default: none)")
    p.add_argument("--renderer", default=cfg.renderer,
                   help=f"Renderer backend: chromium or playwright (default: {cfg.renderer})")
    p.add_argument("--verify", action="store_true", default=cfg.verify,
                   help="Decode the image and check its size after capture")
    p.add_argument("--show-renderer-log", action="store_true", default=cfg.show_renderer_log,
                   help="Print the renderer's stderr when the capture fails")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def request_from_namespace(args: argparse.Namespace) -> CaptureRequest:
    if not args.url:
        raise UsageError("url is required", usage=USAGE)
    if not args.output_path:
        raise UsageError("output path is required", usage=USAGE)
    return CaptureRequest(
        url=args.url,
        output_path=args.output_path,
        width=positive_int("width", args.width),
        height=positive_int("height", args.height),
        virtual_time_budget=positive_int("budget", args.budget),
        timeout=args.timeout,
    )


def parse_capture_args(argv: List[str], cfg: Optional[Config] = None) -> tuple[CaptureRequest, argparse.Namespace]:
    """
    Parse command-line arguments into a capture request.

    Args:
        argv: Arguments without the program name
        cfg: Config supplying defaults (module config if None)

    Returns:
        (request, namespace) - the namespace carries the non-request options

    Raises:
        UsageError: url/output path missing, or a number is not a positive integer
    """
    args = build_parser(cfg).parse_args(argv)
    request = request_from_namespace(args)
    logger.debug(f"Parsed capture request: {request}")
    return request, args
