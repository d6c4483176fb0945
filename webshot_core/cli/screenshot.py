#!/usr/bin/env python3
"""webshot - take a screenshot of a URL with a headless browser."""

import logging
import sys
from typing import List, Optional

from ..screenshot import run_capture
from ..config import Config
from ..config_logger import log_config
from ..errors import CaptureFailure, UsageError
from ..renderers import Renderer, get_renderer
from ..request import parse_capture_args

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CAPTURE_FAILED = 1
EXIT_USAGE = 2


def setup_logging(cfg: Config, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def print_usage_error(err: UsageError) -> None:
    print(f"Usage: {err.usage or 'webshot <url> <output_path> [width] [height]'}", file=sys.stderr)
    print(f"error: {err}", file=sys.stderr)


def print_capture_failure(err: CaptureFailure, show_renderer_log: bool) -> None:
    print("ERROR: Screenshot failed", file=sys.stderr)
    result = err.result
    if result is None:
        return
    if result.problem:
        print(f"  {result.problem}", file=sys.stderr)
    if show_renderer_log and result.outcome.stderr:
        print(result.outcome.stderr.rstrip(), file=sys.stderr)


def main(argv: Optional[List[str]] = None, renderer: Optional[Renderer] = None) -> int:
    """
    Run the webshot command.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)
        renderer: Backend override; built from the options if None

    Returns:
        0 on success, 1 when the capture failed, 2 on a usage error
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        cfg = Config.from_env()
        request, args = parse_capture_args(argv, cfg)
        setup_logging(cfg, args.verbose)
        log_config(cfg)
        if renderer is None:
            renderer = get_renderer(
                args.renderer,
                virtual_time_budget=request.virtual_time_budget,
                timeout=request.timeout,
                cfg=cfg,
            )
    except UsageError as e:
        print_usage_error(e)
        return EXIT_USAGE

    try:
        result = run_capture(request, renderer=renderer, verify=args.verify)
    except CaptureFailure as e:
        print_capture_failure(e, args.show_renderer_log)
        return EXIT_CAPTURE_FAILED

    print(f"Screenshot saved to: {result.path}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
