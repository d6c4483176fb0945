"""
Failure Categorizer.

The success oracle is coarse: a file is there or it is not. This module
looks at what the renderer said to put a name on the failure and to
suggest what the operator should try next. It never changes the outcome.
"""

from typing import Dict, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .screenshot import CaptureResult

logger = logging.getLogger(__name__)


# Error mappings: pattern in renderer stderr -> category
STDERR_PATTERNS = {
    "binary not found": "binary_missing",
    "permission denied": "binary_missing",
    "executable doesn't exist": "binary_missing",
    "err_connection_refused": "network",
    "err_name_not_resolved": "network",
    "err_address_unreachable": "network",
    "err_internet_disconnected": "network",
    "err_connection_timed_out": "timeout",
    "timeout": "timeout",
    "no such file or directory": "output_path",
    "failed to write": "output_path",
    "err_invalid_url": "invalid_url",
    "cannot navigate to invalid url": "invalid_url",
}

HINTS: Dict[str, Dict[str, str]] = {
    "binary_missing": {
        "message": "The headless browser could not be started",
        "suggestion": "Install chromium or set WEBSHOT_CHROMIUM_BIN to the browser binary",
    },
    "network": {
        "message": "The page could not be reached",
        "suggestion": "Check that the server behind the URL is running and listening",
    },
    "timeout": {
        "message": "The renderer did not finish in time",
        "suggestion": "Wait until the server is ready, or raise --timeout",
    },
    "output_path": {
        "message": "The screenshot could not be written",
        "suggestion": "Make sure the parent directory of the output path exists and is writable",
    },
    "invalid_url": {
        "message": "The URL was rejected by the browser",
        "suggestion": "Check the URL, including its scheme (http:// or https://)",
    },
    "invalid_image": {
        "message": "A file was written but it is not the expected image",
        "suggestion": "Capture again after the page has finished loading, or raise --budget",
    },
    "renderer_crash": {
        "message": "The renderer exited with an error",
        "suggestion": "Run again with --show-renderer-log to see the browser output",
    },
    "unknown": {
        "message": "The renderer produced no screenshot",
        "suggestion": "Run again with --show-renderer-log to see the browser output",
    },
}


def categorize_failure(result: "CaptureResult") -> Optional[str]:
    """
    Categorize a capture result.

    Returns:
        None for a successful result, otherwise one of: "binary_missing",
        "network", "timeout", "output_path", "invalid_url", "invalid_image",
        "renderer_crash", "unknown"
    """
    if result.ok:
        return None
    if not result.rendered:
        return "output_path"
    if result.exists:
        return "invalid_image"

    outcome = result.outcome
    if outcome.timed_out:
        return "timeout"

    stderr = (outcome.stderr or "").lower()
    for pattern, category in STDERR_PATTERNS.items():
        if pattern in stderr:
            return category

    if not outcome.started:
        return "binary_missing"
    if outcome.returncode:
        return "renderer_crash"
    return "unknown"


def describe_failure(result: "CaptureResult") -> Dict:
    """
    Convert a failed capture into operator-facing information.

    Returns:
        {"category": str, "message": str, "suggestion": str, "technical": str}
        or an empty dict when the capture succeeded
    """
    category = categorize_failure(result)
    if category is None:
        return {}
    info = dict(HINTS[category])
    info["category"] = category
    info["technical"] = result.problem or (result.outcome.stderr or "").strip()
    logger.debug(f"Categorized capture failure as {category}")
    return info
