"""
Capture - render a URL into an image file and check the result.

Flow:
    request -> drop stale output -> renderer.render() -> file exists? -> [verify]

Usage:
    from webshot_core.screenshot import capture
    from webshot_core.request import CaptureRequest

    result = capture(CaptureRequest("http://localhost:3000", "/tmp/out.png"))
    if result.ok:
        ...
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from .error_handler import describe_failure
from .errors import CaptureFailure
from .renderers import Renderer, RenderOutcome, get_renderer
from .request import CaptureRequest
from .verify import ImageCheck, check_image

logger = logging.getLogger(__name__)


@dataclass
class CaptureResult:
    """Result of one capture attempt"""
    request: CaptureRequest
    outcome: RenderOutcome = field(default_factory=RenderOutcome)
    exists: bool = False
    image: Optional[ImageCheck] = None
    problem: Optional[str] = None
    rendered: bool = True

    @property
    def ok(self) -> bool:
        return self.exists and self.problem is None

    @property
    def path(self) -> str:
        return self.request.output_path


def _remove_stale_output(path: str) -> Optional[str]:
    """Remove an earlier capture at path. Returns a problem description on failure."""
    # Only regular files are removed; anything else is left for the renderer to trip over
    if not os.path.isfile(path):
        return None
    logger.debug(f"Removing previous capture at {path}")
    try:
        os.remove(path)
    except OSError as e:
        return f"could not remove previous file at {path}: {e}"
    return None


def capture(
    request: CaptureRequest,
    renderer: Optional[Renderer] = None,
    verify: bool = False,
) -> CaptureResult:
    """
    Take one screenshot.

    Args:
        request: What to capture and where to write it
        renderer: Backend to use (configured default if None)
        verify: Also decode the image and check its dimensions

    Returns:
        CaptureResult; result.ok tells whether a screenshot is on disk
    """
    if renderer is None:
        renderer = get_renderer(virtual_time_budget=request.virtual_time_budget, timeout=request.timeout)

    stale_problem = _remove_stale_output(request.output_path)
    if stale_problem:
        # Rendering now would let the old file pass as this capture
        result = CaptureResult(request=request, exists=os.path.isfile(request.output_path),
                               problem=stale_problem, rendered=False)
        logger.info(f"Capture skipped: {stale_problem}")
        return result

    logger.info(f"Capturing {request.url} at {request.width}x{request.height} -> {request.output_path}")
    outcome = renderer.render(request.url, request.output_path, request.width, request.height)

    result = CaptureResult(request=request, outcome=outcome)
    result.exists = os.path.isfile(request.output_path)

    if outcome.stderr:
        logger.debug(f"Renderer stderr:\n{outcome.stderr.rstrip()}")

    if result.exists and verify:
        result.image, result.problem = check_image(request.output_path, request.width, request.height)

    if result.ok:
        logger.info(f"Screenshot saved: {request.output_path}")
    else:
        info = describe_failure(result)
        logger.info(f"Capture failed ({info['category']}): {info['message']}. {info['suggestion']}")

    return result


def run_capture(
    request: CaptureRequest,
    renderer: Optional[Renderer] = None,
    verify: bool = False,
) -> CaptureResult:
    """
    Like capture(), but a failed capture raises.

    Raises:
        CaptureFailure: no screenshot (or a rejected one) at the output path
    """
    result = capture(request, renderer=renderer, verify=verify)
    if not result.ok:
        raise CaptureFailure("Screenshot failed", result=result)
    return result
