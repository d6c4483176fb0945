"""
webshot_core package: screenshot capture through a headless browser

Usage:
    from webshot_core import CaptureRequest, capture

    result = capture(CaptureRequest("http://localhost:3000", "/tmp/out.png", 390, 844))
    print(result.ok, result.path)
"""
from .config import Config, config
from .screenshot import CaptureResult, capture, run_capture
from .errors import CaptureFailure, UsageError, WebshotError
from .renderers import ChromiumRenderer, Renderer, RenderOutcome, get_renderer
from .request import CaptureRequest, parse_capture_args

__all__ = [
    # Core
    "Config",
    "config",
    "CaptureRequest",
    "CaptureResult",
    "capture",
    "run_capture",
    "parse_capture_args",
    # Renderers
    "Renderer",
    "RenderOutcome",
    "ChromiumRenderer",
    "get_renderer",
    # Errors
    "WebshotError",
    "UsageError",
    "CaptureFailure",
]

__version__ = '1.0.0'
