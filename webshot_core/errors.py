"""
Error kinds raised by webshot.

Usage errors are raised before anything is rendered; capture failures
after the renderer has had its turn.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .screenshot import CaptureResult


class WebshotError(Exception):
    """Base class for webshot errors"""
    pass


class UsageError(WebshotError):
    """Required arguments are missing or invalid"""

    def __init__(self, message: str, usage: Optional[str] = None):
        super().__init__(message)
        self.usage = usage


class CaptureFailure(WebshotError):
    """No usable screenshot at the output path after the renderer ran"""

    def __init__(self, message: str, result: Optional["CaptureResult"] = None):
        super().__init__(message)
        self.result = result
