"""
Chromium Renderer - headless Chromium via its --screenshot switch

One external process per capture. The binary is not checked before it is
invoked: a missing binary shows up as an outcome without a return code
and, further up, as a missing output file.
"""

import logging
import shutil
import subprocess
from typing import List, Optional

from .base import RenderOutcome

logger = logging.getLogger(__name__)

CHROMIUM_CANDIDATES = ("chromium", "chromium-browser", "google-chrome", "google-chrome-stable")
DEFAULT_VIRTUAL_TIME_BUDGET = 5000


def find_chromium_binary(explicit: Optional[str] = None) -> str:
    """
    Resolve the browser binary to invoke.

    Args:
        explicit: Configured binary; returned unchanged when set

    Returns:
        The explicit binary, the first candidate found on PATH, or "chromium"
    """
    if explicit:
        return explicit
    for name in CHROMIUM_CANDIDATES:
        path = shutil.which(name)
        if path:
            return path
    return CHROMIUM_CANDIDATES[0]


def build_command(
    binary: str,
    url: str,
    output_path: str,
    width: int,
    height: int,
    virtual_time_budget: int = DEFAULT_VIRTUAL_TIME_BUDGET,
) -> List[str]:
    return [
        binary,
        "--headless",
        "--disable-gpu",
        "--no-sandbox",
        "--disable-dev-shm-usage",
        f"--window-size={width},{height}",
        f"--screenshot={output_path}",
        "--hide-scrollbars",
        f"--virtual-time-budget={virtual_time_budget}",
        url,
    ]


class ChromiumRenderer:
    """Renders by running headless Chromium as a subprocess."""

    name = "chromium"

    def __init__(
        self,
        binary: Optional[str] = None,
        virtual_time_budget: int = DEFAULT_VIRTUAL_TIME_BUDGET,
        timeout: Optional[float] = None,
    ):
        self.binary = find_chromium_binary(binary)
        self.virtual_time_budget = virtual_time_budget
        self.timeout = timeout

    def render(self, url: str, output_path: str, width: int, height: int) -> RenderOutcome:
        cmd = build_command(self.binary, url, output_path, width, height, self.virtual_time_budget)
        logger.debug(f"Running renderer: {' '.join(cmd)}")
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            logger.debug(f"Renderer binary not found: {e}")
            return RenderOutcome(returncode=None, stderr=f"binary not found: {self.binary}")
        except PermissionError as e:
            logger.debug(f"Renderer binary not executable: {e}")
            return RenderOutcome(returncode=None, stderr=f"permission denied: {self.binary}")
        except subprocess.TimeoutExpired as e:
            # subprocess.run kills the child before re-raising
            logger.debug(f"Renderer exceeded {self.timeout}s deadline")
            return RenderOutcome(returncode=None, stderr=_decode(e.stderr), timed_out=True)

        logger.debug(f"Renderer exited with status {proc.returncode}")
        return RenderOutcome(returncode=proc.returncode, stderr=_decode(proc.stderr))


def _decode(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data
