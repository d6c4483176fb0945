"""
Renderer backends

- chromium: headless Chromium subprocess (default)
- playwright: Playwright sync API
"""

from typing import Optional

from ..config import Config, config
from ..errors import UsageError
from .base import Renderer, RenderOutcome
from .chromium import ChromiumRenderer, build_command, find_chromium_binary

RENDERERS = ("chromium", "playwright")


def get_renderer(
    name: Optional[str] = None,
    virtual_time_budget: Optional[int] = None,
    timeout: Optional[float] = None,
    cfg: Optional[Config] = None,
) -> Renderer:
    """
    Build the renderer backend by name.

    Args:
        name: "chromium" or "playwright" (config default if None)
        virtual_time_budget: Budget in ms (config default if None)
        timeout: Wall-clock deadline in seconds (None: no deadline)
        cfg: Config to read defaults from

    Raises:
        UsageError: unknown renderer name
    """
    cfg = cfg or config
    name = (name or cfg.renderer).lower()
    budget = virtual_time_budget or cfg.virtual_time_budget

    if name == "chromium":
        return ChromiumRenderer(binary=cfg.chromium_bin, virtual_time_budget=budget, timeout=timeout)
    if name == "playwright":
        # Lazy import keeps the chromium path free of the playwright import
        from .playwright_renderer import PlaywrightRenderer
        return PlaywrightRenderer(virtual_time_budget=budget, timeout=timeout)
    raise UsageError(f"unknown renderer {name!r}, expected one of: {', '.join(RENDERERS)}")


__all__ = [
    'Renderer',
    'RenderOutcome',
    'ChromiumRenderer',
    'RENDERERS',
    'build_command',
    'find_chromium_binary',
    'get_renderer',
]
