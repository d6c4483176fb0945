"""
Renderer capability interface.

A renderer turns (url, output_path, width, height) into an image file.
It reports what happened in a RenderOutcome, but whether the capture
succeeded is decided by the caller looking at the filesystem.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass
class RenderOutcome:
    """What the renderer reported. Informational only."""
    returncode: Optional[int] = None  # None: the renderer could not be started
    stderr: str = ""
    timed_out: bool = False

    @property
    def started(self) -> bool:
        return self.returncode is not None or self.timed_out


@runtime_checkable
class Renderer(Protocol):
    name: str

    def render(self, url: str, output_path: str, width: int, height: int) -> RenderOutcome:
        ...
