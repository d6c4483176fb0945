"""
Shared fixtures: stub renderers that record calls instead of launching a browser.
"""

import pytest
from pathlib import Path

from webshot_core.renderers import RenderOutcome


class StubRenderer:
    """Records every render() call; optionally writes the output file."""

    name = "stub"

    def __init__(self, creates_file=True, content=b"\x89PNG stub", outcome=None):
        self.creates_file = creates_file
        self.content = content
        self.outcome = outcome or RenderOutcome(returncode=0)
        self.calls = []

    @property
    def call_count(self):
        return len(self.calls)

    def render(self, url, output_path, width, height):
        self.calls.append({"url": url, "output_path": output_path, "width": width, "height": height})
        if self.creates_file:
            Path(output_path).write_bytes(self.content)
        return self.outcome


@pytest.fixture
def creating_renderer():
    return StubRenderer(creates_file=True)


@pytest.fixture
def failing_renderer():
    return StubRenderer(
        creates_file=False,
        outcome=RenderOutcome(returncode=1, stderr="ERROR: net::ERR_CONNECTION_REFUSED\n"),
    )


@pytest.fixture
def out_path(tmp_path):
    return str(tmp_path / "out.png")
