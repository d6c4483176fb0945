"""
Unit tests for the headless Chromium renderer.

subprocess.run is replaced, or a small shell script stands in for the browser,
so no real browser is started.
"""

import subprocess
import types

import pytest

from webshot_core.renderers import chromium
from webshot_core.renderers.chromium import ChromiumRenderer, build_command, find_chromium_binary
from webshot_core.request import CaptureRequest
from webshot_core.screenshot import capture
from webshot_core.cli import screenshot as cli


@pytest.fixture
def recorded_runs(monkeypatch):
    """Replace subprocess.run with a recorder that writes the screenshot."""
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append({"cmd": cmd, "kwargs": kwargs})
        shot = next(a for a in cmd if a.startswith("--screenshot="))
        with open(shot.split("=", 1)[1], "wb") as f:
            f.write(b"png")
        return types.SimpleNamespace(returncode=0, stderr="")

    monkeypatch.setattr(chromium.subprocess, "run", fake_run)
    return calls


def test_build_command_switches():
    cmd = build_command("chromium", "http://localhost:3000", "/tmp/out.png", 1400, 900)

    assert cmd == [
        "chromium",
        "--headless",
        "--disable-gpu",
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--window-size=1400,900",
        "--screenshot=/tmp/out.png",
        "--hide-scrollbars",
        "--virtual-time-budget=5000",
        "http://localhost:3000",
    ]


def test_build_command_url_is_last():
    cmd = build_command("chromium", "http://x/?a=1&b=2", "/tmp/o.png", 390, 844, 1200)

    assert cmd[-1] == "http://x/?a=1&b=2"
    assert "--window-size=390,844" in cmd
    assert "--virtual-time-budget=1200" in cmd


def test_render_passes_dimensions(recorded_runs, tmp_path):
    out = str(tmp_path / "m.png")
    renderer = ChromiumRenderer(binary="/opt/chrome", virtual_time_budget=2500)

    outcome = renderer.render("http://localhost:3000", out, 390, 844)

    assert outcome.returncode == 0
    assert len(recorded_runs) == 1
    cmd = recorded_runs[0]["cmd"]
    assert cmd[0] == "/opt/chrome"
    assert "--window-size=390,844" in cmd
    assert "--virtual-time-budget=2500" in cmd
    assert f"--screenshot={out}" in cmd


def test_render_discards_stdout_and_captures_stderr(recorded_runs, tmp_path):
    ChromiumRenderer(binary="chromium").render("http://x", str(tmp_path / "o.png"), 10, 10)

    kwargs = recorded_runs[0]["kwargs"]
    assert kwargs["stdout"] == subprocess.DEVNULL
    assert kwargs["stderr"] == subprocess.PIPE
    assert kwargs["timeout"] is None
    assert kwargs["check"] is False


def test_render_reports_exit_status_and_stderr(monkeypatch, tmp_path):
    def fake_run(cmd, **kwargs):
        return types.SimpleNamespace(returncode=21, stderr="crashed\n")

    monkeypatch.setattr(chromium.subprocess, "run", fake_run)

    outcome = ChromiumRenderer(binary="chromium").render("http://x", str(tmp_path / "o.png"), 10, 10)

    assert outcome.returncode == 21
    assert outcome.stderr == "crashed\n"
    assert outcome.started


def test_missing_binary_is_an_outcome_not_an_exception(monkeypatch, tmp_path):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(chromium.subprocess, "run", fake_run)

    outcome = ChromiumRenderer(binary="no-such-browser").render("http://x", str(tmp_path / "o.png"), 10, 10)

    assert outcome.returncode is None
    assert not outcome.started
    assert "binary not found" in outcome.stderr


def test_timeout_is_recorded(monkeypatch, tmp_path):
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"], stderr=b"still loading")

    monkeypatch.setattr(chromium.subprocess, "run", fake_run)

    outcome = ChromiumRenderer(binary="chromium", timeout=0.5).render("http://x", str(tmp_path / "o.png"), 10, 10)

    assert outcome.timed_out
    assert outcome.stderr == "still loading"


class TestFindChromiumBinary:
    """Binary resolution."""

    def test_explicit_binary_wins(self, monkeypatch):
        monkeypatch.setattr(chromium.shutil, "which", lambda name: "/usr/bin/" + name)
        assert find_chromium_binary("/custom/chrome") == "/custom/chrome"

    def test_first_candidate_on_path(self, monkeypatch):
        found = {"google-chrome": "/usr/bin/google-chrome"}
        monkeypatch.setattr(chromium.shutil, "which", lambda name: found.get(name))
        assert find_chromium_binary() == "/usr/bin/google-chrome"

    def test_falls_back_to_chromium(self, monkeypatch):
        monkeypatch.setattr(chromium.shutil, "which", lambda name: None)
        assert find_chromium_binary() == "chromium"


@pytest.fixture
def fake_browser(tmp_path):
    """A stand-in browser script; writes undecodable bytes to stderr and fails."""
    script = tmp_path / "fake-chromium"
    script.write_text("#!/bin/sh\nprintf '\\377\\376 broken\\n' >&2\nexit 1\n")
    script.chmod(0o755)
    return str(script)


def test_undecodable_stderr_is_replaced(fake_browser, tmp_path):
    outcome = ChromiumRenderer(binary=fake_browser).render("http://x", str(tmp_path / "o.png"), 10, 10)

    assert outcome.returncode == 1
    assert "�" in outcome.stderr
    assert "broken" in outcome.stderr


def test_undecodable_stderr_is_a_capture_failure(fake_browser, tmp_path, capsys):
    renderer = ChromiumRenderer(binary=fake_browser)

    rc = cli.main(["http://x", str(tmp_path / "o.png"), "--show-renderer-log"], renderer=renderer)

    err = capsys.readouterr().err
    assert rc == 1
    assert "ERROR: Screenshot failed" in err
    assert "broken" in err


def test_missing_parent_directory_with_real_subprocess(tmp_path):
    # A browser that honours --screenshot=PATH literally: writes without creating directories
    script = tmp_path / "writer"
    script.write_text(
        "#!/bin/sh\n"
        "for a in \"$@\"; do case $a in --screenshot=*) printf png > \"${a#--screenshot=}\";; esac; done\n"
    )
    script.chmod(0o755)
    out = tmp_path / "missing" / "o.png"

    result = capture(CaptureRequest("http://x", str(out)), renderer=ChromiumRenderer(binary=str(script)))

    assert not result.ok
    assert not (tmp_path / "missing").exists()
