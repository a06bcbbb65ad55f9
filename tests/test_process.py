"""Tests for the subprocess helper (infra/process.py).

``subprocess.run`` is mocked; nothing is executed.
"""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from volnotify.exceptions import BackendCommandError, BinaryNotFoundError, NotifierError
from volnotify.infra.process import run_command


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestRunCommand:
    @patch("volnotify.infra.process.subprocess.run")
    def test_returns_stdout(self, mock_run: object) -> None:
        mock_run.return_value = _completed(stdout="Mute: no\n")  # type: ignore[union-attr]
        assert run_command(["pactl", "get-sink-mute", "@DEFAULT_SINK@"]) == "Mute: no\n"
        mock_run.assert_called_once_with(  # type: ignore[union-attr]
            ["pactl", "get-sink-mute", "@DEFAULT_SINK@"],
            capture_output=True,
            text=True,
            check=False,
        )

    @patch("volnotify.infra.process.subprocess.run")
    def test_non_zero_exit_raises_backend_error(self, mock_run: object) -> None:
        mock_run.return_value = _completed(  # type: ignore[union-attr]
            returncode=1, stderr="Failure: No such entity\n",
        )
        with pytest.raises(BackendCommandError, match="No such entity"):
            run_command(["pactl", "set-sink-mute", "@DEFAULT_SINK@", "true"])

    @patch("volnotify.infra.process.subprocess.run")
    def test_non_zero_exit_without_output(self, mock_run: object) -> None:
        mock_run.return_value = _completed(returncode=3)  # type: ignore[union-attr]
        with pytest.raises(BackendCommandError, match="exit status 3"):
            run_command(["pactl", "info"])

    @patch("volnotify.infra.process.subprocess.run")
    def test_custom_error_class(self, mock_run: object) -> None:
        mock_run.return_value = _completed(returncode=1, stderr="no daemon")  # type: ignore[union-attr]
        with pytest.raises(NotifierError, match="no daemon"):
            run_command(["notify-send", "x"], error_cls=NotifierError)

    @patch("volnotify.infra.process.subprocess.run")
    def test_missing_binary(self, mock_run: object) -> None:
        mock_run.side_effect = FileNotFoundError("pactl")  # type: ignore[union-attr]
        with pytest.raises(BinaryNotFoundError, match="pactl is not installed") as exc_info:
            run_command(["pactl", "info"])
        assert exc_info.value.hint is not None
        assert "pulseaudio-utils" in exc_info.value.hint

    @patch("volnotify.infra.process.subprocess.run")
    def test_os_error_mapped(self, mock_run: object) -> None:
        mock_run.side_effect = PermissionError("denied")  # type: ignore[union-attr]
        with pytest.raises(BackendCommandError, match="Could not run pactl"):
            run_command(["pactl", "info"])
