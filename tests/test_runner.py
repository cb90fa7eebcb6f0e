"""Tests for external command execution."""

import subprocess
from unittest import mock

import pytest

from openrbx.errors import DetectionError, SpawnFailedError
from openrbx.runner import CommandRunner, _detached_popen_kwargs


@pytest.fixture
def runner():
    return CommandRunner()


class TestCapture:
    @mock.patch("openrbx.runner.subprocess.run")
    def test_returns_stdout(self, mock_run, runner):
        mock_run.return_value = subprocess.CompletedProcess("cmd", 0, stdout="2\n", stderr="")
        assert runner.capture("ps | wc -l") == "2\n"
        args, kwargs = mock_run.call_args
        assert args == ("ps | wc -l",)
        assert kwargs["shell"] is True
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True

    @mock.patch("openrbx.runner.subprocess.run")
    def test_nonzero_exit_raises(self, mock_run, runner):
        mock_run.return_value = subprocess.CompletedProcess("cmd", 1, stdout="0\n", stderr="")
        with pytest.raises(DetectionError):
            runner.capture("tasklist | find /c x")

    @mock.patch("openrbx.runner.subprocess.run")
    def test_os_error_raises(self, mock_run, runner):
        mock_run.side_effect = OSError("no shell")
        with pytest.raises(DetectionError, match="no shell"):
            runner.capture("ps")


class TestSpawnAndRelease:
    @mock.patch("openrbx.runner.subprocess.Popen")
    def test_detaches_and_waits_for_open_command(self, mock_popen, runner):
        mock_popen.return_value.wait.return_value = 0

        runner.spawn_and_release(["xdg-open", "roblox-studio:1"])

        args, kwargs = mock_popen.call_args
        assert args == (["xdg-open", "roblox-studio:1"],)
        assert kwargs["stdin"] is subprocess.DEVNULL
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL
        mock_popen.return_value.wait.assert_called_once_with()

    @mock.patch("openrbx.runner.subprocess.Popen")
    def test_missing_binary_raises_spawn_failed(self, mock_popen, runner):
        mock_popen.side_effect = FileNotFoundError("xdg-open not found")
        with pytest.raises(SpawnFailedError) as exc_info:
            runner.spawn_and_release(["xdg-open", "roblox-studio:1"])
        assert exc_info.value.command == ["xdg-open", "roblox-studio:1"]
        assert "xdg-open" in str(exc_info.value)

    @mock.patch("openrbx.runner.subprocess.Popen")
    def test_permission_denied_raises_spawn_failed(self, mock_popen, runner):
        mock_popen.side_effect = PermissionError("denied")
        with pytest.raises(SpawnFailedError, match="denied"):
            runner.spawn_and_release(["open", "roblox-studio:1"])

    @mock.patch("openrbx.runner.subprocess.Popen")
    def test_abnormal_exit_raises_spawn_failed(self, mock_popen, runner):
        mock_popen.return_value.wait.return_value = 4
        with pytest.raises(SpawnFailedError, match="status 4"):
            runner.spawn_and_release(["xdg-open", "roblox-studio:1"])


class TestDetachedPopenKwargs:
    def test_posix_starts_new_session(self, monkeypatch):
        monkeypatch.setattr("openrbx.runner.sys.platform", "linux")
        kwargs = _detached_popen_kwargs()
        assert kwargs["start_new_session"] is True
        assert "creationflags" not in kwargs

    @pytest.mark.skipif(
        not hasattr(subprocess, "DETACHED_PROCESS"), reason="Windows-only constants"
    )
    def test_windows_uses_detached_process(self, monkeypatch):
        monkeypatch.setattr("openrbx.runner.sys.platform", "win32")
        kwargs = _detached_popen_kwargs()
        assert kwargs["creationflags"] & subprocess.DETACHED_PROCESS
        assert "start_new_session" not in kwargs
