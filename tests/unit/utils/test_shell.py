"""Unit tests for shell execution utilities."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from mportctl.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult dataclass."""

    def test_success(self) -> None:
        """Exit code zero is success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success
        assert not CommandResult(stdout="", stderr="", returncode=1).success


class TestRunCommand:
    """Tests for run_command function."""

    @patch("mportctl.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """stdout, stderr and the exit code are returned."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)

        result = run_command(["mport.delete", "curl"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=3)

    @patch("mportctl.utils.shell.subprocess.run")
    def test_passes_timeout(self, mock_run: MagicMock) -> None:
        """The timeout is handed to subprocess.run and output is captured."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["true"], timeout=5.0)

        kwargs = mock_run.call_args.kwargs
        assert kwargs["timeout"] == 5.0
        assert kwargs["capture_output"] is True
        assert kwargs["check"] is False

    @patch("mportctl.utils.shell.subprocess.run")
    def test_timeout_propagates(self, mock_run: MagicMock) -> None:
        """TimeoutExpired reaches the caller."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="sleep", timeout=1)

        with pytest.raises(subprocess.TimeoutExpired):
            run_command(["sleep", "10"], timeout=1)


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("mportctl.utils.shell.shutil.which", return_value="/usr/sbin/mport")
    def test_found(self, mock_which: MagicMock) -> None:
        """A command on PATH exists."""
        assert command_exists("mport")
        mock_which.assert_called_once_with("mport")

    @patch("mportctl.utils.shell.shutil.which", return_value=None)
    def test_missing(self, mock_which: MagicMock) -> None:
        """A command not on PATH does not exist."""
        assert not command_exists("mport")
