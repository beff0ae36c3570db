"""Tests pour le module commands."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from nova_agent_watcher.commands import CommandResult, LinuxCommandExecutor


RUN = "nova_agent_watcher.commands.runner.subprocess.run"


class TestCommandResult:
    """Tests pour la dataclass CommandResult."""

    def test_frozen(self):
        """Test que la dataclass est immuable."""
        result = CommandResult(
            command=["ls"], return_code=0, stdout="", stderr="",
            success=True, duration=0.0,
        )
        with pytest.raises(AttributeError):
            result.return_code = 1

    def test_output(self):
        """output concatène stdout puis stderr."""
        result = CommandResult(
            command=["ls"], return_code=1, stdout="a\n", stderr="b\n",
            success=False, duration=0.0,
        )
        assert result.output == "a\nb\n"


class TestLinuxCommandExecutor:
    """Tests pour LinuxCommandExecutor."""

    @patch(RUN)
    def test_run_succes(self, mock_run):
        """Une commande réussie donne success=True."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["echo"], returncode=0, stdout="ok\n", stderr=""
        )

        result = LinuxCommandExecutor().run(["echo", "ok"])

        assert result.success is True
        assert result.stdout == "ok\n"
        assert mock_run.call_args.kwargs["stderr"] == subprocess.PIPE

    @patch(RUN)
    def test_sortie_combinee(self, mock_run):
        """combine_output fusionne stderr dans stdout."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["t"], returncode=0, stdout="x", stderr=None
        )

        result = LinuxCommandExecutor().run(["t"], combine_output=True)

        assert mock_run.call_args.kwargs["stderr"] == subprocess.STDOUT
        assert result.stderr == ""

    @patch(RUN)
    def test_code_retour_non_nul(self, mock_run):
        """Un code retour non nul est journalisé sans exception."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["false"], returncode=3, stdout="", stderr="erreur"
        )
        logger = MagicMock()

        result = LinuxCommandExecutor(logger=logger).run(["false"])

        assert result.success is False
        assert result.return_code == 3
        logger.log_error.assert_called_once_with("Code retour 3 : false")

    @patch(RUN)
    def test_sortie_decodee_avec_remplacement(self, mock_run):
        """Les octets non UTF-8 sont remplacés, sans exception."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["t"], returncode=0, stdout="", stderr=""
        )

        LinuxCommandExecutor().run(["t"])

        assert mock_run.call_args.kwargs["errors"] == "replace"

    @patch(RUN, side_effect=FileNotFoundError("introuvable"))
    def test_executable_absent(self, mock_run):
        """Un exécutable absent donne return_code=-1."""
        result = LinuxCommandExecutor().run(["absent"])

        assert result.success is False
        assert result.return_code == -1
        assert "introuvable" in result.stderr

    @patch(RUN)
    def test_timeout(self, mock_run):
        """Un timeout donne return_code=-1 et la sortie partielle."""
        mock_run.side_effect = subprocess.TimeoutExpired(
            ["sleep"], 1, output=b"partiel"
        )

        result = LinuxCommandExecutor(default_timeout=1).run(["sleep", "9"])

        assert result.success is False
        assert result.return_code == -1
        assert result.stdout == "partiel"
        assert mock_run.call_args.kwargs["timeout"] == 1

    @patch(RUN)
    def test_environnement_fusionne(self, mock_run):
        """L'environnement spécifique complète celui par défaut."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["env"], returncode=0, stdout="", stderr=""
        )

        LinuxCommandExecutor(default_env={"A": "1"}).run(
            ["env"], env={"B": "2"}
        )

        env = mock_run.call_args.kwargs["env"]
        assert env["A"] == "1"
        assert env["B"] == "2"

    @patch(RUN)
    def test_environnement_par_defaut(self, mock_run):
        """Sans environnement personnalisé, env=None."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["env"], returncode=0, stdout="", stderr=""
        )

        LinuxCommandExecutor().run(["env"])

        assert mock_run.call_args.kwargs["env"] is None
