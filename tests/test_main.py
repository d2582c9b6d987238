"""Tests for main.py CLI module."""

import json

import pytest
from click.testing import CliRunner

from passpolicy import __version__
from passpolicy.config import get_settings
from passpolicy.main import EXIT_CONFIG_ERROR, EXIT_INVALID, cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


def _json_from(output: str) -> dict:
    return json.loads(output[output.index("{") :])


class TestCli:
    """Tests for the CLI group."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self, runner: CliRunner) -> None:
        """Test help lists the commands."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "policy" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test_valid_password(self, runner: CliRunner) -> None:
        """Test a valid password exits 0 and prints the wire response."""
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz"])
        assert result.exit_code == 0
        data = _json_from(result.stdout)
        assert data["isValid"] is True
        assert data["strength"] == 70
        assert data["level"] == "Good"
        assert "errors" not in data
        assert data["warnings"] == ["Password contains common patterns that may be easy to guess"]

    def test_invalid_password(self, runner: CliRunner) -> None:
        """Test a rejected password exits 1."""
        result = runner.invoke(cli, ["check", "Password1!"])
        assert result.exit_code == EXIT_INVALID
        data = _json_from(result.stdout)
        assert data["isValid"] is False
        assert data["errors"] == ["Password cannot contain common words like 'password'"]

    def test_prompt_hides_input(self, runner: CliRunner) -> None:
        """Test the password is prompted for when omitted."""
        result = runner.invoke(cli, ["check"], input="Xk9#mP2$vL5@nQ8&\n")
        assert result.exit_code == 0
        assert "Xk9#mP2$vL5@nQ8&" not in result.stdout
        assert _json_from(result.stdout)["level"] == "Very Strong"

    def test_override_flags(self, runner: CliRunner) -> None:
        """Test requirement overrides relax the policy."""
        result = runner.invoke(
            cli,
            ["check", "lowercaseonly", "--no-uppercase", "--no-numbers", "--no-special"],
        )
        assert result.exit_code == 0
        assert _json_from(result.stdout)["isValid"] is True

    def test_min_length_override(self, runner: CliRunner) -> None:
        """Test --min-length tightens the policy."""
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz", "--min-length", "20"])
        assert result.exit_code == EXIT_INVALID
        assert _json_from(result.stdout)["errors"] == [
            "Password must be at least 20 characters long"
        ]

    def test_inconsistent_override(self, runner: CliRunner) -> None:
        """Test overrides that break the length bounds exit 2."""
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz", "--max-length", "4"])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Configuration error" in result.stderr

    def test_environment_policy(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the policy is read from the environment."""
        monkeypatch.setenv("PASSWORD_FORBIDDEN_WORDS", "troub")
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz"])
        assert result.exit_code == 0

        monkeypatch.setenv("PASSWORD_FORBIDDEN_WORDS", "4dor")
        get_settings.cache_clear()
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz"])
        assert result.exit_code == EXIT_INVALID
        assert _json_from(result.stdout)["errors"] == [
            "Password cannot contain common words like '4dor'"
        ]

    def test_invalid_environment(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an inconsistent environment policy exits 2."""
        monkeypatch.setenv("PASSWORD_MIN_LENGTH", "50")
        monkeypatch.setenv("PASSWORD_MAX_LENGTH", "10")
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz"])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "must be at least the minimum length" in result.stderr

    @pytest.mark.parametrize(
        ("variable", "value"),
        [("PASSWORD_MIN_LENGTH", "twelve"), ("LOG_JSON", "sometimes")],
    )
    def test_malformed_environment(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch, variable: str, value: str
    ) -> None:
        """Test an unparseable environment value exits 2, not the rejection code."""
        monkeypatch.setenv(variable, value)
        result = runner.invoke(cli, ["check", "Tr0ub4dor&3xyz"])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Configuration error" in result.stderr
        assert variable in result.stderr
        assert result.stdout == ""


class TestPolicyCommand:
    """Tests for the policy command."""

    def test_default_policy(self, runner: CliRunner) -> None:
        """Test the effective policy is printed without the word list."""
        result = runner.invoke(cli, ["policy"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "min_length": 8,
            "max_length": 128,
            "require_uppercase": True,
            "require_lowercase": True,
            "require_numbers": True,
            "require_special": True,
            "forbidden_word_count": 6,
        }
        assert "password" not in result.stdout

    def test_environment_policy(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment overrides are reflected."""
        monkeypatch.setenv("PASSWORD_MIN_LENGTH", "14")
        monkeypatch.setenv("PASSWORD_FORBIDDEN_WORDS", '["acme"]')
        result = runner.invoke(cli, ["policy"])
        data = json.loads(result.stdout)
        assert data["min_length"] == 14
        assert data["forbidden_word_count"] == 1

    def test_malformed_environment(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unparseable environment value exits 2."""
        monkeypatch.setenv("PASSWORD_MAX_LENGTH", "lots")
        result = runner.invoke(cli, ["policy"])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "PASSWORD_MAX_LENGTH" in result.stderr
