"""
provider-linux - Integration Tests

End-to-end tests for CLI argument handling, report output and exit codes.
"""

import json
import logging
import sys
from pathlib import Path
from unittest import mock

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from provider_linux.cli import CLI, main, parse_option
from provider_linux.core.config import (
    DEFAULT_SSH_CONFIG_PATH,
    ENV_IP_FORWARD_PATH,
    ENV_SSH_CONFIG_PATH,
)
from provider_linux.core.provider import LinuxProvider, ProviderError


def artifact_args(config) -> list[str]:
    return ["--ssh-config", config.ssh_config_path, "--ip-forward", config.ip_forward_path]


class TestCLIArgumentParsing:
    """Tests for CLI argument parsing."""

    def test_cli_parse_no_args(self) -> None:
        args = CLI().parse_args([])

        assert args.ssh_config is None
        assert args.ip_forward is None
        assert args.format == "text"
        assert args.pretty is False
        assert args.output is None
        assert args.option == []
        assert args.describe is False
        assert args.verbose is False

    def test_cli_parse_paths(self) -> None:
        args = CLI().parse_args(["--ssh-config", "/a", "--ip-forward", "/b"])
        assert args.ssh_config == "/a"
        assert args.ip_forward == "/b"

    def test_cli_parse_options(self) -> None:
        args = CLI().parse_args(["--option", "a=1", "--option", "b=x=y"])
        assert args.option == [("a", "1"), ("b", "x=y")]

    def test_cli_parse_invalid_format(self) -> None:
        with pytest.raises(SystemExit):
            CLI().parse_args(["--format", "xml"])

    def test_parse_option_rejects_missing_separator(self) -> None:
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_option("novalue")
        with pytest.raises(argparse.ArgumentTypeError):
            parse_option("=value")


class TestBuildConfig:
    """Tests for artifact path resolution."""

    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_SSH_CONFIG_PATH, "/env/sshd_config")
        monkeypatch.setenv(ENV_IP_FORWARD_PATH, "/env/ip_forward")

        cli = CLI()
        cli.parse_args(["--ssh-config", "/flag/sshd_config"])
        config = cli.build_config()

        assert config.ssh_config_path == "/flag/sshd_config"
        assert config.ip_forward_path == "/env/ip_forward"

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_SSH_CONFIG_PATH, raising=False)
        monkeypatch.delenv(ENV_IP_FORWARD_PATH, raising=False)

        cli = CLI()
        cli.parse_args([])

        assert cli.build_config().ssh_config_path == DEFAULT_SSH_CONFIG_PATH


class TestMain:
    """Tests for the main entry point and exit codes."""

    def test_secure_system_exits_zero(self, make_config, capsys: pytest.CaptureFixture) -> None:
        exit_code = main(artifact_args(make_config()))

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "[PASS] root-login-disabled" in out
        assert "Score: 45/45" in out

    def test_insecure_system_exits_two(self, make_config, capsys: pytest.CaptureFixture) -> None:
        config = make_config(ssh="PermitRootLogin yes\n", ip_forward="1")

        assert main(artifact_args(config)) == 2
        assert "Score: 0/45" in capsys.readouterr().out

    def test_missing_ssh_config_exits_two(self, make_config, capsys: pytest.CaptureFixture) -> None:
        config = make_config(ssh=None)

        assert main(artifact_args(config)) == 2
        assert "[ERROR] ssh-read-failure" in capsys.readouterr().out

    def test_missing_forwarding_exits_zero(self, make_config) -> None:
        """An omitted forwarding check does not fail the run."""
        assert main(artifact_args(make_config(ip_forward=None))) == 0

    def test_json_output(self, make_config, capsys: pytest.CaptureFixture) -> None:
        exit_code = main(artifact_args(make_config()) + ["--format", "json"])

        assert exit_code == 0
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["metadata"]["provider"]["id"] == "provider-linux"
        assert [c["score"] for c in parsed["checks"]] == [20, 15, 10]

    def test_output_file(self, make_config, tmp_path: Path) -> None:
        output_path = tmp_path / "out" / "report.json"
        output_path.parent.mkdir()

        exit_code = main(
            artifact_args(make_config()) + ["--format", "json", "--pretty", "-o", str(output_path)]
        )

        assert exit_code == 0
        parsed = json.loads(output_path.read_text(encoding="utf-8"))
        assert parsed["summary"]["score"] == 45

    def test_unwritable_output_exits_one(self, make_config, tmp_path: Path) -> None:
        output_path = tmp_path / "missing-dir" / "report.txt"

        assert main(artifact_args(make_config()) + ["-o", str(output_path)]) == 1

    def test_options_passed_through(self, make_config) -> None:
        config = make_config()
        with mock.patch.object(LinuxProvider, "analyze", wraps=LinuxProvider(config).analyze) as analyze:
            exit_code = main(artifact_args(config) + ["--option", "profile=strict"])

        assert exit_code == 0
        analyze.assert_called_once_with(options={"profile": "strict"})

    def test_provider_error_exits_one(self, make_config, capsys: pytest.CaptureFixture) -> None:
        with mock.patch.object(LinuxProvider, "analyze", side_effect=ProviderError("host misuse")):
            exit_code = main(artifact_args(make_config()))

        assert exit_code == 1
        assert "host misuse" in capsys.readouterr().err

    def test_describe(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--describe"]) == 0

        info = json.loads(capsys.readouterr().out)
        assert info["id"] == "provider-linux"
        assert set(info) == {"id", "name", "version", "description", "author"}

    def test_verbose_enables_debug_logging(
        self,
        make_config,
        caplog: pytest.LogCaptureFixture,
        capsys: pytest.CaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="provider_linux"):
            exit_code = main(artifact_args(make_config(ip_forward=None)) + ["-v"])

        assert exit_code == 0
        messages = [r.getMessage() for r in caplog.records]
        assert any("Reading artifact" in m for m in messages)
        assert any("omitting forwarding-disabled" in m for m in messages)
        assert "omitting" not in capsys.readouterr().out

    def test_bad_option_exits_one(self, make_config, capsys: pytest.CaptureFixture) -> None:
        """Usage errors exit 1 so they are distinct from failed checks."""
        exit_code = main(artifact_args(make_config()) + ["--option", "novalue"])

        assert exit_code == 1
        assert "Expected KEY=VALUE" in capsys.readouterr().err

    def test_bad_format_exits_one(self) -> None:
        assert main(["--format", "xml"]) == 1

    def test_help_exits_zero(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--help"]) == 0
        assert "provider-linux" in capsys.readouterr().out
