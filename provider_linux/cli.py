"""
provider-linux - Command Line Interface

This module provides argument parsing and the main entry point that runs
the Linux provider standalone, the way a host orchestrator would.
"""

import argparse
import dataclasses
import json
import sys
import traceback
from pathlib import Path
from typing import Optional

from provider_linux.core.config import ProviderConfig
from provider_linux.core.provider import Provider, ProviderError, Report
from provider_linux.core.registry import ProviderRegistry, default_registry
from provider_linux.logger import console_logging, get_logger
from provider_linux.output.json_formatter import JSONFormatter
from provider_linux.output.text_formatter import TextFormatter

logger = get_logger(__name__)

PROVIDER_ID = "provider-linux"


def parse_option(value: str) -> tuple[str, str]:
    """Parse a KEY=VALUE provider option."""
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{value}'")
    return key, val


class CLI:
    """Command Line Interface for the Linux provider.

    Builds the provider configuration, invokes analyze() and hands the
    report to a formatter.
    """

    def __init__(self, registry: Optional[ProviderRegistry] = None) -> None:
        """Initialize the CLI.

        Args:
            registry: Provider registry (defaults to the built-in providers)
        """
        self.args: Optional[argparse.Namespace] = None
        self.registry = registry or default_registry()

    def parse_args(self, argv: Optional[list[str]] = None) -> argparse.Namespace:
        """Parse command line arguments.

        Args:
            argv: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Parsed arguments namespace
        """
        parser = argparse.ArgumentParser(
            prog="provider-linux",
            description="Linux Security Auditor",
            epilog="Exit codes: 0=all checks passed, 1=error, 2=check failures"
        )

        parser.add_argument(
            "--ssh-config",
            type=str,
            default=None,
            help="Path to sshd_config (default: $PROVIDER_LINUX_SSH_CONFIG or /etc/ssh/sshd_config)"
        )

        parser.add_argument(
            "--ip-forward",
            type=str,
            default=None,
            help=(
                "Path to the IPv4 forwarding value "
                "(default: $PROVIDER_LINUX_IP_FORWARD or /proc/sys/net/ipv4/ip_forward)"
            )
        )

        parser.add_argument(
            "--format", "-f",
            choices=["text", "json"],
            default="text",
            help="Report format (default: text)"
        )

        parser.add_argument(
            "--pretty",
            action="store_true",
            help="Pretty-print JSON output with indentation"
        )

        parser.add_argument(
            "--output", "-o",
            type=str,
            default=None,
            help="Output file path (default: stdout)"
        )

        parser.add_argument(
            "--option",
            type=parse_option,
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Provider option passed through to analyze(); may be repeated"
        )

        parser.add_argument(
            "--describe",
            action="store_true",
            help="Print provider metadata as JSON and exit"
        )

        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose logging on stderr"
        )

        self.args = parser.parse_args(argv)
        return self.args

    def build_config(self) -> ProviderConfig:
        """Resolve artifact paths: CLI flags, then environment, then defaults."""
        config = ProviderConfig.from_env()
        overrides = {}
        if self.args is not None:
            if self.args.ssh_config:
                overrides["ssh_config_path"] = self.args.ssh_config
            if self.args.ip_forward:
                overrides["ip_forward_path"] = self.args.ip_forward
        return dataclasses.replace(config, **overrides)

    def create_provider(self) -> Provider:
        return self.registry.create(PROVIDER_ID, config=self.build_config())

    def write_report(self, provider: Provider, report: Report) -> None:
        """Render the report to the requested destination."""
        if self.args is not None and self.args.format == "json":
            formatter = JSONFormatter(pretty=self.args.pretty)
        else:
            formatter = TextFormatter()

        info = provider.describe()
        if self.args is not None and self.args.output:
            output_path = Path(self.args.output)
            formatter.write_to_file(report, output_path, info=info)
            logger.info("Report written to %s", output_path)
        else:
            formatter.write_to_stdout(report, info=info)

    def run_audit(self) -> int:
        """Run the provider and output its report.

        Returns:
            Exit code (0=all passed, 1=error, 2=failures)
        """
        provider = self.create_provider()
        options = dict(self.args.option) if self.args else {}

        report = provider.analyze(options=options)

        try:
            self.write_report(provider, report)
        except BrokenPipeError:
            # Common when piping to tools like `head`; treat as graceful termination.
            return 0
        except (OSError, UnicodeError) as e:
            print(f"Error writing report: {e}", file=sys.stderr)
            return 1

        if any(not finding.passed for finding in report.findings):
            return 2
        return 0

    def main(self, argv: Optional[list[str]] = None) -> int:
        """Main entry point for the CLI.

        Args:
            argv: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code (0=all passed, 1=error, 2=failures)
        """
        try:
            self.parse_args(argv)
        except SystemExit as e:
            # argparse exits 2 on usage errors; 2 is reserved for failed checks
            return 1 if e.code else 0

        try:
            with console_logging(self.args.verbose):
                if self.args.describe:
                    info = self.create_provider().describe()
                    print(json.dumps(info.to_dict(), indent=2))
                    return 0

                return self.run_audit()

        except (ValueError, KeyError, ProviderError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            print("\nAudit interrupted by user", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            if self.args and self.args.verbose:
                traceback.print_exc()
            return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the provider-linux CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=all passed, 1=error, 2=failures)
    """
    cli = CLI()
    return cli.main(argv)


if __name__ == "__main__":
    sys.exit(main())
