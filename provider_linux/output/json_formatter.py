"""
provider-linux - JSON Output Formatter

This module provides JSON formatting of provider reports.
"""

import json
import socket
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..core.check import Finding
from ..core.provider import PluginInfo, Report


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder to handle datetime serialization."""

    def default(self, o: Any) -> Any:
        """Convert datetime objects to ISO format strings."""
        if isinstance(o, datetime):
            return o.isoformat()
        return super().default(o)


class JSONFormatter:
    """Formatter for provider reports in JSON format.

    Produces structured JSON with metadata, summary statistics and the
    ordered findings.

    Example:
        formatter = JSONFormatter(pretty=True)
        report = provider.analyze()
        print(formatter.format(report, info=provider.describe()))
    """

    SCHEMA_VERSION = "1.0"

    def __init__(self, pretty: bool = False) -> None:
        """Initialize the JSON formatter.

        Args:
            pretty: If True, output formatted JSON with indentation
        """
        self._pretty = pretty

    def format(self, report: Report, info: Optional[PluginInfo] = None) -> str:
        """Format a report as JSON.

        Args:
            report: Report returned by a provider
            info: Optional provider metadata to embed

        Returns:
            JSON string containing the formatted report
        """
        output = self._build_output(report, info)

        if self._pretty:
            return json.dumps(output, cls=DateTimeEncoder, indent=2, sort_keys=False)
        return json.dumps(output, cls=DateTimeEncoder, separators=(',', ':'))

    def _build_output(self, report: Report, info: Optional[PluginInfo]) -> dict[str, Any]:
        return {
            "metadata": self._build_metadata(report, info),
            "summary": self._build_summary(report),
            "checks": self._build_checks(report.findings),
        }

    def _build_metadata(self, report: Report, info: Optional[PluginInfo]) -> dict[str, Any]:
        return {
            "schema_version": self.SCHEMA_VERSION,
            "timestamp": datetime.now(timezone.utc),
            "hostname": socket.gethostname(),
            "provider_id": report.provider_id,
            "provider": info.to_dict() if info is not None else None,
        }

    def _build_summary(self, report: Report) -> dict[str, Any]:
        """Build the summary section with statistics.

        Args:
            report: Report returned by a provider

        Returns:
            Dictionary containing summary statistics
        """
        return {
            "total_checks": len(report.findings),
            "passed": report.passed,
            "failed": report.failed,
            "errors": report.errors,
            "score": report.score,
            "max_score": report.max_score,
        }

    def _build_checks(self, findings: list[Finding]) -> list[dict[str, Any]]:
        return [
            {
                "id": finding.check_id,
                "name": finding.check_name,
                "description": finding.description,
                "passed": finding.passed,
                "score": finding.score,
                "max_score": finding.max_score,
                "remediation": finding.remediation,
                "error": finding.error,
                "details": finding.details if finding.details else None,
            }
            for finding in findings
        ]

    def write_to_file(
        self,
        report: Report,
        output_path: Path,
        info: Optional[PluginInfo] = None,
    ) -> None:
        """Write the formatted report to a file."""
        output_path.write_text(self.format(report, info), encoding='utf-8')

    def write_to_stdout(self, report: Report, info: Optional[PluginInfo] = None) -> None:
        """Write the formatted report to stdout."""
        sys.stdout.write(self.format(report, info))
        if self._pretty:
            sys.stdout.write('\n')
