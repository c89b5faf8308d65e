"""
provider-linux - Text Output Formatter

Human-readable rendering of a provider report for terminals.
"""

import sys
from pathlib import Path
from typing import Optional

from ..core.check import Finding
from ..core.provider import PluginInfo, Report


class TextFormatter:
    """Formatter for provider reports as plain text.

    Output shape:

        Linux Security Auditor 0.1.0 (provider-linux)
        [PASS] root-login-disabled     SSH Root Login Disabled   20/20
        [FAIL] password-auth-disabled  SSH Key-Only Auth          0/15
               -> Use SSH keys! Set 'PasswordAuthentication no' in "/etc/ssh/sshd_config".
        Score: 20/35
    """

    PASS_LABEL = "PASS"
    FAIL_LABEL = "FAIL"
    ERROR_LABEL = "ERROR"

    def format(self, report: Report, info: Optional[PluginInfo] = None) -> str:
        """Format a report as text.

        Args:
            report: Report returned by a provider
            info: Optional provider metadata for the header line

        Returns:
            Multi-line string ending with a newline
        """
        if info is not None:
            header = f"{info.name} {info.version} ({report.provider_id})"
        else:
            header = report.provider_id
        lines = [header]

        id_width = max((len(f.check_id) for f in report.findings), default=0)
        name_width = max((len(f.check_name) for f in report.findings), default=0)

        for finding in report.findings:
            lines.append(
                f"[{self._label(finding)}] "
                f"{finding.check_id:<{id_width}}  "
                f"{finding.check_name:<{name_width}}  "
                f"{finding.score}/{finding.max_score}"
            )
            if finding.error:
                lines.append(f"       error: {finding.error}")
            if not finding.passed and finding.remediation:
                lines.append(f"       -> {finding.remediation}")

        if not report.findings:
            lines.append("No checks were run.")
        lines.append(f"Score: {report.score}/{report.max_score}")
        return "\n".join(lines) + "\n"

    def _label(self, finding: Finding) -> str:
        if finding.degraded:
            return self.ERROR_LABEL
        return self.PASS_LABEL if finding.passed else self.FAIL_LABEL

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
