"""
Linux Audit Check: SSH Root Login Disabled

Ensures direct root login over SSH is disabled in sshd_config.
"""

from provider_linux.core.artifact import Artifact
from provider_linux.core.check import DirectiveCheck


class SSHRootLoginCheck(DirectiveCheck):
    """Check that sshd_config disables direct root login."""

    id = "root-login-disabled"
    name = "SSH Root Login Disabled"
    description = "Checking if direct root login is disabled in sshd_config"
    artifact = Artifact.SSH_CONFIG
    max_score = 20
    directive = "PermitRootLogin no"
    remediation = "Set 'PermitRootLogin no' in \"{path}\" and restart sshd."
