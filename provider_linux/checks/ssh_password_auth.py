"""
Linux Audit Check: SSH Key-Only Authentication

Ensures password authentication is disabled so SSH only accepts keys.
"""

from provider_linux.core.artifact import Artifact
from provider_linux.core.check import DirectiveCheck


class SSHPasswordAuthCheck(DirectiveCheck):
    """Check that sshd_config disables password authentication."""

    id = "password-auth-disabled"
    name = "SSH Key-Only Auth"
    description = "Checking if PasswordAuthentication is disabled"
    artifact = Artifact.SSH_CONFIG
    max_score = 15
    directive = "PasswordAuthentication no"
    remediation = "Use SSH keys! Set 'PasswordAuthentication no' in \"{path}\"."
