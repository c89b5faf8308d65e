"""
Linux Audit Check: SSH Config Readability

Substitute finding emitted in place of the SSH checks when sshd_config
cannot be read.
"""

from provider_linux.core.artifact import Artifact
from provider_linux.core.check import DegradedCheck


class SSHReadFailureCheck(DegradedCheck):
    """Report that the SSH daemon configuration could not be read."""

    id = "ssh-read-failure"
    name = "Read SSH Config"
    description = "Attempting to read {path}"
    artifact = Artifact.SSH_CONFIG
    remediation = "Run the audit with 'sudo' to scan protected config files."
