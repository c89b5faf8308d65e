"""
provider-linux - Checks Package

The fixed check catalog. CATALOG order is the order findings appear in
a report.
"""

from typing import Optional, Type

from provider_linux.core.artifact import Artifact
from provider_linux.core.check import BaseCheck, DegradedCheck

from provider_linux.checks.ssh_root_login import SSHRootLoginCheck
from provider_linux.checks.ssh_password_auth import SSHPasswordAuthCheck
from provider_linux.checks.ssh_read_failure import SSHReadFailureCheck
from provider_linux.checks.net_ip_forward import IPForwardCheck

CATALOG: tuple[Type[BaseCheck], ...] = (
    SSHRootLoginCheck,
    SSHPasswordAuthCheck,
    IPForwardCheck,
)

# Substitute emitted when an artifact cannot be read. None drops the
# artifact's checks from the report without any finding.
UNREADABLE_SUBSTITUTES: dict[Artifact, Optional[Type[DegradedCheck]]] = {
    Artifact.SSH_CONFIG: SSHReadFailureCheck,
    Artifact.IP_FORWARD: None,
}

__all__ = [
    "CATALOG",
    "UNREADABLE_SUBSTITUTES",
    "SSHRootLoginCheck",
    "SSHPasswordAuthCheck",
    "SSHReadFailureCheck",
    "IPForwardCheck",
]
