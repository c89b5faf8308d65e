"""
Linux Audit Check: IP Forwarding Disabled

Ensures the kernel is not forwarding IPv4 packets, so the host cannot
act as a router.
"""

from provider_linux.core.artifact import Artifact
from provider_linux.core.check import ValueCheck


class IPForwardCheck(ValueCheck):
    """Check that the runtime net.ipv4.ip_forward value is 0."""

    id = "forwarding-disabled"
    name = "IP Forwarding Disabled"
    description = "Checking if kernel IP forwarding is off (0)"
    artifact = Artifact.IP_FORWARD
    max_score = 10
    expected = "0"
    remediation = "Set net.ipv4.ip_forward=0 in /etc/sysctl.conf"
