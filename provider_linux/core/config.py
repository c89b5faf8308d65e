"""
provider-linux - Configuration

Artifact locations for the provider. Defaults point at the live system;
every path can be overridden by constructor injection or environment.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .artifact import Artifact

DEFAULT_SSH_CONFIG_PATH = "/etc/ssh/sshd_config"
DEFAULT_IP_FORWARD_PATH = "/proc/sys/net/ipv4/ip_forward"

ENV_SSH_CONFIG_PATH = "PROVIDER_LINUX_SSH_CONFIG"
ENV_IP_FORWARD_PATH = "PROVIDER_LINUX_IP_FORWARD"


@dataclass(frozen=True)
class ProviderConfig:
    """Artifact paths used by the Linux provider.

    Attributes:
        ssh_config_path: Location of the SSH daemon configuration file
        ip_forward_path: Location of the kernel IPv4 forwarding value
    """
    ssh_config_path: str = DEFAULT_SSH_CONFIG_PATH
    ip_forward_path: str = DEFAULT_IP_FORWARD_PATH

    def __post_init__(self) -> None:
        if not self.ssh_config_path:
            raise ValueError("ssh_config_path cannot be empty")
        if not self.ip_forward_path:
            raise ValueError("ip_forward_path cannot be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProviderConfig":
        """Build a configuration from environment overrides.

        Unset or empty variables fall back to the defaults.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ProviderConfig with overrides applied
        """
        if environ is None:
            environ = os.environ
        return cls(
            ssh_config_path=environ.get(ENV_SSH_CONFIG_PATH) or DEFAULT_SSH_CONFIG_PATH,
            ip_forward_path=environ.get(ENV_IP_FORWARD_PATH) or DEFAULT_IP_FORWARD_PATH,
        )

    def path_for(self, artifact: Artifact) -> str:
        """Resolve an artifact to its configured path."""
        if artifact is Artifact.SSH_CONFIG:
            return self.ssh_config_path
        if artifact is Artifact.IP_FORWARD:
            return self.ip_forward_path
        raise KeyError(f"No path configured for artifact '{artifact}'")
