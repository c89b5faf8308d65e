"""
provider-linux - Core Module

This module contains the artifact reader, check framework, provider
contract and registry.
"""

from .artifact import (
    Artifact,
    ArtifactContent,
    read_artifact,
)
from .check import (
    BaseCheck,
    DegradedCheck,
    DirectiveCheck,
    Finding,
    PatternCheck,
    ValueCheck,
)
from .config import (
    DEFAULT_IP_FORWARD_PATH,
    DEFAULT_SSH_CONFIG_PATH,
    ProviderConfig,
)
from .provider import (
    AnalysisCancelled,
    CancellationToken,
    InvalidOptionsError,
    LinuxProvider,
    PluginInfo,
    Provider,
    ProviderError,
    Report,
)
from .registry import (
    ProviderRegistry,
    default_registry,
)

__all__ = [
    "Artifact",
    "ArtifactContent",
    "read_artifact",
    "BaseCheck",
    "DegradedCheck",
    "DirectiveCheck",
    "Finding",
    "PatternCheck",
    "ValueCheck",
    "DEFAULT_IP_FORWARD_PATH",
    "DEFAULT_SSH_CONFIG_PATH",
    "ProviderConfig",
    "AnalysisCancelled",
    "CancellationToken",
    "InvalidOptionsError",
    "LinuxProvider",
    "PluginInfo",
    "Provider",
    "ProviderError",
    "Report",
    "ProviderRegistry",
    "default_registry",
]
