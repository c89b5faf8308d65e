"""
provider-linux

A read-only Linux host security auditor delivered as a pluggable provider.
Inspects the SSH daemon configuration and kernel IP forwarding and
produces a weighted pass/fail report for a host orchestrator.
"""

__version__ = "0.1.0"
__author__ = "GOHL Core"

from .core.config import ProviderConfig
from .core.provider import (
    AnalysisCancelled,
    CancellationToken,
    LinuxProvider,
    PluginInfo,
    Provider,
    ProviderError,
    Report,
)
from .core.check import Finding

__all__ = [
    "ProviderConfig",
    "AnalysisCancelled",
    "CancellationToken",
    "LinuxProvider",
    "PluginInfo",
    "Provider",
    "ProviderError",
    "Report",
    "Finding",
]
