"""
provider-linux - Provider Contract and Report Assembler

This module defines the host-facing Provider interface, the Report and
PluginInfo data types, and LinuxProvider, which reads each artifact once,
runs the catalog against it and assembles an ordered Report.
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Type

from .. import __author__, __version__
from ..logger import get_logger
from .artifact import Artifact, read_artifact
from .check import BaseCheck, DegradedCheck, Finding
from .config import ProviderConfig

logger = get_logger(__name__)


class ProviderError(Exception):
    """Unexpected failure of a provider invocation.

    Expected failures such as unreadable artifacts are reported as findings
    and never raise this.
    """


class AnalysisCancelled(ProviderError):
    """Raised when analyze() is called with an already cancelled token."""


class InvalidOptionsError(ProviderError):
    """Raised when analyze() receives options that are not a str-to-str mapping."""


class CancellationToken:
    """Cancellation signal a host can pass to analyze().

    The provider checks the token once, at the call boundary.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once cancel() has been called."""
        return self._event.is_set()


@dataclass(frozen=True)
class PluginInfo:
    """Static provider metadata returned by describe()."""
    id: str
    name: str
    version: str
    description: str
    author: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "author": self.author,
        }


@dataclass
class Report:
    """Ordered findings produced by one provider invocation.

    Attributes:
        provider_id: Identifier of the provider that produced the report
        findings: Findings in catalog order
    """
    provider_id: str
    findings: list[Finding] = field(default_factory=list)

    @property
    def score(self) -> int:
        """Sum of awarded scores."""
        return sum(f.score for f in self.findings)

    @property
    def max_score(self) -> int:
        """Sum of attainable scores."""
        return sum(f.max_score for f in self.findings)

    @property
    def passed(self) -> int:
        return sum(1 for f in self.findings if f.passed)

    @property
    def failed(self) -> int:
        return sum(1 for f in self.findings if not f.passed and not f.degraded)

    @property
    def errors(self) -> int:
        return sum(1 for f in self.findings if f.degraded)

    def get_finding(self, check_id: str) -> Optional[Finding]:
        """Return the finding with the given check id, if present."""
        for finding in self.findings:
            if finding.check_id == check_id:
                return finding
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider_id": self.provider_id,
            "findings": [f.to_dict() for f in self.findings],
        }


class Provider(ABC):
    """Contract between a host orchestrator and one provider.

    Subclasses expose static metadata through the ``info`` class attribute.
    """

    info: PluginInfo

    def describe(self) -> PluginInfo:
        """Return static provider metadata. Has no side effects."""
        return self.info

    @abstractmethod
    def analyze(
        self,
        cancellation_token: Optional[CancellationToken] = None,
        options: Optional[Mapping[str, str]] = None,
    ) -> Report:
        """Run the provider and return its report.

        Args:
            cancellation_token: Optional cancellation signal from the host
            options: Host-supplied parameters

        Returns:
            Report with findings in catalog order

        Raises:
            ProviderError: On conditions outside normal operation
        """


def _validate_options(options: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise InvalidOptionsError(
            f"options must be a mapping, got {type(options).__name__}"
        )
    for key, value in options.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidOptionsError(
                f"options must map str to str, got {key!r}: {value!r}"
            )
    return options


class LinuxProvider(Provider):
    """Audits SSH daemon and kernel forwarding settings of a Linux host.

    Example:
        provider = LinuxProvider(ProviderConfig(ssh_config_path="/tmp/sshd_config"))
        report = provider.analyze()
        for finding in report.findings:
            print(finding.check_id, finding.score, finding.max_score)
    """

    info = PluginInfo(
        id="provider-linux",
        name="Linux Security Auditor",
        version=__version__,
        description="Audits SSH, Firewall and Kernel security settings",
        author=__author__,
    )

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        catalog: Optional[tuple[Type[BaseCheck], ...]] = None,
        unreadable_substitutes: Optional[Mapping[Artifact, Optional[Type[DegradedCheck]]]] = None,
    ) -> None:
        """Initialize the provider.

        Args:
            config: Artifact paths (defaults to the live system locations)
            catalog: Ordered check classes (defaults to the fixed catalog)
            unreadable_substitutes: Substitute check per artifact for read
                failures; None or a missing entry omits the artifact's checks
        """
        if catalog is None or unreadable_substitutes is None:
            from ..checks import CATALOG, UNREADABLE_SUBSTITUTES

            catalog = CATALOG if catalog is None else catalog
            if unreadable_substitutes is None:
                unreadable_substitutes = UNREADABLE_SUBSTITUTES
        self._config = config or ProviderConfig()
        self._catalog = tuple(catalog)
        self._unreadable_substitutes = dict(unreadable_substitutes)

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def _artifact_groups(self) -> list[tuple[Artifact, list[Type[BaseCheck]]]]:
        """Group catalog checks by artifact, in first-appearance order."""
        groups: dict[Artifact, list[Type[BaseCheck]]] = {}
        for check_class in self._catalog:
            groups.setdefault(check_class.artifact, []).append(check_class)
        return list(groups.items())

    def analyze(
        self,
        cancellation_token: Optional[CancellationToken] = None,
        options: Optional[Mapping[str, str]] = None,
    ) -> Report:
        if cancellation_token is not None and cancellation_token.cancelled:
            raise AnalysisCancelled(f"Analysis by '{self.info.id}' was cancelled")

        options = _validate_options(options)
        if options:
            logger.debug("Ignoring provider options: %s", ", ".join(sorted(options)))

        findings: list[Finding] = []
        for artifact, check_classes in self._artifact_groups():
            path = self._config.path_for(artifact)
            artifact_content = read_artifact(path)

            if not artifact_content.ok:
                substitute = self._unreadable_substitutes.get(artifact)
                if substitute is None:
                    logger.warning(
                        "Cannot read %s (%s); omitting %s",
                        path,
                        artifact_content.error,
                        ", ".join(c.id for c in check_classes),
                    )
                    continue
                logger.warning("Cannot read %s: %s", path, artifact_content.error)
                findings.append(substitute.finding(path, artifact_content.error))
                continue

            for check_class in check_classes:
                finding = check_class(path).evaluate(artifact_content.content)
                logger.debug(
                    "%s: %s (%d/%d)",
                    finding.check_id,
                    "passed" if finding.passed else "failed",
                    finding.score,
                    finding.max_score,
                )
                findings.append(finding)

        logger.info("Analysis complete: %d finding(s)", len(findings))
        return Report(provider_id=self.info.id, findings=findings)
