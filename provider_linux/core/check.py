"""
provider-linux - Check Framework

This module provides the Finding dataclass, the abstract BaseCheck class
with its predicate shapes, and the DegradedCheck base used for substitute
findings when an artifact cannot be read.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from .artifact import Artifact


def _validate_id(check_id: str, owner: str) -> None:
    """Validate a check identifier (lowercase alphanumeric with hyphens)."""
    if not check_id.replace("-", "").isalnum() or not check_id.islower():
        raise ValueError(
            f"Check id '{check_id}' of {owner} must be lowercase alphanumeric with hyphens only"
        )


@dataclass
class Finding:
    """Result of a single check.

    Attributes:
        check_id: Unique, stable identifier of the check
        check_name: Human-readable name of the check
        description: What the check inspects
        passed: True if the check passed
        score: Awarded score (max_score when passed, 0 otherwise)
        max_score: Weight of the check
        remediation: Instructions on how to fix a failure
        error: Failure reason when the artifact could not be read
        details: Optional additional details (e.g., artifact path)
    """
    check_id: str
    check_name: str
    passed: bool
    score: int
    max_score: int
    description: str = ""
    remediation: str = ""
    error: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the finding after initialization."""
        if not self.check_id:
            raise ValueError("check_id cannot be empty")
        if not self.check_name:
            raise ValueError("check_name cannot be empty")
        if self.max_score < 0:
            raise ValueError("max_score cannot be negative")
        if self.passed and self.score != self.max_score:
            raise ValueError("A passed finding must score max_score")
        if not self.passed and self.score != 0:
            raise ValueError("A failed finding must score 0")
        if self.error is not None:
            if self.passed:
                raise ValueError("A degraded finding cannot be marked as passed")
            if self.max_score != 0:
                raise ValueError("A degraded finding must have max_score 0")

    @property
    def degraded(self) -> bool:
        """True if this finding substitutes for checks on an unreadable artifact."""
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the finding to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the finding
        """
        return {
            "check_id": self.check_id,
            "check_name": self.check_name,
            "description": self.description,
            "passed": self.passed,
            "score": self.score,
            "max_score": self.max_score,
            "remediation": self.remediation,
            "error": self.error,
            "details": self.details,
        }

    @classmethod
    def passed_result(
        cls,
        check_id: str,
        check_name: str,
        max_score: int,
        description: str = "",
        remediation: str = "",
        details: Optional[dict[str, Any]] = None
    ) -> "Finding":
        """Create a passed finding scored at max_score."""
        return cls(
            check_id=check_id,
            check_name=check_name,
            passed=True,
            score=max_score,
            max_score=max_score,
            description=description,
            remediation=remediation,
            details=details or {},
        )

    @classmethod
    def failed_result(
        cls,
        check_id: str,
        check_name: str,
        max_score: int,
        description: str = "",
        remediation: str = "",
        details: Optional[dict[str, Any]] = None
    ) -> "Finding":
        """Create a failed finding scored at 0."""
        return cls(
            check_id=check_id,
            check_name=check_name,
            passed=False,
            score=0,
            max_score=max_score,
            description=description,
            remediation=remediation,
            details=details or {},
        )

    @classmethod
    def degraded_result(
        cls,
        check_id: str,
        check_name: str,
        error: str,
        description: str = "",
        remediation: str = "",
        details: Optional[dict[str, Any]] = None
    ) -> "Finding":
        """Create a substitute finding for an unreadable artifact.

        Args:
            check_id: Identifier of the substitute check
            check_name: Human-readable name of the substitute check
            error: Reason the artifact could not be read
            description: What was attempted
            remediation: Instructions on how to make the artifact readable
            details: Optional additional details

        Returns:
            Finding with passed=False, score=0, max_score=0 and error set
        """
        if not error:
            raise ValueError("A degraded finding requires an error message")
        return cls(
            check_id=check_id,
            check_name=check_name,
            passed=False,
            score=0,
            max_score=0,
            description=description,
            remediation=remediation,
            error=error,
            details=details or {},
        )


class BaseCheck(ABC):
    """Abstract base class for all catalog checks.

    A check is bound to one artifact and applies a pure predicate to the
    artifact's content. Scoring is binary: a passing check earns max_score,
    a failing check earns 0.

    Intermediate bases that only fix the predicate shape are declared with
    ``abstract=True`` and are not validated.

    Example:
        class SSHRootLoginCheck(DirectiveCheck):
            id = "root-login-disabled"
            name = "SSH Root Login Disabled"
            description = "Checking if direct root login is disabled in sshd_config"
            artifact = Artifact.SSH_CONFIG
            max_score = 20
            directive = "PermitRootLogin no"
            remediation = "Set 'PermitRootLogin no' in \\"{path}\\" and restart sshd."
    """

    # Check metadata - must be overridden by subclasses
    id: str = ""  # Unique identifier (e.g., "root-login-disabled")
    name: str = ""  # Human-readable name
    description: str = ""  # What this check does
    artifact: Optional[Artifact] = None  # Artifact whose content is tested
    max_score: int = 0  # Weight awarded when the check passes
    remediation: str = ""  # May reference the artifact path as {path}

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        """Validate that concrete subclasses define required attributes."""
        super().__init_subclass__(**kwargs)
        if abstract:
            return

        if not cls.id:
            raise ValueError(f"Check class {cls.__name__} must define 'id'")
        if not cls.name:
            raise ValueError(f"Check class {cls.__name__} must define 'name'")
        if not cls.description:
            raise ValueError(f"Check class {cls.__name__} must define 'description'")
        if not isinstance(cls.artifact, Artifact):
            raise ValueError(f"Check class {cls.__name__} must define 'artifact'")
        if not isinstance(cls.max_score, int) or cls.max_score < 0:
            raise ValueError(
                f"Check class {cls.__name__} must define a non-negative integer 'max_score'"
            )
        _validate_id(cls.id, cls.__name__)

    def __init__(self, artifact_path: str) -> None:
        """Initialize the check.

        Args:
            artifact_path: Path of the artifact this check inspects
        """
        self._artifact_path = artifact_path

    @property
    def artifact_path(self) -> str:
        """Path of the artifact this check inspects."""
        return self._artifact_path

    def render_remediation(self) -> str:
        """Render the remediation text for the configured artifact path."""
        return self.remediation.format(path=self._artifact_path)

    @abstractmethod
    def test(self, content: str) -> bool:
        """Apply the check predicate to artifact content.

        Args:
            content: Full text of the artifact

        Returns:
            True if the content satisfies the check
        """

    def evaluate(self, content: str) -> Finding:
        """Evaluate the check against artifact content.

        Exceptions raised by the predicate propagate to the caller.

        Args:
            content: Full text of the artifact

        Returns:
            Finding scored with the binary weighting policy
        """
        factory = Finding.passed_result if self.test(content) else Finding.failed_result
        return factory(
            check_id=self.id,
            check_name=self.name,
            max_score=self.max_score,
            description=self.description,
            remediation=self.render_remediation(),
            details={"artifact": self._artifact_path},
        )

    def get_metadata(self) -> dict[str, Any]:
        """Get check metadata as a dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "artifact": self.artifact.value if self.artifact else None,
            "max_score": self.max_score,
        }


class DirectiveCheck(BaseCheck, abstract=True):
    """Passes when the content contains the exact directive text."""

    directive: str = ""

    def test(self, content: str) -> bool:
        return self.directive in content


class ValueCheck(BaseCheck, abstract=True):
    """Passes when the trimmed content equals the expected value."""

    expected: str = ""

    def test(self, content: str) -> bool:
        return content.strip() == self.expected


class PatternCheck(BaseCheck, abstract=True):
    """Passes when the regular expression matches anywhere in the content.

    The pattern is compiled with re.MULTILINE so ``^`` and ``$`` anchor on
    individual configuration lines.
    """

    pattern: str = ""
    flags: int = 0

    def test(self, content: str) -> bool:
        return re.search(self.pattern, content, self.flags | re.MULTILINE) is not None


class DegradedCheck:
    """Base class for substitute findings emitted when an artifact is unreadable.

    Subclasses carry metadata only; finding() builds the degraded Finding.
    """

    id: str = ""
    name: str = ""
    description: str = ""  # May reference the artifact path as {path}
    artifact: Optional[Artifact] = None
    remediation: str = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.id:
            raise ValueError(f"Check class {cls.__name__} must define 'id'")
        if not cls.name:
            raise ValueError(f"Check class {cls.__name__} must define 'name'")
        if not isinstance(cls.artifact, Artifact):
            raise ValueError(f"Check class {cls.__name__} must define 'artifact'")
        _validate_id(cls.id, cls.__name__)

    @classmethod
    def finding(cls, path: str, error: str) -> Finding:
        """Build the substitute finding for an unreadable artifact.

        Args:
            path: Path that could not be read
            error: Failure reason reported by the artifact reader

        Returns:
            Degraded Finding with max_score 0
        """
        return Finding.degraded_result(
            check_id=cls.id,
            check_name=cls.name,
            error=error,
            description=cls.description.format(path=path),
            remediation=cls.remediation.format(path=path),
            details={"artifact": path},
        )
