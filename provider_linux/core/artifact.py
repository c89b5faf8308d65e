"""
provider-linux - Artifact Reader

Reads the raw text of a configuration artifact. A missing or unreadable
artifact is reported as data on the returned ArtifactContent, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..logger import get_logger

logger = get_logger(__name__)


class Artifact(Enum):
    """Configuration artifacts inspected by the provider.

    Attributes:
        SSH_CONFIG: SSH daemon configuration file
        IP_FORWARD: Kernel IPv4 forwarding value
    """
    SSH_CONFIG = "ssh_config"
    IP_FORWARD = "ip_forward"


@dataclass(frozen=True)
class ArtifactContent:
    """Outcome of a single artifact read.

    Exactly one of content or error is set.

    Attributes:
        path: Path that was read
        content: Full text of the artifact on success
        error: Human-readable failure reason on failure
    """
    path: str
    content: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.error is None):
            raise ValueError("ArtifactContent requires exactly one of content or error")

    @property
    def ok(self) -> bool:
        """True if the artifact was read successfully."""
        return self.error is None


def read_artifact(path: str) -> ArtifactContent:
    """Read an artifact fully in a single attempt.

    Args:
        path: Filesystem path of the artifact

    Returns:
        ArtifactContent carrying either the text or the failure reason
    """
    logger.debug("Reading artifact %s", path)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return ArtifactContent(path=path, content=f.read())
    except (IOError, OSError, ValueError) as e:
        logger.debug("Artifact %s unreadable: %s", path, e)
        return ArtifactContent(path=path, error=str(e))
