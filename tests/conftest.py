"""
provider-linux - Shared Test Fixtures

Fixtures that write SSH and forwarding artifacts into a temporary
directory so tests never touch real system files.
"""

import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from provider_linux.core.config import ProviderConfig

SECURE_SSH = """
# This is a test config
PermitRootLogin no
PasswordAuthentication no
"""


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ProviderConfig]:
    """Return a factory writing artifacts and building a ProviderConfig.

    Passing None for an artifact leaves its path pointing at a missing file.
    """
    def _make(ssh: Optional[str] = SECURE_SSH, ip_forward: Optional[str] = "0") -> ProviderConfig:
        ssh_path = tmp_path / "sshd_config"
        ip_path = tmp_path / "ip_forward"
        for path, text in ((ssh_path, ssh), (ip_path, ip_forward)):
            if text is None:
                path.unlink(missing_ok=True)
            else:
                path.write_text(text)
        return ProviderConfig(ssh_config_path=str(ssh_path), ip_forward_path=str(ip_path))

    return _make
