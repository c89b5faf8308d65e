"""
provider-linux - Provider Registry Tests
"""

import sys
from pathlib import Path
from typing import Mapping, Optional

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from provider_linux.core.config import ProviderConfig
from provider_linux.core.provider import (
    CancellationToken,
    LinuxProvider,
    PluginInfo,
    Provider,
    Report,
)
from provider_linux.core.registry import ProviderRegistry, default_registry


class StubProvider(Provider):
    """Minimal provider used to exercise the registry."""

    info = PluginInfo(
        id="provider-stub",
        name="Stub",
        version="0.0.1",
        description="Returns an empty report",
        author="tests",
    )

    def analyze(
        self,
        cancellation_token: Optional[CancellationToken] = None,
        options: Optional[Mapping[str, str]] = None,
    ) -> Report:
        return Report(provider_id=self.info.id)


class TestProviderRegistry:
    """Tests for ProviderRegistry."""

    def test_register_and_get(self) -> None:
        registry = ProviderRegistry()
        registry.register(StubProvider)

        assert len(registry) == 1
        assert "provider-stub" in registry
        assert registry.get_provider("provider-stub") is StubProvider
        assert registry.get_provider("missing") is None

    def test_register_rejects_instances(self) -> None:
        registry = ProviderRegistry()
        with pytest.raises(TypeError, match="Expected a class"):
            registry.register(StubProvider())

    def test_register_rejects_non_providers(self) -> None:
        registry = ProviderRegistry()
        with pytest.raises(TypeError, match="concrete Provider subclass"):
            registry.register(dict)

    def test_register_rejects_abstract_provider(self) -> None:
        registry = ProviderRegistry()
        with pytest.raises(TypeError, match="concrete Provider subclass"):
            registry.register(Provider)

    def test_register_requires_info(self) -> None:
        class NoInfoProvider(Provider):
            def analyze(self, cancellation_token=None, options=None) -> Report:
                return Report(provider_id="none")

        registry = ProviderRegistry()
        with pytest.raises(TypeError, match="must define 'info'"):
            registry.register(NoInfoProvider)

    def test_duplicate_id_raises(self) -> None:
        registry = ProviderRegistry()
        registry.register(StubProvider)
        with pytest.raises(ValueError, match="already registered"):
            registry.register(StubProvider)

    def test_unregister(self) -> None:
        registry = ProviderRegistry()
        registry.register(StubProvider)
        registry.unregister("provider-stub")
        assert len(registry) == 0

        with pytest.raises(KeyError):
            registry.unregister("provider-stub")

    def test_create(self, make_config) -> None:
        registry = default_registry()
        config = make_config()

        provider = registry.create("provider-linux", config=config)

        assert isinstance(provider, LinuxProvider)
        assert provider.config == config
        assert provider.analyze().score == 45

    def test_create_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="not registered"):
            ProviderRegistry().create("provider-unknown")

    def test_describe_all_sorted(self) -> None:
        registry = default_registry()
        registry.register(StubProvider)

        assert registry.get_provider_ids() == ["provider-linux", "provider-stub"]
        assert [info.id for info in registry.describe_all()] == [
            "provider-linux",
            "provider-stub",
        ]

    def test_default_registry(self) -> None:
        registry = default_registry()
        assert registry.get_provider_ids() == ["provider-linux"]
        assert isinstance(
            registry.create("provider-linux", config=ProviderConfig()),
            LinuxProvider,
        )
