"""
provider-linux - Provider Registry

Host-side registry that maps provider ids to Provider classes and
instantiates them on demand.
"""

import inspect
from typing import Any, Optional, Type

from .provider import LinuxProvider, PluginInfo, Provider


class ProviderRegistry:
    """Registry for Provider classes.

    Example:
        registry = ProviderRegistry()
        registry.register(LinuxProvider)

        provider = registry.create("provider-linux")
        report = provider.analyze()
    """

    def __init__(self) -> None:
        """Initialize an empty provider registry."""
        self._providers: dict[str, Type[Provider]] = {}

    def register(self, provider_class: Type[Provider]) -> None:
        """Register a provider class with the registry.

        Args:
            provider_class: A concrete class that inherits from Provider

        Raises:
            TypeError: If provider_class is not a concrete Provider subclass
            ValueError: If a provider with the same id is already registered
        """
        if not inspect.isclass(provider_class):
            raise TypeError(f"Expected a class, got {type(provider_class).__name__}")

        if not issubclass(provider_class, Provider) or inspect.isabstract(provider_class):
            raise TypeError(
                f"Provider class must be a concrete Provider subclass, "
                f"got {provider_class.__name__}"
            )

        info = getattr(provider_class, "info", None)
        if not isinstance(info, PluginInfo):
            raise TypeError(f"Provider class {provider_class.__name__} must define 'info'")

        if info.id in self._providers:
            raise ValueError(
                f"Provider with id '{info.id}' is already registered "
                f"({self._providers[info.id].__name__})"
            )

        self._providers[info.id] = provider_class

    def unregister(self, provider_id: str) -> None:
        """Remove a provider from the registry.

        Raises:
            KeyError: If the provider_id is not registered
        """
        if provider_id not in self._providers:
            raise KeyError(f"Provider with id '{provider_id}' is not registered")

        del self._providers[provider_id]

    def get_provider(self, provider_id: str) -> Optional[Type[Provider]]:
        """Get a registered provider class by id."""
        return self._providers.get(provider_id)

    def get_provider_ids(self) -> list[str]:
        """Get a sorted list of all registered provider ids."""
        return sorted(self._providers.keys())

    def create(self, provider_id: str, **kwargs: Any) -> Provider:
        """Instantiate a registered provider.

        Args:
            provider_id: The unique identifier of the provider
            **kwargs: Constructor arguments for the provider class

        Returns:
            New provider instance

        Raises:
            KeyError: If the provider_id is not registered
        """
        provider_class = self.get_provider(provider_id)
        if provider_class is None:
            raise KeyError(f"Provider with id '{provider_id}' is not registered")
        return provider_class(**kwargs)

    def describe_all(self) -> list[PluginInfo]:
        """Get metadata of every registered provider, ordered by id."""
        return [self._providers[pid].info for pid in self.get_provider_ids()]

    def __len__(self) -> int:
        """Return the number of registered providers."""
        return len(self._providers)

    def __contains__(self, provider_id: str) -> bool:
        """Check if a provider id is registered."""
        return provider_id in self._providers


def default_registry() -> ProviderRegistry:
    """Create a registry with the built-in providers registered."""
    registry = ProviderRegistry()
    registry.register(LinuxProvider)
    return registry
