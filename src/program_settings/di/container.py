# src/program_settings/di/container.py
"""Dependency injection container."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional, Type, TypeVar

T = TypeVar("T")


class ServiceLocator:
    """Service locator pattern implementation.

    Acts as the composition root for applications that want one shared
    ``SettingsStore`` (and so one shared path registry) per process.
    """

    _instance = None
    _services: Dict[str, Any] = {}
    _lock = threading.Lock()

    def __new__(cls) -> "ServiceLocator":
        """Singleton implementation."""
        if cls._instance is None:
            cls._instance = super(ServiceLocator, cls).__new__(cls)
        return cls._instance

    def register(self, interface_cls: Type[T], implementation: T) -> None:
        """Register a service implementation.

        Args:
            interface_cls: Interface/class type
            implementation: Implementation instance
        """
        with self._lock:
            self._services[interface_cls.__name__] = implementation

    def resolve(self, interface_cls: Type[T]) -> Optional[T]:
        """Resolve a service implementation.

        Args:
            interface_cls: Interface/class to resolve

        Returns:
            Instance of the requested service or None if not registered
        """
        with self._lock:
            return self._services.get(interface_cls.__name__)

    def resolve_or_register(self, interface_cls: Type[T], factory: Callable[[], T]) -> T:
        """Resolve a service, registering ``factory()`` on first use.

        Args:
            interface_cls: Interface/class to resolve
            factory: Builds the implementation if none is registered

        Returns:
            The registered instance
        """
        with self._lock:
            service = self._services.get(interface_cls.__name__)
            if service is None:
                service = factory()
                self._services[interface_cls.__name__] = service
            return service

    def unregister(self, interface_cls: Type[T]) -> None:
        """Remove a registered service if present."""
        with self._lock:
            self._services.pop(interface_cls.__name__, None)


# Example usage in application initialization
"""
# Create service locator
container = ServiceLocator()

# Register a store configured with the application's folder name
container.register(SettingsStore, SettingsStore(config=StoreConfig(app_name="my_app")))

# Resolve services where needed
store = container.resolve(SettingsStore)
"""
