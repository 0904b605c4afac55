"""Dependency wiring for the flight network application.

Ports are bound to factories. Production code asks the default container
for a ``FlightNetworkService``; tests register an in-memory repository
in place of the CSV one.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Registry of factories keyed by port type.

    Usage:
        container = Container.create_default()
        service = container.resolve(FlightNetworkService)

        container.register(FlightRepositoryPort, lambda: InMemoryFlightRepository(...))

    Attributes:
        config: Application configuration handed to the default bindings
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], Tuple[Factory, bool]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self, port_type: type[Any], factory: Factory, singleton: bool = True
    ) -> None:
        """Bind a factory to a port type, replacing any earlier binding."""
        with self._lock:
            self._bindings[port_type] = (factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for a port type.

        Singleton bindings are built once, on first use.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            try:
                factory, singleton = self._bindings[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None

            if not singleton:
                return factory()
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV repository and the network service."""
        from .adapters.flights import CSVFlightRepository
        from .ports.flights import FlightRepositoryPort
        from .services import FlightNetworkService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            FlightRepositoryPort,
            lambda: CSVFlightRepository(config.network),
        )
        container.register(
            FlightNetworkService,
            lambda: FlightNetworkService(
                repository=container.resolve(FlightRepositoryPort),
                config=config,
            ),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the application container, creating it on first call."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Drop the application container so the next call rebuilds it."""
    global _default_container
    with _container_lock:
        _default_container = None
