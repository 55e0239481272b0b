"""Dependency injection container.

Explicit registration and resolution of the engine's collaborators,
without external frameworks. Tests register fakes for the ports; the
CLI uses ``Container.create_default()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        network = container.resolve(TransportationNetwork)

        # Testing
        container = Container()
        container.register(EdgeSourcePort, lambda: FakeSource())
        source = container.resolve(EdgeSourcePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        self._factories[port_type] = factory
        self._singletons.pop(port_type, None)
        if singleton:
            self._singleton_types.add(port_type)
        else:
            self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")

        if port_type in self._singleton_types:
            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return self._singletons[port_type]

        return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons."""
        self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Each resolve of TransportationNetwork yields an independent
        network instance sharing the source and renderer adapters.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.rendering import FixedWidthTableRenderer
        from .adapters.source import FileEdgeSource
        from .ports.rendering import MatrixRendererPort
        from .ports.source import EdgeSourcePort
        from .services import TransportationNetwork

        config = config or get_config()
        container = cls(config=config)

        container.register(EdgeSourcePort, lambda: FileEdgeSource(config.source))
        container.register(
            MatrixRendererPort,
            lambda: FixedWidthTableRenderer(config.display),
        )

        def create_network() -> TransportationNetwork:
            return TransportationNetwork(
                source=container.resolve(EdgeSourcePort),
                renderer=container.resolve(MatrixRendererPort),
            )

        container.register(TransportationNetwork, create_network, singleton=False)

        return container
