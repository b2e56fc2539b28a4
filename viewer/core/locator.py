from typing import Dict, List, Type, TypeVar
from loguru import logger

from .config import ConfigManager
from .base_system import BaseSystem

T = TypeVar('T', bound=BaseSystem)


class ServiceLocator:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ServiceLocator, cls).__new__(cls)
            cls._instance.is_ready = False
            cls._instance._systems = {}
            cls._instance._order = []
        return cls._instance

    def init(self, config_path: str = "config.json"):
        if self.is_ready:
            return

        self.config = ConfigManager(config_path)
        self._systems: Dict[Type[BaseSystem], BaseSystem] = {}
        self._order: List[Type[BaseSystem]] = []
        self.is_ready = True

    def reset(self):
        """Drop all systems and configuration (used by tests)."""
        self._systems = {}
        self._order = []
        self.is_ready = False

    def register_system(self, system_cls: Type[T]) -> T:
        """
        Instantiate and register a system.

        Registering the same class twice returns the existing instance.
        """
        if system_cls in self._systems:
            return self._systems[system_cls]

        instance = system_cls(self, self.config)
        self._systems[system_cls] = instance
        self._order.append(system_cls)
        logger.debug(f"Registered system: {system_cls.__name__}")
        return instance

    def get_system(self, system_cls: Type[T]) -> T:
        """
        Get a registered system.

        Raises:
            KeyError: If the system was never registered
        """
        if system_cls not in self._systems:
            raise KeyError(f"System not registered: {system_cls.__name__}")
        return self._systems[system_cls]

    def has_system(self, system_cls: Type[BaseSystem]) -> bool:
        return system_cls in self._systems

    async def start_all(self):
        """Initialize systems in dependency order, then registration order."""
        for system_cls in self._start_order():
            instance = self._systems[system_cls]
            if not instance.is_ready:
                await instance.initialize()

    async def stop_all(self):
        """Shutdown systems in reverse start order."""
        for system_cls in reversed(self._start_order()):
            instance = self._systems[system_cls]
            if instance.is_ready:
                try:
                    await instance.shutdown()
                except Exception as e:
                    logger.error(f"Failed to stop {system_cls.__name__}: {e}")

    def _start_order(self) -> List[Type[BaseSystem]]:
        ordered: List[Type[BaseSystem]] = []

        def visit(system_cls):
            if system_cls in ordered or system_cls not in self._systems:
                return
            for dep in getattr(system_cls, "depends_on", []):
                visit(dep)
            ordered.append(system_cls)

        for system_cls in self._order:
            visit(system_cls)
        return ordered


# Global access
sl = ServiceLocator()
