"""
Bootstrap helpers for viewer applications.

Simplifies application setup and initialization.
"""
from typing import Type, List
from loguru import logger

from .locator import ServiceLocator, sl
from .base_system import BaseSystem
from .events import EventBus, Events
from .command_service import CommandService


class ApplicationBuilder:
    """
    Fluent builder for viewer applications.

    Example:
        locator = await (ApplicationBuilder("Viewer", "config.json")
                         .with_logging()
                         .build())
    """

    def __init__(self, name: str = "Viewer", config_path: str = "config.json"):
        """
        Initialize application builder.

        Args:
            name: Application name
            config_path: Path to config.json file
        """
        self.name = name
        self.config_path = config_path
        self._systems: List[Type[BaseSystem]] = []
        self._use_default_systems = True
        self._logging_configured = False

    def with_default_systems(self, enable: bool = True):
        """
        Include default systems.

        Default systems:
        - EventBus
        - ActiveWindowManager
        - CommandService

        Args:
            enable: Whether to include default systems

        Returns:
            Self for chaining
        """
        self._use_default_systems = enable
        return self

    def add_system(self, system_cls: Type[BaseSystem]):
        """
        Register additional custom system.

        Args:
            system_cls: System class to register

        Returns:
            Self for chaining
        """
        self._systems.append(system_cls)
        return self

    def with_logging(self, enable: bool = True):
        """
        Configure logging setup.

        Args:
            enable: Whether to setup logging

        Returns:
            Self for chaining
        """
        self._logging_configured = enable
        return self

    async def build(self) -> ServiceLocator:
        """
        Initialize and start all systems.

        Returns:
            ServiceLocator instance with all systems started
        """
        # 1. Initialize service locator
        sl.init(self.config_path)

        # 2. Setup logging
        if self._logging_configured:
            from .logging import setup_logging
            general = sl.config.data.general
            setup_logging(general.debug_mode, general.log_dir,
                          general.log_rotation, general.log_retention)
            logger.info(f"Starting {self.name}")

        # 3. Register systems
        if self._use_default_systems:
            from viewer.ui.windows import ActiveWindowManager
            for sys_cls in (EventBus, ActiveWindowManager, CommandService):
                sl.register_system(sys_cls)

        for sys_cls in self._systems:
            sl.register_system(sys_cls)

        # 4. Start
        await sl.start_all()
        if sl.has_system(EventBus):
            sl.get_system(EventBus).publish_sync(Events.APP_INITIALIZED)
        logger.info(f"{self.name} ready")
        return sl


async def shutdown_app(locator: ServiceLocator = sl) -> None:
    """Stop all systems started by ApplicationBuilder.build()."""
    if locator.has_system(EventBus):
        locator.get_system(EventBus).publish_sync(Events.APP_STOPPING)
    await locator.stop_all()
    logger.info("Application stopped")
