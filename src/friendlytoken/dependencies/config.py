"""Config dependency for FastAPI."""

from __future__ import annotations

from ..config import Config

__all__ = ["ConfigDependency", "config_dependency"]


class ConfigDependency:
    """Provides the configuration as a dependency.

    The configuration is loaded from the environment when it's first
    requested, and logging is configured at the same time. The test suite can
    call `reset` after changing the environment to force a reload.
    """

    def __init__(self) -> None:
        self._config: Config | None = None

    async def __call__(self) -> Config:
        """Load the configuration if necessary and return it."""
        return self.config()

    def config(self) -> Config:
        """Load the configuration if necessary and return it.

        This is equivalent to using the dependency as a callable except that
        it's not async and can therefore be used from non-async functions.
        """
        if not self._config:
            self._config = Config()
            self._config.configure_logging()
        return self._config

    def reset(self) -> None:
        """Discard the loaded configuration so that it will be reloaded."""
        self._config = None


config_dependency = ConfigDependency()
"""The dependency that will return the current configuration."""
