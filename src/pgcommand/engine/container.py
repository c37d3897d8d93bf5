"""Composition root for engine dependency injection.

This is the single place where concrete executors are bound to protocols.
Command descriptors built without an explicit executor use the ones
registered here.

Usage:
    # Default usage (production)
    executor = Container.executor()

    # Testing with mocks
    Container.set_executor(MockExecutor())
    Container.set_async_executor(MockAsyncExecutor())

    # Reset to defaults
    Container.reset()
"""

from pgcommand.engine.backends import AsyncioExecutor, SubprocessExecutor
from pgcommand.engine.protocols import AsyncCommandExecutor, CommandExecutor
from pgcommand.settings import get_settings


class Container:
    """Service container for engine dependencies.

    Provides lazy initialization of default implementations and
    allows overriding for testing purposes.
    """

    _executor: CommandExecutor | None = None
    _async_executor: AsyncCommandExecutor | None = None

    @classmethod
    def executor(cls) -> CommandExecutor:
        """Get the blocking executor.

        Returns a SubprocessExecutor configured from settings by default.
        """
        if cls._executor is None:
            settings = get_settings()
            cls._executor = SubprocessExecutor(
                encoding=settings.encoding,
                default_timeout=settings.default_timeout,
            )
        return cls._executor

    @classmethod
    def async_executor(cls) -> AsyncCommandExecutor:
        """Get the asyncio executor.

        Returns an AsyncioExecutor configured from settings by default.
        """
        if cls._async_executor is None:
            settings = get_settings()
            cls._async_executor = AsyncioExecutor(
                encoding=settings.encoding,
                default_timeout=settings.default_timeout,
            )
        return cls._async_executor

    @classmethod
    def set_executor(cls, executor: CommandExecutor | None) -> None:
        """Override the blocking executor.

        Pass None to reset to default on next access.
        """
        cls._executor = executor

    @classmethod
    def set_async_executor(cls, executor: AsyncCommandExecutor | None) -> None:
        """Override the asyncio executor.

        Pass None to reset to default on next access.
        """
        cls._async_executor = executor

    @classmethod
    def reset(cls) -> None:
        """Reset all overrides to defaults.

        Call this in test teardown to ensure clean state.
        """
        cls._executor = None
        cls._async_executor = None
