"""Keyed factory registry mapping string identifiers to zero-argument constructors."""

import logging
import threading
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_KEY = "python"

# Marks an omitted factory so that an explicit None still fails the callable check.
NOT_SET = object()


class KeyNotFoundError(KeyError):
    """Raised when a lookup targets a key that was never registered."""

    def __init__(self, key: str, available: list[str]):
        self.key = key
        self.available = available
        super().__init__(f"{key!r} not found in registry. Available: {available}")

    def __str__(self) -> str:
        return self.args[0]


class Registry:
    """Container for factories stored by key.

    Every lookup invokes the stored factory again; constructed objects are
    never cached.

    Attributes:
        default_key: Key used by :meth:`lookup_default`, fixed at construction.
    """

    def __init__(self, default_key: str = DEFAULT_KEY):
        self._default_key = default_key
        self._factories: dict[str, Callable[[], Any]] = {}
        self._lock = threading.Lock()

    @property
    def default_key(self) -> str:
        return self._default_key

    def register(self, key: str, factory: Callable[[], Any] = NOT_SET):
        """
        Store a factory under the provided key, replacing any earlier entry.
        Called with only a key, returns a decorator that registers the
        decorated callable.
        Args:
            key: Name to register the factory under.
            factory: Zero-argument callable building the value.

        Returns:
            None, or the decorator when ``factory`` is omitted.
        """
        if factory is NOT_SET:

            def decorator(fn):
                self.register(key, fn)
                return fn

            return decorator

        if not callable(factory):
            raise TypeError(f"Factory for {key!r} must be callable, got {type(factory).__name__}")

        with self._lock:
            replaced = key in self._factories
            self._factories[key] = factory
        if replaced:
            logger.debug("Replaced factory for %r", key)
        else:
            logger.debug("Registered factory for %r", key)
        return None

    def lookup(self, key: str) -> Any:
        """
        Build a new value from the factory registered under ``key``.
        Args:
            key: Name of the factory to invoke.

        Returns:
            Whatever the factory returns.
        """
        with self._lock:
            factory = self._factories.get(key)
            if factory is None:
                raise KeyNotFoundError(key, sorted(self._factories))
        return factory()

    def lookup_default(self) -> Any:
        """Build a value from the factory registered under the default key."""
        return self.lookup(self._default_key)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)
