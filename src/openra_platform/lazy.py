"""Thread-safe compute-once values.

Lazy wraps a zero-argument factory. The first access to `value` runs the factory
under a lock; every later access (and every caller that raced the first one)
gets the same cached object back. If the factory raises, the exception is cached
instead and re-raised on every later access without running the factory again.
"""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """A value computed at most once, on first use."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._computed = False
        self._value: T | None = None
        self._error: BaseException | None = None

    @property
    def is_computed(self) -> bool:
        return self._computed

    @property
    def value(self) -> T:
        """Return the cached value, computing it first if needed. Re-raises a cached factory error."""
        if not self._computed:
            with self._lock:
                if not self._computed:  # another thread may have won while we waited
                    try:
                        self._value = self._factory()
                    except Exception as e:
                        self._error = e
                        raise
                    finally:
                        self._computed = True
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if not self._computed:
            shown = "<pending>"
        elif self._error is not None:
            shown = f"<failed: {self._error!r}>"
        else:
            shown = repr(self._value)
        return f"Lazy({shown})"
