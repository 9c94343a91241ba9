from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class Cache(Generic[T]):
    """
    Holds one derived value until it is invalidated.

    Validity is tracked separately from the value, so ``None`` is a valid
    cached result. Single-owner: a cache belongs to one session and is not
    locked.
    """

    __slots__ = ("_data", "_valid", "_computations")

    def __init__(self, data: T | object = _MISSING) -> None:
        self._valid = data is not _MISSING
        self._data: Optional[T] = None if data is _MISSING else data  # type: ignore[assignment]
        self._computations = 0

    def get_or_compute(self, recompute: Callable[[], T]) -> T:
        """Return the stored value, calling ``recompute`` once if there is none."""
        if not self._valid:
            value = recompute()
            self._computations += 1
            self._data = value
            self._valid = True
        return self._data  # type: ignore[return-value]

    def invalidate(self) -> None:
        self._data = None
        self._valid = False

    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def computations(self) -> int:
        """How many times ``recompute`` has produced a value."""
        return self._computations

    def peek(self) -> Optional[T]:
        """Return the stored value (None when invalid) without computing anything."""
        return self._data
