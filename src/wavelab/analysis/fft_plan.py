"""Reusable forward-FFT plans keyed by transform length."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np
import scipy.fft
from numpy.typing import ArrayLike

from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FftPlan:
    """
    Forward complex FFT of a fixed length.

    Holds the bin index ramp for ``n`` so callers can label bins without
    rebuilding it on every frame.
    """

    n: int
    workers: Optional[int] = None
    bin_index: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.n <= 0:
            raise InvalidParameterError("n", self.n, "> 0")
        ramp = np.arange(self.n, dtype=np.float64)
        ramp.setflags(write=False)
        object.__setattr__(self, "bin_index", ramp)

    def process(self, buffer: ArrayLike) -> np.ndarray:
        """Return the forward DFT of ``buffer`` (length must equal ``n``)."""
        data = np.asarray(buffer, dtype=np.complex128)
        if data.shape != (self.n,):
            raise ValueError(f"plan expects a buffer of shape ({self.n},), got {data.shape}")
        return scipy.fft.fft(data, workers=self.workers)


class FftPlanner:
    """
    Cache of :class:`FftPlan` objects shared between callers.

    Lookups and inserts are serialized with a lock, so one planner may be
    shared across threads. A plan is stored only once it has been built, so
    a failure while planning never leaves a half-initialized entry behind.
    """

    def __init__(self, workers: Optional[int] = None) -> None:
        self._workers = workers
        self._plans: Dict[int, FftPlan] = {}
        self._lock = threading.Lock()

    def plan_fft_forward(self, n: int) -> FftPlan:
        """Return the plan for length ``n``, building it on first request."""
        key = int(n)
        with self._lock:
            plan = self._plans.get(key)
            if plan is None:
                plan = FftPlan(n=key, workers=self._workers)
                self._plans[key] = plan
                logger.debug("Created forward FFT plan for n=%d", key)
            return plan

    def __len__(self) -> int:
        with self._lock:
            return len(self._plans)

    def __contains__(self, n: object) -> bool:
        with self._lock:
            return n in self._plans

    def clear(self) -> None:
        """Drop every cached plan."""
        with self._lock:
            self._plans.clear()


_SHARED_PLANNER: Optional[FftPlanner] = None
_SHARED_LOCK = threading.Lock()


def shared_planner() -> FftPlanner:
    """Return the process-wide planner, creating it lazily."""
    global _SHARED_PLANNER
    with _SHARED_LOCK:
        if _SHARED_PLANNER is None:
            _SHARED_PLANNER = FftPlanner()
        return _SHARED_PLANNER


__all__ = ["FftPlan", "FftPlanner", "shared_planner"]
