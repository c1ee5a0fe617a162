from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta


class PerformanceTimer:
    """Context manager measuring wall time of a code block with
    time.perf_counter().

    Example:
    >>> with PerformanceTimer() as timer:
    ...     time.sleep(0.1)
    >>> timer.timedelta.total_seconds() >= 0.1
    True
    """

    def __init__(self) -> None:
        self._start: float = None
        self._elapsed: float = None

    def __enter__(self) -> PerformanceTimer:
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args, **kwargs):
        self._elapsed = time.perf_counter() - self._start

    def __str__(self) -> str:
        return str(self.timedelta)

    @property
    def time(self) -> float:
        """
        Returns:
            float: elapsed time in seconds
        """
        return self._elapsed

    @property
    def timedelta(self) -> timedelta:
        return timedelta(seconds=self._elapsed)


@dataclass
class RuleInductionTimes:
    generation_time: timedelta = timedelta()
    selection_time: timedelta = timedelta()
    total_training_time: timedelta = timedelta()

    def __add__(self, other: RuleInductionTimes) -> RuleInductionTimes:
        if other == 0:
            return self
        if not isinstance(other, RuleInductionTimes):
            raise TypeError(f"Cannot add {type(other)} to RuleInductionTimes")
        return RuleInductionTimes(
            generation_time=self.generation_time + other.generation_time,
            selection_time=self.selection_time + other.selection_time,
            total_training_time=self.total_training_time + other.total_training_time,
        )

    def __radd__(self, other: RuleInductionTimes) -> RuleInductionTimes:
        return self.__add__(other)

    def __repr__(self) -> str:
        return (
            f"generation_time={self.generation_time.total_seconds()}, "
            f"selection_time={self.selection_time.total_seconds()}, "
            f"total_training_time={self.total_training_time.total_seconds()}"
        )
