"""Frame timing statistics."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional


@dataclass
class SectionStat:
    """Aggregated timing information for one labelled section."""

    count: int = 0
    total: float = 0.0
    min_time: Optional[float] = None
    max_time: float = 0.0

    def add(self, elapsed: float) -> None:
        self.count += 1
        self.total += elapsed
        if self.min_time is None or elapsed < self.min_time:
            self.min_time = elapsed
        if elapsed > self.max_time:
            self.max_time = elapsed

    @property
    def average(self) -> float:
        """Return the mean duration in seconds."""

        return self.total / self.count if self.count else 0.0


class _Section:
    """Context manager recording one run of a section."""

    __slots__ = ("_timer", "_name", "_start")

    def __init__(self, timer: "FrameTimer", name: str) -> None:
        self._timer = timer
        self._name = name
        self._start: Optional[float] = None

    def __enter__(self) -> "_Section":
        if self._timer.enabled:
            self._start = self._timer._clock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self._timer._record(self._name, self._timer._clock() - self._start)
            self._start = None
        return False


class FrameTimer:
    """Collect per-section durations across frames."""

    def __init__(
        self,
        *,
        clock: Optional[Callable[[], float]] = None,
        enabled: bool = True,
    ) -> None:
        self._clock = clock or time.perf_counter
        self.enabled = enabled
        self._stats: Dict[str, SectionStat] = {}

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def reset(self) -> None:
        """Drop all accumulated statistics."""

        self._stats.clear()

    def _record(self, name: str, elapsed: float) -> None:
        stat = self._stats.get(name)
        if stat is None:
            stat = SectionStat()
            self._stats[name] = stat
        stat.add(max(elapsed, 0.0))

    def section(self, name: str) -> _Section:
        """Return a context manager timing the ``name`` section."""

        return _Section(self, name)

    def snapshot(self) -> Dict[str, SectionStat]:
        """Return a copy of the accumulated statistics."""

        return {name: replace(stat) for name, stat in self._stats.items()}

    def summary(
        self, *, sort_by: str = "total", descending: bool = True
    ) -> List[Dict[str, float | int]]:
        """Return the statistics as dictionaries, sorted by ``sort_by``.

        Raises:
            ValueError: If ``sort_by`` is not a known column.
        """

        key_map = {
            "total": lambda item: item[1].total,
            "count": lambda item: item[1].count,
            "average": lambda item: item[1].average,
            "max": lambda item: item[1].max_time,
            "min": lambda item: item[1].min_time if item[1].min_time is not None else 0.0,
        }
        if sort_by not in key_map:
            raise ValueError(f"Unknown sort key: {sort_by}")
        items = sorted(self._stats.items(), key=key_map[sort_by], reverse=descending)
        return [
            {
                "name": name,
                "count": stat.count,
                "total": stat.total,
                "average": stat.average,
                "min": stat.min_time if stat.min_time is not None else 0.0,
                "max": stat.max_time,
            }
            for name, stat in items
        ]


def format_summary(summary: List[Dict[str, float | int]]) -> str:
    """Render a summary as a single log-friendly line."""

    if not summary:
        return "No timings recorded."
    parts = []
    for row in summary:
        parts.append(
            f"{row['name']}: avg={row['average'] * 1000.0:.3f}ms, "
            f"max={row['max'] * 1000.0:.3f}ms, count={int(row['count'])}"
        )
    return "; ".join(parts)


__all__ = ["SectionStat", "FrameTimer", "format_summary"]
