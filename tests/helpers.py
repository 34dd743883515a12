from __future__ import annotations

from grid import Point


class ManualTimer:
    """Timer that records start/stop calls; ticks are driven by the test."""

    def __init__(self) -> None:
        self.interval: int | None = None
        self.starts: list[int] = []
        self.stops = 0

    @property
    def running(self) -> bool:
        return self.interval is not None

    def start(self, interval: int) -> None:
        self.interval = interval
        self.starts.append(interval)

    def stop(self) -> None:
        self.interval = None
        self.stops += 1


class FoodQueue:
    """spawn_food replacement: hands out queued cells, then a fixed fallback."""

    def __init__(self, *cells: tuple[int, int], fallback: tuple[int, int] = (0, 19)) -> None:
        self.cells = list(cells)
        self.fallback = fallback
        self.calls = 0

    def __call__(self, snake, grid_size, rng) -> Point:
        self.calls += 1
        if self.cells:
            return Point(*self.cells.pop(0))
        return Point(*self.fallback)


class BrokenStore:
    """High score store whose backend is unavailable."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.attempts: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> bool:
        self.attempts.append(value)
        return False
