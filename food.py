"""
Размещение еды.

Сначала пробуем случайные клетки (как обычно и бывает, змейка намного
меньше поля). Если за FOOD_MAX_ATTEMPTS попыток свободная клетка не нашлась,
перебираем все свободные клетки через матрицу занятости и берём случайную.
Если свободных клеток нет, еды нет (None) - змейка заполнила поле.
"""
import numpy as np

from config import GRID_SIZE, FOOD_MAX_ATTEMPTS
from grid import Point


def occupancy(snake, grid_size=GRID_SIZE):
    """Матрица занятости [y, x]: True = тело змейки"""
    grid = np.zeros((grid_size, grid_size), dtype=bool)
    for x, y in snake:
        grid[y, x] = True
    return grid


def free_cells(snake, grid_size=GRID_SIZE):
    """Все свободные клетки, построчно"""
    ys, xs = np.nonzero(~occupancy(snake, grid_size))
    return [Point(int(x), int(y)) for y, x in zip(ys, xs)]


def place_food(snake, grid_size=GRID_SIZE, rng=None, max_attempts=FOOD_MAX_ATTEMPTS):
    """Случайная свободная клетка для еды или None, если места нет"""
    if rng is None:
        rng = np.random.default_rng()

    taken = set(snake)
    if len(taken) >= grid_size * grid_size:
        return None

    for _ in range(max_attempts):
        x, y = rng.integers(0, grid_size, size=2)
        candidate = Point(int(x), int(y))
        if candidate not in taken:
            return candidate

    # Поле почти заполнено - выбираем из оставшихся клеток
    empty = free_cells(snake, grid_size)
    if not empty:
        return None
    return empty[int(rng.integers(len(empty)))]
