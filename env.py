"""
Змейка: пошаговая симуляция.

Один вызов step() = один тик таймера:
  1. фиксируем направление из ячейки ожидания
  2. считаем новую голову
  3. стена -> смерть, змейка не меняется
  4. тело (включая хвост, который ещё не ушёл) -> смерть, змейка не меняется
  5. добавляем голову
  6. еда -> +10 очков, хвост остаётся, новая еда; иначе хвост убираем

Повороты приходят между тиками через turn(). В ячейке ожидания лежит только
последнее принятое направление, разворот на 180° относительно последнего
*применённого* направления отбрасывается.
"""
from enum import Enum

from config import GRID_SIZE, INITIAL_SNAKE, INITIAL_DIRECTION, SCORE_FOR_FOOD
from food import place_food
from grid import Direction, Point, in_bounds, to_points


class StepOutcome(Enum):
    MOVED = 'moved'
    ATE = 'ate'
    CRASHED = 'crashed'
    WON = 'won'

    @property
    def done(self):
        return self in (StepOutcome.CRASHED, StepOutcome.WON)


class SnakeEnv:
    def __init__(self, grid_size=None, rng=None, spawn_food=None, initial_snake=None):
        """
        grid_size: размер поля (по умолчанию из config)
        initial_snake: стартовая змейка для reset() (голова первая)
        rng: numpy Generator для еды (для тестов - с фиксированным seed)
        spawn_food: своя функция размещения еды (snake, grid_size, rng) -> Point | None
        """
        self.grid_size = grid_size or GRID_SIZE
        self.rng = rng
        self.spawn_food = spawn_food or place_food
        self.initial_snake = tuple(initial_snake or INITIAL_SNAKE)
        self.reset()

    def reset(self, snake=None, direction=None, food=None):
        """Начальная змейка, счёт 0, направление вверх"""
        cells = to_points(self.initial_snake if snake is None else snake)
        if not cells:
            raise ValueError("snake must have at least one segment")
        for cell in cells:
            if not in_bounds(cell, self.grid_size):
                raise ValueError(f"snake segment {tuple(cell)} is outside the grid")

        if direction is None:
            direction = Direction(INITIAL_DIRECTION)

        self.snake = cells
        self.direction = direction        # ячейка ожидания (последний принятый поворот)
        self.last_direction = direction   # направление последнего хода
        self.score = 0
        self.steps = 0
        self.alive = True
        self.won = False

        if food is None:
            self.food = self._spawn_food()
        else:
            self.food = Point(*food)
        return self

    def _spawn_food(self):
        return self.spawn_food(self.snake, self.grid_size, self.rng)

    @property
    def head(self):
        return self.snake[0]

    def turn(self, direction):
        """Принять поворот, если это не разворот назад"""
        if direction.is_opposite(self.last_direction):
            return False
        self.direction = direction
        return True

    def step(self):
        """Один тик. Возвращает StepOutcome"""
        if not self.alive:
            return StepOutcome.WON if self.won else StepOutcome.CRASHED

        self.last_direction = self.direction
        new_head = self.head.moved(self.last_direction)

        # Стена
        if not in_bounds(new_head, self.grid_size):
            self.alive = False
            return StepOutcome.CRASHED

        # Тело, хвост тоже считается занятым
        if new_head in self.snake:
            self.alive = False
            return StepOutcome.CRASHED

        self.snake.insert(0, new_head)
        self.steps += 1

        if new_head == self.food:
            self.score += SCORE_FOR_FOOD
            self.food = self._spawn_food()

            # Победа: свободных клеток не осталось
            if self.food is None:
                self.alive = False
                self.won = True
                return StepOutcome.WON
            return StepOutcome.ATE

        self.snake.pop()
        return StepOutcome.MOVED

    def is_win(self):
        """Победа = змейка заполнила всё поле"""
        return self.won
