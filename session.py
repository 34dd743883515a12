"""
Игровая сессия: статусы, счёт, рекорд, скорость.

  IDLE -> PLAYING         start()
  PLAYING -> PAUSED       pause()    таймер остановлен, состояние сохранено
  PAUSED -> PLAYING       resume()   новый таймер с тем же интервалом
  PLAYING -> GAME_OVER    tick() когда змейка умерла (или заполнила поле)
  GAME_OVER -> PLAYING    restart()  то же самое, что start()

Остальные переходы ничего не делают и возвращают False.
Скорость меняется только в IDLE.

После каждого изменения сессия публикует снимки (BoardSnapshot, HudSnapshot)
подписчикам и увеличивает version - отрисовка только читает их.
"""
from collections import namedtuple
from enum import Enum

from config import DIFFICULTY_INTERVALS, INITIAL_DIFFICULTY
from env import SnakeEnv


class GameStatus(Enum):
    IDLE = 'idle'
    PLAYING = 'playing'
    PAUSED = 'paused'
    GAME_OVER = 'game_over'


class Difficulty(Enum):
    """Скорость = интервал тика в миллисекундах"""

    EASY = DIFFICULTY_INTERVALS["EASY"]
    MEDIUM = DIFFICULTY_INTERVALS["MEDIUM"]
    HARD = DIFFICULTY_INTERVALS["HARD"]

    @property
    def interval(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown difficulty: {name!r}") from None


BoardSnapshot = namedtuple('BoardSnapshot', ['snake', 'food', 'grid_size'])
HudSnapshot = namedtuple('HudSnapshot', [
    'status', 'score', 'high_score', 'difficulty',
    'new_high_score', 'won', 'warning',
])


class NullTimer:
    """Таймер-заглушка: тики вызываются вручную"""

    def __init__(self):
        self.interval = None

    @property
    def running(self):
        return self.interval is not None

    def start(self, interval):
        self.interval = interval

    def stop(self):
        self.interval = None


class GameSession:
    def __init__(self, store, timer=None, env=None, difficulty=INITIAL_DIFFICULTY):
        """
        store: хранилище рекорда с load()/save(value)
        timer: объект с start(interval_ms)/stop()
        env: SnakeEnv (можно передать свой, с seed)
        """
        self.store = store
        self.timer = timer or NullTimer()
        self.env = env or SnakeEnv()
        self.difficulty = Difficulty.from_name(difficulty)
        self.status = GameStatus.IDLE

        # Рекорд читается один раз при запуске
        self.high_score = store.load()
        self.new_high_score = False
        self.warning = None

        self.version = 0
        self._listeners = []

    # --- Снимки для отрисовки ---

    @property
    def score(self):
        return self.env.score

    def board_snapshot(self):
        return BoardSnapshot(
            snake=tuple(self.env.snake),
            food=self.env.food,
            grid_size=self.env.grid_size,
        )

    def hud_snapshot(self):
        return HudSnapshot(
            status=self.status,
            score=self.env.score,
            high_score=self.high_score,
            difficulty=self.difficulty,
            new_high_score=self.new_high_score,
            won=self.env.won,
            warning=self.warning,
        )

    def subscribe(self, listener):
        """listener(board, hud) вызывается после каждого изменения"""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener):
        self._listeners.remove(listener)

    def _publish(self):
        self.version += 1
        if not self._listeners:
            return
        board = self.board_snapshot()
        hud = self.hud_snapshot()
        for listener in list(self._listeners):
            listener(board, hud)

    # --- Переходы ---

    def start(self):
        """Новая игра (из IDLE или GAME_OVER)"""
        if self.status not in (GameStatus.IDLE, GameStatus.GAME_OVER):
            return False

        self.env.reset()
        self.new_high_score = False
        self.warning = None
        self.status = GameStatus.PLAYING
        self.timer.start(self.difficulty.interval)
        self._publish()
        return True

    restart = start

    def pause(self):
        if self.status is not GameStatus.PLAYING:
            return False
        self.timer.stop()
        self.status = GameStatus.PAUSED
        self._publish()
        return True

    def resume(self):
        if self.status is not GameStatus.PAUSED:
            return False
        self.status = GameStatus.PLAYING
        self.timer.start(self.difficulty.interval)
        self._publish()
        return True

    def toggle_pause(self):
        if self.status is GameStatus.PLAYING:
            return self.pause()
        return self.resume()

    def set_difficulty(self, difficulty):
        """Сменить скорость (только до начала игры)"""
        if self.status is not GameStatus.IDLE:
            return False
        self.difficulty = Difficulty.from_name(difficulty)
        self._publish()
        return True

    def change_direction(self, direction):
        """Поворот от клавиатуры или кнопок. Применится на следующем тике"""
        if self.status is not GameStatus.PLAYING:
            return False
        return self.env.turn(direction)

    def tick(self):
        """Один шаг змейки по таймеру"""
        if self.status is not GameStatus.PLAYING:
            return None

        outcome = self.env.step()
        if outcome.done:
            self._game_over()
        self._publish()
        return outcome

    def _game_over(self):
        self.timer.stop()
        self.status = GameStatus.GAME_OVER

        score = self.env.score
        if score > self.high_score:
            self.high_score = score
            self.new_high_score = True
            if self.store.save(score):
                self.warning = None
            else:
                self.warning = "High score could not be saved"
