"""
Управление: клавиши и экранные кнопки -> действия сессии.

Сам ничего не решает про игру: только смотрит на статус и передаёт
команду в GameSession. Неизвестные клавиши игнорируются.
"""
from config import KEY_MAPPINGS, PAUSE_KEYS, CONFIRM_KEYS, DIFFICULTY_KEYS
from grid import Direction
from session import GameStatus


class InputAdapter:
    def __init__(self, session):
        self.session = session

    def handle(self, symbol):
        """
        symbol: имя клавиши (pygame.key.name) или экранной кнопки.
        Возвращает имя выполненного действия или None.
        """
        if not symbol:
            return None
        symbol = str(symbol).strip().lower()
        status = self.session.status

        if status in (GameStatus.IDLE, GameStatus.GAME_OVER):
            if symbol in CONFIRM_KEYS:
                self.session.start()
                return 'start'
            if status is GameStatus.IDLE and symbol in DIFFICULTY_KEYS:
                self.session.set_difficulty(DIFFICULTY_KEYS[symbol])
                return 'set_difficulty'
            return None

        if symbol in PAUSE_KEYS:
            self.session.toggle_pause()
            return 'toggle_pause'

        if status is GameStatus.PLAYING and symbol in KEY_MAPPINGS:
            self.session.change_direction(Direction(KEY_MAPPINGS[symbol]))
            return 'change_direction'

        return None
