# Настройки игры
# Поле 20x20, змейка стартует в центре и ползёт вверх
GRID_SIZE = 20

# Отрисовка
CELL_SIZE = 25
WIDTH = GRID_SIZE * CELL_SIZE    # 500 px
HEIGHT = GRID_SIZE * CELL_SIZE
PANEL_WIDTH = 200                # Панель счёта справа от поля

# Цвета
BACKGROUND = (15, 23, 42)
GRID = (30, 41, 59)
BORDER = (51, 65, 85)
PANEL = (40, 40, 40)
SNAKE = (57, 255, 20)
FOOD = (255, 7, 58)
ACCENT = (15, 240, 252)
OVERLAY = (15, 23, 42, 200)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
MUTED = (148, 163, 184)

# Направления (dx, dy)
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Начальная змейка: голова первая
INITIAL_SNAKE = ((10, 10), (10, 11), (10, 12))
INITIAL_DIRECTION = UP

# Очки за еду
SCORE_FOR_FOOD = 10

# Сколько раз пробуем случайную клетку, прежде чем перебрать свободные
FOOD_MAX_ATTEMPTS = 100

# Скорость: интервал тика в миллисекундах
DIFFICULTY_INTERVALS = {
    'EASY': 150,
    'MEDIUM': 100,
    'HARD': 60,
}
INITIAL_DIFFICULTY = 'MEDIUM'

# Частота перерисовки окна (тики игры идут по таймеру, не по FPS)
FPS = 60

# Клавиши (имена как у pygame.key.name(), в нижнем регистре)
KEY_MAPPINGS = {
    'up': UP,
    'w': UP,
    'button_up': UP,
    'down': DOWN,
    's': DOWN,
    'button_down': DOWN,
    'left': LEFT,
    'a': LEFT,
    'button_left': LEFT,
    'right': RIGHT,
    'd': RIGHT,
    'button_right': RIGHT,
}
PAUSE_KEYS = ('space', 'p', 'button_pause')
CONFIRM_KEYS = ('return', 'enter', 'space', 'button_start')
DIFFICULTY_KEYS = {
    '1': 'EASY',
    '2': 'MEDIUM',
    '3': 'HARD',
}

# Рекорд
DB_PATH = "snake_highscore.db"
HIGH_SCORE_KEY = "snake-highscore"
