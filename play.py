"""
Змейка в окне pygame.

Использование:
    python play.py                    # Рекорд в snake_highscore.db
    python play.py my_scores.db       # Своя база для рекорда
    python play.py --no-save          # Без сохранения рекорда

Тики игры идут по таймеру pygame (интервал = скорость), окно
перерисовывается только когда сессия опубликовала новое состояние.
"""
import sys
import pygame

from config import (WIDTH, HEIGHT, CELL_SIZE, PANEL_WIDTH, FPS, DB_PATH,
                    BACKGROUND, GRID, BORDER, PANEL, SNAKE, FOOD, ACCENT,
                    OVERLAY, BLACK, WHITE, MUTED, DIFFICULTY_KEYS)
from controls import InputAdapter
from database import HighScoreDatabase, MemoryStore
from session import GameSession, GameStatus

TICK_EVENT = pygame.USEREVENT + 1


class PygameTimer:
    """Таймер тиков через pygame.time.set_timer"""

    def __init__(self, event_type=TICK_EVENT):
        self.event_type = event_type
        self.interval = None

    @property
    def running(self):
        return self.interval is not None

    def start(self, interval):
        # Повторный set_timer заменяет старый таймер
        pygame.time.set_timer(self.event_type, interval)
        self.interval = interval

    def stop(self):
        pygame.time.set_timer(self.event_type, 0)
        # Тики, успевшие попасть в очередь, после паузы не нужны
        pygame.event.clear(self.event_type)
        self.interval = None


def blend(color, background, alpha):
    """Цвет с прозрачностью alpha поверх фона"""
    return tuple(int(b + (c - b) * alpha) for c, b in zip(color, background))


def body_alpha(index, length):
    """Тело бледнеет к хвосту"""
    return max(0.4, 1 - index / (length + 5))


class SnakeRenderer:
    """Рисует последние снимки сессии"""

    def __init__(self, screen):
        self.screen = screen
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 48, bold=True)
        self.board = None
        self.hud = None
        self.dirty = True

    def update(self, board, hud):
        self.board = board
        self.hud = hud
        self.dirty = True

    def draw(self):
        if not self.dirty or self.board is None:
            return False

        self.screen.fill(BACKGROUND)
        self.draw_grid()
        self.draw_food()
        self.draw_snake()
        self.draw_panel()
        self.draw_overlay()

        pygame.display.flip()
        self.dirty = False
        return True

    def cell_rect(self, point):
        x, y = point
        return pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)

    def draw_grid(self):
        for x in range(0, WIDTH, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, HEIGHT))
        for y in range(0, HEIGHT, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (0, y), (WIDTH, y))
        pygame.draw.rect(self.screen, BORDER, (0, 0, WIDTH, HEIGHT), 3)

    def draw_snake(self):
        snake = self.board.snake
        for i, point in enumerate(snake):
            rect = self.cell_rect(point)
            if i == 0:
                pygame.draw.rect(self.screen, SNAKE, rect)
                # Глаза
                pygame.draw.circle(self.screen, BLACK, (rect.left + 6, rect.top + 6), 3)
                pygame.draw.circle(self.screen, BLACK, (rect.right - 6, rect.top + 6), 3)
            else:
                color = blend(SNAKE, BACKGROUND, body_alpha(i, len(snake)))
                pygame.draw.rect(self.screen, color, rect)

    def draw_food(self):
        if self.board.food is None:
            return
        rect = self.cell_rect(self.board.food)
        pygame.draw.circle(self.screen, FOOD, rect.center, int(CELL_SIZE * 0.4))

    def draw_panel(self):
        hud = self.hud
        panel = pygame.Rect(WIDTH, 0, PANEL_WIDTH, HEIGHT)
        pygame.draw.rect(self.screen, PANEL, panel)

        stats = [
            f"Score: {hud.score}",
            f"Best: {hud.high_score}",
            f"Length: {len(self.board.snake)}",
            f"Speed: {hud.difficulty.name}",
            "",
            "Controls:",
            "Arrows / WASD Move",
            "Space Pause",
            "Enter Start",
            "ESC Quit",
        ]
        if hud.status is GameStatus.IDLE:
            stats.append("1/2/3 Speed")

        for i, text in enumerate(stats):
            surf = self.font.render(text, True, WHITE)
            self.screen.blit(surf, (WIDTH + 10, 20 + i * 25))

        if hud.warning:
            surf = self.font.render(hud.warning, True, FOOD)
            self.screen.blit(surf, (WIDTH + 10, HEIGHT - 30))

    def draw_overlay(self):
        hud = self.hud
        if hud.status is GameStatus.PLAYING:
            return

        shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        self.screen.blit(shade, (0, 0))

        if hud.status is GameStatus.IDLE:
            speeds = "  ".join(
                f"{key}:{name}" + ("*" if name == hud.difficulty.name else "")
                for key, name in DIFFICULTY_KEYS.items()
            )
            lines = [
                (self.big_font, "SNAKE", SNAKE),
                (self.font, f"Best: {hud.high_score}", MUTED),
                (self.font, f"Speed  {speeds}", MUTED),
                (self.font, "Press Enter to start", WHITE),
            ]
        elif hud.status is GameStatus.PAUSED:
            lines = [
                (self.big_font, "PAUSED", WHITE),
                (self.font, "Press Space to resume", WHITE),
            ]
        else:
            lines = [
                (self.big_font, "YOU WIN" if hud.won else "GAME OVER", SNAKE if hud.won else FOOD),
                (self.font, f"Score: {hud.score}", WHITE),
            ]
            if hud.new_high_score:
                lines.append((self.font, "New High Score!", ACCENT))
            lines.append((self.font, "Press Enter to try again", WHITE))

        y = HEIGHT // 2 - 30 * len(lines) // 2 - 20
        for font, text, color in lines:
            surf = font.render(text, True, color)
            self.screen.blit(surf, surf.get_rect(midtop=(WIDTH // 2, y)))
            y += surf.get_height() + 10


class SnakePlayer:
    def __init__(self, store):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH + PANEL_WIDTH, HEIGHT))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()

        self.renderer = SnakeRenderer(self.screen)
        self.session = GameSession(store, timer=PygameTimer())
        self.controls = InputAdapter(self.session)

        self.games = 0
        self._last_status = self.session.status
        self.session.subscribe(self.renderer.update)
        self.session.subscribe(self.on_change)
        self.renderer.update(self.session.board_snapshot(), self.session.hud_snapshot())

        print(f"Best score: {self.session.high_score}")

    def on_change(self, board, hud):
        """Итог игры в консоль"""
        if hud.status is GameStatus.GAME_OVER and self._last_status is not GameStatus.GAME_OVER:
            self.games += 1
            result = "WIN!" if hud.won else f"Score {hud.score}"
            print(f"Game {self.games}: {result} (best {hud.high_score})")
            if hud.warning:
                print(f"Warning: {hud.warning}")
        self._last_status = hud.status

    def play(self):
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        self.controls.handle(pygame.key.name(event.key))
                elif event.type == TICK_EVENT:
                    self.session.tick()

            self.renderer.draw()
            self.clock.tick(FPS)

        self.session.timer.stop()
        self.session.store.close()
        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games, best {self.session.high_score}")


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if "--no-save" in args:
        store = MemoryStore()
    else:
        paths = [a for a in args if not a.startswith("--")]
        store = HighScoreDatabase(paths[0] if paths else DB_PATH)

    player = SnakePlayer(store)
    player.play()


if __name__ == "__main__":
    main()
