from __future__ import annotations

import pygame
import pytest

import play
from config import BACKGROUND, SNAKE


@pytest.fixture
def timer_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    calls: list[tuple] = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda event, millis: calls.append(("set", event, millis)))
    monkeypatch.setattr(pygame.event, "clear", lambda event=None: calls.append(("clear", event)))
    return calls


def test_timer_start_schedules_tick_event(timer_calls: list[tuple]) -> None:
    timer = play.PygameTimer()
    timer.start(100)
    assert timer.running
    assert timer_calls == [("set", play.TICK_EVENT, 100)]


def test_timer_stop_cancels_and_drops_queued_ticks(timer_calls: list[tuple]) -> None:
    timer = play.PygameTimer()
    timer.start(60)
    timer.stop()
    assert not timer.running
    assert timer_calls[1:] == [("set", play.TICK_EVENT, 0), ("clear", play.TICK_EVENT)]


def test_body_fades_towards_tail() -> None:
    alphas = [play.body_alpha(i, 30) for i in range(1, 30)]
    assert alphas == sorted(alphas, reverse=True)
    assert min(alphas) == 0.4


def test_blend_endpoints() -> None:
    assert play.blend(SNAKE, BACKGROUND, 1.0) == SNAKE
    assert play.blend(SNAKE, BACKGROUND, 0.0) == BACKGROUND


def test_main_picks_store_from_args(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    stores = []

    class FakePlayer:
        def __init__(self, store) -> None:
            stores.append(store)

        def play(self) -> None:
            pass

    monkeypatch.setattr(play, "SnakePlayer", FakePlayer)

    play.main(["--no-save"])
    play.main([str(tmp_path / "mine.db")])

    assert isinstance(stores[0], play.MemoryStore)
    assert isinstance(stores[1], play.HighScoreDatabase)
    assert stores[1].db_path == str(tmp_path / "mine.db")
