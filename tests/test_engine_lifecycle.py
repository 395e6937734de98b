"""Tests for session start, restart and end handling."""

from __future__ import annotations

import dataclasses

import pytest

from meteordodge.config.constants import SOUND_HIT
from meteordodge.simulation.state import InputAction, Phase

from .engine_helpers import build_engine, freeze_spawning, meteor_at, star_at


def _play_a_little(engine) -> None:
    engine.start()
    for _ in range(25):
        engine.advance(0.1)
        if engine.phase is not Phase.PLAYING:
            break


class TestStartAndReset:
    def test_engine_starts_idle(self):
        engine = build_engine()
        assert engine.phase is Phase.IDLE
        assert engine.score == 0
        assert engine.meteors == []
        assert engine.stars == []

    def test_start_resets_everything(self):
        engine = build_engine()
        engine.start()
        engine.state.score = 42
        engine.state.elapsed = 12.5
        engine.meteors.append(meteor_at(50, 50))
        engine.stars.append(star_at(80, 80))
        engine.meteor_timer.elapsed = 0.4
        engine.star_timer.elapsed = 1.2
        engine.score_timer.elapsed = 0.7
        engine.ship.x = 3.0

        engine.start()

        assert engine.phase is Phase.PLAYING
        assert engine.score == 0
        assert engine.state.elapsed == 0.0
        assert engine.meteors == []
        assert engine.stars == []
        assert engine.meteor_timer.elapsed == 0.0
        assert engine.star_timer.elapsed == 0.0
        assert engine.score_timer.elapsed == 0.0
        assert engine.ship.x == (400 - 30) / 2

    def test_repeated_start_is_idempotent(self):
        engine = build_engine()
        engine.start()
        first = engine.snapshot()
        engine.start()
        engine.start()
        assert engine.snapshot() == first

    def test_reset_after_play_yields_fresh_snapshot(self):
        engine = build_engine()
        _play_a_little(engine)
        engine.reset()
        snapshot = engine.snapshot()
        assert snapshot.phase is Phase.PLAYING
        assert snapshot.score == 0
        assert snapshot.elapsed == 0.0
        assert snapshot.meteors == ()
        assert snapshot.stars == ()
        assert snapshot.ship.x == (400 - 30) / 2

    def test_start_requests_ambient_audio(self):
        engine = build_engine()
        engine.start()
        assert engine.audio.ambient_starts == 1


class TestPhaseGuards:
    def test_start_request_only_from_idle(self):
        engine = build_engine()
        assert engine.on_restart_requested() is False
        assert engine.phase is Phase.IDLE
        assert engine.on_start_requested() is True
        assert engine.phase is Phase.PLAYING
        assert engine.on_start_requested() is False

    def test_restart_request_only_from_ended(self):
        engine = build_engine()
        engine.start()
        engine.state.score = 7
        assert engine.on_restart_requested() is False
        assert engine.score == 7

        freeze_spawning(engine)
        engine.meteors.append(meteor_at(*engine.ship.center))
        engine.advance(0.0)
        assert engine.phase is Phase.ENDED

        assert engine.on_start_requested() is False
        assert engine.on_restart_requested() is True
        assert engine.phase is Phase.PLAYING
        assert engine.score == 0

    def test_confirm_starts_then_restarts(self):
        engine = build_engine()
        assert engine.handle_input(InputAction.CONFIRM) is True
        assert engine.phase is Phase.PLAYING
        assert engine.handle_input(InputAction.CONFIRM) is False

        freeze_spawning(engine)
        engine.meteors.append(meteor_at(*engine.ship.center))
        engine.advance(0.0)
        assert engine.phase is Phase.ENDED
        assert engine.handle_input(InputAction.CONFIRM) is True
        assert engine.phase is Phase.PLAYING

    def test_directional_actions_set_intent(self):
        engine = build_engine()
        engine.handle_input(InputAction.LEFT_PRESSED)
        engine.handle_input(InputAction.RIGHT_PRESSED)
        assert engine.intent.left and engine.intent.right
        engine.handle_input(InputAction.LEFT_RELEASED)
        assert not engine.intent.left and engine.intent.right
        engine.set_directional_intent(False, False)
        assert not engine.intent.left and not engine.intent.right

    def test_host_only_actions_are_ignored(self):
        engine = build_engine()
        assert engine.handle_input(InputAction.TOGGLE_MUTE) is False
        assert engine.handle_input(InputAction.QUIT) is False
        assert engine.phase is Phase.IDLE


class TestSessionEnd:
    def _crash(self, engine) -> None:
        freeze_spawning(engine)
        engine.meteors.append(meteor_at(*engine.ship.center))
        engine.advance(0.0)

    def test_new_best_score_saved_once(self):
        engine = build_engine(best_score=5)
        engine.start()
        engine.state.score = 12
        self._crash(engine)

        assert engine.phase is Phase.ENDED
        assert engine.best_score == 12
        assert engine.final_score == 12
        assert engine.score_store.best_score == 12
        assert engine.score_store.saves == 1

        for _ in range(20):
            engine.advance(0.1)
        assert engine.score_store.saves == 1

    def test_lower_score_not_saved(self):
        engine = build_engine(best_score=50)
        engine.start()
        engine.state.score = 12
        self._crash(engine)
        assert engine.best_score == 50
        assert engine.score_store.saves == 0
        assert engine.snapshot().final_score == 12

    def test_equal_score_not_saved(self):
        engine = build_engine(best_score=12)
        engine.start()
        engine.state.score = 12
        self._crash(engine)
        assert engine.score_store.saves == 0

    def test_end_stops_ambient_and_plays_hit(self):
        engine = build_engine()
        engine.start()
        self._crash(engine)
        assert engine.audio.ambient_stops == 1
        assert engine.audio.sounds == [SOUND_HIT]

    def test_best_score_loaded_at_construction(self):
        engine = build_engine(best_score=77)
        assert engine.best_score == 77
        assert engine.snapshot().best_score == 77


def test_snapshot_is_read_only():
    engine = build_engine()
    engine.start()
    engine.meteors.append(meteor_at(100, 100))
    snapshot = engine.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.score = 99
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.meteors[0].y = 0.0
    engine.meteors.clear()
    assert len(snapshot.meteors) == 1
