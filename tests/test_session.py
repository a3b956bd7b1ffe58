"""Tests for lanedodge.core.session — restarts, input routing, high score."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from game_engine import START_SPEED, CollaboratorUnavailableError, Command, Phase, make_obstacle
from lanedodge.backends.headless.adapter import HeadlessBackend
from lanedodge.config.loader import load_settings
from lanedodge.core.contracts import SurfaceUnavailableError
from lanedodge.core.session import SessionManager


class NeverSpawn:
    def maybe_spawn(self, tick, track):
        return None


def make_manager(backend=None, **overrides):
    backend = backend or HeadlessBackend()
    settings = load_settings(backend="headless", verbose=False, seed=42, **overrides)
    input_source = backend.make_input()
    manager = SessionManager(
        settings,
        surfaces=backend,
        make_renderer=backend.make_renderer,
        input_source=input_source,
        make_timer=lambda: backend.make_timer(settings),
    )
    return manager, input_source


def crash(loop, score=None):
    """Put an obstacle on top of the player and run one tick."""
    loop.spawner = NeverSpawn()
    s = loop.session
    if score is not None:
        s.scores.score = score
    o = make_obstacle(s.player.lane, loop.track)
    o.y = s.player.y
    s.obstacles.append(o)
    loop.timer.fire(1)
    assert s.phase is Phase.GAME_OVER


class TestSessionManager:
    def test_start(self):
        manager, input_source = make_manager()
        loop = manager.start()
        assert manager.active is loop
        assert loop.phase is Phase.RUNNING
        assert manager.games_started == 1
        assert input_source.subscriber_count == 1
        assert (manager.track.width, manager.track.height) == (800, 600)

    def test_moves_routed_to_active_game(self):
        manager, input_source = make_manager()
        loop = manager.start()
        input_source.push(Command.MOVE_RIGHT)
        input_source.flush()
        assert loop.session.player.lane == 2
        input_source.push(Command.MOVE_LEFT)
        input_source.push(Command.MOVE_LEFT)
        input_source.push(Command.MOVE_LEFT)
        input_source.flush()
        assert loop.session.player.lane == 0

    def test_confirm_restarts_after_game_over(self):
        manager, input_source = make_manager()
        first = manager.start()
        crash(first)

        input_source.push(Command.MOVE_LEFT)
        input_source.flush()
        assert manager.active is first
        assert first.session.player.lane == 1

        input_source.push(Command.CONFIRM)
        input_source.flush()
        second = manager.active
        assert second is not first
        assert second.phase is Phase.RUNNING
        assert second.session.speed == START_SPEED
        assert second.session.score == 0
        assert second.session.obstacles == []
        assert manager.games_started == 2

    def test_single_subscription_across_restarts(self):
        manager, input_source = make_manager()
        manager.start()
        for _ in range(3):
            crash(manager.active)
            input_source.push(Command.CONFIRM)
            input_source.flush()
        assert manager.games_started == 4
        assert input_source.subscriber_count == 1

        # One press moves exactly one lane.
        input_source.push(Command.MOVE_LEFT)
        input_source.flush()
        assert manager.active.session.player.lane == 0

    def test_old_instance_stops_ticking(self):
        manager, input_source = make_manager()
        first = manager.start()
        crash(first)
        input_source.push(Command.CONFIRM)
        input_source.flush()
        assert not first.timer.running
        assert manager.active.timer.running

    def test_high_score_survives_restart(self):
        manager, input_source = make_manager()
        crash(manager.start(), score=7)
        assert manager.high_score.value == 7

        input_source.push(Command.CONFIRM)
        input_source.flush()
        assert manager.active.session.high_score == 7

        crash(manager.active, score=3)
        assert manager.high_score.value == 7

    def test_restart_requires_game_over(self):
        manager, _ = make_manager()
        manager.start()
        with pytest.raises(RuntimeError):
            manager.restart()
        crash(manager.active)
        loop = manager.restart()
        assert loop.phase is Phase.RUNNING

    def test_existing_surface_size_wins(self):
        backend = HeadlessBackend()
        backend.provide("container", (300, 200))
        manager, _ = make_manager(backend=backend)
        manager.start()
        assert (manager.track.width, manager.track.height) == (300, 200)

    def test_surface_failure_aborts_start(self):
        class BrokenBackend(HeadlessBackend):
            def provide(self, container_id, size):
                raise SurfaceUnavailableError("no display")

        manager, input_source = make_manager(backend=BrokenBackend())
        with pytest.raises(SurfaceUnavailableError):
            manager.start()
        assert manager.active is None
        assert input_source.subscriber_count == 0

    def test_missing_surface_aborts_start(self):
        class EmptyBackend(HeadlessBackend):
            def provide(self, container_id, size):
                return None

        manager, _ = make_manager(backend=EmptyBackend())
        with pytest.raises(SurfaceUnavailableError):
            manager.start()

    def test_close_unsubscribes(self):
        manager, input_source = make_manager()
        manager.start()
        manager.close()
        assert input_source.subscriber_count == 0
        assert not manager.active.timer.running

    def test_missing_input_source_aborts_start(self):
        backend = HeadlessBackend()
        settings = load_settings(backend="headless", verbose=False)
        manager = SessionManager(
            settings,
            surfaces=backend,
            make_renderer=backend.make_renderer,
            input_source=None,
            make_timer=lambda: backend.make_timer(settings),
        )
        with pytest.raises(CollaboratorUnavailableError):
            manager.start()
        assert manager.active is None

    def test_missing_renderer_leaves_no_subscription(self):
        backend = HeadlessBackend()
        settings = load_settings(backend="headless", verbose=False)
        input_source = backend.make_input()
        manager = SessionManager(
            settings,
            surfaces=backend,
            make_renderer=lambda surface: None,
            input_source=input_source,
            make_timer=lambda: backend.make_timer(settings),
        )
        with pytest.raises(CollaboratorUnavailableError):
            manager.start()
        assert manager.active is None
        assert input_source.subscriber_count == 0

    def test_failed_first_game_drops_subscription(self):
        class BrokenTimer:
            running = False

            def start(self, callback):
                raise CollaboratorUnavailableError("no timer")

            def stop(self):
                pass

        backend = HeadlessBackend()
        settings = load_settings(backend="headless", verbose=False)
        input_source = backend.make_input()
        manager = SessionManager(
            settings,
            surfaces=backend,
            make_renderer=backend.make_renderer,
            input_source=input_source,
            make_timer=BrokenTimer,
        )
        with pytest.raises(CollaboratorUnavailableError):
            manager.start()
        assert input_source.subscriber_count == 0
