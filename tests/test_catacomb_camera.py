"""Tests for MazeCamera timing and bounds."""

from __future__ import annotations

import pytest

import catacomb_config as cfg
from catacomb_camera import CameraState, Direction, MazeCamera
from conftest import CONFIRM, LEFT, RIGHT, FakeControls, FakeSelector, run, wake


class TestStartup:
    def test_reports_start_position(self) -> None:
        selector = FakeSelector(-2, 2)
        MazeCamera(selector, 1)
        assert selector.moves == [1]

    def test_moving_during_delay(self) -> None:
        camera = MazeCamera(FakeSelector())
        assert camera.is_moving
        run(camera, cfg.MOVEMENT_DELAY_TICKS - 1)
        assert camera.is_moving
        run(camera, 1)
        assert not camera.is_moving

    def test_input_ignored_during_delay(self) -> None:
        selector = FakeSelector()
        camera = MazeCamera(selector)
        run(camera, cfg.MOVEMENT_DELAY_TICKS, LEFT)
        assert camera.state == CameraState.IDLE
        assert camera.relative_position == 0
        assert not camera.is_moving


class TestMove:
    def test_move_takes_moving_speed_ticks(self) -> None:
        selector = FakeSelector()
        camera = MazeCamera(selector)
        wake(camera)

        camera.step(LEFT)
        assert camera.state == CameraState.MOVING_LEFT
        run(camera, cfg.MOVING_SPEED_TICKS - 2)
        assert camera.is_moving
        assert camera.relative_position == 0

        run(camera, 1)
        assert not camera.is_moving
        assert camera.state == CameraState.IDLE
        assert camera.relative_position == -1
        assert selector.moves == [0, -1]

    def test_move_right(self) -> None:
        selector = FakeSelector()
        camera = MazeCamera(selector)
        wake(camera)
        run(camera, cfg.MOVING_SPEED_TICKS, RIGHT)
        assert camera.relative_position == 1
        assert selector.moves == [0, 1]

    def test_held_key_moves_again(self) -> None:
        camera = MazeCamera(FakeSelector(-3, 3))
        wake(camera)
        run(camera, 2 * cfg.MOVING_SPEED_TICKS + 1, RIGHT)
        assert camera.relative_position == 2
        assert camera.is_moving

    def test_input_ignored_while_moving(self) -> None:
        camera = MazeCamera(FakeSelector())
        wake(camera)
        camera.step(LEFT)
        run(camera, cfg.MOVING_SPEED_TICKS - 1, RIGHT)
        assert camera.relative_position == -1
        assert camera.state == CameraState.IDLE

    def test_offset_mid_move(self) -> None:
        camera = MazeCamera(FakeSelector())
        wake(camera)
        camera.step(RIGHT)
        assert camera.offset == pytest.approx(1 / cfg.MOVING_SPEED_TICKS)
        run(camera, 19)
        assert camera.offset == pytest.approx(20 / cfg.MOVING_SPEED_TICKS)

    def test_left_wins_over_right(self) -> None:
        camera = MazeCamera(FakeSelector())
        wake(camera)
        camera.step(FakeControls(Direction.LEFT, Direction.RIGHT))
        assert camera.state == CameraState.MOVING_LEFT


class TestBounds:
    def test_left_blocked_at_smallest(self) -> None:
        camera = MazeCamera(FakeSelector(0, 1))
        wake(camera)
        camera.step(LEFT)
        assert not camera.is_moving
        assert camera.state == CameraState.IDLE

    def test_right_blocked_at_largest(self) -> None:
        camera = MazeCamera(FakeSelector(-1, 0))
        wake(camera)
        camera.step(RIGHT)
        assert not camera.is_moving

    def test_never_leaves_bounds(self) -> None:
        camera = MazeCamera(FakeSelector(-1, 1))
        wake(camera)
        run(camera, 10 * cfg.MOVING_SPEED_TICKS, RIGHT)
        assert camera.relative_position == 1
        run(camera, 10 * cfg.MOVING_SPEED_TICKS, LEFT)
        assert camera.relative_position == -1

    def test_confirm_blocked_when_door_cannot_be_entered(self) -> None:
        selector = FakeSelector(enterable=set())
        camera = MazeCamera(selector)
        wake(camera)
        run(camera, cfg.ZOOM_SPEED_TICKS + 5, CONFIRM)
        assert selector.entered == []
        assert not camera.is_moving


class TestZoom:
    def test_zoom_enters_door_once(self) -> None:
        selector = FakeSelector()
        camera = MazeCamera(selector)
        wake(camera)

        camera.step(CONFIRM)
        assert camera.state == CameraState.ZOOMING_IN
        run(camera, cfg.ZOOM_SPEED_TICKS - 2)
        assert selector.entered == []
        assert 0.0 < camera.zoom < 1.0

        run(camera, 1)
        assert selector.entered == [0]
        assert camera.finished
        assert camera.zoom == 1.0

        run(camera, 200, CONFIRM)
        assert selector.entered == [0]

    def test_zoom_at_current_position(self) -> None:
        selector = FakeSelector(-2, 2)
        camera = MazeCamera(selector, -2)
        wake(camera)
        run(camera, cfg.ZOOM_SPEED_TICKS, CONFIRM)
        assert selector.entered == [-2]

    def test_finished_camera_ignores_input(self) -> None:
        selector = FakeSelector()
        camera = MazeCamera(selector)
        wake(camera)
        run(camera, cfg.ZOOM_SPEED_TICKS, CONFIRM)
        run(camera, 100, LEFT)
        assert camera.relative_position == 0
        assert selector.moves == [0]
        assert selector.entered == [0]
