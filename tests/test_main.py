import json
import logging

import pytest

import constants
import gui_controller
import main
from ballsim.Ball import Ball
from ballsim.errors import ConfigurationError
from ballsim.scheduler import ManualScheduler


def test_cli_defaults_to_app_ball_count():
    config = main.build_config(main.parse_args([]))
    assert config.ball_count == constants.N_BALL
    assert (config.width, config.height) == (constants.WIDTH, constants.HEIGHT)


def test_cli_overrides():
    args = main.parse_args(["--balls", "7", "--width", "320", "--height", "240", "--fps", "30", "--seed", "3"])
    config = main.build_config(args)
    assert config.ball_count == 7
    assert (config.width, config.height) == (320, 240)
    assert config.tick_interval == pytest.approx(1 / 30)
    assert config.seed == 3


def test_cli_config_file_with_override(tmp_path):
    path = tmp_path / "arena.json"
    path.write_text(json.dumps({'ball_count': 9, 'ticks_per_second': 120}))
    config = main.build_config(main.parse_args(["--config", str(path), "--balls", "4"]))
    assert config.ball_count == 4
    assert config.ticks_per_second == 120


def test_cli_rejects_bad_size():
    with pytest.raises(ConfigurationError):
        main.build_config(main.parse_args(["--width", "0"]))


def test_handle_click_removes_ball(make_world):
    world = make_world(balls=[Ball((50, 50), radius=10), Ball((150, 50), radius=10)])
    removed = main.handle_click(world, (52, 48))
    assert len(removed) == 1
    assert len(world.balls) == 1


def test_apply_shared_requests(make_world):
    world = make_world(ball_count=3, seed=1)
    scheduler = ManualScheduler()
    world.start(scheduler)
    shared = {'toggle_pause': True, 'respawn': True, 'ball_count': 6, '__exit__': False}

    assert main.apply_shared(world, scheduler, shared)
    assert not world.running
    assert len(world.balls) == 6
    assert shared['toggle_pause'] is False
    assert shared['respawn'] is False
    assert shared['paused'] is True
    assert shared['balls_alive'] == 6

    shared['__exit__'] = True
    assert not main.apply_shared(world, scheduler, shared)


def test_gui_callbacks_write_shared_requests():
    shared = {}
    count_cb, pause_cb, respawn_cb, exit_cb = gui_controller._make_callbacks(shared)
    count_cb("slider", 25.0, None)
    pause_cb()
    respawn_cb()
    exit_cb()
    assert shared == {'ball_count': 25, 'toggle_pause': True, 'respawn': True, '__exit__': True}


def test_gui_status_line():
    assert gui_controller.status_line({'paused': True, 'balls_alive': 4, 'ticks': 10}) == "paused, balls=4, ticks=10"
    assert gui_controller.status_line({}) == "running, balls=0, ticks=0"


def test_respawn_that_cannot_fit_keeps_current_balls(make_world, caplog):
    world = make_world(ball_count=3, width=200, height=200, max_spawn_attempts=200, seed=2)
    before = list(world.balls)
    shared = {'toggle_pause': False, 'respawn': True, 'ball_count': 300, '__exit__': False}

    with caplog.at_level(logging.ERROR, logger="ballsim"):
        assert main.apply_shared(world, ManualScheduler(), shared)

    assert world.balls == before
    assert shared['respawn'] is False
    assert shared['balls_alive'] == 3
    assert "could not place ball" in shared['error']
    assert "Respawn failed" in caplog.text
    assert "last respawn failed" in gui_controller.status_line(shared)


def test_successful_respawn_clears_the_error(make_world):
    world = make_world(ball_count=3, seed=2)
    shared = {'respawn': True, 'ball_count': 4, 'error': "old failure"}
    main.apply_shared(world, ManualScheduler(), shared)
    assert shared['error'] is None
    assert len(world.balls) == 4


def test_respawn_helper_reports_failure(make_world):
    world = make_world(ball_count=1, width=60, height=60, min_size=10, max_size=15, max_spawn_attempts=50, seed=0)
    before = world.balls[0]
    assert main.respawn(world, 40) is not None
    assert world.balls == [before]
    assert main.respawn(world, 1) is None
    assert len(world.balls) == 1
