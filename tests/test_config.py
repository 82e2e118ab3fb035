import json

import pytest

import constants
from ballsim.config import SimulationConfig, load_config
from ballsim.errors import ConfigurationError


def test_defaults():
    config = SimulationConfig()
    assert config.ball_count == 2
    assert (config.width, config.height) == (800, 600)
    assert config.ticks_per_second == 60
    assert (config.min_size, config.max_size) == (5, 15)
    assert (config.min_speed, config.max_speed) == (1, 2)
    assert config.tick_interval == pytest.approx(1 / 60)
    assert config.validate() is config


@pytest.mark.parametrize("settings", [
    {'width': 0},
    {'height': -10},
    {'ticks_per_second': 0},
    {'ball_count': -1},
    {'min_size': 20, 'max_size': 10},
    {'min_size': 0},
    {'min_speed': 3, 'max_speed': 2},
    {'max_spawn_attempts': 0},
    {'width': 20, 'height': 600},
    {'width': float('nan')},
    {'height': float('inf')},
    {'max_speed': float('nan')},
    {'width': '800'},
    {'min_size': True},
    {'ball_count': 2.5},
    {'max_spawn_attempts': '10'},
    {'seed': 1.5},
    {'background': (0, 0)},
    {'background': (0, 0, 256)},
])
def test_invalid_settings(settings):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**settings).validate()


def test_tiny_arena_is_fine_without_balls():
    SimulationConfig(ball_count=0, width=10, height=10).validate()


def test_replace_returns_new_config():
    config = SimulationConfig()
    bigger = config.replace(ball_count=30)
    assert bigger.ball_count == 30
    assert config.ball_count == 2


def test_load_config(tmp_path):
    path = tmp_path / "arena.json"
    path.write_text(json.dumps({'ball_count': 12, 'width': 400, 'background': [10, 20, 30]}))
    config = load_config(str(path), height=300, seed=None)
    assert config.ball_count == 12
    assert config.width == 400
    assert config.height == 300
    assert config.background == (10, 20, 30)
    assert config.min_size == constants.MIN_BALL_SIZE


def test_load_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "arena.json"
    path.write_text(json.dumps({'balls': 12}))
    with pytest.raises(ConfigurationError, match="balls"):
        load_config(str(path))


def test_load_config_rejects_bad_json(tmp_path):
    path = tmp_path / "arena.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_config(str(path))
    path.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("payload", [
    {'width': "800"},
    {'ball_count': 3.5},
    {'background': "black"},
    {'seed': "abc"},
])
def test_load_config_rejects_wrong_types(tmp_path, payload):
    path = tmp_path / "arena.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_integer_dimensions_are_accepted():
    config = SimulationConfig(width=640, height=480, ticks_per_second=30).validate()
    assert config.width == 640
