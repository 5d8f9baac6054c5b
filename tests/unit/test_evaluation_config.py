"""Tests for evaluation configuration loading."""
import json

import pytest

from poker_showdown.errors import EvaluationConfigError
from poker_showdown.evaluation.evaluation_config import (
    CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, EvaluationConfig, EvaluationConfigLoader
)


@pytest.fixture
def write_config(tmp_path):
    def _write(data) -> object:
        path = tmp_path / "evaluation.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path
    return _write


def test_packaged_default():
    config = EvaluationConfigLoader(DEFAULT_CONFIG_PATH).load()
    assert config.id == "high"
    assert config.max_cards == 10
    assert config.hand_size == 5
    assert config.suit_priority == [1, 2, 3, 4]
    assert config.max_workers == 1


def test_missing_keys_use_defaults(write_config):
    config = EvaluationConfigLoader(write_config({"max_cards": 7})).load()
    assert config.max_cards == 7
    assert config.suit_priority == EvaluationConfig().suit_priority


def test_config_is_cached(write_config):
    loader = EvaluationConfigLoader(write_config({"max_workers": 2}))
    assert loader.get_config() is loader.get_config()


def test_env_var_path(write_config, monkeypatch):
    path = write_config({"max_cards": 8})
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert EvaluationConfigLoader().config_path == path
    assert EvaluationConfigLoader().load().max_cards == 8


def test_missing_file(tmp_path):
    with pytest.raises(EvaluationConfigError, match="not found"):
        EvaluationConfigLoader(tmp_path / "nope.json").load()


def test_invalid_json(write_config):
    with pytest.raises(EvaluationConfigError, match="Invalid JSON"):
        EvaluationConfigLoader(write_config("{not json")).load()


@pytest.mark.parametrize("data", [
    {"max_cards": 0},
    {"max_cards": "10"},
    {"hand_size": 6},
    {"suit_priority": [1, 2, 3]},
    {"suit_priority": [1, 1, 2, 3]},
    {"suit_priority": [1, 2, 3, 5]},
    {"max_workers": 0},
    {"wild_cards": True},
])
def test_schema_rejects(write_config, data):
    with pytest.raises(EvaluationConfigError, match="Schema validation failed"):
        EvaluationConfigLoader(write_config(data)).load()


def test_evaluator_uses_active_config(monkeypatch):
    from poker_showdown.evaluation import evaluation_config
    from poker_showdown.evaluation.evaluator import HandEvaluator

    active = EvaluationConfig(max_cards=7)
    monkeypatch.setattr(evaluation_config.evaluation_config_loader, "_config", active)
    assert HandEvaluator().config is active
