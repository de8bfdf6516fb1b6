import json

import pytest

from alibigen.config import PuzzleConfig, ScenarioSettings, SolverSettings
from alibigen.core.errors import ConfigurationError
from alibigen.solver.dpll import DEFAULT_TIMEOUT_MS


def base(**overrides):
    data = {"rooms": ["A", "B"], "edges": [["A", "B"]], "chars": ["X", "Y"], "T": 3}
    data.update(overrides)
    return data


def test_defaults():
    cfg = PuzzleConfig.coerce(base())
    assert cfg.edges == [("A", "B")]
    assert cfg.must_move is False
    assert cfg.allow_stay is True
    assert cfg.include_self is True
    assert cfg.seed == 0
    assert cfg.scenarios.enabled() == []


def test_camel_case_aliases():
    cfg = PuzzleConfig.coerce(base(mustMove=True, allowStay=True))
    assert cfg.must_move is True
    assert cfg.include_self is False

    cfg = PuzzleConfig.coerce(base(allowStay=False))
    assert cfg.include_self is False


def test_scenario_short_names():
    cfg = PuzzleConfig.coerce(base(scenarios={"s1": True, "s1_room": "B", "s1_time": 2, "s2": True, "s4": True, "s5": True}))
    s = cfg.scenarios
    assert s.poison and s.phantom and s.bomb_duo and s.lovers
    assert s.poison_room == "B"
    assert s.poison_time == 2


def test_enabled_order_is_fixed():
    s = ScenarioSettings(bomb_duo=True, poison=True, lovers=True, phantom=True)
    assert s.enabled() == ["phantom", "lovers", "poison", "bomb_duo"]


def test_blank_fixed_parameters_are_unset():
    s = ScenarioSettings.model_validate({"s1": True, "s1_room": "", "s1_time": ""})
    assert s.poison_room is None
    assert s.poison_time is None


def test_blank_seed():
    assert PuzzleConfig.coerce(base(seed="")).seed == 0
    assert PuzzleConfig.coerce(base(seed=None)).seed == 0
    assert PuzzleConfig.coerce(base(seed=17)).seed == 17


def test_coerce_passes_models_through():
    cfg = PuzzleConfig.coerce(base())
    assert PuzzleConfig.coerce(cfg) is cfg


@pytest.mark.parametrize("bad", [
    base(rooms=["A", "A"], edges=[]),
    base(chars=["X", "X"]),
    base(edges=[["A", "Cellar"]]),
    base(T=0),
    base(scenarios={"s3": True}),
    base(scenarios={"freeze": True}),
])
def test_invalid_configurations(bad):
    with pytest.raises(ConfigurationError):
        PuzzleConfig.coerce(bad)


def test_missing_fields():
    with pytest.raises(ConfigurationError):
        PuzzleConfig.coerce({"rooms": ["A"]})


def test_solver_settings_default(monkeypatch):
    monkeypatch.delenv("ALIBIGEN_TIMEOUT_MS", raising=False)
    monkeypatch.delenv("ALIBIGEN_CONFIG_PATH", raising=False)
    assert SolverSettings.from_env_or_file().timeout_ms == DEFAULT_TIMEOUT_MS


def test_solver_settings_env(monkeypatch):
    monkeypatch.setenv("ALIBIGEN_TIMEOUT_MS", "250")
    assert SolverSettings.from_env_or_file().timeout_ms == 250.0


def test_solver_settings_file(monkeypatch, tmp_path):
    path = tmp_path / "solver.json"
    path.write_text(json.dumps({"timeout_ms": 900}))
    monkeypatch.delenv("ALIBIGEN_TIMEOUT_MS", raising=False)
    monkeypatch.setenv("ALIBIGEN_CONFIG_PATH", str(path))
    assert SolverSettings.from_env_or_file().timeout_ms == 900.0


def test_solver_settings_bad_values_fall_back(monkeypatch, tmp_path):
    path = tmp_path / "solver.json"
    path.write_text("not json")
    monkeypatch.setenv("ALIBIGEN_TIMEOUT_MS", "soon")
    monkeypatch.setenv("ALIBIGEN_CONFIG_PATH", str(path))
    assert SolverSettings.from_env_or_file().timeout_ms == DEFAULT_TIMEOUT_MS
