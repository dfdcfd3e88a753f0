import json

import pytest

from motorsim.config import SimConfig, load_config
from motorsim.experiments.sim import run


def test_defaults_match_stock_demo():
    cfg = SimConfig()
    assert cfg.gains == (0.5, 0.1, 0.02)
    assert (cfg.dt, cfg.target_speed, cfg.cycles) == (0.05, 100.0, 200)
    assert (cfg.inertia, cfg.friction) == (0.1, 0.05)
    assert cfg.log_path == "log.csv"


@pytest.mark.parametrize("bad", [
    dict(dt=0.0), dict(dt=-1.0), dict(inertia=0.0), dict(friction=-0.1), dict(cycles=-1),
])
def test_contract_violations_fail_fast(bad):
    with pytest.raises(ValueError):
        SimConfig(**bad)


def test_replace_revalidates():
    with pytest.raises(ValueError):
        SimConfig().replace(dt=0.0)
    assert SimConfig().replace(kp=2.0).kp == 2.0


def test_from_dict_ignores_unknown_keys():
    cfg = SimConfig.from_dict({"kp": 1.5, "colour": "blue"})
    assert cfg.kp == 1.5 and cfg.ki == 0.1


def test_to_dict_round_trip():
    cfg = SimConfig(kp=0.9, cycles=10)
    assert SimConfig.from_dict(cfg.to_dict()) == cfg


def test_load_config(tmp_path):
    p = tmp_path / "run.json"
    p.write_text(json.dumps({"target_speed": 50.0, "cycles": 20}))
    cfg = load_config(p)
    assert cfg.target_speed == 50.0 and cfg.cycles == 20 and cfg.kp == 0.5


def test_whole_float_cycles_is_coerced(tmp_path):
    p = tmp_path / "run.json"
    p.write_text(json.dumps({"cycles": 20.0}))
    cfg = load_config(p)
    assert cfg.cycles == 20 and isinstance(cfg.cycles, int)
    assert len(run(cfg)["cycle"]) == 20


def test_numeric_string_dt_is_coerced(tmp_path):
    p = tmp_path / "run.json"
    p.write_text(json.dumps({"dt": "0.05"}))
    cfg = load_config(p)
    assert cfg.dt == 0.05 and isinstance(cfg.dt, float)


@pytest.mark.parametrize("bad", [
    dict(dt="fast"), dict(kp=None), dict(cycles=2.5), dict(cycles="ten"), dict(cycles=True),
])
def test_wrong_types_raise_value_error(bad):
    with pytest.raises(ValueError):
        SimConfig(**bad)


def test_load_config_rejects_non_object(tmp_path):
    p = tmp_path / "run.json"
    p.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(p)
