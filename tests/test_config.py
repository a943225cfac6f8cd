import pytest
from pydantic import ValidationError

from gamestamps.config import FullConfig, GeneratorCfg, load_config
from gamestamps.eval.checks import offsets_strictly_increasing
from gamestamps.generation.rng import SeededUniform
from gamestamps.generation.stamps import generate_freeform


def test_defaults():
    cfg = FullConfig()
    assert cfg.seed == 1234
    assert cfg.generator.count == 50000
    assert cfg.generator.max_offset_step == 3
    assert cfg.generator.score_change_probability == 0.0001
    assert cfg.generator.home_score_probability == 0.45


def test_load_yaml(tmp_path):
    p = tmp_path / "gen.yaml"
    p.write_text("seed: 7\ngenerator:\n  count: 300\n  max_offset_step: 5\n")
    cfg = load_config(str(p))
    assert cfg.seed == 7
    assert cfg.generator.count == 300
    assert cfg.generator.home_score_probability == 0.45


def test_empty_yaml_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(str(p)) == FullConfig()


@pytest.mark.parametrize("bad", [
    {"max_offset_step": 0},
    {"score_change_probability": 1.5},
    {"home_score_probability": -0.1},
])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValidationError):
        GeneratorCfg(**bad)


def test_generator_accepts_config_fields():
    cfg = FullConfig(generator=GeneratorCfg(count=400, max_offset_step=7))
    seq = generate_freeform(SeededUniform(cfg.seed), **cfg.generator.model_dump())
    assert len(seq) == 400
    assert offsets_strictly_increasing(seq)
    assert seq.last.offset <= 399 * 7
