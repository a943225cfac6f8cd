from __future__ import annotations
from pydantic import BaseModel, Field
import yaml

from gamestamps.constants import (DEFAULT_COUNT, DEFAULT_HOME_SCORE_PROBABILITY, DEFAULT_MAX_OFFSET_STEP,
                                  DEFAULT_SCORE_CHANGE_PROBABILITY, DEFAULT_SEED)

class GeneratorCfg(BaseModel):
    count: int = DEFAULT_COUNT
    max_offset_step: int = Field(DEFAULT_MAX_OFFSET_STEP, ge=1)
    score_change_probability: float = Field(DEFAULT_SCORE_CHANGE_PROBABILITY, ge=0.0, le=1.0)
    home_score_probability: float = Field(DEFAULT_HOME_SCORE_PROBABILITY, ge=0.0, le=1.0)

class FullConfig(BaseModel):
    seed: int = DEFAULT_SEED
    generator: GeneratorCfg = GeneratorCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
