from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional
import numpy as np

from gamestamps.constants import (DEFAULT_COUNT, DEFAULT_HOME_SCORE_PROBABILITY, DEFAULT_MAX_OFFSET_STEP,
                                  DEFAULT_SCORE_CHANGE_PROBABILITY)
from gamestamps.generation.rng import UniformSource
from gamestamps.state import KICKOFF, ZERO_SCORE, GameStamp, Score, StampSequence

log = logging.getLogger(__name__)

HOME_POINT = Score(1, 0)
AWAY_POINT = Score(0, 1)

# (natural offset, previous offset) -> offset to record
OffsetRule = Callable[[int, int], int]


def _positive_sorted(offsets: Iterable[int]) -> list[int]:
    return sorted({int(o) for o in offsets if o > 0})


def _next_stamp(rng: UniformSource, prev: GameStamp, max_offset_step: int,
                score_change_probability: float, home_score_probability: float) -> GameStamp:
    # draw order per stamp: change?, [home?], offset step
    delta = ZERO_SCORE
    if rng.next_uniform_double() > 1 - score_change_probability:
        delta = HOME_POINT if rng.next_uniform_double() > 1 - home_score_probability else AWAY_POINT
    step = int(np.floor(rng.next_uniform_double() * max_offset_step)) + 1
    return GameStamp(prev.offset + step, prev.score + delta)


def _generate(rng: UniformSource, count: int, max_offset_step: int, score_change_probability: float,
              home_score_probability: float, rule: Optional[OffsetRule] = None) -> StampSequence:
    if count <= 0:
        return StampSequence()
    stamps = [KICKOFF]
    for _ in range(1, count):
        prev = stamps[-1]
        stamp = _next_stamp(rng, prev, max_offset_step, score_change_probability, home_score_probability)
        if rule is not None:
            offset = rule(stamp.offset, prev.offset)
            if offset != stamp.offset:
                stamp = GameStamp(offset, stamp.score)
        stamps.append(stamp)
    log.debug("generated %d stamps, final %s at offset %d", len(stamps), stamps[-1].score, stamps[-1].offset)
    return StampSequence(stamps)


class ForcedOffsets:
    """Pulls a natural offset back onto the next requested offset once it has been reached."""

    def __init__(self, offsets: Iterable[int]):
        self.offsets = _positive_sorted(offsets)
        self.pos = 0

    def __call__(self, natural: int, previous: int) -> int:
        if self.pos < len(self.offsets) and self.offsets[self.pos] <= natural:
            natural = self.offsets[self.pos]
            self.pos += 1
        return natural

    @property
    def unplaced(self) -> list[int]:
        return self.offsets[self.pos:]


class ExcludedOffsets:
    """Steers natural offsets around a set of forbidden values."""

    def __init__(self, offsets: Iterable[int]):
        self.offsets = _positive_sorted(offsets)
        self.pos = 0

    def __call__(self, natural: int, previous: int) -> int:
        offs = self.offsets
        while self.pos < len(offs) and offs[self.pos] < natural:
            self.pos += 1
        if self.pos == len(offs) or offs[self.pos] != natural:
            return natural
        lowered = natural - 1
        if lowered > previous and (self.pos == 0 or offs[self.pos - 1] != lowered):
            # cursor stays put: the next stamp may land on `natural` again
            return lowered
        while self.pos < len(offs) and offs[self.pos] == natural:
            natural += 1
            self.pos += 1
        return natural


def generate_freeform(rng: UniformSource,
                      count: int = DEFAULT_COUNT,
                      max_offset_step: int = DEFAULT_MAX_OFFSET_STEP,
                      score_change_probability: float = DEFAULT_SCORE_CHANGE_PROBABILITY,
                      home_score_probability: float = DEFAULT_HOME_SCORE_PROBABILITY) -> StampSequence:
    """Random game of `count` stamps starting from kickoff.

    Each stamp advances the offset by 1..`max_offset_step`; with probability
    `score_change_probability` one side scores a point, the home side with
    probability `home_score_probability`.
    """
    return _generate(rng, count, max_offset_step, score_change_probability, home_score_probability)


def generate_with_forced_offsets(rng: UniformSource,
                                 count: int = DEFAULT_COUNT,
                                 max_offset_step: int = DEFAULT_MAX_OFFSET_STEP,
                                 score_change_probability: float = DEFAULT_SCORE_CHANGE_PROBABILITY,
                                 home_score_probability: float = DEFAULT_HOME_SCORE_PROBABILITY,
                                 desired_offsets: Iterable[int] = ()) -> StampSequence:
    """Like `generate_freeform`, but every positive offset in `desired_offsets` that the
    game reaches within `count` stamps is recorded verbatim. Offsets beyond reach are
    logged and left out."""
    rule = ForcedOffsets(desired_offsets)
    seq = _generate(rng, count, max_offset_step, score_change_probability, home_score_probability, rule)
    if count > 0 and rule.unplaced:
        log.warning("%d requested offsets beyond the last stamp at %d: %s",
                    len(rule.unplaced), seq.last.offset, rule.unplaced)
    return seq


def generate_with_excluded_offsets(rng: UniformSource,
                                   count: int = DEFAULT_COUNT,
                                   max_offset_step: int = DEFAULT_MAX_OFFSET_STEP,
                                   score_change_probability: float = DEFAULT_SCORE_CHANGE_PROBABILITY,
                                   home_score_probability: float = DEFAULT_HOME_SCORE_PROBABILITY,
                                   excluded_offsets: Iterable[int] = ()) -> StampSequence:
    """Like `generate_freeform`, but no stamp lands on a positive offset in `excluded_offsets`."""
    rule = ExcludedOffsets(excluded_offsets)
    return _generate(rng, count, max_offset_step, score_change_probability, home_score_probability, rule)
