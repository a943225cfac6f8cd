from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator
import numpy as np

from gamestamps.constants import INITIAL_AWAY, INITIAL_HOME, KICKOFF_OFFSET

@dataclass(frozen=True, slots=True)
class Score:
    home: int
    away: int

    def __add__(self, other: Score) -> Score:
        return Score(self.home + other.home, self.away + other.away)

ZERO_SCORE = Score(INITIAL_HOME, INITIAL_AWAY)

@dataclass(frozen=True, slots=True)
class GameStamp:
    offset: int             # elapsed time units since kickoff
    score: Score            # valid from `offset` onward

KICKOFF = GameStamp(KICKOFF_OFFSET, ZERO_SCORE)

@dataclass(frozen=True, slots=True)
class StampSequence:
    """Read-only run of stamps ordered by offset. Ordering is not re-checked here."""
    stamps: tuple[GameStamp, ...] = ()
    offsets: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        stamps = tuple(self.stamps)
        object.__setattr__(self, "stamps", stamps)
        offsets = np.fromiter((s.offset for s in stamps), dtype=np.int64, count=len(stamps))
        offsets.flags.writeable = False
        object.__setattr__(self, "offsets", offsets)

    def __len__(self) -> int:
        return len(self.stamps)

    def __iter__(self) -> Iterator[GameStamp]:
        return iter(self.stamps)

    def __getitem__(self, i: int) -> GameStamp:
        return self.stamps[i]

    def __bool__(self) -> bool:
        return bool(self.stamps)

    @property
    def last(self) -> GameStamp:
        return self.stamps[-1]
