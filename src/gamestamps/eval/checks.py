from __future__ import annotations
from typing import Iterable, List
import numpy as np

from gamestamps.state import KICKOFF, StampSequence

def offsets_strictly_increasing(seq: StampSequence) -> bool:
    return bool(np.all(np.diff(seq.offsets) > 0))

def scores_non_decreasing(seq: StampSequence) -> bool:
    """Neither side's score ever goes down from one stamp to the next."""
    if len(seq) < 2:
        return True
    home = np.array([s.score.home for s in seq], dtype=np.int64)
    away = np.array([s.score.away for s in seq], dtype=np.int64)
    return bool(np.all(np.diff(home) >= 0) and np.all(np.diff(away) >= 0))

def starts_at_kickoff(seq: StampSequence) -> bool:
    return not seq or seq[0] == KICKOFF

def missing_offsets(seq: StampSequence, offsets: Iterable[int]) -> List[int]:
    """Positive `offsets` with no stamp recorded exactly there."""
    wanted = np.array(sorted({int(o) for o in offsets if o > 0}), dtype=np.int64)
    return wanted[~np.isin(wanted, seq.offsets)].tolist()

def present_offsets(seq: StampSequence, offsets: Iterable[int]) -> List[int]:
    wanted = np.array(sorted({int(o) for o in offsets if o > 0}), dtype=np.int64)
    return wanted[np.isin(wanted, seq.offsets)].tolist()

def score_change_count(seq: StampSequence) -> int:
    return sum(1 for a, b in zip(seq.stamps, seq.stamps[1:]) if a.score != b.score)
