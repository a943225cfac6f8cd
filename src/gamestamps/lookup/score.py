from __future__ import annotations
import numpy as np

from gamestamps.state import ZERO_SCORE, Score, StampSequence

def get_score(sequence: StampSequence, offset: int) -> Score:
    """Score in effect at `offset`: that of the last stamp recorded at or before it.

    Non-positive offsets and empty sequences read as the kickoff score (0, 0);
    offsets at or past the final stamp read as the final score.
    """
    if offset <= 0 or not sequence:
        return ZERO_SCORE
    last = sequence.last
    if offset >= last.offset:
        return last.score
    idx = int(np.searchsorted(sequence.offsets, offset, side="right")) - 1
    if idx < 0:
        # hand-built sequences may open after kickoff
        return ZERO_SCORE
    return sequence[idx].score
