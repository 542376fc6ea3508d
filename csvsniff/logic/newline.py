import numpy as np
from typing import Dict, List, Optional
from csvsniff.data.constants import NEWLINE_CANDIDATES, NEWLINE_MIN_LINES
from csvsniff.errors import NoNewlineFoundError
from csvsniff.utils import get_logger

logger = get_logger(__name__)

def line_lengths(sample: str, newline: str) -> List[int]:
    """
    Lengths of the lines the given terminator would produce.
    The final unterminated fragment (possibly empty) counts as a line too,
    so a terminator that never occurs yields exactly one line.
    """
    return [len(line) for line in sample.split(newline)]

def _eliminate_substring_matches(counts: Dict[str, int]):
    # Every "\r\n" or "\n\r" also registers as a "\n" and a "\r".
    for double in ("\r\n", "\n\r"):
        if counts[double] <= 1:
            continue
        for single in ("\n", "\r"):
            if counts[single] == counts[double]:
                counts[single] = 0

def _consistency_score(lengths: List[int]) -> float:
    """Mean absolute deviation of the line lengths relative to the mean length."""
    arr = np.asarray(lengths, dtype=float)
    mean = arr.mean()
    if mean == 0:
        return float("inf")
    return float(np.abs(arr - mean).sum() / len(arr) / mean)

def detect_newline(sample: str) -> Optional[str]:
    """
    Finds the most probable line terminator of the sample, or None.
    Algorithm:
    1. Count the lines each candidate produces and drop spurious single-char matches.
    2. A sole surviving candidate wins.
    3. Otherwise prefer candidates with more than NEWLINE_MIN_LINES lines; without
       any, the largest line count wins (declaration order breaks ties).
    4. Several frequent candidates are scored on line length consistency.
    """
    logger.info("Stage 1: Detecting newline...")
    lengths = {nl: line_lengths(sample, nl) for nl in NEWLINE_CANDIDATES}
    counts = {nl: len(lengths[nl]) for nl in NEWLINE_CANDIDATES}
    _eliminate_substring_matches(counts)
    logger.debug(f"Newline line counts: {counts!r}")

    candidates = [nl for nl in NEWLINE_CANDIDATES if counts[nl] > 1]
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    frequent = [nl for nl in candidates if counts[nl] > NEWLINE_MIN_LINES]
    if not frequent:
        # max() keeps the first of equal counts, i.e. declaration order
        return max(candidates, key=lambda nl: counts[nl])
    if len(frequent) == 1:
        return frequent[0]

    scores = {nl: _consistency_score(lengths[nl]) for nl in frequent}
    logger.debug(f"Newline consistency scores: {scores!r}")
    return min(frequent, key=lambda nl: scores[nl])

def resolve_newline(sample: str) -> str:
    """Like detect_newline, but a sample without any terminator is fatal."""
    newline = detect_newline(sample)
    if newline is None:
        raise NoNewlineFoundError()
    logger.info(f"Newline detected: {newline!r}")
    return newline
