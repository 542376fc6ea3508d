import numpy as np
from typing import List
from csvsniff.data.constants import HEADER_TYPE_MISMATCH_VOTE, HEADER_LENGTH_TOLERANCE
from csvsniff.models import ColumnType, HeaderVote, TypeProfile
from csvsniff.utils import get_logger

logger = get_logger(__name__)

def get_lengths(rows: List[List[str]]) -> List[List[int]]:
    """Per column, the field lengths of every row after the first with row 0's width."""
    if not rows:
        return []
    width = len(rows[0])
    lengths: List[List[int]] = [[] for _ in range(width)]
    for row in rows[1:]:
        if len(row) != width:
            continue
        for i, value in enumerate(row):
            lengths[i].append(len(value))
    return lengths

def _column_vote(header_value: str, first_type: ColumnType, tail_type: ColumnType, lengths: List[int]) -> int:
    if first_type != tail_type and first_type == ColumnType.STRING:
        return HEADER_TYPE_MISMATCH_VOTE
    if not lengths:
        return -1
    # Note: the tolerance is scaled by the variance, not the standard deviation
    avg = np.mean(lengths)
    variance = np.var(lengths)
    if abs(len(header_value) - avg) > HEADER_LENGTH_TOLERANCE * variance:
        return 1
    return -1

def vote_header(rows: List[List[str]], types: TypeProfile, lengths: List[List[int]]) -> HeaderVote:
    """
    Lets every column vote on row 0 being a header.
    A string header above a numeric column votes strongly in favour. Otherwise
    the header length is compared with the lengths in the rest of the column:
    far from the average votes +1, close to it votes -1.
    """
    logger.info("Stage 4: Voting on header presence...")
    if not rows:
        return HeaderVote(has_header=False, vote=0, types=types.all)

    vote = 0
    for i, value in enumerate(rows[0]):
        vote += _column_vote(value, types.first[i], types.tail[i], lengths[i])

    has_header = vote > 0
    logger.info(f"Header vote total {vote}: has_header={has_header}")
    return HeaderVote(has_header=has_header, vote=vote, types=types.tail if has_header else types.all)
