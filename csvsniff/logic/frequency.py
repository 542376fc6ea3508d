from collections import Counter
from typing import AbstractSet, Dict, List, Optional
from csvsniff.data.constants import (
    ASCII_TABLE_SIZE, CONSISTENCY_START, CONSISTENCY_STEP, CONSISTENCY_FLOOR,
    PREFERRED_DELIMITERS
)
from csvsniff.utils import get_logger

logger = get_logger(__name__)

def terminated_lines(sample: str, newline: str) -> List[str]:
    """Lines that end with the terminator; an unterminated tail is not a line."""
    return sample.split(newline)[:-1]

def build_ascii_tables(lines: List[str]) -> List[List[int]]:
    """One occurrence table per line, indexed by ASCII code."""
    tables = []
    for line in lines:
        table = [0] * ASCII_TABLE_SIZE
        for ch in line:
            code = ord(ch)
            if code < ASCII_TABLE_SIZE:
                table[code] += 1
        tables.append(table)
    return tables

def build_meta_frequencies(tables: List[List[int]]) -> List[Counter]:
    """
    For every character: how many lines had exactly k occurrences of it.
    e.g. ',' occurred 5 times in 10 rows, 6 times in 1000 rows.
    """
    return [Counter(table[code] for table in tables) for code in range(ASCII_TABLE_SIZE)]

def calculate_modes(meta: List[Counter]) -> Dict[int, int]:
    """
    Mode per character: the highest meta-frequency minus the sum of all the
    others (2 * max - sum). A character occurring equally often on every line
    scores the number of lines. Characters whose most common occurrence count
    is zero cannot be delimiters and are left out.
    """
    modes = {}
    for code, freq_table in enumerate(meta):
        # the lowest occurrence count wins ties on meta-frequency
        expected, max_meta = max(sorted(freq_table.items()), key=lambda kv: kv[1])
        if expected == 0:
            continue
        mode = 2 * max_meta - sum(freq_table.values())
        if mode > 0:
            modes[code] = mode
    return modes

def _pick_preferred(candidates: List[str]) -> str:
    for d in PREFERRED_DELIMITERS:
        if d in candidates:
            return d
    # We still found no apparent winner, take the first one
    return candidates[0]

def guess_delimiter(sample: str, newline: str, delimiters: Optional[AbstractSet[str]] = None) -> Optional[str]:
    """
    Guesses the delimiter from per-line character frequencies.
    The delimiter should occur the same number of times on each row, but
    malformed data may break that, so the required consistency starts at
    CONSISTENCY_START and is relaxed step by step until a candidate appears
    or CONSISTENCY_FLOOR is reached.
    """
    logger.info("Stage 2b: Guessing delimiter from character frequencies...")
    lines = terminated_lines(sample, newline)
    if not lines:
        logger.info("No complete lines to analyse.")
        return None

    modes = calculate_modes(build_meta_frequencies(build_ascii_tables(lines)))
    total = len(lines)

    candidates: List[str] = []
    step = 0
    consistency = CONSISTENCY_START
    while not candidates and consistency > CONSISTENCY_FLOOR:
        for code, mode in modes.items():
            ch = chr(code)
            if delimiters is not None and ch not in delimiters:
                continue
            if mode / total >= consistency:
                candidates.append(ch)
        step += 1
        consistency = round(CONSISTENCY_START - step * CONSISTENCY_STEP, 10)

    if not candidates:
        logger.info("No consistent delimiter candidate found.")
        return None

    logger.debug(f"Delimiter candidates {candidates!r} at consistency {consistency + CONSISTENCY_STEP:.2f}")
    delimiter = candidates[0] if len(candidates) == 1 else _pick_preferred(candidates)
    logger.info(f"Frequency guess: delimiter={delimiter!r}")
    return delimiter
