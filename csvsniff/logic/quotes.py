import re
from collections import Counter
from typing import AbstractSet, List, NamedTuple, Optional, Tuple
from csvsniff.data.constants import QUOTE_CHARS
from csvsniff.utils import get_logger

logger = get_logger(__name__)

class QuotePattern(NamedTuple):
    name: str
    regex: re.Pattern
    delim_group: Optional[int]
    quote_group: int

def build_patterns(newline: str) -> List[QuotePattern]:
    """
    Builds the four structural patterns in priority order.
    None of them may cross a line: quoted content, surrounding whitespace and
    delimiter candidates all exclude the newline characters.
    """
    nl_chars = "".join(re.escape(c) for c in dict.fromkeys(newline))
    quotes = "".join(re.escape(q) for q in QUOTE_CHARS)
    nl = re.escape(newline)

    delim = f"([^{nl_chars}{quotes}])"
    quote = f"([{quotes}])"
    content = f"[^{nl_chars}]*?"
    space = f"[^\\S{nl_chars}]*?"
    line_start = f"(?:\\A|(?<={nl}))"
    line_end = f"(?={nl}|\\Z)"

    return [
        # ,'text',
        QuotePattern("delimited", re.compile(f"{delim}{space}{quote}{content}\\2{space}\\1"), 1, 2),
        # 'text', at the start of a line
        QuotePattern("leading", re.compile(f"{line_start}{space}{quote}{content}\\1{space}{delim}"), 2, 1),
        # ,'text' at the end of a line
        QuotePattern("trailing", re.compile(f"{delim}{space}{quote}{content}\\2{space}{line_end}"), 1, 2),
        # 'text' as the whole line
        QuotePattern("whole_line", re.compile(f"{line_start}{space}{quote}{content}\\1{space}{line_end}"), None, 1),
    ]

def _first_matching_pattern(sample: str, patterns: List[QuotePattern]) -> List[Tuple[Optional[str], str]]:
    for pattern in patterns:
        matches = []
        for m in pattern.regex.finditer(sample):
            d = m.group(pattern.delim_group) if pattern.delim_group else None
            matches.append((d, m.group(pattern.quote_group)))
        if matches:
            logger.debug(f"Quote pattern '{pattern.name}' produced {len(matches)} matches.")
            return matches
    return []

def guess_quote_and_delimiter(sample: str, newline: str, delimiters: Optional[AbstractSet[str]] = None) -> Tuple[Optional[str], Optional[str]]:
    """
    Looks for text enclosed between two identical quotes, preceded and/or
    followed by the probable delimiter, e.g.  ,'some text',
    The patterns are tried in priority order and the first one with any match
    over the whole sample is used. The most voted delimiter and quote win,
    the earliest seen breaking ties.
    Returns (delimiter, quote); (None, None) when nothing matched.
    """
    logger.info("Stage 2a: Guessing quote and delimiter from quoted fields...")
    matches = _first_matching_pattern(sample, build_patterns(newline))
    if not matches:
        logger.info("No quoted fields found.")
        return None, None

    delim_votes: Counter = Counter()
    quote_votes: Counter = Counter()
    for d, q in matches:
        if d is not None and (delimiters is None or d in delimiters):
            delim_votes[d] += 1
        quote_votes[q] += 1

    # most_common() keeps insertion order among equal counts
    delimiter = delim_votes.most_common(1)[0][0] if delim_votes else None
    quote = quote_votes.most_common(1)[0][0]

    if delimiter is not None and delimiter in newline:
        # This is probably a one column file
        delimiter = None

    logger.info(f"Quote pattern guess: delimiter={delimiter!r}, quote={quote!r}")
    return delimiter, quote
