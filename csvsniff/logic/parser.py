from typing import List, Optional
from csvsniff.data.constants import ESCAPE_CHAR
from csvsniff.utils import get_logger

logger = get_logger(__name__)

def _split_unquoted(sample: str, newline: str, delimiter: Optional[str]) -> List[List[str]]:
    # The last fragment is either empty or an incomplete line
    lines = sample.split(newline)[:-1]
    if not delimiter:
        return [[line] for line in lines]
    return [line.split(delimiter) for line in lines]

def _split_quoted(sample: str, newline: str, delimiter: Optional[str], quote: str) -> List[List[str]]:
    """
    Walks over the sample remembering whether we are inside quotes (a small
    state machine), so delimiters and newlines within quoted fields are kept.
    Whitespace between delimiters and quotes is kept in the values; that does
    not matter for the statistics.
    """
    rows: List[List[str]] = []
    row: List[str] = []
    field: List[str] = []
    inside_quotes = False
    escape = False
    nl_len = len(newline)
    i = 0
    n = len(sample)

    while i < n:
        ch = sample[i]
        if escape:
            field.append(ch)
            escape = False
            i += 1
            continue
        if ch == ESCAPE_CHAR:
            escape = True
            i += 1
            continue
        if ch == quote:
            inside_quotes = not inside_quotes
            i += 1
            continue
        if not inside_quotes:
            if sample.startswith(newline, i):
                # A blank line closes an empty row
                if field or row:
                    row.append("".join(field))
                rows.append(row)
                row, field = [], []
                i += nl_len
                continue
            if ch == delimiter:
                row.append("".join(field))
                field = []
                i += 1
                continue
        field.append(ch)
        i += 1

    if field or row:
        logger.debug("Discarding unterminated trailing row.")
    return rows

def parse_sample(sample: str, newline: str, delimiter: Optional[str], quote: Optional[str]) -> List[List[str]]:
    """
    Splits the sample into rows of fields. Only lines closed by the newline
    are returned; a trailing partial line is dropped.
    A falsy quote means no quoting, a falsy delimiter yields single-field rows.
    """
    if not quote:
        rows = _split_unquoted(sample, newline, delimiter)
    else:
        rows = _split_quoted(sample, newline, delimiter, quote)
    logger.debug(f"Parsed {len(rows)} rows.")
    return rows
