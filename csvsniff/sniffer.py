import pandas as pd
from typing import Any, Dict, Iterable, Optional, Union, FrozenSet
from csvsniff.data.constants import QUOTE_CHARS, INT64_MIN, INT64_MAX
from csvsniff.logic.newline import resolve_newline
from csvsniff.logic.quotes import guess_quote_and_delimiter
from csvsniff.logic.frequency import guess_delimiter
from csvsniff.logic.parser import parse_sample
from csvsniff.logic.types import get_types, parse_number, parse_integer
from csvsniff.logic.header import get_lengths, vote_header
from csvsniff.models import ColumnType, SniffOptions, SniffResult
from csvsniff.utils import get_logger

logger = get_logger(__name__)

class CSVSniffer:
    """
    Infers the dialect of a delimited text sample (newline, delimiter, quote),
    whether its first row is a header, and the type of every column.

    Modelled after the Python csv.Sniffer, but sniff and has_header are done in
    one pass, the newline is detected too, and the caller can pin any of the
    dialect parts so only the rest is guessed.
    """

    def __init__(self, delimiters: Optional[Iterable[str]] = None):
        self._delimiters: Optional[FrozenSet[str]] = frozenset(delimiters) if delimiters is not None else None

    @property
    def delimiters(self) -> Optional[FrozenSet[str]]:
        """Delimiters auto-detection may propose; None allows any ASCII character."""
        return self._delimiters

    def sniff(self, sample: str, options: Union[SniffOptions, Dict[str, Any], None] = None, **kwargs) -> SniffResult:
        """
        Sniffs the sample. Options that are not provided are auto-detected;
        when auto-detection fails the delimiter and quote stay None.
        A supplied delimiter is always kept, but a warning is added when the
        quoted fields in the sample suggest another one.
        Raises NoNewlineFoundError when the sample has no line terminator.
        """
        opts = self._coerce_options(options, kwargs)
        warnings = []

        newline = opts.newline_str or resolve_newline(sample)

        guessed_delim, guessed_quote = guess_quote_and_delimiter(sample, newline, self._delimiters)
        valid_quote = guessed_quote if guessed_quote in QUOTE_CHARS else None

        delimiter = opts.delimiter
        if opts.quote_char_given:
            quote = opts.quote_char
        else:
            quote = valid_quote

        if valid_quote and guessed_delim:
            if delimiter is None:
                delimiter = guessed_delim
            elif delimiter != guessed_delim:
                msg = (f"Difference found in delimiters. User proposed {delimiter!r} "
                       f"but we believe it should be {guessed_delim!r}")
                logger.warning(msg)
                warnings.append(msg)

        if delimiter is None:
            delimiter = guess_delimiter(sample, newline, self._delimiters)

        logger.info(f"Stage 3: Parsing sample with delimiter={delimiter!r}, quote={quote!r}...")
        rows = parse_sample(sample, newline, delimiter, quote)
        types = get_types(rows)

        if opts.has_header is None:
            decision = vote_header(rows, types, get_lengths(rows))
            has_header, column_types = decision.has_header, decision.types
        else:
            has_header = opts.has_header
            column_types = types.tail if has_header else types.all

        labels = rows[0] if has_header and rows else None
        records = rows[1:] if has_header else rows

        return SniffResult(
            newline_str=newline,
            delimiter=delimiter,
            quote_char=quote,
            has_header=has_header,
            warnings=warnings,
            types=column_types,
            labels=labels,
            records=records,
        )

    def sniff_frame(self, sample: str, options: Union[SniffOptions, Dict[str, Any], None] = None, **kwargs) -> pd.DataFrame:
        """Sniffs the sample and loads the parsed records into a DataFrame."""
        return to_dataframe(self.sniff(sample, options, **kwargs))

    @staticmethod
    def _coerce_options(options, kwargs) -> SniffOptions:
        if isinstance(options, SniffOptions):
            if kwargs:
                return SniffOptions(**{**options.model_dump(exclude_unset=True), **kwargs})
            return options
        return SniffOptions(**{**(options or {}), **kwargs})

def to_dataframe(result: SniffResult) -> pd.DataFrame:
    """
    Builds a DataFrame from the sniffed records.
    Labels become the column names (positions when there is no header), rows
    with a different width are skipped and numeric columns are converted.
    """
    width = len(result.labels) if result.labels is not None else len(result.types)
    rows = [r for r in result.records if len(r) == width]
    if len(rows) != len(result.records):
        logger.warning(f"Skipped {len(result.records) - len(rows)} rows with a deviating number of fields.")

    columns = result.labels if result.labels is not None else list(range(width))
    df = pd.DataFrame(rows, columns=columns)

    # Positional, labels may repeat
    for i, col_type in enumerate(result.types[:width]):
        if col_type == ColumnType.STRING:
            continue
        column = df.iloc[:, i]
        if col_type == ColumnType.FLOAT:
            df.isetitem(i, column.map(parse_number).astype("float64"))
            continue
        ints = [parse_integer(v) for v in column]
        if all(INT64_MIN <= v <= INT64_MAX for v in ints):
            df.isetitem(i, pd.Series(ints, index=df.index, dtype="int64"))
        else:
            # Too wide for int64, keep exact Python ints
            df.isetitem(i, pd.Series(ints, index=df.index, dtype="object"))
    return df
