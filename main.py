import re
from pydantic import ValidationError
from csvsniff.sniffer import CSVSniffer, to_dataframe
from csvsniff.models import SniffOptions
from csvsniff.errors import NoNewlineFoundError
from csvsniff.utils import get_logger
from csvsniff.data.constants import SNIFF_SAMPLE_SIZE, PREVIEW_ROWS

logger = get_logger(__name__)

NEWLINE_NAMES = {"crlf": "\r\n", "lfcr": "\n\r", "lf": "\n", "cr": "\r"}
SHELL_ESCAPES = {"\\t": "\t", "\\n": "\n", "\\r": "\r", "\\\\": "\\"}
ESCAPE_PATTERN = re.compile(r"\\[tnr\\]")

def _unescape(value):
    # Lets a shell user type \t for a tab delimiter; other characters pass through
    if value is None:
        return None
    return ESCAPE_PATTERN.sub(lambda m: SHELL_ESCAPES[m.group(0)], value)

def build_options(args) -> SniffOptions:
    options = {}
    if args.newline:
        options["newline_str"] = NEWLINE_NAMES[args.newline]
    if args.delimiter is not None:
        options["delimiter"] = _unescape(args.delimiter)
    if args.quote is not None:
        options["quote_char"] = args.quote
    if args.header is not None:
        options["has_header"] = args.header
    return SniffOptions(**options)

if __name__ == "__main__":

    import argparse
    import os
    import sys

    parser = argparse.ArgumentParser(description='csvsniff - Delimited Text Dialect Sniffer')
    parser.add_argument('file', help='Path to the delimited text file to sniff')
    parser.add_argument('--newline', choices=sorted(NEWLINE_NAMES), help='Line terminator, skips newline detection')
    parser.add_argument('--delimiter', help='Field delimiter (escapes like \\t allowed)')
    parser.add_argument('--quote', help="Quote character, '' for an unquoted file")
    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument('--header', dest='header', action='store_true', default=None, help='First row is a header')
    header_group.add_argument('--no-header', dest='header', action='store_false', help='First row is data')
    parser.add_argument('--allowed-delimiters', help='Characters auto-detection may choose from, e.g. ",;\\t"')
    parser.add_argument('--sample-size', type=int, default=SNIFF_SAMPLE_SIZE, help='Number of characters to read')
    parser.add_argument('--json', action='store_true', help='Print the full result as JSON')
    args = parser.parse_args()

    if not os.path.exists(args.file):
        logger.error(f"File not found: {args.file}")
        sys.exit(1)

    logger.info(f"Reading the first {args.sample_size} characters of {args.file}")
    with open(args.file, 'r', encoding='utf-8', errors='replace', newline='') as f:
        sample = f.read(args.sample_size)

    allowed = _unescape(args.allowed_delimiters)
    sniffer = CSVSniffer(allowed if allowed else None)

    try:
        result = sniffer.sniff(sample, build_options(args))
    except (NoNewlineFoundError, ValidationError) as e:
        logger.error(str(e))
        sys.exit(1)

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
        sys.exit(0)

    print("\n--- Dialect ---")
    print(f"newline:   {result.newline_str!r}")
    print(f"delimiter: {result.delimiter!r}")
    print(f"quote:     {result.quote_char!r}")
    print(f"header:    {result.has_header}")
    print(f"types:     {[t.value for t in result.types]}")
    for warning in result.warnings:
        print(f"[!] {warning}")

    print("\n--- Preview ---")
    print(to_dataframe(result).head(PREVIEW_ROWS))
