import pytest
from csvsniff.logic.parser import parse_sample

def test_unquoted_split():
    rows = parse_sample("a,b,c\n1,2,3\n", "\n", ",", None)
    assert rows == [["a", "b", "c"], ["1", "2", "3"]]

def test_unquoted_drops_incomplete_last_line():
    rows = parse_sample("a,b\n1,2\n3,", "\n", ",", None)
    assert rows == [["a", "b"], ["1", "2"]]

def test_no_delimiter_gives_single_field_rows():
    assert parse_sample("1\n2\n", "\n", None, None) == [["1"], ["2"]]
    assert parse_sample('"a,b"\n"c"\n', "\n", None, '"') == [["a,b"], ["c"]]

def test_empty_quote_means_unquoted():
    assert parse_sample('"a",b\n', "\n", ",", "") == [['"a"', "b"]]

def test_quoted_delimiter_is_kept():
    rows = parse_sample('"x, y",z\n"1",2\n', "\n", ",", '"')
    assert rows == [["x, y", "z"], ["1", "2"]]

def test_quoted_newline_is_kept():
    rows = parse_sample('"line\nbreak",1\nb,2\n', "\n", ",", '"')
    assert rows == [["line\nbreak", "1"], ["b", "2"]]

def test_escaped_quote_and_delimiter():
    rows = parse_sample('a\\"b,c\\,d\n', "\n", ",", '"')
    assert rows == [['a"b', "c,d"]]

def test_escape_survives_multi_char_newline():
    # Only the escaped "\r" is literal; the following "\n" is plain text
    rows = parse_sample("a\\\r\nb,c\r\n", "\r\n", ",", '"')
    assert rows == [["a\r\nb", "c"]]

def test_trailing_partial_row_is_discarded():
    rows = parse_sample("'a','b'\n'1','2", "\n", ",", "'")
    assert rows == [["a", "b"]]

def test_unterminated_quote_discards_rest():
    rows = parse_sample('a,b\n"open,1\n2,3\n', "\n", ",", '"')
    assert rows == [["a", "b"]]

def test_blank_line_in_quoted_mode():
    rows = parse_sample('"a",b\n\n"c",d\n', "\n", ",", '"')
    assert rows == [["a", "b"], [], ["c", "d"]]

@pytest.mark.parametrize("line", [
    'a,b,c',
    '"a,b",c',
    'a\\,b,c,',
    '"",""',
    '"x""y",z',
])
def test_field_count_follows_unquoted_delimiters(line):
    rows = parse_sample(line + "\n", "\n", ",", '"')
    unquoted = 0
    inside = False
    escaped = False
    for ch in line:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            inside = not inside
        elif ch == "," and not inside:
            unquoted += 1
    assert len(rows[0]) == unquoted + 1
