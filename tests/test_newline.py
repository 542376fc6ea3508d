import pytest
from csvsniff.logic.newline import detect_newline, resolve_newline, line_lengths
from csvsniff.errors import NoNewlineFoundError

@pytest.mark.parametrize("newline", ["\r\n", "\n\r", "\n", "\r"])
def test_single_terminator_wins(newline):
    sample = newline.join(["a,b", "1,2", "3,4"]) + newline
    assert detect_newline(sample) == newline

def test_crlf_does_not_leak_into_lf_or_cr():
    """Each \\r\\n also counts as a \\n and a \\r; those must be discarded."""
    sample = "h1;h2\r\n" + "".join(f"{i};{i * 2}\r\n" for i in range(20))
    assert detect_newline(sample) == "\r\n"

def test_one_occurrence_is_enough():
    assert detect_newline("a,b\n1,2") == "\n"

def test_no_terminator_returns_none():
    assert detect_newline("a,b,c") is None

def test_resolve_newline_raises_without_terminator():
    with pytest.raises(NoNewlineFoundError):
        resolve_newline("just one line")

def test_few_lines_largest_count_wins():
    # 3 lines by "\n", 2 lines by "\r"; neither passes the threshold
    sample = "a\nb\rc\n"
    assert detect_newline(sample) == "\n"

def test_many_lines_consistency_decides():
    """
    Both terminators split the sample into many lines, but only the \\n split
    gives lines of equal length.
    """
    row = "ab\rcd\ref\rgh\n"
    sample = row * 6
    # "\r" splits into short uneven pieces ("ab", "cd", "ef", "gh\nab", ...)
    assert detect_newline(sample) == "\n"

def test_line_lengths_include_trailing_fragment():
    assert line_lengths("ab\ncde\n", "\n") == [2, 3, 0]
