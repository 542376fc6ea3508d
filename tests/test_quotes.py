from csvsniff.logic.quotes import guess_quote_and_delimiter

def test_delimiter_on_both_sides():
    sample = '"a","b","c"\n"1","2","3"\n'
    assert guess_quote_and_delimiter(sample, "\n") == (",", '"')

def test_quote_at_line_start():
    sample = "'name','age'\n'bob','30'\n'ann','25'\n"
    assert guess_quote_and_delimiter(sample, "\n") == (",", "'")

def test_quote_at_line_end():
    sample = "id;'label'\n1;'foo'\n2;'bar'\n"
    assert guess_quote_and_delimiter(sample, "\n") == (";", "'")

def test_whole_line_quoted_has_no_delimiter():
    sample = '"only one"\n"column here"\n'
    assert guess_quote_and_delimiter(sample, "\n") == (None, '"')

def test_no_quotes():
    assert guess_quote_and_delimiter("a,b\n1,2\n", "\n") == (None, None)

def test_patterns_do_not_cross_lines():
    # Quote blocks never span the terminator, so nothing matches here
    sample = 'a,"b\nc",d\n'
    assert guess_quote_and_delimiter(sample, "\n") == (None, None)

def test_allowed_delimiters_filter_votes():
    sample = '"a"|"b"|"c"\n"1"|"2"|"3"\n'
    assert guess_quote_and_delimiter(sample, "\n") == ("|", '"')
    delimiter, quote = guess_quote_and_delimiter(sample, "\n", frozenset({",", ";"}))
    assert delimiter is None
    assert quote == '"'

def test_crlf_sample():
    sample = '"x";"y"\r\n"1";"2"\r\n'
    assert guess_quote_and_delimiter(sample, "\r\n") == (";", '"')
