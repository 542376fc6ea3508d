import argparse
import runpy
import sys
from pathlib import Path
import pytest
from main import build_options, _unescape, NEWLINE_NAMES

def _args(**overrides):
    defaults = {"newline": None, "delimiter": None, "quote": None, "header": None}
    defaults.update(overrides)
    return argparse.Namespace(**defaults)

def test_no_flags_leave_everything_to_detection():
    options = build_options(_args())
    assert options.model_fields_set == set()
    assert options.quote_char_given is False

def test_flags_map_to_options():
    options = build_options(_args(newline="crlf", delimiter="\\t", quote="", header=False))
    assert options.newline_str == NEWLINE_NAMES["crlf"] == "\r\n"
    assert options.delimiter == "\t"
    assert options.quote_char == ""
    assert options.quote_char_given is True
    assert options.has_header is False

MAIN_PATH = Path(__file__).resolve().parent.parent / "main.py"

def _run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    runpy.run_path(str(MAIN_PATH), run_name="__main__")

def test_unescape_only_touches_backslash_escapes():
    assert _unescape("\\t") == "\t"
    assert _unescape("\\\\") == "\\"
    assert _unescape("§") == "§"
    assert _unescape(",;\\t") == ",;\t"

def test_non_ascii_delimiter_flag():
    options = build_options(_args(delimiter="§"))
    assert options.delimiter == "§"

def test_cli_invalid_delimiter_exits_cleanly(tmp_path, monkeypatch):
    csv_file = tmp_path / "data.csv"
    csv_file.write_text("a,b\n1,2\n")
    with pytest.raises(SystemExit) as exc:
        _run_cli(monkeypatch, str(csv_file), "--delimiter", ",,")
    assert exc.value.code == 1

def test_cli_preview_with_wide_integers(tmp_path, monkeypatch, capsys):
    csv_file = tmp_path / "accounts.csv"
    csv_file.write_text("n,v\n1,99999999999999999999999\n2,3\n")
    _run_cli(monkeypatch, str(csv_file))
    out = capsys.readouterr().out
    assert "99999999999999999999999" in out
