import io
import re
import warnings

import pytest

from sigconv.sigblocks import Signal, SignalError, parse_blocks

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_parse_blocks_pads_to_four_blocks():
    assert parse_blocks("0101") == [5, 0, 0, 0]


@pytest.mark.parametrize("count", range(1, 10))
def test_parse_blocks_length_is_multiple_of_four(count):
    blocks = parse_blocks("1010" * count)
    assert len(blocks) % 4 == 0
    assert blocks[:count] == [10] * count


def test_parse_blocks_round_trips_bits():
    text = "0000000100100011010001010110011110001001101010111100110111101111"
    blocks = parse_blocks(text)
    assert blocks == list(range(16))
    assert "".join(f"{b:04b}" for b in blocks) == text


def test_parse_blocks_empty():
    assert parse_blocks("") == []


def test_parse_blocks_rejects_other_symbols():
    with pytest.raises(SignalError):
        parse_blocks("0120")


def test_parse_blocks_warns_and_drops_partial_block():
    with pytest.warns(UserWarning):
        blocks = parse_blocks("111101")
    assert blocks == [15, 0, 0, 0]


def test_parse_blocks_no_warning_for_whole_blocks():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert parse_blocks("1111") == [15, 0, 0, 0]


def test_load_text_ignores_spaces():
    signal = Signal()
    signal.load_text("1 1 1 1 0000")
    assert signal.blocks == [15, 0, 0, 0]


def test_read_from_console_replaces_blocks():
    signal = Signal(blocks=[1, 2, 3, 4])
    out = io.StringIO()
    signal.read(io.StringIO("\n1111 0001\n"), out)
    assert signal.blocks == [15, 1, 0, 0]
    assert "Enter signal" in out.getvalue()


def test_fread_reads_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("1000 0100", encoding="utf-8")
    signal = Signal()
    signal.fread(str(path))
    assert signal.blocks == [8, 4, 0, 0]


def test_fread_appends_to_existing_blocks(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("1111", encoding="utf-8")
    signal = Signal()
    signal.fread(str(path))
    signal.fread(str(path))
    assert signal.blocks == [15, 0, 0, 0, 15, 0, 0, 0]


def test_fread_missing_file(tmp_path):
    with pytest.raises(SignalError):
        Signal().fread(str(tmp_path / "absent.txt"))


def test_format_lines():
    signal = Signal()
    signal.load_text("0101" * 5)
    lines = signal.format_lines()
    assert lines[0] == "0:\t0101 0101 0101 0101 "
    assert lines[1].startswith("4:\t")
    assert len(lines) == 2


def test_display_shows_formatted_lines():
    signal = Signal()
    signal.load_text("11110000")
    out = io.StringIO()
    signal.display(out)
    plain = ANSI.sub("", out.getvalue())
    for line in signal.format_lines():
        assert line in plain
    assert "Signal Out" in plain