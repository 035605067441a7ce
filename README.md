# sigconv

`sigconv` turns a binary signal (a string of `0` and `1`) into one of two
ternary line codes:

- **4B3T**: every 4-bit block becomes three symbols from {-1, 0, +1}. One code
  table is used while the running sum is positive, the other while it is zero
  or negative.
- **FOMOT**: four code tables, one for each running sum from -1 to 2.

The input is split into 4-bit blocks. Spaces are ignored, trailing bits that do
not fill a whole block are dropped with a warning, and the block list is padded
with zero blocks to a multiple of four.

## Installation

```
pip install .
```

## Interactive use

```
sigconv
```

This opens a menu in the terminal. Use the up and down arrow keys to move,
Enter to choose an item and Escape to leave the program. The items are:

1. Convert to 4B3T
2. Convert to FOMOT
3. Switch console/file output
4. Set input path (default `in.txt`; only accepted if the path exists)
5. Set output path (default `out.txt`; its directory is created if needed)
0. Exit

What each conversion does depends on the output setting:

- **Console mode** (the default): the signal is typed on one line. You are
  asked for a starting sum (-2 to 3 for 4B3T, -1 to 2 for FOMOT; anything else
  keeps the current value). FOMOT prints its result to the terminal; 4B3T
  writes its result to the output path.
- **File mode**: the signal is read from the input path and the result is
  written to the output path. FOMOT still asks for a starting sum; 4B3T uses
  the current one.

The command takes no options other than `--help`.

## Use as a library

```python
from sigconv.sigblocks import parse_blocks
from sigconv.fourbthreet import Conv4B3T
from sigconv.fomot import ConvFOMOT

blocks = parse_blocks("0000000100100011")

conv = Conv4B3T()
symbols = conv.convert(0, blocks)   # list of (a, b, c) triples
print(conv.render(symbols))

fomot = ConvFOMOT()
fomot.convert_to_file(0, blocks, "out.txt")
```

Other pieces:

- `sigconv.sigblocks.Signal` holds a list of block values; `load_text`,
  `read(stdin, stdout)` and `fread(path)` fill it, `format_lines` and
  `display(stream)` show it in rows of four blocks.
- `Converter.convert_to_console(start_mode, blocks, stream)` writes the
  coloured listing to a stream.
- `sigconv.keys.read_key` reads one key press; `decode_key` decodes the bytes
  of one.
- `sigconv.bits` has `get_bit`, `set_bit`, `clear_bit` and `clear_console`.
- `sigconv.settings.Settings` holds the input and output paths, the starting
  sum and the output mode.

Errors:

- A signal with characters other than `0`, `1` and spaces, or an unreadable
  signal file, raises `sigconv.sigblocks.SignalError`.
- A starting sum outside a code's tables, a block value outside 0-15, or an
  output file that cannot be opened raises
  `sigconv.converter.ConversionError`.

## What it does not do

There is no decoder: ternary symbols cannot be turned back into a binary
signal. There is also no graphical drawing of the signal; it is shown only as
text.

## Running the tests

```
pip install .[test]
pytest
```