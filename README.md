# bcfileio

File helpers and a command-line option scanner for a Blowfish file
encryption tool. The package has no dependencies beyond the standard library.

## `bcfileio.rwfile`

- `Options`: a dataclass of processing settings. It has `remove`,
  `standardout`, `compression`, `type`, `origsize` and `securedelete`. Only
  `standardout` and `securedelete` change what the functions below do.
- `get_remain(size, divisor)`: returns the number of bytes that take `size`
  up to the next multiple of `divisor`. A size that is already a multiple
  gets a whole extra `divisor`.
- `pad_input(data)`: pads `data` with zero bytes to a multiple of the 8-byte
  cipher block. Empty data and data that is already aligned are returned
  unchanged.
- `attach_key(data, key)`: returns `data` with the key bytes appended.
- `read_file(path)`: returns the whole file as bytes. It raises `OSError`
  ("Unable to open file ...") if the file cannot be read.
- `write_file(path, data, options, mode)`: writes `data` to `path`. When
  `options.standardout` is set, it writes to standard output instead. After a
  file is written to disk, it applies the permission bits `mode` with
  `os.chmod`, unless `mode` is `None`. It raises `OSError` if the file cannot
  be created or fully written.
- `delete_file(path, options)`: removes the file. When
  `options.securedelete` is above zero, the start of the file is first
  overwritten with random 8-byte words (from `os.urandom`), once for each
  pass. It raises `OSError` ("Error deleting file ...") if the removal fails.

## `bcfileio.cmdline`

- `OptionScanner(args, optstring, report_errors)`: scans short options in
  the classic getopt style. `args` does not include the program name.
  - An option word starts with `-` or `/`. Several letters may be grouped
    in one word.
  - A letter followed by `:` in `optstring` takes an argument. The argument
    can be attached to the letter or given as the next word.
  - Scanning stops at the first word that is not an option. It also stops
    at `-` or `--`, and either marker is consumed.
  - Iterating over the scanner yields `(letter, argument)` pairs.
  - An unknown letter, or a missing argument, yields `"?"` when
    `report_errors` is true. Otherwise it yields the letter itself.
  - `remaining()` returns the arguments left after the options.
- `getopt(args, optstring, report_errors)`: returns the list of pairs and
  the remaining arguments in one call.

## Example

```python
from bcfileio.cmdline import getopt
from bcfileio.rwfile import attach_key, pad_input

options, rest = getopt(["-c", "-s", "3", "notes.txt"], "cs:", True)
# options == [("c", None), ("s", "3")], rest == ["notes.txt"]

padded = pad_input(b"hello")
assert len(padded) == 8
data = attach_key(padded, b"placeholder")
```

## What it does not do

The package has no Blowfish cipher, key derivation or compression. It has no
command to run. It only prepares, reads, writes and removes the files such a
tool works on, and parses its option letters.

## Running the tests

```
pip install -e .[test]
pytest
```