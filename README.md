# linc

`linc` is a small compiler for a minimal language. It reads a source file,
lexes and parses it, and generates QBE intermediate code. It then runs the
external `qbe` tool and the system C compiler `cc` to build a native
executable, which it runs.

## Requirements

- Python 3.10 or later
- `qbe` and `cc` available on `PATH` (needed only by `linc run`)

## Installation

```
pip install .
```

## The language

A program is a single `main` function whose body is one expression:

```
fn main() {
    putchar(72)
}
```

An expression is one of:

- an integer literal such as `42` (at most 2147483647)
- a call `name(expr)` to an external function taking one word argument;
  a name starts with an ASCII letter or `_` and continues with letters,
  digits or `_`
- `()`, the unit value, which is the same as `0`
- nothing at all, which is also the unit value

The value of the expression becomes the exit status of the program.
Spaces, tabs, newlines, carriage returns and form feeds between tokens are
ignored.

## Usage

Compile and run a program:

```
linc run hello.ln
```

This writes `out.qbe`, `out.s` and the executable `./out` in the current
directory, then runs `./out`. If the program exits with a non-zero status,
`linc` exits with the same status.

Remove the generated files:

```
linc clean
```

A failure of `rm` (for example because the files are already gone) is
ignored.

## Errors

All errors are printed to standard error and `linc` exits with status 1.

- Argument errors name what was expected or what was unexpected.
- Lexing and parsing errors give the file name, the line and column, and
  the offending part of the source underlined. Parse errors also list what
  was expected at that point.
- If `qbe` or `cc` fails, its standard output and standard error are shown,
  each in a framed block.

## Using it from Python

```python
from linc.cli import compile_source
from linc.source import Source

source = Source.from_bytes("example.ln", b"fn main() { putchar(72) }")
print(compile_source(source))
```

This prints the QBE code for the program. The stages are also available
separately: `linc.source.read_source`, `linc.lexer.lex`,
`linc.parser.parse` and `linc.analyser.analyse`. Errors raised by the
compiler are subclasses of `linc.errors.LincError` (`LexError`,
`ParseError`, `ArgsError`, `CallFailed`, `LaunchError`), whose message is
the text `linc` prints.

## What it does not do

The language has no variables, operators, control flow or functions other
than `main`. `linc` does not produce machine code itself: assembling and
linking are left to `qbe` and `cc`, and the output file names are fixed.

## Running the tests

```
pip install .[test]
pytest
```