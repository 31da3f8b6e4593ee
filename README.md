# smallutils

A small collection of utilities:

- `smallutils.mathfuncs`: elementary math functions computed with series
  expansions, loops and a fixed number of iterations, not with the platform
  math library.
- `smallutils-cat` (`smallutils.cat`): writes files to standard output and can
  number lines and show hidden characters.
- `smallutils-grep` (`smallutils.grep`): searches files for lines that match
  regular expressions.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Math functions

```python
from smallutils import mathfuncs

mathfuncs.factorial(5)      # 120.0
mathfuncs.power(3.2, 2)     # close to 10.24
mathfuncs.sqrt(9)           # close to 3.0
mathfuncs.sin(1)            # close to 0.8415
mathfuncs.log(0)            # -inf
mathfuncs.acos(3)           # nan: outside [-1, 1]
```

Functions: `abs_int`, `fabs`, `fmod`, `ceil`, `floor`, `factorial`,
`int_power`, `power`, `sqrt`, `exp`, `log`, `acos`, `asin`, `atan`, `cos`,
`sin`, `tan`. Constants: `PI`, `E`, `PI_2`, `LN2`, `NAN`, `INF`.

- No function raises for a bad argument. An argument outside the domain gives
  `nan`: a negative argument to `sqrt`, `log` or `factorial`, an argument
  outside [-1, 1] to `asin` or `acos`, a zero divisor to `fmod`.
- `log(0)` is `-inf`. `power(0, y)` is `inf` for negative `y`.
- `tan` gives `nan` where the computed cosine is exactly zero.
- `int_power` multiplies or divides step by step. A fractional exponent is
  rounded away from zero to a whole number of steps.
- `exp` reduces its argument by ln 2 and sums a Taylor series until a term is
  below 1e-8. `log` runs ten fixed iterations. `sin` sums 15 Taylor terms.
  `atan` sums a fixed number of series terms. Results are close to the math
  library's values, but they are not always equal.

## cat

```
smallutils-cat [-b] [-e] [-E] [-n] [-s] [-t] [-v] FILE...
```

| Option | Meaning |
|--------|---------|
| `-b`, `--number-nonblank` | number non-empty output lines |
| `-n`, `--number` | number all output lines (`-b` takes precedence) |
| `-s`, `--squeeze-blank` | collapse repeated empty lines into one |
| `-E` | show `$` at the end of each line |
| `-e` | same as `-E -v` |
| `-t` | show tabs as `^I` and also do what `-v` does |
| `-v` | show non-printing characters in `^X` and `M-X` notation |

`-T` is accepted and has no effect. Long options can be shortened as long as
the short form is unambiguous. Unknown options are reported on standard error
and ignored. Option parsing stops at the first operand that is not an option.
Arguments that start with `-` are never read as files. A file that cannot be
opened is reported as `cat: FILE: reason`, and the other files are still
printed. The exit status is always 0.

From Python, `parse_args(argv)` returns a `CatOptions` and the list of files,
`build_table(options)` gives the 256-entry byte translation table, and
`render(stream, options, table)` yields the rendered lines of a binary stream.

## grep

```
smallutils-grep [-i] [-v] [-c] [-l] [-n] [-h] [-s] [-o] [-e PATTERN]... [-f FILE]... [PATTERN] FILE...
```

| Option | Meaning |
|--------|---------|
| `-e PATTERN` | add a pattern; this option can be given more than once |
| `-f FILE` | read patterns from FILE, one pattern on each line |
| `-i` | ignore case (only for patterns that come after it) |
| `-v` | select lines that do not match |
| `-c` | print a count for each file instead of the lines |
| `-l` | print only the names of files that have a selected line |
| `-n` | put the line number before each output line |
| `-h` | do not put file names before output lines |
| `-s` | do not report files that are missing or cannot be read |
| `-o` | print only the matched parts of lines, then any captured groups |

Patterns are Python regular expressions. If no `-e` or `-f` is given, the
first operand is the pattern. When more than one file is searched, each output
line starts with the file name, unless `-h` is given.

Some details of the output:

- `-c` counts, for each line, every pattern that matches it, so a line matched
  by two patterns counts twice. With `-v` it prints the number of lines minus
  that count. With `-l` as well, it prints `1` or `0` and then the file name
  when a line is selected.
- `-o` has no effect together with `-v`; the selected lines are printed whole.
- An invalid option, a missing argument to `-e` or `-f`, an unreadable pattern
  file or a pattern that does not compile stops the program with a message on
  standard error and exit status 1. Otherwise the exit status is 0, whether or
  not anything matched.

From Python, `parse_args(argv)` returns a `GrepOptions`, the compiled patterns
and the files; `grep_file(path, patterns, options)` returns the output lines
for one file. Fatal errors are raised as `GrepError`.

## What it does not do

Neither command reads standard input: an argument of `-` is not taken to mean
standard input, and with no file operands nothing is printed. There are no
`--help` or `--version` options, and grep has no recursive search, context
lines or colour output.