"""Concatenate files to standard output, optionally numbering and marking lines."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import BinaryIO

__all__ = ["CatOptions", "parse_args", "build_table", "render", "main"]

_SHORT_FLAGS = frozenset("bevEnsvtT")
_LONG_FLAGS = {
    "number-nonblank": "b",
    "number": "n",
    "squeeze-blank": "s",
}


@dataclass
class CatOptions:
    """Switches that control how file contents are rendered."""

    number_nonblank: bool = False
    show_ends: bool = False
    number: bool = False
    squeeze_blank: bool = False
    show_tabs: bool = False
    show_nonprinting: bool = False

    def apply(self, flag: str) -> None:
        """Turn on the behaviour selected by a single short flag."""
        if flag == "b":
            self.number_nonblank = True
        elif flag == "e":
            self.show_ends = True
            self.show_nonprinting = True
        elif flag == "v":
            self.show_nonprinting = True
        elif flag == "E":
            self.show_ends = True
        elif flag == "n":
            self.number = True
        elif flag == "s":
            self.squeeze_blank = True
        elif flag == "t":
            self.show_nonprinting = True
            self.show_tabs = True


def _warn(message: str) -> None:
    print(f"cat: {message}", file=sys.stderr)


def _resolve_long(name: str) -> str | None:
    if name in _LONG_FLAGS:
        return _LONG_FLAGS[name]
    candidates = [key for key in _LONG_FLAGS if key.startswith(name)]
    if len(candidates) == 1:
        return _LONG_FLAGS[candidates[0]]
    if candidates:
        _warn(f"option '--{name}' is ambiguous")
    else:
        _warn(f"unrecognized option '--{name}'")
    return None


def parse_args(argv: Sequence[str]) -> tuple[CatOptions, list[str]]:
    """Parse command-line arguments into options and the files to print.

    Option parsing stops at the first argument that is not an option.
    Every argument beginning with ``-`` is left out of the file list.
    """
    options = CatOptions()
    parsing = True
    for arg in argv:
        if parsing:
            if arg == "--":
                parsing = False
                continue
            if arg.startswith("--"):
                name, has_value, _ = arg[2:].partition("=")
                flag = _resolve_long(name)
                if flag is not None:
                    if has_value:
                        _warn(f"option '--{name}' doesn't allow an argument")
                    else:
                        options.apply(flag)
                continue
            if arg.startswith("-") and arg != "-":
                for flag in arg[1:]:
                    if flag in _SHORT_FLAGS:
                        options.apply(flag)
                    else:
                        _warn(f"invalid option -- '{flag}'")
                continue
            parsing = False
    files = [arg for arg in argv if not arg.startswith("-")]
    return options, files


def _caret_notation(code: int) -> bytes:
    if code == 127:
        return b"^?"
    if code >= 128:
        return b"M-" + _caret_notation(code - 128)
    if code < 32:
        return b"^" + bytes([code + 64])
    return bytes([code])


def build_table(options: CatOptions) -> list[bytes]:
    """Return the 256-entry byte translation table for ``options``."""
    table = [bytes([code]) for code in range(256)]
    if options.show_ends:
        table[ord("\n")] = b"$\n"
    if options.show_tabs:
        table[ord("\t")] = b"^I"
    if options.show_nonprinting:
        for code in range(256):
            if code in (ord("\t"), ord("\n")):
                continue
            if code < 32 or code >= 127:
                table[code] = _caret_notation(code)
    return table


def render(
    stream: BinaryIO | Iterable[bytes], options: CatOptions, table: Sequence[bytes]
) -> Iterator[bytes]:
    """Yield the rendered output for a binary stream, one line at a time."""
    line_number = 0
    squeezing = False
    for line in stream:
        if not line:
            continue
        blank = line == b"\n"
        if options.squeeze_blank and blank:
            if squeezing:
                continue
            squeezing = True
        else:
            squeezing = False
        prefix = b""
        if options.number_nonblank:
            if not blank:
                line_number += 1
                prefix = f"{line_number:6d}\t".encode()
        elif options.number:
            line_number += 1
            prefix = f"{line_number:6d}\t".encode()
        yield prefix + b"".join(table[byte] for byte in line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the cat command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    options, files = parse_args(argv)
    table = build_table(options)
    out = sys.stdout.buffer
    for path in files:
        try:
            with open(path, "rb") as stream:
                for chunk in render(stream, options, table):
                    out.write(chunk)
        except OSError as exc:
            out.flush()
            _warn(f"{path}: {exc.strerror or 'No such file or directory'}")
    out.flush()
    return 0