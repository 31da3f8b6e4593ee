"""Print lines of files that match regular expressions."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "GrepOptions",
    "GrepError",
    "parse_args",
    "compile_pattern",
    "load_patterns",
    "count_lines",
    "list_file",
    "only_matching",
    "matching_lines",
    "grep_file",
    "main",
]

# A match reporting more captured groups than this yields nothing, as with a
# fixed 50-slot offset vector.
_MAX_GROUPS = 16

_SWITCHES = {
    "i": "ignore_case",
    "v": "invert",
    "c": "count",
    "l": "files_with_matches",
    "n": "line_number",
    "h": "no_filename",
    "s": "no_messages",
    "o": "only_matching",
}


class GrepError(Exception):
    """A fatal error that stops the search before any file is read."""


@dataclass
class GrepOptions:
    """Switches that control matching and output."""

    patterns_given: bool = False
    ignore_case: bool = False
    invert: bool = False
    count: bool = False
    files_with_matches: bool = False
    line_number: bool = False
    no_filename: bool = False
    no_messages: bool = False
    pattern_file: bool = False
    only_matching: bool = False
    multiple_files: bool = False

    def apply(self, flag: str) -> None:
        """Turn on the behaviour selected by a single short flag."""
        attribute = _SWITCHES.get(flag)
        if attribute is None:
            raise GrepError("Invalid flag")
        setattr(self, attribute, True)


def compile_pattern(text: str, ignore_case: bool) -> re.Pattern[str]:
    """Compile one regular expression, optionally ignoring case."""
    try:
        return re.compile(text, re.IGNORECASE if ignore_case else 0)
    except re.error as exc:
        raise GrepError("Failed to compile regular expression") from exc


def load_patterns(path: str, ignore_case: bool) -> list[re.Pattern[str]]:
    """Compile every line of the file at ``path`` as a pattern."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as stream:
            lines = stream.readlines()
    except OSError as exc:
        raise GrepError("No such file or directory") from exc
    return [compile_pattern(line.removesuffix("\n"), ignore_case) for line in lines]


def parse_args(
    argv: Sequence[str],
) -> tuple[GrepOptions, list[re.Pattern[str]], list[str]]:
    """Parse arguments into options, compiled patterns and file names.

    Options may appear anywhere before ``--``. Patterns given with ``-e`` or
    ``-f`` are compiled as they are met, so only an earlier ``-i`` affects
    them. Without either, the first operand is the pattern.
    """
    options = GrepOptions()
    patterns: list[re.Pattern[str]] = []
    operands: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            operands.extend(args)
            break
        if not arg.startswith("-") or arg == "-":
            operands.append(arg)
            continue
        cluster = arg[1:]
        for index, flag in enumerate(cluster):
            if flag not in ("e", "f"):
                options.apply(flag)
                continue
            if index + 1 < len(cluster):
                value = cluster[index + 1 :]
            else:
                value = next(args, None)
                if value is None:
                    raise GrepError("Invalid flag")
            options.patterns_given = True
            if flag == "e":
                patterns.append(compile_pattern(value, options.ignore_case))
            else:
                options.pattern_file = True
                patterns.extend(load_patterns(value, options.ignore_case))
            break
    if not options.patterns_given and operands:
        patterns.append(compile_pattern(operands.pop(0), options.ignore_case))
    options.multiple_files = len(operands) > 1
    return options, patterns, operands


def _file_prefix(options: GrepOptions, filename: str) -> str:
    return f"{filename}:" if options.multiple_files and not options.no_filename else ""


def _number_prefix(options: GrepOptions, number: int) -> str:
    return f"{number}:" if options.line_number else ""


def count_lines(
    lines: Iterable[str],
    patterns: Sequence[re.Pattern[str]],
    options: GrepOptions,
    filename: str,
) -> Iterator[str]:
    """Yield the match count for a file; each matching pattern counts once per line."""
    total = 0
    matched = 0
    for line in lines:
        total += 1
        matched += sum(1 for pattern in patterns if pattern.search(line) is not None)
    if options.files_with_matches:
        value = int(matched > 0 or (total - matched > 0 and options.invert))
    else:
        value = total - matched if options.invert else matched
    yield f"{_file_prefix(options, filename)}{value}\n"


def list_file(
    lines: Iterable[str],
    patterns: Sequence[re.Pattern[str]],
    options: GrepOptions,
    filename: str,
) -> Iterator[str]:
    """Yield the file name once if any line is selected by any pattern."""
    for line in lines:
        for pattern in patterns:
            if (pattern.search(line) is not None) != options.invert:
                yield f"{filename}\n"
                return


def _group_spans(match: re.Match[str], length: int) -> list[tuple[int, int]]:
    last = max(
        (group for group in range(1, match.re.groups + 1) if match.start(group) != -1),
        default=0,
    )
    spans = []
    for group in range(last + 1):
        start, end = match.span(group)
        spans.append((0, length) if start == -1 else (start, end))
    return spans


def only_matching(
    lines: Iterable[str],
    patterns: Sequence[re.Pattern[str]],
    options: GrepOptions,
    filename: str,
) -> Iterator[str]:
    """Yield each matched part of every line, followed by its captured groups."""
    file_prefix = _file_prefix(options, filename)
    for number, line in enumerate(lines, 1):
        prefix = file_prefix + _number_prefix(options, number)
        length = len(line)
        for pattern in patterns:
            offset = 0
            while offset < length:
                match = pattern.search(line, offset)
                if match is None:
                    break
                if match.start() == match.end():
                    # Empty matches are stepped over rather than printed.
                    offset = match.end() + 1
                    continue
                spans = _group_spans(match, length)
                if len(spans) > _MAX_GROUPS:
                    break
                for start, end in spans:
                    yield f"{prefix}{line[start:end]}\n"
                offset = match.end()


def matching_lines(
    lines: Iterable[str],
    patterns: Sequence[re.Pattern[str]],
    options: GrepOptions,
    filename: str,
) -> Iterator[str]:
    """Yield every selected line, ending each with a newline."""
    file_prefix = _file_prefix(options, filename)
    for number, line in enumerate(lines, 1):
        hit = any(pattern.search(line) is not None for pattern in patterns)
        if hit != options.invert:
            ending = "" if line.endswith("\n") else "\n"
            yield f"{file_prefix}{_number_prefix(options, number)}{line}{ending}"


def grep_file(
    path: str, patterns: Sequence[re.Pattern[str]], options: GrepOptions
) -> list[str]:
    """Search one file and return its output; report unreadable files on stderr."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as stream:
            lines = stream.readlines()
    except OSError:
        if not options.no_messages:
            sys.stderr.write("No such file or directory")
        return []
    output: list[str] = []
    if options.count:
        output.extend(count_lines(lines, patterns, options, path))
    if options.files_with_matches:
        output.extend(list_file(lines, patterns, options, path))
    elif not options.count:
        # Counting consumes the input; only -l reads the file a second time.
        if options.only_matching and not options.invert:
            output.extend(only_matching(lines, patterns, options, path))
        else:
            output.extend(matching_lines(lines, patterns, options, path))
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Run the grep command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options, patterns, files = parse_args(argv)
    except GrepError as exc:
        print(exc, file=sys.stderr)
        return 1
    out = sys.stdout.buffer
    for path in files:
        for chunk in grep_file(path, patterns, options):
            out.write(chunk.encode("utf-8", "surrogateescape"))
    out.flush()
    return 0