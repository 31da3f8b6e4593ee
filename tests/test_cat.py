import io

import pytest

from smallutils.cat import CatOptions, build_table, main, parse_args, render


def _run(data: bytes, options: CatOptions) -> bytes:
    return b"".join(render(io.BytesIO(data), options, build_table(options)))


def test_parse_short_flag_and_file():
    options, files = parse_args(["-b", "notes.txt"])
    assert options.number_nonblank is True
    assert options.number is False
    assert files == ["notes.txt"]


def test_parse_clustered_flags():
    options, _ = parse_args(["-ens"])
    assert options.show_ends and options.show_nonprinting
    assert options.number and options.squeeze_blank
    assert not options.show_tabs


@pytest.mark.parametrize(
    "flag, ends, tabs, nonprinting",
    [
        ("-e", True, False, True),
        ("-E", True, False, False),
        ("-t", False, True, True),
        ("-v", False, False, True),
        ("-T", False, False, False),
    ],
)
def test_parse_display_flags(flag, ends, tabs, nonprinting):
    options, _ = parse_args([flag])
    assert (options.show_ends, options.show_tabs, options.show_nonprinting) == (
        ends,
        tabs,
        nonprinting,
    )


def test_parse_long_options_and_prefix():
    options, _ = parse_args(["--number-nonblank", "--squeeze", "--number"])
    assert options.number_nonblank and options.squeeze_blank and options.number


def test_parse_ambiguous_long_prefix_is_ignored(capsys):
    options, _ = parse_args(["--num"])
    assert options == CatOptions()
    assert "ambiguous" in capsys.readouterr().err


def test_parse_stops_at_first_file_but_skips_dashed_args():
    options, files = parse_args(["a.txt", "-n", "b.txt"])
    assert options.number is False
    assert files == ["a.txt", "b.txt"]


def test_default_table_is_identity():
    table = build_table(CatOptions())
    assert b"".join(table) == bytes(range(256))


def test_table_ends_and_tabs():
    table = build_table(CatOptions(show_ends=True, show_tabs=True))
    assert table[ord("\n")] == b"$\n"
    assert table[ord("\t")] == b"^I"
    assert table[0] == b"\x00"


def test_table_nonprinting():
    table = build_table(CatOptions(show_nonprinting=True))
    assert table[0] == b"^@"
    assert table[8] == b"^H"
    assert table[11] == b"^K"
    assert table[27] == b"^["
    assert table[127] == b"^?"
    assert table[128] == b"M-^@"
    assert table[160] == b"M- "
    assert table[ord("A") + 128] == b"M-A"
    assert table[255] == b"M-^?"
    assert table[ord("\t")] == b"\t"
    assert table[ord("\n")] == b"\n"
    assert table[ord("A")] == b"A"


def test_render_plain_round_trip():
    data = b"first\n\n\nsecond\x01\tline\nno newline"
    assert _run(data, CatOptions()) == data


def test_render_numbers_every_line():
    out = _run(b"a\n\nb\n", CatOptions(number=True))
    lines = out.split(b"\n")[:-1]
    assert len(lines) == 3
    assert [line.split(b"\t")[0].strip() for line in lines] == [b"1", b"2", b"3"]
    assert lines[0] == b"     1\ta"


def test_render_number_nonblank_skips_blank_lines():
    out = _run(b"a\n\nb\n", CatOptions(number_nonblank=True, number=True))
    lines = out.split(b"\n")[:-1]
    assert lines[1] == b""
    assert lines[2].split(b"\t") == [b"     2", b"b"]


def test_render_squeeze_blank():
    out = _run(b"a\n\n\n\nb\n\n", CatOptions(squeeze_blank=True))
    assert out == b"a\n\nb\n\n"


def test_render_leading_blank_lines_squeezed():
    out = _run(b"\n\n\nx\n", CatOptions(squeeze_blank=True))
    assert out == b"\nx\n"


def test_render_show_ends_and_tabs():
    options = CatOptions(show_ends=True, show_tabs=True)
    assert _run(b"a\tb\n", options) == b"a^Ib$\n"


def test_main_prints_files(tmp_path, capsysbinary):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"x\ny\n")
    second.write_bytes(b"z\n")
    status = main(["-n", str(first), str(second)])
    out = capsysbinary.readouterr().out
    assert status == 0
    lines = out.split(b"\n")[:-1]
    assert [line.split(b"\t")[1] for line in lines] == [b"x", b"y", b"z"]
    assert lines[2].split(b"\t")[0].strip() == b"1"


def test_main_reports_missing_file(tmp_path, capsysbinary):
    existing = tmp_path / "present.txt"
    existing.write_bytes(b"ok\n")
    missing = tmp_path / "absent.txt"
    status = main([str(missing), str(existing)])
    captured = capsysbinary.readouterr()
    assert status == 0
    assert captured.out == b"ok\n"
    assert str(missing).encode() in captured.err


def test_main_without_files_prints_nothing(capsysbinary):
    assert main(["-n"]) == 0
    assert capsysbinary.readouterr().out == b""