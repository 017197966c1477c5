import io

import pytest

from argtable.core import Arg, ArgFlag, end, lit0, lit1, litn, rem
from argtable.printing import (
    format_glossary,
    format_glossary_gnu,
    format_option,
    format_syntax,
    format_syntaxv,
    format_wrapped,
    print_glossary,
    print_glossary_gnu,
    print_option,
    print_syntax,
    print_syntaxv,
    print_wrapped,
)

DOC_TEXT = "Some text that doesn't fit."


def valued(shortopts, longopts, datatype, glossary, mincount, maxcount):
    return Arg(shortopts, longopts, datatype, glossary, mincount, maxcount, ArgFlag.HASVALUE)


def demo_table():
    return [
        lit0(None, "help", "display this help and exit"),
        lit0(None, "version", "display version info and exit"),
        lit0("a", None, "the -a option"),
        lit0("b", None, "the -b option"),
        lit0("c", None, "the -c option"),
        valued(None, "scalar", "<n>", "foo value", 0, 1),
        lit0("v", "verbose", "verbose output"),
        valued("o", None, "myfile", "output file", 0, 1),
        valued(None, None, "<file>", "input files", 0, 100),
        end(20),
    ]


def test_wrapped_documented_example():
    assert format_wrapped(0, 5, DOC_TEXT) == "Some\ntext\nthat\ndoesn'\nt fit.\n"


def test_wrapped_documented_example_with_margin():
    expected = "Some\n  text\n  that\n  doesn'\n  t fit.\n"
    assert format_wrapped(2, 7, DOC_TEXT) == expected


def test_wrapped_preserves_non_space_characters():
    text = "alpha beta gamma delta epsilon zeta eta theta iota kappa lambda"
    out = format_wrapped(4, 20, text)
    assert "".join(out.split()) == "".join(text.split())


def test_wrapped_lines_fit_column():
    text = "word " * 40
    out = format_wrapped(3, 22, text)
    lines = out.splitlines()
    assert len(lines) > 1
    for line in lines[1:]:
        assert line.startswith("   ")
        assert len(line) - 3 <= 20
    assert len(lines[0]) <= 20


def test_wrapped_empty_text():
    assert format_wrapped(2, 10, "") == ""


def test_wrapped_rejects_inverted_margins():
    with pytest.raises(ValueError):
        format_wrapped(10, 5, "text")


def test_format_option_joins_every_tag():
    assert format_option("a", "alpha,beta", "<n>", "\n") == "-a|--alpha|--beta=<n>\n"


def test_format_option_without_anything_is_suffix_only():
    assert format_option(None, None, None, "tail") == "tail"


def test_format_option_is_clipped():
    result = format_option(None, "x" * 500, None, None)
    assert result.startswith("--xxx")
    assert len(result) < 200


def test_syntax_for_demo_table():
    expected = " [-abcv] [--help] [--version] [--scalar=<n>] [-o myfile] [<file>]...\n"
    assert format_syntax(demo_table(), "\n") == expected


def test_syntax_bundles_mandatory_before_optional():
    table = [lit1("x", None, "x"), lit0("y", None, "y"), end(5)]
    result = format_syntax(table)
    assert result.startswith(" -x")
    assert result.endswith("[y]")


def test_syntax_repeats_mandatory_instances():
    table = [valued(None, "name", "<s>", "g", 2, 2), end(5)]
    result = format_syntax(table)
    assert result.count("--name=<s>") == 2
    assert "[" not in result


def test_syntax_two_optional_instances():
    table = [valued(None, "name", "<s>", "g", 0, 2), end(5)]
    assert format_syntax(table).count("[--name=<s>]") == 2


def test_syntax_many_optional_instances_use_ellipsis():
    table = [valued("n", None, "<s>", "g", 1, 9), end(5)]
    result = format_syntax(table)
    assert result.endswith("]...")
    assert result.count("-n <s>") == 2


def test_syntax_stops_at_terminator():
    table = [lit0("a", None, "a"), end(5), lit0("z", None, "z")]
    assert "z" not in format_syntax(table)


def test_syntaxv_matches_option_format():
    table = [lit0("bB", "bee", "g"), end(5)]
    assert format_syntaxv(table) == " [" + format_option("bB", "bee", None) + "]"


def test_syntaxv_includes_remarks_and_suffix():
    table = [rem("FILE", "a remark"), end(5)]
    result = format_syntaxv(table, "!")
    assert result.startswith(" FILE")
    assert result.endswith("!")


def test_glossary_lists_entries_in_order():
    table = [lit0("v", "verbose", "verbose output"), rem("X", None), lit0("q", None, "quiet"), end(5)]
    lines = format_glossary(table, "%s\t%s\n").splitlines()
    pairs = [line.split("\t") for line in lines]
    assert [p[1] for p in pairs] == ["verbose output", "quiet"]
    assert pairs[0][0].split(", ") == ["-v", "--verbose"]


def test_glossary_default_format_pads_column():
    table = [lit0("v", "verbose", "verbose output"), end(5)]
    line = format_glossary(table)
    assert line.startswith("  ")
    assert line[2:22].rstrip() == "-v, --verbose"
    assert line[23:] == "verbose output\n"


def test_gnu_glossary_indents_long_only_options():
    table = [lit0(None, "help", "show help"), end(5)]
    result = format_glossary_gnu(table)
    assert result.startswith("      --help")
    assert result.endswith("show help\n\n")


def test_gnu_glossary_moves_long_syntax_to_own_line():
    table = [valued(None, "a-very-long-option-name", "<value>", "text here", 0, 1), end(5)]
    lines = format_glossary_gnu(table).split("\n")
    assert lines[0].strip() == "--a-very-long-option-name=<value>"
    assert lines[1] == " " * 28 + "text here"


def test_gnu_glossary_wraps_long_text():
    table = [lit0("x", None, "lorem ipsum " * 20), end(5)]
    lines = format_glossary_gnu(table).split("\n")
    body = [line for line in lines if line]
    assert len(body) > 1
    for line in body:
        assert len(line) <= 80
    for line in body[1:]:
        assert line.startswith(" " * 28)


def test_print_functions_write_formatted_text():
    table = demo_table()
    buf = io.StringIO()
    print_syntax(table, "\n", file=buf)
    print_syntaxv(table, "\n", file=buf)
    print_glossary(table, None, file=buf)
    print_glossary_gnu(table, file=buf)
    expected = (
        format_syntax(table, "\n")
        + format_syntaxv(table, "\n")
        + format_glossary(table)
        + format_glossary_gnu(table)
    )
    assert buf.getvalue() == expected


def test_print_option_and_wrapped():
    buf = io.StringIO()
    print_option("a", "all", None, ";", file=buf)
    print_wrapped(0, 5, DOC_TEXT, file=buf)
    assert buf.getvalue() == format_option("a", "all", None, ";") + format_wrapped(0, 5, DOC_TEXT)


def test_print_defaults_to_stdout(capsys):
    print_wrapped(0, 5, DOC_TEXT)
    assert capsys.readouterr().out == format_wrapped(0, 5, DOC_TEXT)