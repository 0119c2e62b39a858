import pytest

from vclpy.ast import (
    Ident,
    ImportStatement,
    IncludeStatement,
    ReturnStatement,
    SourceFile,
    String,
    SubroutineDeclaration,
)
from vclpy.format import FormatOptions, format_subroutine, run_format
from tests._shared_cases import block, if_chain, meta, set_header, tier_switch


def _recv() -> SubroutineDeclaration:
    body = block(
        set_header("A", "1", trailing=("# first",)),
        if_chain(),
        tier_switch(),
        ReturnStatement(Ident("lookup"), meta=meta(1, blank=1)),
    )
    return SubroutineDeclaration(Ident("vcl_recv"), body, meta=meta(0, leading=("# recv",)))


def test_run_format_renders_source_file() -> None:
    source = SourceFile(
        (
            ImportStatement(Ident("std")),
            IncludeStatement(String("mod")),
            SubroutineDeclaration(
                Ident("vcl_hash"),
                block(ReturnStatement(Ident("hash"), meta=meta(1))),
                meta=meta(0, leading=("# hash",)),
            ),
        )
    )

    result = run_format(source)

    assert result.formatted_text == (
        "import std;\n"
        'include "mod";\n'
        "\n"
        "# hash\n"
        "sub vcl_hash {\n"
        "  return (hash);\n"
        "}\n"
    )
    assert result.changed is False


def test_functional_subroutine_returns_bare_value() -> None:
    decl = SubroutineDeclaration(
        Ident("compute_tier"),
        block(ReturnStatement(Ident("req.http.X-Tier"), meta=meta(1))),
        return_type=Ident("STRING"),
    )

    line = format_subroutine(decl, FormatOptions(return_statement_parenthesis=True))

    assert line.render() == "sub compute_tier STRING {\n  return req.http.X-Tier;\n}"


def test_subroutine_trailing_comment_comes_from_block() -> None:
    decl = SubroutineDeclaration(Ident("vcl_miss"), block(trailing=("# end miss",)))

    assert format_subroutine(decl, FormatOptions()).trailing == " # end miss"


def test_run_format_is_stable_and_reports_changes() -> None:
    source = SourceFile((_recv(),))

    first = run_format(source)
    second = run_format(source, original_text=first.formatted_text)
    different = run_format(source, original_text="sub vcl_recv {}\n")

    assert second.formatted_text == first.formatted_text
    assert second.changed is False
    assert different.changed is True
    assert first.formatted_text.startswith("# recv\nsub vcl_recv {\n")
    assert "\n\n  return (lookup);\n}\n" in first.formatted_text


def test_run_format_accepts_preset() -> None:
    source = SourceFile((_recv(),))

    result = run_format(source, preset="compact")

    assert result.options == FormatOptions.for_preset("compact")
    assert "  return lookup;\n" in result.formatted_text


def test_run_format_rejects_options_with_preset() -> None:
    with pytest.raises(ValueError, match="Pass either options or preset, not both"):
        run_format(SourceFile(), FormatOptions(), preset="default")


def test_run_format_empty_source() -> None:
    assert run_format(SourceFile()).formatted_text == ""


def test_top_level_blank_line_sits_above_leading_comments() -> None:
    source = SourceFile(
        (
            ImportStatement(Ident("std")),
            ImportStatement(Ident("querystring"), meta=meta(0, leading=("# query helpers",), blank=1)),
        )
    )

    assert run_format(source).formatted_text == "import std;\n\n# query helpers\nimport querystring;\n"
