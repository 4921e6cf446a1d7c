import pytest

from kkeditkit.rules import (
    HighlightRule,
    LanguagePlugin,
    TextFormat,
    ThemePart,
    find_hash_comment,
    find_slash_comment,
    find_slash_comment_any_quote,
    qt_regex,
)


def test_qt_regex_word_class():
    text = "foo_1 bar"
    assert qt_regex("[[:word:]]+").match(text).group(0) == "foo_1"


def test_qt_regex_space_and_digit():
    m = qt_regex("[[:digit:]]+[[:space:]]+x").search("ab 12  x")
    assert m.group(0) == "12  x"


def test_qt_regex_xdigit():
    assert qt_regex("[[:xdigit:]]+").fullmatch("beef09") is not None
    assert qt_regex("[[:xdigit:]]+").fullmatch("xyz") is None


def test_slash_comment_simple():
    text = "x = 1; // hi"
    start = text.index("//")
    assert find_slash_comment(text) == (start, len(text) - start)


def test_slash_comment_skips_quoted():
    text = '"a//b" // c'
    start = text.rindex("//")
    assert find_slash_comment(text) == (start, len(text) - start)


def test_slash_comment_escaped_quote_keeps_string_open():
    assert find_slash_comment('"a\\"//" ') is None


def test_slash_comment_ignores_single_quotes():
    text = "'//' x"
    assert find_slash_comment(text)[0] == text.index("//")


def test_any_quote_skips_single_quoted():
    text = "'//' // x"
    start = text.rindex("//")
    assert find_slash_comment_any_quote(text) == (start, len(text) - start)


def test_any_quote_mixed_quotes():
    text = "'\"//' z"
    assert find_slash_comment_any_quote(text) is None


def test_hash_comment():
    text = "echo '#' # c"
    start = text.rindex("#")
    assert find_hash_comment(text) == (start, len(text) - start)


def test_hash_comment_escaped():
    assert find_hash_comment("a \\# b") is None


def test_no_comment():
    assert find_slash_comment("int a;") is None


def test_rule_matches_skip_empty():
    rule = HighlightRule(format=TextFormat(), pattern=qt_regex(".*"))
    text = "abc"
    assert rule.matches(text) == [(0, len(text))]


def test_make_format_uses_theme():
    plugin = LanguagePlugin()
    plugin.set_theme({"keywords": ThemePart("#ff0000", True, True)})
    assert plugin.make_format("keywords") == TextFormat("#ff0000", True, True)


def test_make_format_missing_part_defaults():
    assert LanguagePlugin().make_format("nothing") == TextFormat(None, False, False)


def test_base_plugin_has_no_rules():
    plugin = LanguagePlugin()
    plugin.init_plug("/tmp/plug.so")
    assert plugin.plug_path == "/tmp/plug.so"
    assert plugin.language_rules() == []
    assert plugin.multiline_rules() == []
    rule = HighlightRule(format=TextFormat(), pattern=qt_regex(".*"), kind="comment")
    assert plugin.run_custom_rule("// x", rule) is None
    assert rule.start == 0


@pytest.mark.parametrize("finder", [find_slash_comment, find_slash_comment_any_quote, find_hash_comment])
def test_empty_text(finder):
    assert finder("") is None