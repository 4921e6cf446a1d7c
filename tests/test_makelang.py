import pytest

from kkeditkit.makelang import MakeLang
from kkeditkit.rules import ThemePart


def matched(rule, text):
    return [text[s : s + n] for s, n in rule.matches(text)]


@pytest.fixture
def plugin():
    return MakeLang()


def test_rule_order_and_comment_rule(plugin):
    rules = plugin.language_rules()
    assert len(rules) == 10
    assert rules[-1].kind == "comment"
    assert rules[-1].custom_rule is True
    assert all(not r.custom_rule for r in rules[:-1])


def test_no_multiline_rules(plugin):
    assert plugin.multiline_rules() == []


def test_theme_applied_to_keywords(plugin):
    plugin.set_theme({"keywords": ThemePart(colour="red", italic=True, bold=True)})
    fmt = plugin.language_rules()[2].format
    assert fmt.foreground == "red"
    assert fmt.italic is True
    assert fmt.bold is True


def test_missing_theme_part_gives_plain_format(plugin):
    fmt = plugin.language_rules()[0].format
    assert fmt.foreground is None
    assert fmt.bold is False


def test_target_rule(plugin):
    assert matched(plugin.language_rules()[1], "all: main.o") == ["all"]


def test_keyword_rule(plugin):
    assert "ifeq" in matched(plugin.language_rules()[2], "ifeq ($(CC),gcc)")


def test_variable_rule(plugin):
    assert matched(plugin.language_rules()[3], "CC = gcc") == ["CC"]


def test_function_rule(plugin):
    assert matched(plugin.language_rules()[0], "build = (stuff)") == ["build"]


def test_bracketed_variable_rule(plugin):
    text = "gcc $(CFLAGS) ${LIBS}"
    found = matched(plugin.language_rules()[6], text)
    assert "$(CFLAGS)" in found
    assert "${LIBS}" in found


def test_plain_dollar_variable(plugin):
    assert "$$HOME" in matched(plugin.language_rules()[7], "echo $$HOME")


def test_comment_outside_quotes(plugin):
    rule = plugin.language_rules()[-1]
    text = "echo '#not' # real"
    span = plugin.run_custom_rule(text, rule)
    assert span == (text.rindex("#"), len(text) - text.rindex("#"))
    assert (rule.start, rule.length) == span


def test_hash_inside_quotes_is_not_comment(plugin):
    rule = plugin.language_rules()[-1]
    assert plugin.run_custom_rule('echo "#"', rule) is None
    assert rule.start == 0 and rule.length == 0


def test_escaped_hash_is_not_comment(plugin):
    rule = plugin.language_rules()[-1]
    assert plugin.run_custom_rule("a \\# b", rule) is None


def test_non_comment_rule_is_ignored(plugin):
    rule = plugin.language_rules()[0]
    assert plugin.run_custom_rule("x # y", rule) is None