"""Highlighting rules for Java."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_slash_comment,
)

_CLASS_WORDS = (
    "class|enum|extends|implements|instanceof|interface|native|throws|private|protected|public"
)

_KEYWORDS = (
    "assert|break|case|catch|continue|default|do|else|finally|for|if|return|throw|switch|"
    "try|while|new|super|this|goto|abstract|final|static|strictfp|synchronized|transient|"
    "volatile|class|enum|extends|implements|instanceof|interface|native|throws"
)

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('\\.')|('.')"


class JavaLang(LanguagePlugin):
    """Java language plugin."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("functions", r"\b[[:word:]\.]*[[:word:]_]+(?=\()"),
            self._rule("class", f"({_CLASS_WORDS})"),
            self._rule("quotes", _QUOTES),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule("includes", r"\b(import|package)\b"),
            self._rule(
                "types",
                r"\b(boolean|byte|char|double|float|int|long|short|void)\b",
            ),
            self._rule(
                "custom",
                r"\b(abstract|final|static|strictfp|synchronized|transient|volatile)\b",
            ),
            self._comment_rule(),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        rule = self._rule("comments", r"/\*", r"\*/")
        # Block comments take only the style of the comment part, not its colour.
        rule.format.foreground = None
        return [rule]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_slash_comment)