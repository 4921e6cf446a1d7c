"""Highlighting rules for JavaScript."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_slash_comment_any_quote,
)

_KEYWORDS = (
    "let|abstract|break|case|catch|const|continue|debugger|default|delete|do|else|enum|"
    "export|extends|final|finally|for|function|goto|if|implements|in|instanceof|interface|"
    "native|new|private|protected|prototype|public|return|super|switch|synchronized|throw|"
    "throws|this|transient|try|typeof|var|volatile|while|with"
)

_EXTRAS = (
    "abstract|boolean|byte|char|class|debugger|double|enum|extends|final|float|goto|"
    "implements|interface|int|long|native|package|private|protected|public|short|static|"
    "super|synchronized|throws|transient|volatile"
)

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('([^'\\]*(\\.[^'\\]*)*)')"


class JsLang(LanguagePlugin):
    """JavaScript language plugin."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("functions", r"\b[A-Za-z0-9_]+(?=\()"),
            self._rule("quotes", _QUOTES),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule("types", r"\b(NULL|null|true|false|null|undefined)\b"),
            self._rule(
                "custom",
                r"\b(Infinity|Math|NaN|NEGATIVE_INFINITY|POSITIVE_INFINITY)\b",
            ),
            self._rule("lanuageextra", rf"\b({_EXTRAS})\b"),
            self._comment_rule(),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        return [self._rule("comments", r"/\*", r"\*/")]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_slash_comment_any_quote)