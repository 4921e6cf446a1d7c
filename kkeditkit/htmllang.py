"""Highlighting rules for HTML."""

from __future__ import annotations

from kkeditkit.rules import NUMBERS_PATTERN, HighlightRule, LanguagePlugin


class HtmlLang(LanguagePlugin):
    """HTML language plugin; it has no custom rules."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule(
                "functions",
                r"^[[:space:]]*function[[:space:]]*[A-Za-z0-9_]+(?=\()",
            ),
            self._rule(
                "keywords",
                r"(<[/\!?]?.*[/\!?]?>)|(<[/\!?]?[^\n]*)|([/\!?]?>)",
            ),
            self._rule("quotes", r"(\".*\")|('.*')"),
            self._rule("variables", r"([[:word:]_]*)(?=[[:space:]]*=)"),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("types", r"\&#?[[:alnum:]]+;|\bconst\b"),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        return [self._rule("comments", "<!--", "-->")]