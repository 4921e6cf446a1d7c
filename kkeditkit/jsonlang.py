"""Highlighting rules for JSON."""

from __future__ import annotations

from kkeditkit.rules import NUMBERS_PATTERN, HighlightRule, LanguagePlugin

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('\\.')|('.')"


class JsonLang(LanguagePlugin):
    """JSON language plugin; it has no multi-line or custom rules."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("quotes", _QUOTES),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("types", r"\b(true|false)\b"),
        ]