"""Highlighting rules for makefiles."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_hash_comment,
)

_KEYWORDS = (
    "addprefix|addsuffix|basename|call|dir|error|filter|filter-out|findstring|firstword|"
    "foreach|join|notdir|origin|patsubst|shell|sort|strip|subst|suffix|warning|wildcard|"
    "word|words|define|else|endef|endif|if|ifdef|ifeq|ifndef|ifneq|include|override|"
    "unexport|case|esac|fi|elif|echo|exit|for|printf|continue|do|done|test|break"
)


class MakeLang(LanguagePlugin):
    """Makefile language plugin; it has no multi-line rules."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule(
                "functions",
                r"^[[:space:]]*[A-Za-z0-9_]+(?=[[:space:]]*=?[[:space:]]*[{\(])",
            ),
            self._rule("lanuageextra", r"^[[:print:]]*(?=:)"),
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule("variables", r"([[:word:]_]*)(?=[[:space:]]*=)"),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("types", r"\b(true|false|yes|no)|\b"),
            self._rule(
                "class",
                r"(\$\$?\{[[:word:]][[:word:]]*\}|\$\([[:word:]][[:word:]]*\))",
            ),
            self._rule("class", r"\$\$?[[:word:]][[:word:]]*"),
            self._rule("quotes", r"(\".*\")|('.*')"),
            self._comment_rule(),
        ]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_hash_comment)