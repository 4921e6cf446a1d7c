"""Highlighting rules for shell scripts."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_hash_comment,
)

_KEYWORDS = (
    "alias|bg|bind|break|builtin|caller|case|command|compgen|complete|continue|declare|"
    "dirs|disown|do|done|elif|else|enable|esac|eval|exec|exit|export|false|fc|fg|fi|for|"
    "getopts|hash|help|history|if|in|jobs|let|local|logout|popd|printf|pushd|read|"
    "readonly|return|select|set|shift|shopt|suspend|test|then|times|trap|true|type|"
    "typeset|umask|unalias|unset|until|wait|while|echo"
)

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('([^'\\]*(\\.[^'\\]*)*)')"


class ShLang(LanguagePlugin):
    """Shell script language plugin."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("includes", r"^[[:blank:]]*(\.[^\n]*|source[^\n]*)"),
            self._rule("variables", r"(([[:word:]]*)(?==)|\$[[:word:]]*)"),
            self._rule(
                "class",
                r"(\$\{[[:word:]]*\}|\$\([[:print:]]*\)|\$[[:word:]_]+|\$\{.*\})",
            ),
            self._rule(
                "functions",
                r"^(function[[:blank:]]*[[:word:]]*|[[:word:]]*)([[:blank:]]*\([[:blank:]]*\))",
            ),
            self._rule("quotes", _QUOTES),
            self._comment_rule(),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        return [self._rule("comments", "if false;then", "else|fi")]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_hash_comment)