"""Highlighting rules for PHP."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_slash_comment_any_quote,
)

_KEYWORDS = (
    "__FILE__|exception|php_user_filter|__LINE__|abstract|array|as|break|case|catch|"
    "cfunction|class|clone|const|continue|declare|default|do|while|for|each|echo|else|"
    "elseif|empty|enddeclare|endfor|endforeach|endif|endswitch|endwhile|eval|exit|extends|"
    "final|foreach|function|global|goto|if|implements|interface|instanceof|isset|list|"
    "namespace|new|old_function|print|private|protected|public|return|static|switch|throw|"
    "unset|use|var|__FUNCTION__|__CLASS__|__METHOD__|__DIR__|__NAMESPACE__"
)

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('([^'\\]*(\\.[^'\\]*)*)')"


class PhpLang(LanguagePlugin):
    """PHP language plugin."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("functions", r"\b[A-Za-z0-9_]+(?=\()"),
            self._rule(
                "keywords",
                r"(<[/\!?]?.*[/\!?]?>)|(<[/\!?]?[^\n]*)|([/\!?]?>)",
            ),
            self._rule("quotes", _QUOTES),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule(
                "types",
                r"\b(and|or|xor|null|true|false|NULL|TRUE|FALSE)\b",
            ),
            self._rule("variables", r"\$[[:word:]]*"),
            self._comment_rule(),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        return [self._rule("comments", r"/\*", r"\*/")]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_slash_comment_any_quote)