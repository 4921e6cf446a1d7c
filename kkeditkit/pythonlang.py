"""Highlighting rules for Python."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_hash_comment,
)

_KEYWORDS = (
    "import|abs|all|any|apply|basestring|buffer|callable|chr|classmethod|cmp|coerce|"
    "compile|complex|delattr|dict|dir|divmod|enumerate|eval|execfile|file|filter|"
    "frozenset|getattr|globals|hasattr|hash|hex|id|input|intern|isinstance|issubclass|"
    "iter|len|list|locals|map|max|min|object|oct|open|ord|pow|property|range|raw_input|"
    "reduce|reload|repr|reversed|round|setattr|set|slice|sorted|staticmethod|str|sum|"
    "super|tuple|type|unichr|unicode|vars|xrange|zip|from|try|except|def|and|assert|"
    "break|class|continue|def|del|elif|else|except|exec|finally|for|global|if|in|is|"
    "lambda|not|or|pass|print|raise|return|try|while|with|yield|__name__|__debug__|"
    "__class__"
)

_CUSTOM = (
    "NULL|nullptr|true|false|TRUE|FALSE|None|Ellipsis|NotImplemented|self|True|False"
)

_EXTRAS = (
    "ArithmeticError|AssertionError|AttributeError|EnvironmentError|EOFError|Exception|"
    "FloatingPointError|ImportError|IndentationError|IndexError|IOError|"
    "KeyboardInterrupt|KeyError|LookupError|MemoryError|NameError|NotImplementedError|"
    "OSError|OverflowError|ReferenceError|RuntimeError|StandardError|StopIteration|"
    "SyntaxError|SystemError|SystemExit|TabError|TypeError|UnboundLocalError|"
    "UnicodeDecodeError|UnicodeEncodeError|UnicodeError|UnicodeTranslateError|"
    "ValueError|WindowsError|ZeroDivisionError|Warning|UserWarning|DeprecationWarning|"
    "PendingDeprecationWarning|SyntaxWarning|OverflowWarning|RuntimeWarning|FutureWarning"
)

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('([^'\\]*(\\.[^'\\]*)*)')"


class PythonLang(LanguagePlugin):
    """Python language plugin."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("functions", r"\b[A-Za-z0-9_]+(?=\()"),
            self._rule(
                "types",
                r"\b(bool|char|double|float|int|long|short|signed|unsigned|void|wchar_t|const)\b",
            ),
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule("quotes", _QUOTES),
            self._rule("variables", r"([[:word:]_]*)(?=[[:space:]]*=)"),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("custom", rf"\b({_CUSTOM})\b"),
            self._rule("lanuageextra", rf"\b({_EXTRAS})\b"),
            self._comment_rule(),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        return [self._rule("comments", '"""', '"""')]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_hash_comment)