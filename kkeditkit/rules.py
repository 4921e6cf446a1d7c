"""Shared pieces for syntax-highlighting language plugins."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

_POSIX_CLASSES = {
    "[:word:]": r"\w",
    "[:space:]": r"\s",
    "[:digit:]": r"\d",
    "[:xdigit:]": "0-9A-Fa-f",
    "[:alnum:]": "0-9A-Za-z",
    "[:alpha:]": "A-Za-z",
    "[:print:]": r"\x20-\x7e",
    "[:blank:]": r" \t",
}

NUMBERS_PATTERN = (
    r"([+-]?\b[[:digit:]]*\.?[[:digit:]]+([eE][+-]?[[:digit:]]+)?\b)"
    r"|([+-]?\b0x[[:xdigit:]]*\.?[[:xdigit:]]+\b)"
    r"|([+-]?\b0b[01]*\.?[01]+\b)"
)


def qt_regex(pattern: str) -> re.Pattern[str]:
    """Compile a PCRE-style pattern that may use POSIX bracket classes."""
    for posix, python in _POSIX_CLASSES.items():
        pattern = pattern.replace(posix, python)
    return re.compile(pattern, re.ASCII)


def _scan_for_comment(text: str, marker: str, any_quote: bool) -> Optional[tuple[int, int]]:
    inquote = False
    openquote = "\0"
    cnt = 0
    while cnt < len(text):
        char = text[cnt]
        if char == "\\":
            cnt += 2
            continue
        if any_quote:
            if openquote == "\0" and char in "\"'":
                openquote = char
            if char == openquote:
                inquote = not inquote
                if not inquote:
                    openquote = "\0"
                cnt += 1
                continue
        elif char == '"':
            inquote = not inquote
            cnt += 1
            continue
        if not inquote and text.startswith(marker, cnt):
            return cnt, len(text) - cnt
        cnt += 1
    return None


def find_slash_comment(text: str) -> Optional[tuple[int, int]]:
    """Find a '//' comment outside double quotes; return (start, length)."""
    return _scan_for_comment(text, "//", any_quote=False)


def find_slash_comment_any_quote(text: str) -> Optional[tuple[int, int]]:
    """Find a '//' comment outside single or double quotes."""
    return _scan_for_comment(text, "//", any_quote=True)


def find_hash_comment(text: str) -> Optional[tuple[int, int]]:
    """Find a '#' comment outside single or double quotes."""
    return _scan_for_comment(text, "#", any_quote=True)


@dataclass
class ThemePart:
    """Colour and style of one highlighted part of the text."""

    colour: Optional[str] = None
    italic: bool = False
    bold: bool = False


@dataclass
class TextFormat:
    """Character format applied to a highlighted span."""

    foreground: Optional[str] = None
    italic: bool = False
    bold: bool = False


@dataclass
class HighlightRule:
    """A pattern and the format given to what it matches."""

    format: TextFormat
    pattern: re.Pattern[str]
    end_pattern: Optional[re.Pattern[str]] = None
    kind: str = ""
    custom_rule: bool = False
    start: int = 0
    length: int = 0

    def matches(self, text: str) -> list[tuple[int, int]]:
        """Return (start, length) of every non-empty match in text."""
        return [
            (m.start(), m.end() - m.start())
            for m in self.pattern.finditer(text)
            if m.end() > m.start()
        ]


@dataclass
class LanguagePlugin:
    """Base for language plugins; gives no rules of its own."""

    plug_path: str = ""
    theme: dict[str, ThemePart] = field(default_factory=dict)

    def init_plug(self, path: str) -> None:
        self.plug_path = path

    def unload_plug(self) -> None:
        """Forget the plugin path and theme."""
        self.plug_path = ""
        self.theme = {}

    def set_theme(self, theme: dict[str, ThemePart]) -> None:
        self.theme = dict(theme)

    def make_format(self, part_name: str) -> TextFormat:
        part = self.theme.get(part_name, ThemePart())
        return TextFormat(foreground=part.colour, italic=part.italic, bold=part.bold)

    def _rule(
        self,
        part_name: str,
        pattern: str,
        end_pattern: Optional[str] = None,
        kind: str = "",
        custom_rule: bool = False,
    ) -> HighlightRule:
        return HighlightRule(
            format=self.make_format(part_name),
            pattern=qt_regex(pattern),
            end_pattern=qt_regex(end_pattern) if end_pattern is not None else None,
            kind=kind,
            custom_rule=custom_rule,
        )

    def _comment_rule(self) -> HighlightRule:
        return self._rule("comments", ".*", kind="comment", custom_rule=True)

    def language_rules(self) -> list[HighlightRule]:
        return []

    def multiline_rules(self) -> list[HighlightRule]:
        return []

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return None

    def _apply_comment(self, text, rule, finder) -> Optional[tuple[int, int]]:
        if rule.kind != "comment":
            return None
        span = finder(text)
        if span is not None:
            rule.start, rule.length = span
        return span