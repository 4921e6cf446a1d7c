"""Highlighting rules for C and C++."""

from __future__ import annotations

from typing import Optional

from kkeditkit.rules import (
    NUMBERS_PATTERN,
    HighlightRule,
    LanguagePlugin,
    find_slash_comment,
)

_KEYWORDS = (
    "__asm|__cdecl|__declspec|__export|__far16|__fastcall|__fortran|__import|__pascal|"
    "__rtti|__stdcall|_asm|_cdecl|__except|_export|_far16|_fastcall|__finally|_fortran|"
    "_import|_pascal|_stdcall|__thread|__try|asm|auto|break|case|catch|cdecl|continue|"
    "default|do|else|enum|extern|goto|pascal|register|return|sizeof|static|struct|switch|"
    "typedef|union|volatile|class|const_cast|delete|dynamic_cast|explicit|friend|inline|"
    "mutable|namespace|new|operator|private|protected|public|reinterpret_cast|static_cast|"
    "template|this|throw|try|typeid|typename|using|virtual|for|if|while"
)

_QUOTES = r'("([^"\\]*(\\.[^"\\]*)*)")' + r"|('\\.')|('.')"


class CppLang(LanguagePlugin):
    """C/C++ language plugin."""

    def language_rules(self) -> list[HighlightRule]:
        return [
            self._rule("functions", r"([[:word:]]+(\.|\-\>|(?=[[:space:]]*\()))+"),
            self._rule("class", r"\b[A-Za-z0-9_]+(?=::)\b"),
            self._rule("variables", r"([a-zA-Z0-9_\.]|-\>)+[[:space:]]*(?==)"),
            self._rule("numbers", NUMBERS_PATTERN),
            self._rule("keywords", rf"\b({_KEYWORDS})\b"),
            self._rule(
                "includes",
                r"#[[:space:]]*(define|include|undef|ifdef|ifndef|if|elif|else|endif|pragma|error)\b.*$",
            ),
            self._rule(
                "types",
                r"\b(bool|char|double|float|int|long|short|signed|unsigned|void|wchar_t|const)\b",
            ),
            self._rule("custom", "NULL|nullptr|true|false|TRUE|FALSE"),
            self._rule("quotes", _QUOTES),
            self._comment_rule(),
        ]

    def multiline_rules(self) -> list[HighlightRule]:
        return [
            self._rule("comments", r"/\*", r"\*/"),
            self._rule("comments", "^#if 0", "^(#endif|#else)"),
        ]

    def run_custom_rule(self, text: str, rule: HighlightRule) -> Optional[tuple[int, int]]:
        return self._apply_comment(text, rule, find_slash_comment)