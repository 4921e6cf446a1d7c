# kkeditkit

Syntax highlighting rule sets for a programmer's text editor, and a few
small helpers that go with the editor.

## Language rule sets

Each language has a plugin class derived from
`kkeditkit.rules.LanguagePlugin`:

| Module                 | Class        |
|------------------------|--------------|
| `kkeditkit.cpplang`    | `CppLang`    |
| `kkeditkit.javalang`   | `JavaLang`   |
| `kkeditkit.jslang`     | `JsLang`     |
| `kkeditkit.jsonlang`   | `JsonLang`   |
| `kkeditkit.htmllang`   | `HtmlLang`   |
| `kkeditkit.makelang`   | `MakeLang`   |
| `kkeditkit.phplang`    | `PhpLang`    |
| `kkeditkit.pythonlang` | `PythonLang` |
| `kkeditkit.shlang`     | `ShLang`     |

Give a plugin a theme with `set_theme()`: a dict mapping part names such as
`"keywords"`, `"comments"` or `"quotes"` to `ThemePart` values (colour,
italic, bold). Parts missing from the theme get a plain `TextFormat`. The
plugin then offers:

- `language_rules()`: the single-line `HighlightRule`s, in the order they
  are applied;
- `multiline_rules()`: rules with both a start and an end pattern, for block
  comments and the like (an empty list where the language has none);
- `run_custom_rule(text, rule)`: for a rule whose `kind` is `"comment"`,
  finds where a line comment begins outside any string, stores it in the
  rule's `start` and `length`, and returns `(start, length)`, or `None`.

`HighlightRule.matches(text)` returns the `(start, length)` of every
non-empty match of the rule's pattern.

```python
from kkeditkit.cpplang import CppLang

plugin = CppLang()
for rule in plugin.language_rules():
    print(rule.matches("int x = 42;"))
```

`kkeditkit.rules` also holds the shared building blocks: `qt_regex()`, which
compiles patterns written with POSIX classes such as `[[:word:]]`, and the
comment scanners `find_slash_comment()`, `find_slash_comment_any_quote()`
and `find_hash_comment()`.

## Tag reader

`kkeditkit.tagreader.read_tag_groups(source, group_tag, tag_names)` walks an
XML document given as a path or an open file. Each time a `group_tag`
element closes it gives one line of `name=value ` pairs for the wanted inner
tags met since the last such line. Malformed XML raises `ValueError`.

From the command line:

```
kkeditkit-tagreader /path/to/file.xml taggroup tagname1 tagname2
```

## Editor messages

`kkeditkit.messages` holds the message vocabulary of the editor. `MsgAction`
lists the message types; `message_to_type()` maps a command or information
request name such as `"gotoline"` to its type, ignoring case, and falls back
to the activate type. `parse_args()` turns command-line style arguments
(`-c`, `-d`, `-k`, `-i`, `-f`, `-a`, `-r`, `-h`) into `MessageOptions`,
raising `UsageError` for an unknown option; `help_text()` returns the usage
text listing the known commands and requests.

## Progress control files

`kkeditkit.progress` reads the control-file format that drives a progress
display. `parse_control()` turns a control file's text into a
`ProgressUpdate` (a plain label and value, `pulse`, `progress` or `quit`),
and `ProgressState.apply()` applies it to the current state. Labels longer
than 64 characters are shortened in the middle by
`truncate_with_ellipses()`.

## What it does not do

- There are no highlighting rules for Go.
- `kkeditkit.messages` only builds and parses messages; it does not send
  them to a running editor or wait for replies.
- `kkeditkit.progress` keeps the state of a progress display but draws no
  window and does not watch a control file by itself.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```