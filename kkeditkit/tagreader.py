"""Print the chosen child tags of each group element in an XML file."""

from __future__ import annotations

import os
import sys
from typing import IO, Iterable, Optional, Union
from xml.parsers import expat

_USAGE = (
    "Usage:\n"
    "kkeditqttagreader /path/to/file.xml taggroup tagname1 ... [tagname2...tagnameN]"
)

_END_DOCUMENT = ("enddoc", "", "")


def _local(name: str) -> str:
    return name.rpartition(":")[2]


def _tokens(data: Union[str, bytes]) -> list[tuple[str, str, str]]:
    """Turn an XML document into (kind, name, text) stream tokens."""
    tokens: list[tuple[str, str, str]] = [("startdoc", "", "")]

    def characters(text: str) -> None:
        if tokens[-1][0] == "chars":
            tokens[-1] = ("chars", "", tokens[-1][2] + text)
        else:
            tokens.append(("chars", "", text))

    parser = expat.ParserCreate()
    parser.StartElementHandler = lambda name, attrs: tokens.append(("start", _local(name), ""))
    parser.EndElementHandler = lambda name: tokens.append(("end", _local(name), ""))
    parser.CharacterDataHandler = characters
    parser.CommentHandler = lambda text: tokens.append(("comment", "", text))
    parser.ProcessingInstructionHandler = lambda target, data: tokens.append(("pi", target, ""))
    try:
        parser.Parse(data, True)
    except expat.ExpatError as exc:
        raise ValueError(f"malformed XML: {exc}") from exc
    tokens.append(_END_DOCUMENT)
    return tokens


def read_tag_groups(
    source: Union[str, "os.PathLike[str]", IO],
    group_tag: str,
    tag_names: Iterable[str],
) -> list[str]:
    """Return one line per closing group tag, holding 'name=data ' for wanted tags.

    Each start element takes as its data the text of the token straight after it;
    that token is consumed and not examined further.
    """
    if hasattr(source, "read"):
        data = source.read()
    else:
        with open(source, "rb") as handle:
            data = handle.read()

    wanted = set(tag_names)
    lines: list[str] = []
    parts: list[str] = []
    stream = iter(_tokens(data))
    for kind, name, _text in stream:
        if kind == "start":
            following = next(stream, _END_DOCUMENT)
            if name in wanted:
                parts.append(f"{name}={following[2]} ")
        elif name == group_tag:
            lines.append("".join(parts))
            parts.clear()
    return lines


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or not os.path.exists(args[0]):
        print("Cannot read file", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 0
    group = args[1] if len(args) > 1 else ""
    try:
        lines = read_tag_groups(args[0], group, args[2:])
    except OSError as exc:
        print(f"Cannot open file for reading {exc}", file=sys.stderr)
        return 0
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())