"""Control-file protocol for a progress window driven by another program."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_MESSAGE_LEN = 64


def truncate_with_ellipses(text: str, limit: int = MAX_MESSAGE_LEN) -> str:
    """Shorten text longer than limit by keeping both ends around '...'."""
    if len(text) <= limit:
        return text
    keep = (limit - 3) // 2
    return text[:keep] + "..." + text[len(text) - keep:]


def _to_int(text: str) -> int:
    stripped = text.strip()
    if "_" in stripped:
        return 0
    try:
        return int(stripped)
    except ValueError:
        return 0


class UpdateKind(Enum):
    """What a control file asks for."""

    QUIT = "quit"
    PULSE = "pulse"
    PROGRESS = "progress"
    LABEL = "label"


@dataclass
class ProgressUpdate:
    """One reading of the control file."""

    kind: UpdateKind
    label: Optional[str] = None
    value: Optional[int] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    wants_show: bool = False


def parse_control(text: str) -> ProgressUpdate:
    """Interpret the contents of a control file."""
    lines = iter(text.splitlines())

    def next_line() -> str:
        return next(lines, "")

    first = next_line()
    show = len(first) > 1
    if first == "quit":
        return ProgressUpdate(UpdateKind.QUIT, wants_show=show)
    if first == "pulse":
        return ProgressUpdate(
            UpdateKind.PULSE,
            label=truncate_with_ellipses(next_line()),
            value=0,
            minimum=0,
            maximum=0,
            wants_show=show,
        )
    if first == "progress":
        label = truncate_with_ellipses(next_line())
        value = _to_int(next_line())
        minimum = _to_int(next_line())
        maximum = _to_int(next_line())
        return ProgressUpdate(
            UpdateKind.PROGRESS,
            label=label,
            value=value,
            minimum=minimum,
            maximum=maximum,
            wants_show=show,
        )
    return ProgressUpdate(
        UpdateKind.LABEL,
        label=truncate_with_ellipses(first),
        value=_to_int(next_line()),
        wants_show=show,
    )


@dataclass
class ProgressState:
    """State of the progress window."""

    title: str = ""
    cancel_label: Optional[str] = None
    label: str = ""
    value: int = 0
    minimum: int = 0
    maximum: int = 0
    visible: bool = False
    finished: bool = False

    def apply(self, update: ProgressUpdate) -> None:
        """Apply one control-file update."""
        if update.wants_show and not self.visible:
            self.visible = True
        if update.kind is UpdateKind.QUIT:
            self.value = self.maximum
            self.finished = True
            return
        if update.label is not None:
            self.label = update.label
        if update.value is not None:
            self.value = update.value
        if update.minimum is not None:
            self.minimum = update.minimum
        if update.maximum is not None:
            self.maximum = update.maximum