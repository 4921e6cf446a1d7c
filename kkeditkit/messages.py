"""Command-line options and message types for talking to a running editor."""

from __future__ import annotations

import getopt
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

APP_NAME = "kkedtqtmsg"
MSG_VERSION = "0.7.0"

MAX_MSG_SIZE = 4096
DEFAULT_KEY = 0xDEADBEEF

ANY_MSG = 0
ALL_MSG_TYPES = 0xFFF
GET_MSG = 0x1000
SEND_MSG = 0x1000
RAISE_FLAG = 0x4000
CONTINUE_FLAG = 0x8000

EXIT_OK = 0
EXIT_UNKNOWN_ARG = 1
EXIT_NO_QUEUE = 2
EXIT_NO_SEND = 3


class MsgAction(IntEnum):
    """Message types understood by the editor."""

    ACTIVATEAPP = 100
    NEWFILE = 101
    SAVEFILE = 102
    SAVEFILEAS = 103
    QUITAPP = 104
    SAVECURRENTSESSION = 105
    RESTORESESSION = 106
    GOTOLINE = 107
    SEARCHDEF = 108
    SELECTTAB = 109
    SELECTTABBYNAME = 110
    SELECTTABBYPATH = 111
    BOOKMARK = 112
    CLOSETAB = 113
    CLOSEALLTABS = 114
    SETUSERMARK = 115
    UNSETUSERMARK = 116
    MOVETO = 117
    PASTE = 118
    COPY = 119
    CUT = 120
    INSERTTEXT = 121
    INSERTNL = 122
    SELECTBETWEEN = 123
    INSERTFILE = 124
    PRINTFILES = 125
    RUNTOOL = 126
    ACTIVATEMENUBYLABELED = 127
    OPENINDOCVIEW = 128
    SENDPOSDATA = 129
    SENDSELECTEDTEXT = 130
    SENDCURRENTURL = 131
    SENDSESSIONNAME = 132
    LAST = 133


COMMANDS = (
    "activate", "openfile", "newfile", "savefile", "savefileas", "quit",
    "savesession", "restoresession", "gotoline", "searchdefine", "selecttab",
    "selecttabbyname", "selecttabbypath", "togglebookmark", "closetab",
    "closealltabs", "setusermark", "unsetusermark", "moveto", "paste", "copy",
    "cut", "inserttext", "insertnl", "selectbetween", "insertfile", "printfile",
    "runtool", "activatemenubylabel", "openindocview",
)

INFO_REQUESTS = ("sendposdata", "sendselectedtext", "sendcurrenturl", "sendsessionname")


class UsageError(ValueError):
    """Raised for an option that is not recognised."""


@dataclass
class MessageOptions:
    """What the command line asks to be sent."""

    msg_type: int = int(MsgAction.ACTIVATEAPP)
    data: str = ""
    key: int = DEFAULT_KEY
    flush: bool = False
    wait_for_reply: bool = False
    wait_continue: bool = False
    show_help: bool = False


def message_to_type(name: str) -> int:
    """Map a command or information request name to its message type.

    Names are compared without regard to case. Commands number from 100 in list
    order; information requests follow on after the whole command list. An
    unknown name gives the activate type.
    """
    lowered = name.lower()
    for index, command in enumerate(COMMANDS):
        if command == lowered:
            return index + int(MsgAction.ACTIVATEAPP)
    for index, request in enumerate(INFO_REQUESTS):
        if request == lowered:
            return len(COMMANDS) + index + int(MsgAction.ACTIVATEAPP)
    return int(MsgAction.ACTIVATEAPP)


def help_text() -> str:
    """Return the usage text."""
    lines = [
        f"Usage: {APP_NAME}-{MSG_VERSION} [OPTION] [TEXT]",
        "A CLI application to send messages to kkeditqt",
        " -c, --command\tSend command [TEXT]",
        " -d, --data\tData to send [TEXT]",
        " -f, --flush\tFlush message queue quietly",
        " -k, --key\tUse key [INTEGER] instead of generated one",
        " -i, --info\tSend information request and wait for reply to arrive, "
        "then print to stdout (blocking)",
        " -a, --autowait\tWait for command to complete (blocking, no output)",
        " -r, --raise\tRaise/Activate KKEdit",
        " -h, -?, --help\tprint this help",
        "",
        "",
        "Commands recognised by KKEditQT:",
        "".join(f"{command} " for command in COMMANDS),
        "N.B. Newline escapes( '\\n' ) in inserttext data are passed as literal '\\n', "
        "( a quirk of argv ).",
        "",
        "",
        "Information resquests recognised by KKEditQT:",
        "".join(f"{request} " for request in INFO_REQUESTS),
        "N.B. 'sendposdata' sends data in the format the tab number ( 0 based ):"
        "line number ( 1 based ):column number ( 1 based ).",
        "",
        f"N.B. 'sendposdata' Will send a maximum {MAX_MSG_SIZE} characters, "
        "defined in kkedit-includes.h as MAXMSGSIZE.",
        "",
        "",
        "Commands that dont require a parameter:",
        "activate,quit,bookmark,closetab,closealltabs,setusermark,unsetusermark,"
        "paste,copy,cut,insertnl,printfile,savesession",
        "",
    ]
    return "\n".join(lines)


def _strtol(text: str) -> int:
    """Parse an integer the way strtol does with base 0; junk gives 0."""
    body = text.lstrip()
    sign = 1
    if body[:1] in "+-" and body:
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body[:2].lower() == "0x":
        base, digits, body = 16, "0123456789abcdefABCDEF", body[2:]
    elif body[:1] == "0":
        base, digits = 8, "01234567"
    else:
        base, digits = 10, "0123456789"
    taken = ""
    for char in body:
        if char not in digits:
            break
        taken += char
    return sign * int(taken, base) if taken else 0


_SHORT = "?hfari:d:k:c:"
_LONG = ["command=", "data=", "key=", "info=", "flush", "autowait", "raise", "help"]


def parse_args(argv: Optional[list[str]] = None) -> MessageOptions:
    """Parse command-line options in order; raise UsageError on an unknown one."""
    args = [] if argv is None else list(argv)
    try:
        pairs, _rest = getopt.gnu_getopt(args, _SHORT, _LONG)
    except getopt.GetoptError as exc:
        raise UsageError(f"?? Unknown argument {exc.opt} ??") from exc

    options = MessageOptions()
    for flag, value in pairs:
        if flag in ("-c", "--command"):
            options.msg_type = message_to_type(value)
        elif flag in ("-d", "--data"):
            options.data = value[: MAX_MSG_SIZE - 1]
        elif flag in ("-f", "--flush"):
            options.flush = True
        elif flag in ("-i", "--info"):
            options.msg_type = message_to_type(value)
            options.wait_for_reply = True
        elif flag in ("-a", "--autowait"):
            options.wait_continue = True
        elif flag in ("-r", "--raise"):
            options.msg_type |= RAISE_FLAG
        elif flag in ("-k", "--key"):
            options.key = _strtol(value)
        elif flag in ("-?", "-h", "--help"):
            options.show_help = True
            return options
    if options.wait_for_reply:
        options.wait_continue = False
    return options