import pytest

from kkeditkit.messages import (
    COMMANDS,
    DEFAULT_KEY,
    INFO_REQUESTS,
    MAX_MSG_SIZE,
    RAISE_FLAG,
    MsgAction,
    UsageError,
    help_text,
    message_to_type,
    parse_args,
)


def test_activate_is_first_type():
    assert message_to_type("activate") == MsgAction.ACTIVATEAPP


def test_lookup_ignores_case():
    assert message_to_type("OpenFile") == message_to_type("openfile")


def test_unknown_name_gives_activate():
    assert message_to_type("no-such-command") == MsgAction.ACTIVATEAPP


def test_command_types_are_distinct_and_ordered():
    types = [message_to_type(name) for name in COMMANDS]
    assert types == sorted(types)
    assert len(set(types)) == len(COMMANDS)


def test_info_types_follow_commands():
    last_command = message_to_type(COMMANDS[-1])
    info = [message_to_type(name) for name in INFO_REQUESTS]
    assert min(info) > last_command
    assert len(set(info)) == len(INFO_REQUESTS)


def test_defaults():
    options = parse_args([])
    assert options.msg_type == MsgAction.ACTIVATEAPP
    assert options.key == DEFAULT_KEY
    assert options.data == ""
    assert not options.flush


def test_command_and_data():
    options = parse_args(["-c", "quit", "--data", "hello"])
    assert options.msg_type == message_to_type("quit")
    assert options.data == "hello"


def test_data_is_truncated():
    options = parse_args(["-d", "x" * (MAX_MSG_SIZE * 2)])
    assert len(options.data) == MAX_MSG_SIZE - 1


def test_raise_flag_ored_into_type():
    options = parse_args(["-c", "paste", "-r"])
    assert options.msg_type == message_to_type("paste") | RAISE_FLAG


def test_later_command_overrides_raise():
    options = parse_args(["-r", "-c", "paste"])
    assert options.msg_type == message_to_type("paste")


def test_key_accepts_hex_and_decimal():
    assert parse_args(["-k", "0x10"]).key == 16
    assert parse_args(["--key", "42"]).key == 42


def test_info_waits_and_clears_autowait():
    options = parse_args(["-a", "-i", "sendposdata"])
    assert options.wait_for_reply
    assert not options.wait_continue
    assert options.msg_type == message_to_type("sendposdata")


def test_autowait_alone():
    assert parse_args(["-a", "-c", "copy"]).wait_continue


def test_flush():
    assert parse_args(["--flush"]).flush


def test_help():
    assert parse_args(["-h"]).show_help
    assert parse_args(["--help"]).show_help


def test_unknown_option_raises():
    with pytest.raises(UsageError):
        parse_args(["-z"])


def test_help_text_lists_everything():
    text = help_text()
    assert text.startswith("Usage: kkedtqtmsg-0.7.0")
    for name in COMMANDS + INFO_REQUESTS:
        assert name in text