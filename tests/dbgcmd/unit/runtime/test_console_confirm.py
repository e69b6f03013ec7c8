from __future__ import annotations

import logging

import pytest

from dbgcmd.api.console import ParseFailed, Parsed
from dbgcmd.runtime.console import RuntimeConsole
from dbgcmd.runtime.errors import CommandParseError
from tests.dbgcmd.conftest import ExplodingParser, Greeting, Teleport


def test_typed_command_parses_and_archives(console: RuntimeConsole) -> None:
    console.receive_char("h")
    console.receive_char("i")
    result = console.confirm(Greeting)
    assert result == Parsed(Greeting.SAY_HI)
    assert console.entry() == ""
    assert console.history() == ("hi",)
    assert console.history_cursor is None


def test_dataclass_command_parse(console: RuntimeConsole) -> None:
    console.set_entry("tp 3 -4")
    assert console.confirm(Teleport) == Parsed(Teleport(3, -4))


def test_plain_callable_parser(console: RuntimeConsole) -> None:
    console.set_entry("100")
    assert console.confirm(int) == Parsed(100)
    assert console.entry() == ""


def test_parse_failure_returns_caller_error_and_still_archives(console: RuntimeConsole) -> None:
    console.set_entry("1a0")
    result = console.confirm(int)
    assert isinstance(result, ParseFailed)
    assert isinstance(result.error, ValueError)
    assert console.entry() == ""
    assert console.history() == ("1a0",)


def test_parse_failure_error_is_passed_through_unchanged(console: RuntimeConsole) -> None:
    console.set_entry("dance")
    result = console.confirm(Greeting)
    assert isinstance(result, ParseFailed)
    assert isinstance(result.error, CommandParseError)
    assert result.error.text == "dance"


def test_lookup_errors_count_as_parse_failures(console: RuntimeConsole) -> None:
    console.set_entry("nope")
    result = console.confirm(lambda text: Greeting[text])
    assert isinstance(result, ParseFailed)
    assert isinstance(result.error, KeyError)


def test_blank_entries_are_parsed_but_not_archived(console: RuntimeConsole) -> None:
    assert console.confirm(str) == Parsed("")
    console.set_entry("   ")
    assert isinstance(console.confirm(Greeting), ParseFailed)
    assert console.history() == ()
    assert console.entry() == ""


def test_confirm_while_browsing_archives_browsed_text(console: RuntimeConsole) -> None:
    console.set_entry("hi")
    console.confirm(Greeting)
    console.up()
    assert console.confirm(Greeting) == Parsed(Greeting.SAY_HI)
    assert console.history() == ("hi", "hi")
    assert console.history_cursor is None


def test_unexpected_parser_errors_propagate_after_bookkeeping(console: RuntimeConsole) -> None:
    console.set_entry("boom")
    with pytest.raises(RuntimeError, match="parser bug"):
        console.confirm(ExplodingParser)
    assert console.entry() == ""
    assert console.history() == ("boom",)


def test_parse_failure_is_logged_at_debug(console: RuntimeConsole, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="dbgcmd.runtime.console")
    console.set_entry("dance")
    console.confirm(Greeting)
    records = [r for r in caplog.records if r.getMessage() == "console_confirm_parse_failed"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert records[0].exc_info is not None
    assert getattr(records[0], "entry_text") == "dance"


class SpawnCommand:
    def __init__(self, text: str) -> None:
        name = text.removeprefix("spawn ").strip()
        if not name or name == text.strip():
            raise CommandParseError(text, reason="expected 'spawn NAME'")
        self.name = name

    def parse(self, extra: str) -> str:
        return f"{self.name} {extra}"


class Heal:
    @staticmethod
    def parse(text: str) -> int:
        return int(text.removeprefix("heal "))


def test_instance_method_named_parse_falls_back_to_constructor(console: RuntimeConsole) -> None:
    console.set_entry("spawn orc")
    result = console.confirm(SpawnCommand)
    assert isinstance(result, Parsed)
    assert isinstance(result.value, SpawnCommand)
    assert result.value.name == "orc"

    console.set_entry("jump")
    result = console.confirm(SpawnCommand)
    assert isinstance(result, ParseFailed)
    assert isinstance(result.error, CommandParseError)


def test_staticmethod_parse_is_used(console: RuntimeConsole) -> None:
    console.set_entry("heal 25")
    assert console.confirm(Heal) == Parsed(25)
