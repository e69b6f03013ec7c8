from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self

import pytest

from dbgcmd.runtime.build_config import DEBUG_BUILD
from dbgcmd.runtime.console import RuntimeConsole
from dbgcmd.runtime.errors import CommandParseError


class Greeting(Enum):
    SAY_HI = "hi"
    SAY_BYE = "bye"

    @classmethod
    def parse(cls, text: str) -> Self:
        try:
            return cls(text.strip())
        except ValueError:
            raise CommandParseError(text) from None


@dataclass(frozen=True, slots=True)
class Teleport:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> Self:
        parts = text.split()
        if len(parts) != 3 or parts[0] != "tp":
            raise CommandParseError(text, reason="expected 'tp X Y'")
        return cls(int(parts[1]), int(parts[2]))


class ExplodingParser:
    @classmethod
    def parse(cls, text: str) -> ExplodingParser:
        raise RuntimeError("parser bug")


@pytest.fixture
def console() -> RuntimeConsole:
    return RuntimeConsole(build=DEBUG_BUILD)


def confirm_all(console: RuntimeConsole, *entries: str) -> None:
    for text in entries:
        console.set_entry(text)
        console.confirm(str)
