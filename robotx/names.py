"""Node full names of the form ``NodeClass::NodeName[::ExName]`` and window titles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Sequence

SEPARATOR = "::"
TITLE_PREFIX = "Robot-X : "

_TITLE_FORBIDDEN = re.compile(r"[^a-zA-Z0-9/_$]")


class InvalidNodeName(ValueError):
    """Raised when a node full name does not have two or three parts."""


@dataclass(frozen=True)
class NodeName:
    """A parsed node full name."""

    node_class: str
    node_name: str
    ex_name: str | None = None

    def __str__(self) -> str:
        parts = [self.node_class, self.node_name]
        if self.ex_name:
            parts.append(self.ex_name)
        return SEPARATOR.join(parts)


def split_name(text: str) -> list[str]:
    """Split a full name on ``::``, dropping empty parts."""
    return [part for part in text.split(SEPARATOR) if part]


def parse_node_name(text: str) -> NodeName:
    """Parse ``NodeClass::NodeName[::ExName]``; raise InvalidNodeName otherwise."""
    parts = split_name(text)
    if not 2 <= len(parts) <= 3:
        raise InvalidNodeName(
            f"node full name must be NodeClass::NodeName[::ExName], got {text!r}"
        )
    return NodeName(*parts)


def sanitize_title(text: str) -> str:
    """Replace every character outside ``[a-zA-Z0-9/_$]`` with an underscore."""
    return _TITLE_FORBIDDEN.sub("_", text)


def _base_name(path: str) -> str:
    name = PurePath(path).name
    return name.split(".", 1)[0]


def window_title(argv: Sequence[str]) -> str:
    """Build the main window title from the command line.

    The first argument names the window; without one, the program's base
    name is used.
    """
    if not argv:
        raise ValueError("argv must hold at least the program name")
    name = argv[1] if len(argv) > 1 else _base_name(argv[0])
    return TITLE_PREFIX + sanitize_title(name)