"""Message formatting constants."""

from __future__ import annotations

MESSAGE_TERMINATOR: str = "."
MESSAGE_SEPARATOR: str = " "
