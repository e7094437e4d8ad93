"""
Option resolution helpers.

Commands receive raw CLI style options as a mapping of option name to the
string the user typed, True for bare flags, or None when the option is
absent. These helpers check the mapping against the names a command accepts
and convert values to the types the command needs.

Every failure raises InvalidCommandInput so the caller can report it before
any work is done.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from disk_balancer.core.errors import InvalidCommandInput


def verify_options(command: str, raw: Mapping[str, Any], valid: Iterable[str]) -> None:
    """
    Reject options the command does not recognize.

    Options that are present but None count as absent.
    """
    allowed = set(valid)
    unknown = sorted(k for k, v in raw.items() if v is not None and k not in allowed)
    if unknown:
        names = ", ".join(unknown)
        raise InvalidCommandInput(f"invalid option(s) for {command}: {names}")


def require_str(raw: Mapping[str, Any], name: str, message: str | None = None) -> str:
    value = raw.get(name)
    if not isinstance(value, str) or not value.strip():
        raise InvalidCommandInput(message or f"{name} must be a non empty string")
    return value.strip()


def optional_str(raw: Mapping[str, Any], name: str) -> str | None:
    value = raw.get(name)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise InvalidCommandInput(f"{name} must be a non empty string")
    return value.strip()


def optional_non_negative_int(raw: Mapping[str, Any], name: str) -> int | None:
    """
    Parse an integer option that may not be negative.

    Integers are accepted as is so programmatic callers do not need to
    stringify values.
    """
    value = raw.get(name)
    if value is None:
        return None

    if isinstance(value, bool):
        raise InvalidCommandInput(f"{name} must be an integer")

    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError as exc:
            raise InvalidCommandInput(f"{name} must be an integer, got {value!r}") from exc

    if parsed < 0:
        raise InvalidCommandInput(f"{name} must not be negative, got {parsed}")
    return parsed


def flag(raw: Mapping[str, Any], name: str) -> bool:
    """A bare flag is on when present and not explicitly False."""
    value = raw.get(name)
    return value is not None and value is not False
