"""Fixed substitution cipher over letters and the space character."""

from __future__ import annotations

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ "
KEY = "qwertyuiopasdfghjklmnbvcxzMNBVCXZASDFGHJKLPOIUYTREWQ@"

_ENCODE = dict(zip(ALPHABET, KEY))
_DECODE = dict(zip(KEY, ALPHABET))


def _substitute(message: str, table: dict[str, str]) -> str:
    try:
        return "".join(table[ch] for ch in message)
    except KeyError as exc:
        raise ValueError(f"character {exc.args[0]!r} cannot be substituted") from None


def encode(message: str) -> str:
    """Replace every letter and space with its counterpart in the key."""
    return _substitute(message, _ENCODE)


def decode(message: str) -> str:
    """Undo :func:`encode`."""
    return _substitute(message, _DECODE)