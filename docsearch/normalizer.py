"""Text normalisation: case folding, accent stripping and whitespace cleanup."""

from __future__ import annotations

import string
from dataclasses import dataclass

_ACCENT_MAP: dict[str, str] = {
    "á": "a", "à": "a", "ä": "a", "â": "a",
    "é": "e", "è": "e", "ë": "e", "ê": "e",
    "í": "i", "ì": "i", "ï": "i", "î": "i",
    "ó": "o", "ò": "o", "ö": "o", "ô": "o",
    "ú": "u", "ù": "u", "ü": "u", "û": "u",
    "ñ": "n", "ç": "c",
    "Á": "A", "À": "A", "Ä": "A", "Â": "A",
    "É": "E", "È": "E", "Ë": "E", "Ê": "E",
    "Í": "I", "Ì": "I", "Ï": "I", "Î": "I",
    "Ó": "O", "Ò": "O", "Ö": "O", "Ô": "O",
    "Ú": "U", "Ù": "U", "Ü": "U", "Û": "U",
    "Ñ": "N", "Ç": "C",
}
_ACCENT_TABLE = str.maketrans(_ACCENT_MAP)
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WHITESPACE = frozenset(" \t\n\r\v\f")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_PUNCTUATION = frozenset(string.punctuation)


@dataclass(frozen=True)
class NormalizationConfig:
    """Switches for :func:`normalize_text`."""

    to_lowercase: bool = True
    remove_accents: bool = True
    normalize_whitespace: bool = True
    remove_special_chars: bool = False
    preserve_numbers: bool = True
    preserve_hyphens: bool = True


def remove_accent_char(c: str) -> str:
    """Return the unaccented form of ``c``, or ``c`` itself."""
    return _ACCENT_MAP.get(c, c)


def is_accent_char(c: str) -> bool:
    """Tell whether ``c`` is one of the known accented letters."""
    return c in _ACCENT_MAP


def is_whitespace_char(c: str) -> bool:
    """Tell whether ``c`` is an ASCII whitespace character."""
    return c in _WHITESPACE


def to_lowercase(text: str) -> str:
    """Lowercase the ASCII letters of ``text``; other characters are kept."""
    return text.translate(_LOWER_TABLE)


def remove_accents(text: str) -> str:
    """Replace every known accented letter with its base letter."""
    return text.translate(_ACCENT_TABLE)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs into one space and drop a trailing space."""
    out: list[str] = []
    in_whitespace = False
    for c in text:
        if c in _WHITESPACE:
            if not in_whitespace:
                out.append(" ")
                in_whitespace = True
        else:
            out.append(c)
            in_whitespace = False
    if out and out[-1] == " ":
        out.pop()
    return "".join(out)


def normalize_punctuation(text: str) -> str:
    """Keep ASCII letters, digits, spaces, '-' and '_'; punctuation becomes a space.

    A punctuation mark adds a space only after a non-space character; any
    other character is dropped.
    """
    out: list[str] = []
    for c in text:
        if c in _ALNUM or c in " -_":
            out.append(c)
        elif c in _PUNCTUATION and out and out[-1] != " ":
            out.append(" ")
    return "".join(out)


def _keep(c: str, config: NormalizationConfig) -> bool:
    if not config.remove_special_chars:
        return True
    if c in _ALNUM:
        return True
    if config.preserve_numbers and c in string.digits:
        return True
    return config.preserve_hyphens and c in "-_"


def normalize_text(text: str, config: NormalizationConfig) -> str:
    """Normalise ``text`` according to ``config``.

    Whitespace is always removed from its original place; with
    ``normalize_whitespace`` each run becomes a single space and a trailing
    space is dropped.
    """
    out: list[str] = []
    last_was_whitespace = False
    for c in text:
        if config.remove_accents:
            c = remove_accent_char(c)
        if config.to_lowercase:
            c = to_lowercase(c)
        if c in _WHITESPACE:
            if config.normalize_whitespace and not last_was_whitespace:
                out.append(" ")
                last_was_whitespace = True
            continue
        if _keep(c, config):
            out.append(c)
            last_was_whitespace = False
    if config.normalize_whitespace and out and out[-1] == " ":
        out.pop()
    return "".join(out)


def normalize_simple(text: str) -> str:
    """Normalise ``text`` with the default configuration."""
    return normalize_text(text, NormalizationConfig())