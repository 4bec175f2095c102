"""
Case conversion helpers — the built-in template function vocabulary.

All helpers take one value and return a string. Non-string input goes
through ``str()`` first, so an undefined template value (which stringifies
to ``""``) converts to ``""``.

Word splitting rules (any Unicode letter or digit is a word character):
    - runs of other characters separate words ("my-name", "my_name")
    - a lower→upper boundary starts a word ("myName" → my, Name)
    - an acronym ends before a capitalised word ("HTTPServer" → HTTP, Server)
    - digits stay with the word around them ("v2Api" → v2, Api; "2fa" → 2fa)
    - a digit followed by an uppercase letter starts a word ("2FA" → 2, FA)
"""

from __future__ import annotations

import re
from typing import Any, Callable

# Unicode letters and digits; "_" counts as a separator
_CHUNK_RE = re.compile(r"[^\W_]+")


def split_words(value: Any) -> list[str]:
    """Split a mixed-case / delimited string into its words."""
    words: list[str] = []
    for chunk in _CHUNK_RE.findall(_text(value)):
        words.extend(_split_case(chunk))
    return words


def _split_case(chunk: str) -> list[str]:
    """Split one separator-free run on its case boundaries."""
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        prev, cur = chunk[i - 1], chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if cur.isupper() and (prev.islower() or prev.isdigit()):
            boundary = True
        else:
            # HTTPServer: the S starts a new word
            boundary = cur.isupper() and prev.isupper() and nxt.islower()
        if boundary:
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


# ── Helpers ─────────────────────────────────────────────────────


def to_camel(value: Any) -> str:
    """``my-name`` → ``myName``."""
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(_title(w) for w in words[1:])


def to_pascal(value: Any) -> str:
    """``my-name`` → ``MyName``."""
    return "".join(_title(w) for w in split_words(value))


def to_kebab(value: Any) -> str:
    """``myName`` → ``my-name``."""
    return "-".join(w.lower() for w in split_words(value))


def to_snake(value: Any) -> str:
    """``my-name`` → ``my_name``."""
    return "_".join(w.lower() for w in split_words(value))


def to_space(value: Any) -> str:
    """Kebab case with the dashes turned into spaces."""
    return to_kebab(value).replace("-", " ")


def to_lower(value: Any) -> str:
    return _text(value).lower()


def to_upper(value: Any) -> str:
    return _text(value).upper()


def default_helpers() -> dict[str, Callable[..., Any]]:
    """Fresh copy of the built-in helper table, keyed by template name."""
    return {
        "ToCamel": to_camel,
        "ToKebab": to_kebab,
        "ToLower": to_lower,
        "ToPascal": to_pascal,
        "ToSpace": to_space,
        "ToSnake": to_snake,
        "ToUpper": to_upper,
    }
