"""String helpers exposed to templates.

Thin wrappers over ``str`` methods and :mod:`textwrap`. The subject string
is always the LAST argument so that it can be piped in as a filter:

    {{ name | trimprefix("Mr. ") | upper }}
"""
from __future__ import annotations

import textwrap
from typing import Any, Iterable


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def upper(s: Any) -> str:
    return _text(s).upper()


def lower(s: Any) -> str:
    return _text(s).lower()


def title(s: Any) -> str:
    return _text(s).title()


def untitle(s: Any) -> str:
    """Lowercase the first letter of each word."""
    return " ".join(word[:1].lower() + word[1:] for word in _text(s).split(" "))


def trim(s: Any) -> str:
    return _text(s).strip()


def trimall(cutset: Any, s: Any) -> str:
    return _text(s).strip(_text(cutset))


def trimprefix(prefix: Any, s: Any) -> str:
    return _text(s).removeprefix(_text(prefix))


def trimsuffix(suffix: Any, s: Any) -> str:
    return _text(s).removesuffix(_text(suffix))


def repeat(count: int, s: Any) -> str:
    return _text(s) * max(_int(count), 0)


def substr(start: int, end: int, s: Any) -> str:
    """Slice ``s[start:end]``; a negative ``end`` means "to the end"."""
    text = _text(s)
    start = max(_int(start), 0)
    end = _int(end, -1)
    if end < 0 or end > len(text):
        end = len(text)
    return text[start:end]


def contains(needle: Any, s: Any) -> bool:
    return _text(needle) in _text(s)


def hasprefix(prefix: Any, s: Any) -> bool:
    return _text(s).startswith(_text(prefix))


def hassuffix(suffix: Any, s: Any) -> bool:
    return _text(s).endswith(_text(suffix))


def quote(*items: Any) -> str:
    return " ".join(f'"{_text(item)}"' for item in items)


def squote(*items: Any) -> str:
    return " ".join(f"'{_text(item)}'" for item in items)


def cat(*items: Any) -> str:
    """Join non-None items with single spaces."""
    return " ".join(str(item) for item in items if item is not None)


def indent(width: int, s: Any) -> str:
    pad = " " * max(_int(width), 0)
    return pad + _text(s).replace("\n", "\n" + pad)


def replace(old: Any, new: Any, s: Any) -> str:
    return _text(s).replace(_text(old), _text(new))


def plural(one: Any, many: Any, count: Any) -> Any:
    return one if count == 1 else many


def wrap(width: int, s: Any) -> str:
    return wrapwith(width, "\n", s)


def wrapwith(width: int, sep: Any, s: Any) -> str:
    lines = textwrap.wrap(_text(s), width=max(_int(width, 80), 1), break_long_words=False)
    return _text(sep).join(lines)


def join(sep: Any, items: Iterable[Any]) -> str:
    if isinstance(items, str):
        return items
    return _text(sep).join(_text(item) for item in items or ())


__all__ = [
    "upper",
    "lower",
    "title",
    "untitle",
    "trim",
    "trimall",
    "trimprefix",
    "trimsuffix",
    "repeat",
    "substr",
    "contains",
    "hasprefix",
    "hassuffix",
    "quote",
    "squote",
    "cat",
    "indent",
    "replace",
    "plural",
    "wrap",
    "wrapwith",
    "join",
]
