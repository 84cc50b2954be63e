"""Base64 and base32 helpers exposed to templates.

Text is encoded as UTF-8. Decoders never raise: malformed input yields the
decoder's error message, which renders visibly in the output.
"""
from __future__ import annotations

import base64
import binascii
from typing import Any, Callable


def _encode(encoder: Callable[[bytes], bytes], value: Any) -> str:
    return encoder(("" if value is None else str(value)).encode("utf-8")).decode("ascii")


def _decode(decoder: Callable[[bytes], bytes], value: Any) -> str:
    try:
        return decoder(("" if value is None else str(value)).encode("ascii")).decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        return str(exc)


def b64enc(value: Any) -> str:
    return _encode(base64.b64encode, value)


def b64dec(value: Any) -> str:
    return _decode(lambda raw: base64.b64decode(raw, validate=True), value)


def b32enc(value: Any) -> str:
    return _encode(base64.b32encode, value)


def b32dec(value: Any) -> str:
    return _decode(base64.b32decode, value)


__all__ = ["b64enc", "b64dec", "b32enc", "b32dec"]
