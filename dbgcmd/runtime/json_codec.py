"""JSON codec helpers for console log records."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_bytes(payload: Any) -> bytes:
    """Serialize payload to UTF-8 JSON bytes.

    Values orjson does not know natively (exceptions, paths, arbitrary host
    objects passed through ``extra=``) are written with ``str()``.
    """
    return orjson.dumps(payload, default=str)


def dumps_text(payload: Any) -> str:
    return dumps_bytes(payload).decode("utf-8")


__all__ = ["dumps_bytes", "dumps_text"]
