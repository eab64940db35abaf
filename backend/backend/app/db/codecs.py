"""Column codecs for values the relational store has no native type for."""

from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)


def encode_array(value: Sequence[str] | str | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    return json.dumps(list(value))


def decode_array(raw: Any) -> list[str]:
    """Decode a stored array column.

    NULL and empty text decode to ``[]``. Anything that is not a JSON list also
    decodes to ``[]`` so that one bad row never breaks a listing.
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Discarding malformed array column value %r", raw)
        return []
    if not isinstance(value, list):
        logger.warning("Discarding non-list array column value %r", raw)
        return []
    return value


class JSONArrayText(TypeDecorator):
    """A list of strings stored as JSON text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encode_array(value)

    def process_result_value(self, value, dialect):
        return decode_array(value)
