from __future__ import annotations

import datetime
import decimal
import enum
import fractions
import pathlib
import uuid
from typing import Any

DEFAULT_VALUE_TYPES: tuple[type[Any], ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    decimal.Decimal,
    fractions.Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    pathlib.PurePath,
    enum.Enum,
    list,
    tuple,
    dict,
    set,
    frozenset,
)
"""Types whose instances are leaf configuration values.

Members declared with (or holding) one of these types are never registered and
never walked. ``datetime.datetime`` is covered through ``datetime.date``.
Named tuples are exempt from the ``tuple`` entry so they can act as
configuration sections.
"""
