"""Bind visual channels (x, y, stroke, color) to table columns or literal values."""
from enum import Enum

import numpy as np
import pandas as pd

from tabular import column


class Channel(str, Enum):
    x = "x"
    y = "y"
    stroke = "stroke"
    color = "color"


def _resolve(channel: Channel, source, table):
    """Return (field name, values) for one binding."""
    if isinstance(source, pd.Series):
        name = source.name if source.name is not None else channel.value
        return str(name), source.reset_index(drop=True)
    if isinstance(source, str):
        if table is None:
            raise ValueError(f"channel {channel.value!r} names field {source!r} but no table was given")
        return source, column(table, source).reset_index(drop=True)
    return channel.value, pd.Series(np.asarray(source), name=channel.value)


def _free_field(base, values, columns):
    """First of base, base_1, base_2, ... that is unused or already holds ``values``."""
    field, n = base, 0
    while field in columns and not columns[field].equals(values):
        n += 1
        field = f"{base}_{n}"
    return field


def bind_channels(bindings, table=None):
    """Collect channel bindings into one frame for a single mark.

    Returns ``(frame, fields)`` where ``frame`` has one column per distinct
    source and one row per mark, and ``fields`` maps channel name to the
    column of ``frame`` that drives it. Every source must have the same length.
    """
    columns = {}
    fields = {}
    for key, source in bindings.items():
        channel = Channel(key)
        field, values = _resolve(channel, source, table)
        if field in columns and not columns[field].equals(values):
            field = _free_field(channel.value, values, columns)
        columns[field] = values
        fields[channel.value] = field

    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"channel bindings have different lengths: {lengths}")

    return pd.DataFrame(columns), fields
