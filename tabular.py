"""Build pandas tables from literal columns, row records or CSV files."""
import asyncio
import logging
from collections.abc import Mapping

import pandas as pd

logger = logging.getLogger(__name__)


def table_from_arrays(columns: Mapping) -> pd.DataFrame:
    """Named, equal-length columns -> DataFrame (column order kept)."""
    return pd.DataFrame({name: list(values) for name, values in columns.items()})


def table_from_records(records, columns=None) -> pd.DataFrame:
    return pd.DataFrame.from_records(list(records), columns=columns)


def build_table(source, columns=None) -> pd.DataFrame:
    """Accept either a {name: values} mapping or a sequence of row records."""
    if isinstance(source, pd.DataFrame):
        return source.copy()
    if isinstance(source, Mapping):
        return table_from_arrays(source)
    return table_from_records(source, columns=columns)


def column(table: pd.DataFrame, name: str) -> pd.Series:
    return table[name]


def num_rows(table: pd.DataFrame) -> int:
    return len(table.index)


def auto_type(table: pd.DataFrame) -> pd.DataFrame:
    """Turn text columns that are entirely ISO-8601 dates into datetimes.

    Numbers, booleans and empty fields are already typed by the CSV reader;
    anything that is not a clean date column stays as text.
    """
    typed = table.copy()
    for name in typed.columns:
        values = typed[name]
        is_text = pd.api.types.is_object_dtype(values) or pd.api.types.is_string_dtype(values)
        if not is_text or values.dropna().empty:
            continue
        try:
            typed[name] = pd.to_datetime(values, format="ISO8601")
        except (ValueError, TypeError):
            continue
    return typed


async def load_csv(path) -> pd.DataFrame:
    logger.debug("reading csv %s", path)
    raw = await asyncio.to_thread(pd.read_csv, path)
    table = auto_type(raw)
    logger.debug("read %d rows x %d columns from %s", num_rows(table), len(table.columns), path)
    return table
