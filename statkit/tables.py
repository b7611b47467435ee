"""Convert between nested mappings and DataFrames, and summarize tables.

This module is the boundary between dictionary-shaped data and
``pandas.DataFrame`` tables. Conversions validate shape up front and raise
:class:`~statkit.errors.SchemaMismatchError` instead of letting pandas
broadcast or pad silently.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
from pandas.api.types import is_list_like, is_numeric_dtype

from .errors import InvalidInputError, SchemaMismatchError


def dict_to_dataframe(nested_mapping: Mapping[str, Any]) -> pd.DataFrame:
    """Build a DataFrame whose columns are the top-level keys of a mapping.

    Args:
        nested_mapping (Mapping): Column name to column data. Column data is
            either a list-like (rows by position) or a mapping (rows keyed by
            the mapping's keys, which become the index).

    Returns:
        pandas.DataFrame: One column per top-level key, in key order.

    Raises:
        SchemaMismatchError: If a column is a scalar, columns differ in length
            or row keys, or list-like and mapping columns are mixed.
    """
    if not nested_mapping:
        return pd.DataFrame()

    keyed = {name: isinstance(col, Mapping) for name, col in nested_mapping.items()}
    if len(set(keyed.values())) > 1:
        raise SchemaMismatchError(
            "Columns must be all list-like or all mappings, not a mix."
        )

    if all(keyed.values()):
        row_keys = {name: list(col.keys()) for name, col in nested_mapping.items()}
        reference = next(iter(row_keys.values()))
        for name, keys in row_keys.items():
            if set(keys) != set(reference):
                raise SchemaMismatchError(
                    f"Column '{name}' has row keys {keys}, expected {reference}."
                )
        return pd.DataFrame(
            {name: [col[k] for k in reference] for name, col in nested_mapping.items()},
            index=reference,
        )

    lengths = {}
    for name, col in nested_mapping.items():
        if not is_list_like(col):
            raise SchemaMismatchError(f"Column '{name}' is not list-like: {col!r}")
        lengths[name] = len(col)
    if len(set(lengths.values())) > 1:
        raise SchemaMismatchError(f"Column lengths differ: {lengths}")
    return pd.DataFrame({name: list(col) for name, col in nested_mapping.items()})


def dataframe_to_nested_dict(table: pd.DataFrame) -> Dict[Any, Dict[str, Any]]:
    """Key each row by its first-column value, mapping to the remaining columns.

    >>> df = pd.DataFrame({"city": ["Oslo", "Rome"], "temp": [4, 18]})
    >>> dataframe_to_nested_dict(df)
    {'Oslo': {'temp': 4}, 'Rome': {'temp': 18}}

    Raises:
        InvalidInputError: If the table has fewer than two columns.
        SchemaMismatchError: If the first column holds duplicate keys.
    """
    if table.shape[1] < 2:
        raise InvalidInputError(
            f"Need at least two columns to build a nested mapping, got {table.shape[1]}."
        )
    key_col = table.columns[0]
    keys = table[key_col]
    if keys.duplicated().any():
        dupes = keys[keys.duplicated()].unique().tolist()
        raise SchemaMismatchError(f"Key column '{key_col}' has duplicate values: {dupes}")
    return table.set_index(key_col).to_dict(orient="index")


def transpose_dataframe(table: pd.DataFrame) -> pd.DataFrame:
    """Swap rows and columns of a homogeneous table.

    Column labels become the index and the old index becomes the columns.

    Raises:
        SchemaMismatchError: If the table mixes numeric and non-numeric
            columns, or several non-numeric dtypes.
    """
    dtypes = list(table.dtypes)
    if not all(is_numeric_dtype(d) for d in dtypes) and len(set(dtypes)) > 1:
        raise SchemaMismatchError(
            f"Transpose requires a homogeneous table, got dtypes {sorted(set(map(str, dtypes)))}."
        )
    return table.T


def get_nested_keys(nested_mapping: Mapping[str, Any]) -> List[str]:
    """List every key at every depth, depth-first in iteration order."""
    keys: List[str] = []
    for key, value in nested_mapping.items():
        keys.append(key)
        if isinstance(value, Mapping):
            keys.extend(get_nested_keys(value))
    return keys


def create_time_series(table: pd.DataFrame, time_col: str, value_col: str) -> pd.Series:
    """Index ``value_col`` by the parsed timestamps in ``time_col``.

    Args:
        table (pandas.DataFrame): Source data.
        time_col (str): Column with dates or date strings.
        value_col (str): Column with the observed values.

    Returns:
        pandas.Series: Values named ``value_col`` on a sorted ``DatetimeIndex``.

    Raises:
        SchemaMismatchError: If either column is missing.
        InvalidInputError: If a timestamp cannot be parsed.
    """
    missing = [c for c in (time_col, value_col) if c not in table.columns]
    if missing:
        raise SchemaMismatchError(f"Table is missing columns: {missing}")
    try:
        index = pd.to_datetime(table[time_col])
    except (ValueError, TypeError) as exc:
        raise InvalidInputError(f"Column '{time_col}' holds unparseable timestamps.") from exc
    series = pd.Series(table[value_col].to_numpy(), index=pd.DatetimeIndex(index), name=value_col)
    series.index.name = time_col
    return series.sort_index(kind="stable")


def group_summary(
    table: pd.DataFrame,
    by: str,
    columns: Optional[Sequence[str]] = None,
    agg: str = "mean",
) -> pd.DataFrame:
    """Aggregate numeric columns per group, with a row count.

    Args:
        table (pandas.DataFrame): Source data.
        by (str): Grouping column.
        columns (sequence of str, optional): Columns to aggregate. Defaults to
            every numeric column other than ``by``.
        agg (str): Any pandas reduction name, e.g. ``"mean"`` or ``"sum"``.

    Returns:
        pandas.DataFrame: One row per group with ``by``, ``count`` and the
        aggregated columns, sorted by group.

    Raises:
        SchemaMismatchError: If ``by`` or a requested column is missing, or
            a column named ``count`` would collide with the row count.
    """
    if by not in table.columns:
        raise SchemaMismatchError(f"Table is missing grouping column '{by}'.")
    if columns is None:
        columns = [c for c in table.select_dtypes(include="number").columns if c != by]
    missing = [c for c in columns if c not in table.columns]
    if missing:
        raise SchemaMismatchError(f"Table is missing columns: {missing}")
    if "count" in columns or by == "count":
        raise SchemaMismatchError(
            "Column name 'count' is reserved for the group row count."
        )

    grouped = table.groupby(by, sort=True)
    summary = grouped[list(columns)].agg(agg) if columns else pd.DataFrame(index=grouped.size().index)
    summary.insert(0, "count", grouped.size())
    return summary.reset_index()
