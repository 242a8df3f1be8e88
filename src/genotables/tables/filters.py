"""Row filtering: boolean masks, combinators and selection conventions.

Masks are plain boolean pandas Series aligned to the frame's index, so they
combine with the usual operators::

    mask = is_in(df, "gene", {"TP53", "KRAS"}) & matches(df, "cdna", r">")
    mask = equals(df, "type", "SNP") | ~equals(df, "filter", "PASS")
    df_f = filter_rows(df, mask)

Selections (``{column: value}``) follow one convention shared by the report,
the notebook and the app: ``SELECTION_ALL`` means "no filter" for a column.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Iterable

import pandas as pd

from genotables.utils.logging import get_logger

logger = get_logger(__name__)

# Sentinel value meaning "no filter" for a selection column.
SELECTION_ALL = "(all)"


def _column(df: pd.DataFrame, col: str) -> pd.Series:
    if col not in df.columns:
        raise KeyError(f"Unknown column {col!r}; available: {list(df.columns)}")
    return df[col]


def equals(df: pd.DataFrame, col: str, value: Any) -> pd.Series:
    """Mask of rows where df[col] == value."""
    return (_column(df, col) == value).fillna(False).astype(bool)


def is_in(df: pd.DataFrame, col: str, values: Iterable[Any]) -> pd.Series:
    """Mask of rows where df[col] is one of values."""
    return _column(df, col).isin(list(values)).astype(bool)


def matches(df: pd.DataFrame, col: str, pattern: str, *, case: bool = True) -> pd.Series:
    """Mask of rows where the regex pattern is found in df[col]. Missing values never match."""
    s = _column(df, col).astype("string")
    return s.str.contains(pattern, case=case, regex=True).fillna(False).astype(bool)


def all_of(*masks: pd.Series) -> pd.Series:
    """Logical AND of masks."""
    if not masks:
        raise ValueError("all_of needs at least one mask")
    return reduce(lambda a, b: a & b, masks)


def any_of(*masks: pd.Series) -> pd.Series:
    """Logical OR of masks."""
    if not masks:
        raise ValueError("any_of needs at least one mask")
    return reduce(lambda a, b: a | b, masks)


def filter_rows(df: pd.DataFrame, mask: pd.Series) -> pd.DataFrame:
    """Return the rows of df where mask is True, with a fresh 0..n-1 index."""
    if not mask.index.equals(df.index):
        raise ValueError("mask index does not match the frame index")
    out = df[mask.astype(bool)].reset_index(drop=True)
    logger.debug(f"filter_rows: {len(df)} -> {len(out)} rows")
    return out


def default_selections(columns: list[str]) -> dict[str, str]:
    """Selections dict with every column set to SELECTION_ALL."""
    return {col: SELECTION_ALL for col in columns}


def is_filtered(selections: dict[str, object]) -> bool:
    """True if any selection applies a filter (is not SELECTION_ALL)."""
    return any(v != SELECTION_ALL for v in selections.values())


def format_selection_display(selections: dict[str, object]) -> str:
    """Short label for titles / legends: active selections or 'All'."""
    if not is_filtered(selections):
        return "All"
    return ", ".join(f"{k}={v}" for k, v in selections.items() if v != SELECTION_ALL)


def filter_by_selections(df: pd.DataFrame, selections: dict[str, Any]) -> pd.DataFrame:
    """AND together ``col == value`` for every active selection.

    Values are compared as strings so a selection of "17" matches a numeric 17.
    """
    df_f = df
    for col, val in selections.items():
        if val is None or val == SELECTION_ALL:
            continue
        df_f = df_f[_column(df_f, col).astype(str) == str(val)]
    return df_f.reset_index(drop=True)


def selection_values(df: pd.DataFrame, col: str) -> list[Any]:
    """Sorted unique non-null values of a column, for building selection menus."""
    values = _column(df, col).dropna().unique().tolist()
    try:
        return sorted(values)
    except TypeError:
        return sorted(values, key=str)


def selection_options(df: pd.DataFrame, columns: Iterable[str]) -> dict[str, list[str]]:
    """Menu options per column: SELECTION_ALL first, then the column's values as strings."""
    return {col: [SELECTION_ALL] + [str(v) for v in selection_values(df, col)] for col in columns}
