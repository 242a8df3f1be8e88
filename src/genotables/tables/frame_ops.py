"""Projection, sorting, sampling and column unification over DataFrames.

Thin, explicit wrappers around pandas so each notebook step reads as one call.
All functions return new frames.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import pandas as pd
import polars as pl

from genotables.utils.logging import get_logger

logger = get_logger(__name__)


def as_pandas(data: Any) -> pd.DataFrame:
    """Return data as a pandas DataFrame.

    Accepts a pandas DataFrame (returned unchanged), a polars DataFrame, or a
    list of row dicts.
    """
    if isinstance(data, pd.DataFrame):
        return data
    if isinstance(data, pl.DataFrame):
        return pd.DataFrame(data.to_dicts(), columns=data.columns)
    if isinstance(data, list) and all(isinstance(r, dict) for r in data):
        return pd.DataFrame(data)
    raise TypeError("Unsupported data type: expected list[dict], pandas.DataFrame, or polars.DataFrame.")


def _as_list(columns: Union[str, Sequence[str]]) -> list[str]:
    if isinstance(columns, str):
        return [columns]
    return list(columns)


def _check_columns(df: pd.DataFrame, columns: Sequence[str]) -> None:
    unknown = [c for c in columns if c not in df.columns]
    if unknown:
        raise KeyError(f"Unknown column(s) {unknown}; available: {list(df.columns)}")


def select_columns(
    df: pd.DataFrame,
    columns: Union[str, Sequence[str]],
    *,
    rename: Optional[dict[str, str]] = None,
) -> pd.DataFrame:
    """Keep columns in the given order, optionally renaming some of them.

    Args:
        df: Source frame.
        columns: Column name(s) to keep.
        rename: Optional mapping old name -> new name applied after selection.

    Raises:
        KeyError: If a column (or a rename source) is not in df.
    """
    cols = _as_list(columns)
    _check_columns(df, cols)
    out = df.loc[:, cols].copy()
    if rename:
        _check_columns(out, list(rename))
        out = out.rename(columns=rename)
    return out


def drop_columns(df: pd.DataFrame, columns: Union[str, Sequence[str]]) -> pd.DataFrame:
    """Remove the named columns."""
    cols = _as_list(columns)
    _check_columns(df, cols)
    return df.drop(columns=cols)


def rename_columns(df: pd.DataFrame, mapping: dict[str, str]) -> pd.DataFrame:
    """Rename columns (old -> new); unknown sources raise KeyError."""
    _check_columns(df, list(mapping))
    return df.rename(columns=mapping)


def arrange(
    df: pd.DataFrame,
    by: Union[str, Sequence[str]],
    *,
    descending: Union[bool, Sequence[bool]] = False,
) -> pd.DataFrame:
    """Sort rows by one or more columns.

    ``descending`` is either one flag for all columns or one flag per column.
    The sort is stable and the returned index is 0..n-1.
    """
    cols = _as_list(by)
    _check_columns(df, cols)
    if isinstance(descending, bool):
        ascending: Union[bool, list[bool]] = not descending
    else:
        flags = list(descending)
        if len(flags) != len(cols):
            raise ValueError(f"descending has {len(flags)} flags for {len(cols)} sort columns")
        ascending = [not d for d in flags]
    out = df.sort_values(cols, ascending=ascending, kind="mergesort", na_position="last")
    return out.reset_index(drop=True)


def sample_rows(
    df: pd.DataFrame,
    *,
    n: Optional[int] = None,
    frac: Optional[float] = None,
    random_state: Optional[int] = None,
) -> pd.DataFrame:
    """Draw a random subset of rows without replacement.

    Exactly one of ``n`` (row count) or ``frac`` (fraction in [0, 1]) must be
    given. Without ``random_state`` the draw differs between runs.
    """
    if (n is None) == (frac is None):
        raise ValueError("Specify exactly one of n or frac")
    if n is not None:
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        if n > len(df):
            raise ValueError(f"Cannot sample {n} rows from a table with {len(df)} rows")
        out = df.sample(n=n, random_state=random_state)
    else:
        if not 0.0 <= frac <= 1.0:
            raise ValueError(f"frac must be in [0, 1], got {frac}")
        out = df.sample(frac=frac, random_state=random_state)
    logger.debug(f"sample_rows: n={n} frac={frac} random_state={random_state} -> {len(out)} rows")
    return out.reset_index(drop=True)


def unite_columns(
    df: pd.DataFrame,
    columns: Sequence[str],
    into: str,
    *,
    sep: str = "-",
    remove: bool = True,
) -> pd.DataFrame:
    """Concatenate several columns into one delimited string column.

    The new column takes the position of the first united column. With
    ``remove=True`` the source columns are dropped. A missing field is written
    as "NA" so the other fields of the row are kept.

    Example:
        gene=BRCA1, chromosome=17, genome_position=41197701, ref=C, alt=T
        -> "BRCA1-17-41197701-C-T"
    """
    cols = list(columns)
    if not cols:
        raise ValueError("unite_columns needs at least one column")
    _check_columns(df, cols)

    parts = [df[c].astype(object).where(df[c].notna(), "NA").astype(str) for c in cols]
    united = parts[0]
    for p in parts[1:]:
        united = united + sep + p

    dropped = set(cols) if remove else set()
    dropped.add(into)
    before = list(df.columns)[: list(df.columns).index(cols[0])]
    position = sum(1 for c in before if c not in dropped)

    out = df.drop(columns=[c for c in df.columns if c in dropped])
    out.insert(position, into, united.values)
    return out
