"""
Grouped aggregation over the variant and fusion tables.

Partition rows by one or more key columns and compute per-group count and
mean of a numeric column. Counts are the number of source rows sharing the
key (NaN values still count); means skip NaN and are rounded for display.
A value column that is not numeric raises TypeError rather than averaging
to NaN.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from genotables.tables.derive import augment_variants
from genotables.utils.logging import get_logger

logger = get_logger(__name__)


def _numeric_values(df: pd.DataFrame, col: str) -> pd.Series:
    """Return df[col] as numbers; raise TypeError if any present value is not numeric."""
    try:
        return pd.to_numeric(df[col])
    except (TypeError, ValueError) as e:
        raise TypeError(f"Column {col!r} is not numeric: {e}") from e


def group_summary(
    df: pd.DataFrame,
    keys: Union[str, Sequence[str]],
    value_col: str,
    *,
    count_col: str = "count",
    mean_col: Optional[str] = None,
    decimals: int = 2,
) -> pd.DataFrame:
    """Count rows and average ``value_col`` per group.

    Args:
        df: Source frame.
        keys: Grouping column(s). Groups come out sorted by key.
        value_col: Numeric column to average.
        count_col: Name of the count column.
        mean_col: Name of the mean column; defaults to ``mean_<value_col>``.
        decimals: Rounding applied to the mean.

    Returns:
        DataFrame with the key columns, ``count_col`` and ``mean_col``; one
        row per key combination present in df.

    Raises:
        KeyError: If a key or value column is not in df.
        TypeError: If value_col holds non-numeric values (e.g. "23.5%").
    """
    key_cols = [keys] if isinstance(keys, str) else list(keys)
    missing = [c for c in key_cols + [value_col] if c not in df.columns]
    if missing:
        raise KeyError(f"Unknown column(s) {missing}; available: {list(df.columns)}")
    if mean_col is None:
        mean_col = f"mean_{value_col}"

    tmp = df[key_cols].copy()
    tmp["_value"] = _numeric_values(df, value_col)
    grp = tmp.groupby(key_cols, sort=True, dropna=False)["_value"]

    out = pd.DataFrame({
        count_col: grp.size(),
        mean_col: grp.mean().round(decimals),
    }).reset_index()
    out[count_col] = out[count_col].astype(int)
    logger.debug(f"group_summary: keys={key_cols} value_col={value_col} -> {len(out)} groups")
    return out


def deamination_summary(variants: pd.DataFrame) -> pd.DataFrame:
    """Per sample and deamination status: number of variants and mean VAF.

    Augments the table first when ``deaminated``/``vaf_numeric`` are absent.
    """
    if "deaminated" not in variants.columns or "vaf_numeric" not in variants.columns:
        variants = augment_variants(variants)
    return group_summary(
        variants,
        ["sample", "deaminated"],
        "vaf_numeric",
        mean_col="mean_vaf",
    )


def fusion_support_summary(fusions: pd.DataFrame) -> pd.DataFrame:
    """Per sample: number of fusion calls and mean junction read support."""
    return group_summary(
        fusions,
        "sample",
        "junction_reads",
        mean_col="mean_junction_reads",
    )


def group_stats_table(df: pd.DataFrame, group_col: str, value_col: str) -> pd.DataFrame:
    """Full per-group stats for one value column: count, min, max, mean, std, sem.

    std and sem use ddof=1. Values are not rounded. One row per group, with the
    group in ``group_col``.
    """
    g = df[group_col].astype(str)
    y = _numeric_values(df, value_col)
    tmp = pd.DataFrame({"group": g, "y": y})

    grp = tmp.groupby("group", sort=True)["y"]
    stats = pd.DataFrame({
        "count": grp.count(),
        "min": grp.min(),
        "max": grp.max(),
        "mean": grp.mean(),
        "std": grp.std(ddof=1),
        "sem": grp.sem(ddof=1),
    })
    stats.index.name = group_col
    return stats.replace([np.inf, -np.inf], np.nan).reset_index()
